class CipherError(ValueError):
    """Base class for every error raised by the cipher toolkit."""


class InvalidRange(CipherError):
    """Range bounds are unusable (high <= low, bad bound, unknown preset)."""


class EmptyKey(CipherError):
    """Vigenère key has no characters."""


class InvalidKeyFormat(CipherError):
    """Caesar key given as text does not parse as a base-10 integer."""


class InvalidOperation(CipherError):
    """Operation name is not one of the four known ones."""


class InvalidArgumentCount(CipherError):
    """Command line did not carry exactly operation, key and message."""
