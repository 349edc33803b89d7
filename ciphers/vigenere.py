from .errors import EmptyKey
from .ranges import CharRange


def _check(range_low, range_high, key: str) -> CharRange:
    rng = CharRange.of(range_low, range_high)
    if not key:
        raise EmptyKey("Vigenère key must not be empty")
    return rng


def encrypt_vigenere(range_low, range_high, key: str, text: str) -> str:
    rng = _check(range_low, range_high, key)
    K_LEN = len(key)
    out = []
    key_idx = 0  # We use a separate index for the key

    for ch in text:
        if rng.contains(ch):
            # The key char's own distance from the low bound is the shift.
            shift = rng.offset(key[key_idx % K_LEN])
            out.append(rng.wrap(rng.offset(ch) + shift))
            key_idx += 1  # Only advance the key index when we use it
        else:
            # Out-of-range chars pass through and don't consume a key position.
            out.append(ch)

    return ''.join(out)


def decrypt_vigenere(range_low, range_high, key: str, text: str) -> str:
    rng = _check(range_low, range_high, key)
    K_LEN = len(key)
    out = []
    key_idx = 0

    for ch in text:
        if rng.contains(ch):
            key_char = key[key_idx % K_LEN]
            out.append(rng.wrap(ord(ch) - ord(key_char) + rng.size))
            key_idx += 1
        else:
            out.append(ch)

    return ''.join(out)
