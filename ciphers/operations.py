"""Name-based dispatch over the four transformations, shared by the CLI and the service."""
import re

from .caesar import encrypt_caesar, decrypt_caesar
from .vigenere import encrypt_vigenere, decrypt_vigenere
from .errors import InvalidKeyFormat, InvalidOperation

# strtol-style: optional leading whitespace, optional sign, base-10 digits, nothing after
_INT_KEY = re.compile(r"\s*[+-]?[0-9]+")

OPERATIONS = {
    "caesar-encrypt": encrypt_caesar,
    "caesar-decrypt": decrypt_caesar,
    "vigenere-encrypt": encrypt_vigenere,
    "vigenere-decrypt": decrypt_vigenere,
}


def parse_caesar_key(key) -> int:
    if isinstance(key, int) and not isinstance(key, bool):
        return key
    if isinstance(key, str) and _INT_KEY.fullmatch(key):
        return int(key)
    raise InvalidKeyFormat("Invalid key for Caesar cipher. Must be an integer.")


def run_operation(operation: str, range_low, range_high, key, text: str) -> str:
    """Run ``operation`` (e.g. ``"caesar-encrypt"``) over ``text``.

    Caesar keys may be integers or decimal strings; Vigenère keys are used
    verbatim and must be strings.
    """
    try:
        func = OPERATIONS[operation]
    except KeyError:
        raise InvalidOperation(
            "Invalid operation. Must be one of: " + ", ".join(OPERATIONS) + "."
        ) from None
    if operation.startswith("caesar-"):
        key = parse_caesar_key(key)
    elif not isinstance(key, str):
        raise InvalidKeyFormat("Invalid key for Vigenère cipher. Must be a string.")
    return func(range_low, range_high, key, text)
