"""Range-bounded classical ciphers: Caesar and Vigenère."""
from .caesar import encrypt_caesar, decrypt_caesar
from .vigenere import encrypt_vigenere, decrypt_vigenere
from .ranges import CharRange, PRESETS, UPPER, LOWER, DIGITS, PRINTABLE, preset
from .errors import (CipherError, InvalidRange, EmptyKey, InvalidKeyFormat,
                     InvalidOperation, InvalidArgumentCount)
from .operations import OPERATIONS, run_operation, parse_caesar_key
