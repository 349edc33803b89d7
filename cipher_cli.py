#!/usr/bin/env python3
"""
cipher_cli.py — Caesar / Vigenère over the range 'A'..'Z' from the command line.

Usage:
  rangecipher caesar-encrypt 3 HELLOWORLD      ->  KHOORZRUOG
  rangecipher caesar-decrypt 3 KHOORZRUOG      ->  HELLOWORLD
  rangecipher vigenere-encrypt KEY HELLO       ->  RIJVS
  rangecipher vigenere-decrypt KEY RIJVS       ->  HELLO

Notes:
- Only 'A'..'Z' is shifted; spaces, lowercase, punctuation pass through.
- Set CIPHER_TRACE=1 (environment or .env) to print a per-character trace on stderr.
"""
import os
import sys
from typing import Iterable, Optional, TextIO

from dotenv import load_dotenv

from ciphers import OPERATIONS, CipherError, InvalidArgumentCount, run_operation

load_dotenv()

RANGE_LOW = "A"
RANGE_HIGH = "Z"

USAGE = ("usage: rangecipher <operation> <key> <message>\n"
         "  operation: " + " | ".join(OPERATIONS))


def _trace_enabled() -> bool:
    return os.getenv("CIPHER_TRACE", "").strip().lower() in ("1", "true", "yes", "on")


def _trace(operation: str, text: str, result: str, err: TextIO):
    print(f"{operation}: range {RANGE_LOW!r}..{RANGE_HIGH!r}", file=err)
    for before, after in zip(text, result):
        print(f"  {before!r} -> {after!r}", file=err)


def main(argv: Iterable[str], out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    args = list(argv)

    if args in (["-h"], ["--help"]):
        print(USAGE, file=out)
        return 0

    try:
        if len(args) != 3:
            raise InvalidArgumentCount("Invalid number of arguments.")
        operation, key, message = args
        result = run_operation(operation, RANGE_LOW, RANGE_HIGH, key, message)
    except CipherError as e:
        print(f"Error: {e}", file=err)
        if isinstance(e, InvalidArgumentCount):
            print(USAGE, file=err)
        return 1

    if _trace_enabled():
        _trace(operation, message, result, err)
    print(result, file=out)
    return 0


def run():
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
