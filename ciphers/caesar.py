from .ranges import CharRange


def _caesar(rng: CharRange, shift: int, text: str) -> str:
    out = []
    for ch in text:
        if rng.contains(ch):
            out.append(rng.wrap(rng.offset(ch) + shift))
        else:
            # Outside the range: pass it through unchanged.
            out.append(ch)
    return ''.join(out)


def encrypt_caesar(range_low, range_high, key: int, text: str) -> str:
    """Shift every in-range character of ``text`` by ``key`` positions.

    ``key`` may be any integer; it is taken modulo the range size, so
    negative keys shift backwards.

    >>> encrypt_caesar('A', 'Z', 3, "HELLOWORLD")
    'KHOORZRUOG'
    """
    rng = CharRange.of(range_low, range_high)
    return _caesar(rng, key, text)


def decrypt_caesar(range_low, range_high, key: int, text: str) -> str:
    """Undo :func:`encrypt_caesar` with the same key (same as encrypting with ``-key``)."""
    rng = CharRange.of(range_low, range_high)
    return _caesar(rng, -key, text)
