from dataclasses import dataclass

from .errors import InvalidRange

# Single-byte character codes only
MIN_CODE = 0
MAX_CODE = 255


def _code(bound) -> int:
    """Turn a one-character string or an integer code into an integer code."""
    if isinstance(bound, str):
        if len(bound) != 1:
            raise InvalidRange(f"range bound must be a single character, got {bound!r}")
        return ord(bound)
    if isinstance(bound, int) and not isinstance(bound, bool):
        return bound
    raise InvalidRange(f"range bound must be a character or an integer code, got {bound!r}")


@dataclass(frozen=True)
class CharRange:
    low: int
    high: int

    @classmethod
    def of(cls, low, high) -> "CharRange":
        lo, hi = _code(low), _code(high)
        if hi <= lo:
            raise InvalidRange(f"range high {hi} must be greater than range low {lo}")
        if lo < MIN_CODE or hi > MAX_CODE:
            raise InvalidRange(f"range {lo}..{hi} is outside single-byte codes {MIN_CODE}..{MAX_CODE}")
        return cls(lo, hi)

    @property
    def size(self) -> int:
        return self.high - self.low + 1

    def contains(self, ch: str) -> bool:
        return self.low <= ord(ch) <= self.high

    def offset(self, ch: str) -> int:
        """Distance of ``ch`` from the low bound (may fall outside the range)."""
        return ord(ch) - self.low

    def wrap(self, offset: int) -> str:
        # % with a positive modulus never goes negative
        return chr(self.low + offset % self.size)

    def __str__(self):
        return f"{chr(self.low)!r}..{chr(self.high)!r}"


UPPER = CharRange.of("A", "Z")
LOWER = CharRange.of("a", "z")
DIGITS = CharRange.of("0", "9")
# All 95 printable ASCII chars from space ( ) to tilde (~)
PRINTABLE = CharRange.of(" ", "~")

PRESETS = {
    "upper": UPPER,
    "lower": LOWER,
    "digits": DIGITS,
    "printable": PRINTABLE,
}


def preset(name: str) -> CharRange:
    try:
        return PRESETS[name.lower()]
    except KeyError:
        raise InvalidRange(
            f"unknown range {name!r}, expected one of: {', '.join(PRESETS)}"
        ) from None
