"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_SPACES = frozenset(" \t\n\v\f\r")
_INT_BITS = 32


def _code(c: str | int) -> int:
    """Return the code point of a one-character string, or an int unchanged."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def is_space(c: str | int) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    code = _code(c)
    return 0 <= code < 0x110000 and chr(code) in _SPACES


def _same_kind(original: str | int, code: int) -> str | int:
    return chr(code) if isinstance(original, str) else code


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def _wrap_int(value: int) -> int:
    """Reduce a value to the range of a signed 32-bit integer."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; text without digits gives 0.
    The result wraps like a signed 32-bit integer.
    """
    rest = text.lstrip("".join(_SPACES))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for ch in rest:
        if not is_digit(ch):
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return _wrap_int(number * sign)


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    if not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)