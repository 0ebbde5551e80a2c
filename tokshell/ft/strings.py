"""String helpers: bounded copy and concatenation, search, comparison,
slicing, joining, trimming, splitting and per-character mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_NUL = "\0"


def _char_code(c: str | int) -> int:
    """Code of the character to look for, reduced like a byte when large."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        code = ord(c)
    elif isinstance(c, int):
        code = c
    else:
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    if code >= 256:
        code %= 256
    return code


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters.

    Returns the text that fits (at most size - 1 characters, nothing when
    size is 0) and the full length of src, which signals truncation.
    """
    _check_size(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst in a buffer of size characters.

    Returns the resulting text and the length it tried to create. When the
    buffer is already full, dst is returned unchanged with size + len(src).
    """
    _check_size(size, "size")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first occurrence of c in s, or None.

    Looking for the NUL character gives the index just past the end.
    """
    code = _char_code(c)
    if code == 0:
        return len(s)
    index = s.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last occurrence of c in s, or None.

    Looking for the NUL character gives the index just past the end.
    """
    code = _char_code(c)
    if code == 0:
        return len(s)
    index = s.rfind(chr(code))
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first occurrence of little lying wholly within the first
    length characters of big, or None. An empty needle matches at 0."""
    _check_size(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def _compare(a: str, b: str) -> int:
    for x, y in zip_longest(a, b, fillvalue=_NUL):
        if x != y or x == _NUL:
            return ord(x) - ord(y)
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters; the sign of the result orders a and b."""
    _check_size(n, "n")
    return _compare(a[:n], b[:n])


def strcmp(a: str, b: str) -> int:
    """Compare two strings; the sign of the result orders a and b."""
    return _compare(a, b)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from index start; empty past the end."""
    _check_size(start, "start")
    _check_size(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    if a is None or b is None:
        raise TypeError("cannot join a missing string")
    return a + b


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    if s is None or charset is None:
        raise TypeError("cannot trim a missing string")
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split s on the separator character, dropping empty pieces."""
    if s is None:
        raise TypeError("cannot split a missing string")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """New string made of f(index, char) for every character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(buf: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call f(index, char) for each item of buf, storing any value it returns
    back in place."""
    for index, ch in enumerate(buf):
        result = f(index, ch)
        if result is not None:
            buf[index] = result