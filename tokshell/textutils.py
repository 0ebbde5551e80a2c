"""Small string helpers and error reporting."""

from __future__ import annotations

import sys
from typing import TextIO

from tokshell.ft.chars import is_space
from tokshell.ft.output import put_str


def str_join_char(text: str | None, c: str) -> str:
    """text with the character c appended; a missing text gives just c."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c if text is None else text + c


def str_join_free(a: str | None, b: str | None) -> str:
    """Concatenate a and b, treating a missing one as absent."""
    if a is None and b is None:
        raise TypeError("cannot join two missing strings")
    if a is None:
        return b
    if b is None:
        return a
    return a + b


def str_is_empty(text: str | None) -> bool:
    """True if text is missing or holds only whitespace."""
    return text is None or all(is_space(ch) for ch in text)


def print_error(msg: str, stream: TextIO | None = None) -> None:
    """Write "Error: msg" and a newline to stream (standard error by default)."""
    out = sys.stderr if stream is None else stream
    put_str("Error: ", out)
    put_str(msg, out)
    put_str("\n", out)