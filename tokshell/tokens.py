"""Token kinds produced by the lexer, and character classes it uses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from tokshell.ft.chars import is_space

_OPERATORS = frozenset("|<>")
_QUOTES = frozenset("'\"")


class TokenType(Enum):
    """Kinds of token in a command line."""

    WORD = auto()
    PIPE = auto()
    REDIR_IN = auto()
    REDIR_OUT = auto()
    HEREDOC = auto()
    APPEND = auto()
    EOF = auto()


@dataclass(frozen=True)
class Token:
    """A token and its text, if it has any."""

    type: TokenType
    value: str | None = None


def is_operator(c: str) -> bool:
    """True for the pipe and redirection characters."""
    return len(c) == 1 and c in _OPERATORS


def is_word_char(c: str) -> bool:
    """True for characters that may appear in an unquoted word."""
    if len(c) != 1 or c == "\0":
        return False
    return not is_space(c) and not is_operator(c) and c not in _QUOTES


def format_token(token: Token) -> str:
    """One-line description of a token, without a trailing newline."""
    text = f"Token: {token.type.name}"
    if token.value is not None:
        text += f" -> [{token.value}]"
    return text