"""Splitting a command line into words, pipes and redirections."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from tokshell.expand import expand_env_vars
from tokshell.ft.chars import is_space
from tokshell.tokens import Token, TokenType, is_operator, is_word_char

_QUOTES = ("'", '"')
_ESCAPE = "\\"


class UnclosedQuoteError(ValueError):
    """A quoted word has no closing quote."""

    def __init__(self, quote: str) -> None:
        super().__init__("unclosed quote")
        self.quote = quote


class Lexer:
    """Produce the tokens of one command line, one at a time.

    Text after a NUL character is ignored. Double-quoted and unquoted words
    have $NAME references expanded from env (the process environment when
    env is None); single-quoted words are taken literally.
    """

    def __init__(self, text: str, env: Mapping[str, str] | None = None) -> None:
        self.text = text.split("\0", 1)[0]
        self.pos = 0
        self.env = env

    def skip_spaces(self) -> None:
        """Advance past any whitespace at the current position."""
        while self.pos < len(self.text) and is_space(self.text[self.pos]):
            self.pos += 1

    def next_token(self) -> Token:
        """The next token; an EOF token once the text is used up.

        Raises UnclosedQuoteError when a quote is never closed.
        """
        self.skip_spaces()
        if self.pos >= len(self.text):
            return Token(TokenType.EOF)
        ch = self.text[self.pos]
        if is_operator(ch):
            return self._operator()
        if ch in _QUOTES:
            return self._quoted(ch)
        return self._word()

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the EOF token."""
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def _operator(self) -> Token:
        ch = self.text[self.pos]
        doubled = self.text[self.pos + 1:self.pos + 2] == ch
        self.pos += 1
        if ch == "|":
            return Token(TokenType.PIPE, "|")
        if doubled:
            self.pos += 1
            kind = TokenType.HEREDOC if ch == "<" else TokenType.APPEND
            return Token(kind, ch * 2)
        kind = TokenType.REDIR_IN if ch == "<" else TokenType.REDIR_OUT
        return Token(kind, ch)

    def _quoted(self, quote: str) -> Token:
        text = self.text
        pos = self.pos + 1
        chars: list[str] = []
        escaped = False
        while pos < len(text):
            ch = text[pos]
            if not escaped and ch == _ESCAPE and pos + 1 < len(text):
                escaped = True
                pos += 1
                continue
            if not escaped and ch == quote:
                break
            chars.append(ch)
            escaped = False
            pos += 1
        else:
            raise UnclosedQuoteError(quote)
        self.pos = pos + 1
        word = "".join(chars)
        if quote == '"':
            word = expand_env_vars(word, self.env)
        return Token(TokenType.WORD, word)

    def _word(self) -> Token:
        start = self.pos
        while self.pos < len(self.text) and is_word_char(self.text[self.pos]):
            self.pos += 1
        word = self.text[start:self.pos]
        if "$" in word:
            word = expand_env_vars(word, self.env)
        return Token(TokenType.WORD, word)


def tokenize(text: str, env: Mapping[str, str] | None = None) -> list[Token]:
    """All tokens of text, ending with the EOF token."""
    return list(Lexer(text, env))