"""Interactive prompt that prints the tokens of each line entered."""

from __future__ import annotations

import signal
import sys
import threading
from collections.abc import Mapping, Sequence
from typing import TextIO

from tokshell.lexer import Lexer, UnclosedQuoteError
from tokshell.textutils import print_error
from tokshell.tokens import format_token

try:
    import readline
except ImportError:  # pragma: no cover - platforms without readline
    readline = None

PROMPT = "minishell> "
EXIT_COMMAND = "exit"


def process_input(
    line: str,
    out: TextIO | None = None,
    err: TextIO | None = None,
    env: Mapping[str, str] | None = None,
) -> bool:
    """Print the tokens of line to out; return True if the shell should exit.

    On an unclosed quote, the tokens before it are printed, then an error
    goes to err.
    """
    if line == EXIT_COMMAND:
        return True
    out = sys.stdout if out is None else out
    try:
        for token in Lexer(line, env):
            out.write(format_token(token) + "\n")
    except UnclosedQuoteError as exc:
        print_error(str(exc), sys.stderr if err is None else err)
    return False


def _install_signals() -> dict[int, object]:
    """Ignore the quit signal while the prompt runs; return what to restore."""
    previous: dict[int, object] = {}
    if threading.current_thread() is not threading.main_thread():
        return previous
    sigquit = getattr(signal, "SIGQUIT", None)
    if sigquit is not None:
        previous[sigquit] = signal.signal(sigquit, signal.SIG_IGN)
    return previous


def _restore_signals(previous: dict[int, object]) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)


def main(argv: Sequence[str] | None = None) -> int:
    """Read lines until end of input or the exit command; return the exit status."""
    previous = _install_signals()
    try:
        while True:
            try:
                line = input(PROMPT)
            except KeyboardInterrupt:
                sys.stdout.write("\n")
                sys.stdout.flush()
                continue
            except EOFError:
                break
            if line and readline is not None:
                readline.add_history(line)
            if process_input(line):
                break
    finally:
        _restore_signals(previous)
    return 0


if __name__ == "__main__":
    sys.exit(main())