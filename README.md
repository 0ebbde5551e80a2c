# tokshell

`tokshell` is a small interactive prompt. It reads command lines, breaks each
one into tokens (words, pipes and redirections), expands environment
variables, and prints the tokens it found. Typing `exit` leaves the prompt.

## Installation

```
pip install .
```

## Running the prompt

```
tokshell
```

The same prompt can also be started with `python -m tokshell.shell`.

A session looks like this:

```
minishell> echo "hello $USER" | cat >> log.txt
Token: WORD -> [echo]
Token: WORD -> [hello alice]
Token: PIPE -> [|]
Token: WORD -> [cat]
Token: APPEND -> [>>]
Token: WORD -> [log.txt]
Token: EOF
minishell> exit
```

The prompt ends on `exit` or at end of input (Ctrl-D) and returns status 0.
Ctrl-C starts a fresh line instead of leaving, and the quit signal (Ctrl-\\)
is ignored while the prompt runs. Non-empty lines are added to the readline
history where the `readline` module is available.

## Tokenizing rules

- `|` is a pipe, `<` and `>` redirect input and output, `<<` starts a
  here-document and `>>` appends.
- Unquoted words end at whitespace, an operator or a quote. A word that holds
  `$` has its variables expanded.
- Text in double quotes is one word with variables expanded. Text in single
  quotes is one word without expansion. Inside either kind of quote a
  backslash escapes the character after it.
- `$NAME` takes letters, digits and underscores as the name; unset names and a
  bare `$` expand to nothing.
- Anything after a NUL character is ignored.
- A quote that is never closed is an error. At the prompt, the tokens before
  it are printed and then `Error: unclosed quote` goes to standard error.

## What it does not do

`tokshell` only shows how a line splits into tokens. It does not run
commands, build pipelines, open files for redirections, read here-documents,
or offer any built-in command other than `exit`.

## Using it as a library

```python
from tokshell.lexer import tokenize
from tokshell.tokens import TokenType, format_token

tokens = tokenize('cat < in.txt | grep "$NAME"', env={"NAME": "x"})
for token in tokens:
    print(format_token(token))

assert tokens[-1].type is TokenType.EOF
```

- `tokshell.tokens` has `TokenType` (`WORD`, `PIPE`, `REDIR_IN`, `REDIR_OUT`,
  `HEREDOC`, `APPEND`, `EOF`), the frozen `Token` dataclass with `type` and
  `value`, `is_operator`, `is_word_char` and `format_token`.
- `tokshell.lexer.tokenize` returns all tokens, ending with the EOF token, and
  raises `tokshell.lexer.UnclosedQuoteError` (a `ValueError`) when a quote is
  left open. `tokshell.lexer.Lexer` gives tokens one at a time through
  `next_token()` or by iteration.
- `tokshell.shell.process_input(line, out, err, env)` handles one line the way
  the prompt does and returns `True` when the line is `exit`.
- `tokshell.expand.expand_env_vars(text, env)` expands variables alone, from
  the given mapping or the process environment.
- `tokshell.textutils` has `str_join_char`, `str_join_free`, `str_is_empty`
  and `print_error`, which writes `Error: <message>` to a stream.

## Helper library

The `tokshell.ft` package has the small building blocks the prompt rests on:

- `tokshell.ft.chars`: ASCII character classes, case mapping, `atoi` (which
  wraps like a signed 32-bit integer) and `itoa`.
- `tokshell.ft.strings`: bounded copies and concatenation (`strlcpy`,
  `strlcat`, returning the text and the length they tried to create),
  searching that returns indices, comparisons, `substr`, `strjoin`,
  `strtrim`, `split` (dropping empty pieces), `strmapi` and `striteri`.
- `tokshell.ft.memory`: fill, copy, move, search and compare on byte buffers,
  and `calloc` for zeroed `bytearray`s.
- `tokshell.ft.linked`: a singly linked list, `LinkedList`, made of `Node`s.
- `tokshell.ft.output`: writing characters, strings and numbers to a stream.
- `tokshell.ft.gnl`: `LineReader`, which reads a text or binary stream line by
  line through a fixed-size buffer, and `read_map`, which reads all lines
  without their line breaks.

## Running the tests

```
pip install ".[test]"
pytest
```