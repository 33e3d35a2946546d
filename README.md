# pokeshell

Building blocks for the front end of a small POSIX-style shell: checking
quotes in a command line, expanding `$NAME` and `$?`, the token types a
lexer works with, and the coloured error messages the shell prints.

The package has no dependencies beyond the standard library.

## Modules

### `pokeshell.quotes`

- `check_quotes(text)` walks the line and returns how many units it holds.
  A quoted part, quotes included, counts as one unit. Every other character
  counts as one unit. If a single or double quote is never closed, it raises
  `UnclosedQuoteError`. The exception's `quote` attribute holds the quote
  character. Its message is `Double quotes unclosed.` or
  `Single quotes unclosed.`
- `count_args(text)` returns the number of words plus the number of operator
  characters (`<`, `>`, `|`). Quoted parts that touch other text belong to
  the same word. For example, `count_args("echo hi | wc")` is 4, and
  `count_args("ls>>out")` is 4 as well.

### `pokeshell.expansion`

- `expand(text, env, exit_status)` returns `text` with variables expanded.
  `env` is a sequence of `NAME=value` strings. It calls `check_quotes`
  first, so an open quote raises `UnclosedQuoteError`. An empty line gives
  `""`.
  - Quotes are kept in the result.
  - Text inside single quotes is copied unchanged.
  - Inside double quotes, the character right after an expansion is copied
    without being examined.
- `expand_dollar(text, pos, env, exit_status)` expands the `$` at `pos`. It
  returns the expansion and the position just after it.
  - `$?` becomes the exit status.
  - Otherwise the name is the run of ASCII letters and digits that follows
    the `$`.
- `find_value(env, name)` returns the text after the first `=` of the first
  entry that starts with `name`. This is a prefix match, so `HO` finds
  `HOME=...`. An empty name gives a literal `$`. An unknown name gives `""`.

```python
from pokeshell.expansion import expand

env = ["HOME=/home/user", "USER=user"]
expand("echo $USER", env, 0)     # 'echo user'
expand("echo '$HOME'", env, 0)   # "echo '$HOME'"
expand("exit $?", env, 2)        # 'exit 2'
expand("cost $ 5", env, 0)       # 'cost $ 5'
```

### `pokeshell.tokens`

- `TokenType` is an `IntEnum` of token kinds. It has the following members:
  - `WORD`
  - `STRING_SINGLE`
  - `STRING_DOUBLE`
  - `PIPE`
  - `RE_INPUT`
  - `INFILE`
  - `LIMITER`
  - `RE_OUTPUT`
  - `OUTFILE`
  - `NGUL`
- `Token` is a dataclass with a `type` and a `value`.
- `check_fd_in(token, stream=None)` returns `True` if `token.value` names a
  file that exists and can be read. Otherwise it writes a red message to
  `stream` (stderr by default) and returns `False`.
  - An empty value gives a syntax error message.
  - A missing or unreadable file gives `minishell: <name>: <reason>`.

### `pokeshell.state`

`Shell` is a dataclass that holds the following fields:

- `env`: a list of `NAME=value` strings. It defaults to a copy of the process
  environment.
- `exit_status`
- `pipe_number`
- `exp_input`

`Shell.getenv(name)` returns the value of the variable named exactly `name`,
or `None` if there is no such variable.

### `pokeshell.utils`

- `is_operator(c)` is true for `<`, `>` and `|`.
- `is_bash_print(c)` is true for visible ASCII characters other than
  `` ~ ` < > ( ) ^ | `` and `~`.
- `envp_dup(envp)` returns an independent list copy of an environment.
- `print_err(s1, err_type, stream=None)` writes `s1` and `err_type` in red.
- `print_syntax_err(token_value, stream=None)` writes
  ``minishell: syntax error near token `<value>'``.
- The module also holds the ANSI colour constants, such as `RED` and
  `NO_ALL`, that these messages use.

## What it does not do

This package provides parts of a shell, not a shell. It has none of the
following:

- a lexer that turns a whole line into `Token` objects
- syntax checking of token sequences
- heredoc reading
- signal handling
- command execution
- an interactive prompt or a command to run

## Install

```
pip install .
```

To run the tests with `pytest`, install the test extra instead:

```
pip install .[test]
```