"""Character classes, environment copying and error printing helpers."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

NO_ALL = "\033[0m"
NO_COLOR = "\033[39m"
BLACK = "\033[30m"
RED = "\033[31m"
GREEN = "\033[32m"
BRGREEN = "\033[32;1m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[95m"
BRCYAN = "\033[96m"

OPERATORS = "<>|"
_NOT_BASH_PRINT = "~`<>()^|"


def is_bash_print(c: str) -> bool:
    """Return True if ``c`` is a visible character bash treats as plain text."""
    return (
        len(c) == 1
        and 32 < ord(c) < 126
        and c not in _NOT_BASH_PRINT
    )


def is_operator(c: str) -> bool:
    """Return True if ``c`` is one of the shell operators ``<``, ``>`` or ``|``."""
    return len(c) == 1 and c in OPERATORS


def envp_dup(envp: Iterable[str]) -> list[str]:
    """Return an independent copy of an environment given as ``NAME=value`` entries."""
    return list(envp)


def print_err(s1: str, err_type: str, stream: TextIO | None = None) -> None:
    """Write ``s1`` followed by ``err_type`` in red to ``stream`` (stderr by default)."""
    out = sys.stderr if stream is None else stream
    out.write(f"{RED}{s1}{err_type}{NO_ALL}")


def print_syntax_err(token_value: str, stream: TextIO | None = None) -> None:
    """Report a syntax error near ``token_value``."""
    out = sys.stderr if stream is None else stream
    out.write(f"{RED}minishell: syntax error near token `{token_value}'\n{NO_ALL}")