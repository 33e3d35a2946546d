"""Token kinds, the token record and redirection file checks."""

from __future__ import annotations

import errno
import os
import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO

from pokeshell.utils import NO_ALL, RED


class TokenType(IntEnum):
    """Kinds of token produced by the lexer."""

    WORD = 0
    STRING_SINGLE = 1
    STRING_DOUBLE = 2
    PIPE = 3
    RE_INPUT = 4
    INFILE = 5
    LIMITER = 6
    RE_OUTPUT = 7
    OUTFILE = 8
    NGUL = 9


@dataclass
class Token:
    """A lexed piece of the command line."""

    type: TokenType
    value: str


def check_fd_in(token: Token, stream: TextIO | None = None) -> bool:
    """Return True if the token names an existing, readable file; report otherwise."""
    out = sys.stderr if stream is None else stream
    if not token.value:
        out.write(f"{RED}minishell: syntax error found in input redirection\n{NO_ALL}")
        return False
    try:
        os.stat(token.value)
    except OSError as exc:
        reason = exc.strerror or os.strerror(exc.errno or errno.ENOENT)
    else:
        if os.access(token.value, os.R_OK):
            return True
        reason = os.strerror(errno.EACCES)
    out.write(f"{RED}minishell: {token.value}: {reason}\n{NO_ALL}")
    return False