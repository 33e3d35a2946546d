"""Expansion of ``$NAME`` and ``$?`` in a command line."""

from __future__ import annotations

import re
from collections.abc import Sequence

from pokeshell.quotes import check_quotes

_VAR_NAME = re.compile(r"[0-9A-Za-z]*")


def find_value(env: Sequence[str], name: str) -> str:
    """Return the value of the first entry in ``env`` that starts with ``name``.

    An empty name yields a literal ``$``; an unknown one yields an empty string.
    """
    if not name:
        return "$"
    return next(
        (entry.partition("=")[2] for entry in env if entry.startswith(name)),
        "",
    )


def expand_dollar(
    text: str, pos: int, env: Sequence[str], exit_status: int
) -> tuple[str, int]:
    """Expand the ``$`` at ``pos``; return the expansion and the position after it."""
    if text[pos + 1 : pos + 2] == "?":
        return str(exit_status), pos + 2
    match = _VAR_NAME.match(text, pos + 1)
    return find_value(env, match.group()), match.end()


def expand(text: str, env: Sequence[str], exit_status: int) -> str:
    """Return ``text`` with variables expanded outside single quotes.

    Quotes are kept in the result. Raises UnclosedQuoteError if a quote is open.
    """
    if not text:
        return ""
    check_quotes(text)
    out: list[str] = []
    pos = 0
    end = len(text)
    while pos < end:
        ch = text[pos]
        if ch == "'":
            close = text.find("'", pos + 1)
            stop = end if close < 0 else close + 1
            out.append(text[pos:stop])
            pos = stop
        elif ch == '"':
            out.append(ch)
            pos += 1
            while pos < end and text[pos] != '"':
                if text[pos] == "$":
                    value, pos = expand_dollar(text, pos, env, exit_status)
                    out.append(value)
                # The character right after an expansion is always taken as is.
                if pos < end:
                    out.append(text[pos])
                    pos += 1
            if pos < end:
                out.append(text[pos])
                pos += 1
        elif ch == "$":
            value, pos = expand_dollar(text, pos, env, exit_status)
            out.append(value)
        else:
            out.append(ch)
            pos += 1
    return "".join(out)