"""Quote balance checking and argument counting for raw command lines."""

from __future__ import annotations

import re

_QUOTE_NAMES = {'"': "Double", "'": "Single"}

_ARG = re.compile(r"""(?:"[^"]*"?|'[^']*'?|[^ <>|"'])+|[<>|]""")


class UnclosedQuoteError(ValueError):
    """Raised when a command line has a quote that is never closed."""

    def __init__(self, quote: str) -> None:
        self.quote = quote
        super().__init__(f"{_QUOTE_NAMES[quote]} quotes unclosed.")


def check_quotes(text: str) -> int:
    """Return the number of units in ``text``, counting each quoted part as one.

    Raises UnclosedQuoteError if a quote is left open.
    """
    units = 0
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch in _QUOTE_NAMES:
            end = text.find(ch, pos + 1)
            if end < 0:
                raise UnclosedQuoteError(ch)
            pos = end + 1
        else:
            pos += 1
        units += 1
    return units


def count_args(text: str) -> int:
    """Return the number of words plus operator characters in ``text``."""
    return sum(1 for _ in _ARG.finditer(text))