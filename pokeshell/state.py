"""Mutable state carried by a running shell."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _environ_entries() -> list[str]:
    return [f"{name}={value}" for name, value in os.environ.items()]


@dataclass
class Shell:
    """The environment, last exit status and per-line data of a shell session."""

    env: list[str] = field(default_factory=_environ_entries)
    exit_status: int = 0
    pipe_number: int = 0
    exp_input: str = ""

    def getenv(self, name: str) -> str | None:
        """Return the value of the variable called exactly ``name``, or None."""
        prefix = f"{name}="
        return next(
            (entry[len(prefix):] for entry in self.env if entry.startswith(prefix)),
            None,
        )