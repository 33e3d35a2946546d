"""Quote checking, variable expansion, token types and error helpers for a small shell."""

__version__ = "0.1.0"