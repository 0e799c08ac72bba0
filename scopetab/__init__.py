"""Scoped hash-bucket symbol tables, a command driver and parse-tree printing."""

__version__ = "0.1.0"
__all__ = ["symbols", "parsetree", "scope", "table", "commands"]