"""Sorting methods with step traces, NIF keys and binary trees (search, balanced, AVL)."""

__version__ = "0.1.0"