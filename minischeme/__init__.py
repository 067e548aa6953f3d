"""Core Scheme data types and built-in procedures for a small interpreter."""

__version__ = "0.1.0"

__all__ = [
    "elements",
    "atoms",
    "namespace",
    "procedure",
    "listprocs",
    "lambdas",
    "arithmetic",
    "binding",
]