"""Atomic Scheme values: numbers, symbols and the void value."""

from __future__ import annotations

from typing import Optional

from .elements import Element


class Number(Element):
    """A Scheme integer."""

    def __init__(self, value: int) -> None:
        self.value = int(value)

    def copy(self) -> "Number":
        return Number(self.value)

    def equals(self, other: Optional[Element]) -> bool:
        return isinstance(other, Number) and other.value == self.value

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Number({self.value})"


class Symbol(Element):
    """A Scheme symbol, identified by its name."""

    def __init__(self, value: str) -> None:
        self.value = str(value)

    def copy(self) -> "Symbol":
        return Symbol(self.value)

    def equals(self, other: Optional[Element]) -> bool:
        return isinstance(other, Symbol) and other.value == self.value

    def value_equals(self, value: Optional[str]) -> bool:
        """Return True if the symbol's name is ``value``; None never matches."""
        if value is None:
            return False
        return self.value == value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Symbol({self.value!r})"


class Void(Element):
    """The value that stands for the absence of a value; a single instance exists."""

    _instance: Optional["Void"] = None

    def __new__(cls) -> "Void":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def copy(self) -> "Void":
        return self

    def equals(self, other: Optional[Element]) -> bool:
        return isinstance(other, Void) and other is self

    def __str__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "Void()"


def void() -> Void:
    """Return the void value."""
    return Void()