"""Core Scheme values: the element base class, booleans and pairs."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional


class SchemeError(Exception):
    """Raised when a Scheme value does not have the shape an operation needs."""


def _copy(element: Optional["Element"]) -> Optional["Element"]:
    return None if element is None else element.copy()


def _show(element: Optional["Element"]) -> str:
    return "" if element is None else str(element)


class Element:
    """Base class of every Scheme value."""

    def copy(self) -> "Element":
        """Return a copy; immutable values may return themselves."""
        return self

    def equals(self, other: Optional["Element"]) -> bool:
        """Return True if this element equals ``other``."""
        return self is other

    def __str__(self) -> str:
        return f"#<{type(self).__name__.lower()}>"


class Boolean(Element):
    """The Scheme symbols #t and #f; exactly one instance exists for each."""

    _instances: dict = {}

    def __new__(cls, value: bool) -> "Boolean":
        key = bool(value)
        instance = cls._instances.get(key)
        if instance is None:
            instance = super().__new__(cls)
            cls._instances[key] = instance
        return instance

    def __init__(self, value: bool) -> None:
        self.value = bool(value)

    def copy(self) -> "Boolean":
        return self

    def equals(self, other: Optional[Element]) -> bool:
        return isinstance(other, Boolean) and other is self

    def __str__(self) -> str:
        return "#t" if self.value else "#f"

    def __repr__(self) -> str:
        return f"Boolean({self.value})"


class Pair(Element):
    """A Scheme pair holding two elements; the empty list is a unique pair."""

    def __init__(self, first: Optional[Element], second: Optional[Element]) -> None:
        self.first = _copy(first)
        self.second = _copy(second)

    @classmethod
    def _cons(cls, first: Optional[Element], second: Optional[Element]) -> "Pair":
        pair = cls.__new__(cls)
        pair.first = first
        pair.second = second
        return pair

    def is_empty(self) -> bool:
        """Return True if this is the empty list."""
        return self is _EMPTY

    def is_list(self) -> bool:
        """Return True if this pair starts a proper list."""
        node: Optional[Element] = self
        while isinstance(node, Pair) and node is not _EMPTY:
            node = node.second
        return node is _EMPTY

    def __iter__(self) -> Iterator[Optional[Element]]:
        node: Optional[Element] = self
        while isinstance(node, Pair) and node is not _EMPTY:
            yield node.first
            node = node.second
        if node is not _EMPTY:
            raise SchemeError("not a proper list")

    def to_list(self) -> list:
        """Return the list's elements, raising SchemeError for an improper list."""
        return list(self)

    def copy(self) -> "Pair":
        if self is _EMPTY:
            return self
        firsts = []
        node: Optional[Element] = self
        while isinstance(node, Pair) and node is not _EMPTY:
            firsts.append(_copy(node.first))
            node = node.second
        result = _copy(node)
        for first in reversed(firsts):
            result = Pair._cons(first, result)
        return result

    def equals(self, other: Optional[Element]) -> bool:
        if not isinstance(other, Pair):
            return False
        a: Optional[Element] = self
        b: Optional[Element] = other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is _EMPTY or b is _EMPTY:
                return a is b
            if not equal(a.first, b.first):
                return False
            a, b = a.second, b.second
        return equal(a, b)

    def __str__(self) -> str:
        if self is _EMPTY:
            return "()"
        parts = []
        node: Optional[Element] = self
        while isinstance(node, Pair) and node is not _EMPTY:
            parts.append(_show(node.first))
            node = node.second
        text = " ".join(parts)
        if not isinstance(node, Pair):
            text += " . " + _show(node)
        return f"({text})"

    def __repr__(self) -> str:
        return f"<Pair {self}>"


_EMPTY = Pair._cons(None, None)


def empty() -> Pair:
    """Return the empty list."""
    return _EMPTY


def make_list(items: Iterable[Optional[Element]]) -> Pair:
    """Build a proper Scheme list holding copies of ``items``."""
    result = _EMPTY
    for item in reversed(list(items)):
        result = Pair._cons(_copy(item), result)
    return result


def boolean(value: object) -> Boolean:
    """Return #t or #f according to the truth of ``value``."""
    return Boolean(bool(value))


def _empty_and_false(first: Optional[Element], second: Optional[Element]) -> bool:
    return first is _EMPTY and isinstance(second, Boolean) and not second.value


def equal(element: Optional[Element], other: Optional[Element]) -> bool:
    """Compare two elements; None never matches, and '() equals #f."""
    if element is None or other is None:
        return False
    if _empty_and_false(element, other) or _empty_and_false(other, element):
        return True
    return element.equals(other)