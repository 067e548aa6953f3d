"""Namespaces mapping identifiers to Scheme values."""

from __future__ import annotations

from typing import Dict, Optional

from .elements import Element, SchemeError, equal


class UnboundIdentifierError(SchemeError, KeyError):
    """Raised when an identifier is not bound in a namespace or its supersets."""

    def __str__(self) -> str:
        return f"unbound identifier: {self.args[0]}" if self.args else "unbound identifier"


class Namespace(Element):
    """A mapping from identifiers to elements, with an optional enclosing namespace.

    Elements are stored and returned as copies. The superset is referenced,
    not copied, and bindings here take priority over those in the superset.
    """

    def __init__(self, superset: Optional["Namespace"] = None) -> None:
        self.superset = superset if isinstance(superset, Namespace) else None
        self._items: Dict[str, Optional[Element]] = {}

    def _find(self, identifier: str) -> Optional["Namespace"]:
        scope: Optional[Namespace] = self
        while scope is not None:
            if identifier in scope._items:
                return scope
            scope = scope.superset
        return None

    def lookup(self, identifier: str) -> Optional[Element]:
        """Return a copy of the element bound to ``identifier``."""
        scope = self._find(identifier)
        if scope is None:
            raise UnboundIdentifierError(identifier)
        element = scope._items[identifier]
        return None if element is None else element.copy()

    def define(self, identifier: str, element: Optional[Element]) -> None:
        """Bind a copy of ``element`` to ``identifier`` in this namespace."""
        self._items[identifier] = None if element is None else element.copy()

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self._find(identifier) is not None

    def copy(self) -> "Namespace":
        duplicate = Namespace(self.superset)
        for identifier, element in self._items.items():
            duplicate.define(identifier, element)
        return duplicate

    def equals(self, other: Optional[Element]) -> bool:
        if not isinstance(other, Namespace):
            return False
        if len(self._items) != len(other._items):
            return False
        if not equal(self.superset, other.superset):
            return False
        return all(
            this_id == that_id and equal(this_elem, that_elem)
            for (this_id, this_elem), (that_id, that_elem) in zip(
                self._items.items(), other._items.items()
            )
        )

    def __str__(self) -> str:
        return "#<namespace>"

    def __repr__(self) -> str:
        return f"<Namespace {sorted(self._items)}>"