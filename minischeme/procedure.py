"""Scheme procedures: named values wrapping a Python callable."""

from __future__ import annotations

from typing import Callable, Optional

from .elements import Element, SchemeError
from .namespace import Namespace

Evaluator = Callable[[Optional[Element], Namespace], Optional[Element]]
ProcedureFunction = Callable[
    ["Procedure", Optional[Element], Namespace, Evaluator], Optional[Element]
]


class Procedure(Element):
    """A Scheme procedure.

    ``function`` is called as ``function(procedure, arguments, namespace,
    evaluate)``, where ``arguments`` is the unevaluated argument list and
    ``evaluate(element, namespace)`` evaluates a single expression.
    """

    def __init__(self, name: Optional[str], function: Optional[ProcedureFunction]) -> None:
        self.name = None if name is None else str(name)
        self.function = function

    def apply(
        self,
        arguments: Optional[Element],
        namespace: Namespace,
        evaluate: Evaluator,
    ) -> Element:
        """Run the procedure on ``arguments`` and return its result."""
        if self.function is None:
            raise SchemeError(f"{self} has no function to apply")
        result = self.function(self, arguments, namespace, evaluate)
        if result is None:
            raise SchemeError(f"{self} could not be applied")
        return result

    def copy(self) -> "Procedure":
        return Procedure(self.name, self.function)

    def equals(self, other: Optional[Element]) -> bool:
        if not isinstance(other, Procedure):
            return False
        if self.name != other.name:
            return False
        return self.function == other.function

    def __str__(self) -> str:
        if self.name is not None:
            return f"#<procedure:{self.name}>"
        return "#<procedure>"

    def __repr__(self) -> str:
        return f"Procedure({self.name!r})"