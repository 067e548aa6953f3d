"""Built-in numeric procedures: "*", "-", "<" and "<="."""

from __future__ import annotations

from typing import Callable, List, Optional

from .atoms import Number
from .elements import Element, Pair, SchemeError, boolean
from .namespace import Namespace
from .procedure import Evaluator, Procedure


def _evaluated_numbers(
    arguments: Optional[Element], namespace: Namespace, evaluate: Evaluator, name: str
) -> List[int]:
    if not isinstance(arguments, Pair):
        raise SchemeError(f"{name}: arguments do not form a list")
    values = [evaluate(argument, namespace) for argument in arguments.to_list()]
    for value in values:
        if not isinstance(value, Number):
            raise SchemeError(f"{name}: expects numbers, given {value}")
    return [value.value for value in values]


def _multiply(procedure: Procedure, arguments, namespace, evaluate) -> Element:
    product = 1
    for value in _evaluated_numbers(arguments, namespace, evaluate, "*"):
        product *= value
    return Number(product)


def _subtract(procedure: Procedure, arguments, namespace, evaluate) -> Element:
    values = _evaluated_numbers(arguments, namespace, evaluate, "-")
    if not values:
        raise SchemeError("-: expects at least 1 argument")
    first, *rest = values
    if not rest:
        return Number(-first)
    return Number(first - sum(rest))


def _ordered(name: str, holds: Callable[[int, int], bool]):
    def compare(procedure: Procedure, arguments, namespace, evaluate) -> Element:
        values = _evaluated_numbers(arguments, namespace, evaluate, name)
        if len(values) < 2:
            raise SchemeError(f"{name}: expects at least 2 arguments, given {len(values)}")
        return boolean(all(holds(later, earlier) for earlier, later in zip(values, values[1:])))

    return compare


_MULTIPLY = Procedure("*", _multiply)
_SUBTRACT = Procedure("-", _subtract)
_LESS = Procedure("<", _ordered("<", lambda later, earlier: later < earlier))
_LESSEQUAL = Procedure("<=", _ordered("<=", lambda later, earlier: later <= earlier))


def multiply_procedure() -> Procedure:
    """Return "*", the product of its numeric arguments (1 when there are none)."""
    return _MULTIPLY


def subtract_procedure() -> Procedure:
    """Return "-": negates a single number, else subtracts the rest from the first."""
    return _SUBTRACT


def less_procedure() -> Procedure:
    """Return "<": #t if its numbers are in strictly decreasing order, else #f."""
    return _LESS


def lessequal_procedure() -> Procedure:
    """Return "<=": #t if its numbers are in non-increasing order, else #f."""
    return _LESSEQUAL