"""Built-in procedures working on lists: quote, list, or, last and length."""

from __future__ import annotations

from typing import List, Optional

from .atoms import Number
from .elements import Element, Pair, SchemeError, boolean, equal, make_list
from .namespace import Namespace
from .procedure import Evaluator, Procedure


def _arguments(element: Optional[Element], name: str) -> List[Optional[Element]]:
    if not isinstance(element, Pair):
        raise SchemeError(f"{name}: arguments do not form a list")
    return element.to_list()


def _single_argument(element: Optional[Element], name: str) -> Optional[Element]:
    args = _arguments(element, name)
    if len(args) != 1:
        raise SchemeError(f"{name}: expects 1 argument, given {len(args)}")
    return args[0]


def _evaluated(
    element: Optional[Element], namespace: Namespace, evaluate: Evaluator, name: str
) -> List[Optional[Element]]:
    return [evaluate(arg, namespace) for arg in _arguments(element, name)]


def _evaluated_list(
    element: Optional[Element], namespace: Namespace, evaluate: Evaluator, name: str
) -> List[Optional[Element]]:
    value = evaluate(_single_argument(element, name), namespace)
    if not isinstance(value, Pair):
        raise SchemeError(f"{name}: argument is not a list")
    return value.to_list()


def _copy(element: Optional[Element]) -> Optional[Element]:
    return None if element is None else element.copy()


def _quote(procedure: Procedure, arguments, namespace, evaluate) -> Optional[Element]:
    return _copy(_single_argument(arguments, "quote"))


def _list(procedure: Procedure, arguments, namespace, evaluate) -> Element:
    return make_list(_evaluated(arguments, namespace, evaluate, "list"))


def _or(procedure: Procedure, arguments, namespace, evaluate) -> Optional[Element]:
    values = _evaluated(arguments, namespace, evaluate, "or")
    if not values:
        return boolean(False)
    false = boolean(False)
    for value in values:
        if not equal(value, false):
            return _copy(value)
    return _copy(values[-1])


def _last(procedure: Procedure, arguments, namespace, evaluate) -> Optional[Element]:
    items = _evaluated_list(arguments, namespace, evaluate, "last")
    if not items:
        raise SchemeError("last: list is empty")
    return _copy(items[-1])


def _length(procedure: Procedure, arguments, namespace, evaluate) -> Element:
    return Number(len(_evaluated_list(arguments, namespace, evaluate, "length")))


_QUOTE = Procedure("quote", _quote)
_LIST = Procedure("list", _list)
_OR = Procedure("or", _or)
_LAST = Procedure("last", _last)
_LENGTH = Procedure("length", _length)


def quote_procedure() -> Procedure:
    """Return "quote", which yields its single argument unevaluated."""
    return _QUOTE


def list_procedure() -> Procedure:
    """Return "list", which builds a list of its evaluated arguments."""
    return _LIST


def or_procedure() -> Procedure:
    """Return "or": the first evaluated argument that is not #f, else the last one."""
    return _OR


def last_procedure() -> Procedure:
    """Return "last", which yields the last element of a non-empty list."""
    return _LAST


def length_procedure() -> Procedure:
    """Return "length", which counts the elements of a list."""
    return _LENGTH