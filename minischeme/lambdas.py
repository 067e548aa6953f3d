"""Procedures created by "lambda": parameters, defaults, a rest list and a body."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from .atoms import Symbol
from .elements import Element, Pair, SchemeError, equal, make_list
from .namespace import Namespace
from .procedure import Evaluator, Procedure


@dataclass(frozen=True)
class LambdaArgument:
    """A parameter of a lambda procedure, with an optional default value."""

    id: str
    default: Optional[Element] = None


def _copy(element: Optional[Element]) -> Optional[Element]:
    return None if element is None else element.copy()


def _evaluate_argument(
    expression: Optional[Element], namespace: Namespace, evaluate: Evaluator
) -> Element:
    value = evaluate(expression, namespace)
    if value is None:
        raise SchemeError(f"could not evaluate argument {expression}")
    return value


def _run_lambda(
    procedure: "Lambda",
    arguments: Optional[Element],
    namespace: Namespace,
    evaluate: Evaluator,
) -> Optional[Element]:
    if not isinstance(arguments, Pair) or not arguments.is_list():
        raise SchemeError(f"{procedure}: arguments do not form a list")
    given = arguments.to_list()

    required = sum(1 for argument in procedure.arguments if argument.default is None)
    if len(given) < required:
        raise SchemeError(
            f"{procedure}: expects at least {required} arguments, given {len(given)}"
        )
    if procedure.rest_id is None and len(given) > len(procedure.arguments):
        raise SchemeError(
            f"{procedure}: expects at most {len(procedure.arguments)} arguments, "
            f"given {len(given)}"
        )

    local = Namespace(namespace)
    for position, argument in enumerate(procedure.arguments):
        if position < len(given):
            value = _evaluate_argument(given[position], namespace, evaluate)
        else:
            value = argument.default
        local.define(argument.id, value)

    if procedure.rest_id is not None:
        rest = [
            _evaluate_argument(expression, namespace, evaluate)
            for expression in given[len(procedure.arguments):]
        ]
        local.define(procedure.rest_id, make_list(rest))

    result: Optional[Element] = None
    for expression in procedure.expressions:
        result = evaluate(expression, local)
    return result


class Lambda(Procedure):
    """A user-defined procedure whose body is evaluated in a fresh local namespace.

    Arguments are evaluated in the caller's namespace; missing trailing
    arguments take their default values as given, without evaluation. Extra
    arguments are collected in a list bound to ``rest_id`` when there is one.
    """

    def __init__(
        self,
        name: Optional[str],
        arguments: Optional[Iterable[LambdaArgument]],
        rest_id: Optional[str],
        expressions: Sequence[Optional[Element]],
    ) -> None:
        checked = tuple(arguments or ())
        seen_default = False
        for argument in checked:
            if not argument.id:
                raise SchemeError("lambda: argument identifier cannot be blank")
            if argument.default is None:
                if seen_default:
                    raise SchemeError(
                        f"lambda: argument {argument.id} without a default "
                        "follows one with a default"
                    )
            else:
                seen_default = True
        if not expressions:
            raise SchemeError("lambda: body has no expressions")

        super().__init__(name, _run_lambda)
        self.arguments: Tuple[LambdaArgument, ...] = tuple(
            LambdaArgument(argument.id, _copy(argument.default)) for argument in checked
        )
        self.rest_id = None if rest_id is None else str(rest_id)
        self.expressions: Tuple[Optional[Element], ...] = tuple(
            _copy(expression) for expression in expressions
        )

    @classmethod
    def from_elements(
        cls,
        name: Optional[str],
        arguments: Optional[Element],
        expressions: Optional[Element],
    ) -> "Lambda":
        """Build a lambda from a parameter specification and a list of expressions.

        ``arguments`` is a symbol (every argument goes into a rest list) or a
        list of symbols and ``(symbol default)`` lists, optionally ending in a
        dotted rest symbol.
        """
        if not isinstance(arguments, (Symbol, Pair)):
            raise SchemeError("lambda: arguments must be a symbol or a list")
        if not (isinstance(expressions, Pair) and expressions.is_list()):
            raise SchemeError("lambda: body must be a list of expressions")

        parsed = []
        rest_id: Optional[str] = None
        if isinstance(arguments, Symbol):
            rest_id = arguments.value
        else:
            node: Optional[Element] = arguments
            while isinstance(node, Pair) and not node.is_empty():
                parsed.append(_parse_argument(node.first))
                node = node.second
            if isinstance(node, Symbol):
                rest_id = node.value
            elif not isinstance(node, Pair):
                raise SchemeError("lambda: argument list must end in () or a symbol")

        return cls(name, parsed, rest_id, expressions.to_list())

    def copy(self) -> "Lambda":
        return Lambda(self.name, self.arguments, self.rest_id, self.expressions)

    def equals(self, other: Optional[Element]) -> bool:
        if not isinstance(other, Lambda):
            return False
        if not super().equals(other):
            return False
        if self.rest_id != other.rest_id:
            return False
        if len(self.arguments) != len(other.arguments):
            return False
        for this, that in zip(self.arguments, other.arguments):
            if this.id != that.id:
                return False
            if (this.default is None) != (that.default is None):
                return False
            if this.default is not None and not equal(this.default, that.default):
                return False
        if len(self.expressions) != len(other.expressions):
            return False
        return all(
            equal(this, that) for this, that in zip(self.expressions, other.expressions)
        )

    def __repr__(self) -> str:
        return f"Lambda({self.name!r})"


def _parse_argument(argument: Optional[Element]) -> LambdaArgument:
    if isinstance(argument, Symbol):
        return LambdaArgument(argument.value)
    if isinstance(argument, Pair):
        parts = argument.to_list()
        if len(parts) != 2:
            raise SchemeError("lambda: a default must be written (identifier value)")
        identifier, default = parts
        if not isinstance(identifier, Symbol):
            raise SchemeError("lambda: argument identifier must be a symbol")
        return LambdaArgument(identifier.value, default)
    raise SchemeError("lambda: each argument must be a symbol or a list")