"""The built-in "let", which binds local names and evaluates a body."""

from __future__ import annotations

from typing import Optional

from .atoms import Symbol
from .elements import Element, Pair, SchemeError, empty
from .lambdas import Lambda
from .namespace import Namespace
from .procedure import Procedure


def _let(procedure: Procedure, arguments, namespace: Namespace, evaluate) -> Optional[Element]:
    if not isinstance(arguments, Pair) or arguments.is_empty():
        raise SchemeError("let: expects bindings and a body")
    try:
        parts = arguments.to_list()
    except SchemeError as error:
        raise SchemeError("let: arguments do not form a list") from error
    if len(parts) < 2:
        raise SchemeError("let: expects bindings and a body")

    first = parts[0]
    proc_id: Optional[str] = None
    if isinstance(first, Pair):
        lambda_data = arguments
    elif isinstance(first, Symbol):
        lambda_data = arguments.second
        if not isinstance(lambda_data, Pair):
            raise SchemeError("let: named form expects bindings and a body")
        proc_id = first.value
    else:
        raise SchemeError("let: first argument must be a binding list or a name")

    lam = Lambda.from_elements(proc_id, lambda_data.first, lambda_data.second)

    local = namespace
    if proc_id is not None:
        local = Namespace(namespace)
        local.define(proc_id, lam)

    return lam.apply(empty(), local, evaluate)


_LET = Procedure("let", _let)


def let_procedure() -> Procedure:
    """Return "let", which evaluates a body with local bindings in effect.

    ``(let ((id value) ...) body ...)`` binds each id to its value as written;
    ``(let name ((id value) ...) body ...)`` also binds ``name`` to the
    procedure built from the bindings and body.
    """
    return _LET