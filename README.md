# minischeme

The building blocks of a small Scheme interpreter: the data types that
Scheme values are made of, and a set of built-in procedures written on
top of them.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Data types

- `minischeme.elements`: `Element` is the base of every value and has
  `copy()` and `equals(other)`. `Boolean` stands for `#t` and `#f`; there
  is one instance of each, and `boolean(value)` returns the one that
  matches the truth of `value`. `Pair` holds two elements and is used to
  build lists. It has `is_empty()`, `is_list()` and `to_list()`, and it
  can be iterated. `empty()` gives the empty list `()` and
  `make_list(items)` builds a proper list from copies of Python items.
  `equal(element, other)` compares two values. It returns `False` if
  either is `None`, and it treats `()` and `#f` as equal. When a value
  does not have the shape an operation needs, such as an improper list
  given to `to_list()`, `SchemeError` is raised.
- `minischeme.atoms`: `Number` is an integer and `Symbol` is an
  identifier, with `value_equals(name)`. `Void` is the value that prints
  as nothing. There is one instance of it, returned by `void()`.
- `minischeme.namespace`: `Namespace` maps identifiers to elements. It
  may have a parent namespace that it falls back to. `define` binds a
  copy of an element to a name, and `lookup` returns a copy of the bound
  element. `in` tests whether a name is bound. A name that is not bound
  anywhere raises `UnboundIdentifierError`, which is both a `SchemeError`
  and a `KeyError`.
- `minischeme.procedure`: `Procedure` wraps a Python function under a
  Scheme name. `apply(arguments, namespace, evaluate)` calls it with the
  argument list as written, so the procedure decides whether and when
  each argument is evaluated. It raises `SchemeError` when the procedure
  has no function or its function returns `None`.
- `minischeme.lambdas`: `Lambda` is a procedure defined in Scheme. Its
  arguments are `LambdaArgument`s, which may have default values. A rest
  identifier collects any further arguments into a list.
  `Lambda.from_elements` builds one from the argument list and body of a
  `lambda` form. Given arguments are evaluated in the caller's namespace.
  Defaults are used as written, without evaluation. The body runs in a
  new namespace whose parent is the caller's.

## Built-in procedures

Each of these functions returns a ready-made `Procedure`:

| Module       | Function                | Scheme name | Meaning                                               |
|--------------|-------------------------|-------------|-------------------------------------------------------|
| `listprocs`  | `quote_procedure()`     | `quote`     | its one argument, unevaluated                         |
| `listprocs`  | `list_procedure()`      | `list`      | a new list of the evaluated arguments                 |
| `listprocs`  | `or_procedure()`        | `or`        | the first value that is not `#f` or `()`, else the last; `#f` with no arguments |
| `listprocs`  | `last_procedure()`      | `last`      | the last item of a non-empty list                     |
| `listprocs`  | `length_procedure()`    | `length`    | the number of items in a list                         |
| `arithmetic` | `multiply_procedure()`  | `*`         | the product of its numbers, `1` with none             |
| `arithmetic` | `subtract_procedure()`  | `-`         | negation, or the first number minus the rest          |
| `arithmetic` | `less_procedure()`      | `<`         | whether the numbers are strictly decreasing           |
| `arithmetic` | `lessequal_procedure()` | `<=`        | whether the numbers are non-increasing                |
| `binding`    | `let_procedure()`       | `let`       | local bindings, including the named-`let` form        |

`or` evaluates all of its arguments before it chooses one. `<` and `<=`
take at least two numbers and check for decreasing order. This is how
these procedures behave, and it is kept on purpose. In `let`, each bound
value is used as written, without evaluation. The named form
`(let name (...) body ...)` also binds `name` to the procedure built from
the bindings and body.

## Example

```python
from minischeme.atoms import Number, Symbol
from minischeme.elements import make_list
from minischeme.namespace import Namespace
from minischeme.arithmetic import multiply_procedure

namespace = Namespace(None)
namespace.define("x", Number(6))

def evaluate(element, namespace):
    if isinstance(element, Symbol):
        return namespace.lookup(str(element))
    return element

product = multiply_procedure().apply(
    make_list([Symbol("x"), Number(7)]), namespace, evaluate
)
print(product)  # 42
```

## What this package does not do

The package has no reader, no evaluator and no interactive prompt. It
cannot turn Scheme source text into values, and it has no command to
run. Every procedure takes an `evaluate(element, namespace)` function
from the caller, as in the example above. Only the built-in procedures
listed here are provided, and nothing registers them in a namespace for
you.