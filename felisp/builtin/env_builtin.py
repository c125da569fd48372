"""Built-in functions for the Felisp global environment.

Arithmetic (`+`, `-`) and the ordered comparisons (`= > >= < <=`). Every
native receives the list of already-evaluated arguments and raises Reason on
bad input.
"""
from __future__ import annotations

import operator
from typing import Callable, Optional

from felisp import Expression, NativeFunction
from felisp.config import default_table_name
from felisp.errors import Reason
from felisp.storage.catalog import TableCatalog
from felisp.types.environment import Environment


def is_number(x: Expression) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def parse_list_of_floats(args: list[Expression]) -> list[float]:
    floats = []
    for x in args:
        if not is_number(x):
            raise Reason("expected a number")
        floats.append(float(x))
    return floats


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Expression]) -> float:
    """Sum of all arguments; (+) is 0."""
    return sum(parse_list_of_floats(args), 0.0)


def sub(args: list[Expression]) -> float:
    """First argument minus the sum of the rest."""
    floats = parse_list_of_floats(args)
    if not floats:
        raise Reason("expected at least one number")
    return floats[0] - sum(floats[1:], 0.0)


# -------------------------------
# Comparison
# -------------------------------
def ensure_tonicity(check: Callable[[float, float], bool], name: str) -> NativeFunction:
    """Build a comparison that holds when `check` holds for every adjacent pair."""

    def compare(args: list[Expression]) -> bool:
        floats = parse_list_of_floats(args)
        if not floats:
            raise Reason("expected at least one number")
        return all(check(a, b) for a, b in zip(floats, floats[1:]))

    compare.__name__ = compare.__qualname__ = name
    return compare


eq = ensure_tonicity(operator.eq, "eq")
gt = ensure_tonicity(operator.gt, "gt")
gte = ensure_tonicity(operator.ge, "gte")
lt = ensure_tonicity(operator.lt, "lt")
lte = ensure_tonicity(operator.le, "lte")


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update(
        {
            "+": add,
            "-": sub,
            "=": eq,
            ">": gt,
            ">=": gte,
            "<": lt,
            "<=": lte,
        }
    )


def default_env(tables: Optional[TableCatalog] = None) -> Environment:
    """Global scope: builtins plus a handle to the seeded table.

    The seeded table is owned by `tables` when given.
    """
    env = Environment()
    register(env)
    name = default_table_name()
    if tables is None:
        tables = TableCatalog()
    env.bind(name, tables.create(name))
    return env
