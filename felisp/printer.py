"""Display form of Felisp expressions (REPL output, stringified forms)."""

import math

from felisp import Expression
from felisp.types.symbol import Symbol
from felisp.types.lambda_fn import Lambda
from felisp.types.table import Row, Table


def format_number(x: float) -> str:
    """Shortest text for a number; integral values print without a fraction."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    if float(x).is_integer():
        return str(int(x))
    return repr(float(x))


def to_string(expr: Expression) -> str:
    if isinstance(expr, bool):
        return "true" if expr else "false"
    if isinstance(expr, Symbol):
        return expr.name
    if isinstance(expr, (int, float)):
        return format_number(expr)
    if isinstance(expr, list):
        return "(" + ",".join(to_string(x) for x in expr) + ")"
    if isinstance(expr, (Lambda, Table, Row)):
        return str(expr)
    if callable(expr):
        return "Function {}"
    return str(expr)
