from felisp import EvaluatorFn
from felisp import Expression
from felisp.errors import Reason
from felisp.storage.catalog import TableCatalog
from felisp.types.environment import Environment
from felisp.types.symbol import Symbol


def define_form(
    tail: list[Expression],
    env: Environment,
    tables: TableCatalog,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (defn name value)
    Binds in the current scope and returns the name form unevaluated.
    """
    if not tail:
        raise Reason("expected first form")
    name = tail[0]
    if not isinstance(name, Symbol):
        raise Reason("expected first form to be a symbol")
    if len(tail) < 2:
        raise Reason("expected second form")
    if len(tail) > 2:
        raise Reason("defn can only have two forms")

    value = evaluate_fn(tail[1], env, tables)
    env.bind(name, value)
    return name
