from felisp import EvaluatorFn
from felisp import Expression
from felisp.errors import Reason
from felisp.storage.catalog import TableCatalog
from felisp.types.environment import Environment
from felisp.types.lambda_fn import Lambda


def lambda_form(
    tail: list[Expression],
    env: Environment,
    tables: TableCatalog,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    # (fn (params...) body). Nothing is evaluated here, and the parameter form
    # is only checked when the lambda is called.
    if not tail:
        raise Reason("expected args form")
    if len(tail) < 2:
        raise Reason("expected second form")
    if len(tail) > 2:
        raise Reason("fn definition can only have two forms")

    return Lambda(tail[0], tail[1])
