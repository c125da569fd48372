from felisp import EvaluatorFn
from felisp import Expression
from felisp.errors import Reason
from felisp.printer import to_string
from felisp.storage.catalog import TableCatalog
from felisp.types.environment import Environment


def if_form(
    tail: list[Expression],
    env: Environment,
    tables: TableCatalog,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """
    (if test then else)
    The test must evaluate to a boolean; only the chosen branch is evaluated.
    """
    if not tail:
        raise Reason("expected test form")
    test_form = tail[0]
    test = evaluate_fn(test_form, env, tables)
    if not isinstance(test, bool):
        raise Reason(f"unexpected test form='{to_string(test_form)}'")

    form_idx = 1 if test else 2
    if form_idx >= len(tail):
        raise Reason(f"expected form idx={form_idx}")
    return evaluate_fn(tail[form_idx], env, tables)
