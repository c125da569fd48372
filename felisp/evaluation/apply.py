"""Application engine for Felisp.

Calling a native function or a lambda from the head of a list:
- Natives receive the evaluated argument list.
- Lambdas bind their parameters in a fresh child of the *calling*
  environment and evaluate their body there. Free variables in the body are
  therefore resolved at the call site, not where the lambda was written.
"""

import logging

from felisp import Expression, EvaluatorFn
from felisp.errors import Reason
from felisp.storage.catalog import TableCatalog
from felisp.types.environment import Environment
from felisp.types.lambda_fn import Lambda
from felisp.types.symbol import Symbol
from felisp.types.table import Table

logger = logging.getLogger(__name__)


def is_native(fn: Expression) -> bool:
    return callable(fn) and not isinstance(fn, (Lambda, Table, Symbol, type))


def parse_list_of_symbol_strings(params: Expression) -> list[str]:
    if not isinstance(params, list):
        raise Reason("expected args form to be a list")
    names = []
    for p in params:
        if not isinstance(p, Symbol):
            raise Reason("expected symbols in the argument list")
        names.append(p.name)
    return names


def eval_forms(
    arg_forms: list[Expression],
    env: Environment,
    tables: TableCatalog,
    evaluate_fn: EvaluatorFn,
) -> list[Expression]:
    """Evaluate forms left to right; the first failure propagates."""
    return [evaluate_fn(form, env, tables) for form in arg_forms]


def env_for_lambda(
    params: Expression,
    arg_forms: list[Expression],
    outer_env: Environment,
    tables: TableCatalog,
    evaluate_fn: EvaluatorFn,
) -> Environment:
    """Child scope of `outer_env` binding each parameter to its argument value."""
    names = parse_list_of_symbol_strings(params)
    if len(names) != len(arg_forms):
        raise Reason(f"expected {len(names)} arguments, got {len(arg_forms)}")
    values = eval_forms(arg_forms, outer_env, tables, evaluate_fn)
    env = Environment(outer_env)
    for name, value in zip(names, values):
        env.bind(name, value)
    return env


def apply(
    fn: Expression,
    arg_forms: list[Expression],
    env: Environment,
    tables: TableCatalog,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Apply an evaluated head to the unevaluated argument forms."""
    if is_native(fn):
        args = eval_forms(arg_forms, env, tables, evaluate_fn)
        return fn(args)

    if isinstance(fn, Lambda):
        call_env = env_for_lambda(fn.params, arg_forms, env, tables, evaluate_fn)
        logger.debug("lambda call at depth %d: %s", call_env.depth(), call_env)
        return evaluate_fn(fn.body, call_env, tables)

    raise Reason("first form must be a function")
