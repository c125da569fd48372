"""Core evaluator for the Felisp interpreter.

Case dispatch over the expression variants. Atoms evaluate to themselves,
symbols are looked up in the environment chain, and lists are either special
forms (checked by head symbol first) or applications.
"""

from __future__ import annotations

import logging

from felisp import Expression
from felisp.errors import Reason
from felisp.evaluation.apply import apply
from felisp.evaluation.special_forms import SPECIAL_FORMS
from felisp.storage.catalog import TableCatalog
from felisp.types.environment import Environment
from felisp.types.lambda_fn import Lambda
from felisp.types.symbol import Symbol
from felisp.types.table import Table

logger = logging.getLogger(__name__)


def evaluate(
    expr: Expression, env: Environment, tables: TableCatalog | None = None
) -> Expression:
    """
    Evaluate `expr` in `env`. Raises Reason on the first failure.

    `tables` owns the tables that `select`/`insert` operate on; a fresh
    catalog is used when none is given.
    """
    if tables is None:
        tables = TableCatalog()

    match expr:
        case bool() | int() | float():
            return expr

        case Symbol():
            return env.lookup(expr)

        case Table():
            return expr

        case []:
            raise Reason("expected a non-empty list")

        case [head, *arg_forms]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                logger.debug("special form %s", head)
                return SPECIAL_FORMS[head](arg_forms, env, tables, evaluate)
            fn = evaluate(head, env, tables)
            return apply(fn, arg_forms, env, tables, evaluate)

        case Lambda():
            raise Reason("unexpected form in lambda")

    raise Reason("unexpected form")
