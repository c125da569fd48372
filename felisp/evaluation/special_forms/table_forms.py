"""`select` and `insert`: the two forms that reach the table catalog.

    (select mytable1)
    (insert mytable1 alice alice@example.com)

Both evaluate their first form. When it yields a Table the catalog performs
the operation on the table it owns; any other value is silently ignored.
Both return the first form unevaluated.
"""

import logging

from felisp import EvaluatorFn
from felisp import Expression
from felisp.errors import Reason
from felisp.printer import to_string
from felisp.storage.catalog import TableCatalog
from felisp.types.environment import Environment
from felisp.types.table import Table

logger = logging.getLogger(__name__)

# Every row inserted from Felisp code gets this id.
INSERT_ROW_ID = 1


def select_form(
    tail: list[Expression],
    env: Environment,
    tables: TableCatalog,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    if not tail:
        raise Reason("expected first form")
    table_form = tail[0]
    table = evaluate_fn(table_form, env, tables)
    if isinstance(table, Table):
        tables.select(table)
    else:
        logger.debug("select on non-table %s ignored", to_string(table_form))
    return table_form


def insert_form(
    tail: list[Expression],
    env: Environment,
    tables: TableCatalog,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    # username and email are the display text of the unevaluated forms
    if not tail:
        raise Reason("expected first form")
    if len(tail) < 2:
        raise Reason("expected second form")
    if len(tail) < 3:
        raise Reason("expected third form")
    table_form, username_form, email_form = tail[0], tail[1], tail[2]

    table = evaluate_fn(table_form, env, tables)
    if isinstance(table, Table):
        tables.insert(table, INSERT_ROW_ID, to_string(username_form), to_string(email_form))
        tables.select(table)
    else:
        logger.debug("insert into non-table %s ignored", to_string(table_form))
    return table_form
