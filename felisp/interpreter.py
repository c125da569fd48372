from __future__ import annotations

from felisp import Expression
from felisp.builtin.env_builtin import default_env
from felisp.evaluation.evaluator import evaluate
from felisp.reader.parser import parse, tokenize
from felisp.storage.catalog import TableCatalog
from felisp.types.environment import Environment


class Interpreter:
    """
    A Felisp session: one global Environment plus the TableCatalog that owns
    its tables. Definitions and inserts persist across calls to eval().
    """

    def __init__(self):
        self.tables: TableCatalog = TableCatalog()
        self.env: Environment = default_env(self.tables)

    def eval(self, code: str) -> Expression:
        """Parse the first form of `code` and evaluate it.

        Tokens after the first complete form are ignored.
        """
        expr, _rest = parse(tokenize(code))
        return evaluate(expr, self.env, self.tables)
