# (exit ...) stops the session. The evaluator raises Halt and leaves it to
# the host (the REPL) to end the process with the carried status.

import logging

from felisp import EvaluatorFn
from felisp import Expression
from felisp.storage.catalog import TableCatalog
from felisp.types.environment import Environment

logger = logging.getLogger(__name__)

EXIT_STATUS = 0x0100


class Halt(Exception):
    """Cooperative termination request raised by the exit form."""

    def __init__(self, status: int = EXIT_STATUS):
        super().__init__(f"Halt(status={status})")
        self.status: int = status


def exit_form(
    tail: list[Expression],
    env: Environment,
    tables: TableCatalog,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    # Arguments are ignored, and never evaluated.
    logger.debug("exit requested")
    raise Halt(EXIT_STATUS)
