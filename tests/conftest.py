import pytest

from felisp.builtin.env_builtin import default_env
from felisp.evaluation.evaluator import evaluate
from felisp.reader.parser import parse_str
from felisp.storage.catalog import TableCatalog


@pytest.fixture
def tables():
    """Fresh catalog owning the seeded table."""
    return TableCatalog()


@pytest.fixture
def env(tables):
    """Fresh global environment with builtins and the seeded table."""
    return default_env(tables)


@pytest.fixture
def run(env, tables):
    """Parse and evaluate one line of source in the shared env."""

    def _run(source):
        return evaluate(parse_str(source), env, tables)

    return _run
