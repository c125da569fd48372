"""Single owner of the named tables reachable from Felisp code.

The catalog travels next to the Environment through every evaluation. The
environment only holds handles; `select` and `insert` resolve a handle's name
here, so there is exactly one mutable copy of each table.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from felisp.types.table import Row, Table, execute_select

logger = logging.getLogger(__name__)


class TableCatalog:
    __slots__ = ("tables",)

    def __init__(self):
        self.tables: dict[str, Table] = {}

    def create(self, name: str) -> Table:
        """Return the table called `name`, creating an empty one if needed."""
        table = self.tables.get(name)
        if table is None:
            table = Table(name)
            self.tables[name] = table
            logger.debug("created table %s", name)
        return table

    def get(self, name: str) -> Optional[Table]:
        return self.tables.get(name)

    def resolve(self, handle: Table) -> Table:
        """Map a table value to the catalog's owned store.

        A table the catalog has never seen is adopted under its own name.
        """
        table = self.tables.get(handle.name)
        if table is None:
            self.tables[handle.name] = handle
            logger.debug("adopted table %s", handle.name)
            return handle
        return table

    def insert(self, handle: Table, id: int, username: str, email: str) -> Row:
        table = self.resolve(handle)
        row = table.insert(id, username, email)
        logger.debug(
            "insert into %s: %s (rows=%d pages=%d)",
            table.name, row, table.row_count, table.page_count,
        )
        return row

    def select(self, handle: Table) -> list[Row]:
        return execute_select(self.resolve(handle))

    def __contains__(self, name: str) -> bool:
        return name in self.tables

    def __iter__(self) -> Iterator[str]:
        return iter(self.tables)

    def __len__(self) -> int:
        return len(self.tables)
