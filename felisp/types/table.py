"""Paged in-memory tables.

A Table keeps its rows in fixed-size pages of ROWS_PER_PAGE optional slots.
The row with logical index i (0-based, insertion order) lives at
pages[i // ROWS_PER_PAGE][i % ROWS_PER_PAGE]. Pages are allocated on demand
and never removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

ROWS_PER_PAGE = 10

Page = list  # list[Optional[Row]] of length ROWS_PER_PAGE


def new_page() -> Page:
    return [None] * ROWS_PER_PAGE


@dataclass(frozen=True)
class Row:
    id: int
    username: str
    email: str

    def __str__(self) -> str:
        return f'Row {{ id: {self.id}, username: "{self.username}", email: "{self.email}" }}'


@dataclass(eq=False)
class Table:
    name: str
    row_count: int = 0
    page_count: int = 0
    pages: list[Page] = field(default_factory=list)

    def insert(self, id: int, username: str, email: str) -> Row:
        """Append a row at the next logical index, allocating a page if needed.

        Duplicate ids are accepted.
        """
        page_num = self.row_count // ROWS_PER_PAGE
        if page_num >= self.page_count:
            self.pages.append(new_page())
            self.page_count += 1
        row = Row(int(id), str(username), str(email))
        self.pages[page_num][self.row_count % ROWS_PER_PAGE] = row
        self.row_count += 1
        return row

    def __iter__(self) -> Iterator[Row]:
        for page in self.pages:
            for slot in page:
                if slot is not None:
                    yield slot

    def select(self) -> list[Row]:
        """Every occupied slot, page by page then slot by slot."""
        return list(self)

    def row_at(self, index: int) -> Optional[Row]:
        page_num, slot = divmod(index, ROWS_PER_PAGE)
        if index < 0 or page_num >= self.page_count:
            return None
        return self.pages[page_num][slot]

    def header(self) -> str:
        return f"Table: <{self.name}, {self.row_count} rows, {self.page_count} pages>"

    def __str__(self) -> str:
        return f"Table: Name: {self.name} Rows: {self.row_count}"


def execute_select(table: Table) -> list[Row]:
    """Print the table header and its occupied rows; returns the rows."""
    rows = table.select()
    print(table.header())
    for row in rows:
        print(row)
    return rows
