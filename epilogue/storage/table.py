"""
epilogue/storage/table.py

In-memory row store for a single table.

Responsibilities:
- Own one TableSchema and an ordered mapping primary key -> Row
- Validate rows, assign primary keys and store them (insert)
- Provide ordered scans and point lookups for the executor
- Render the table as a fixed-width text grid (display)

Design notes:
- Primary keys are assigned as len(rows) + 1. Rows are never updated or
  removed, so keys are 1..n, contiguous and strictly increasing.
- Python dicts keep insertion order, and insertion order IS ascending key order
  here, so a plain dict is the ordered store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from prettytable import PrettyTable

from ..errors import IntegrityFault
from ..schema import Row, TableSchema
from ..values import Key

logger = logging.getLogger(__name__)


@dataclass
class Table:
    """
    A schema plus its stored rows.

    Attributes:
        schema: Column layout every stored row conforms to.
        _rows: pk -> Row, iterated in ascending pk order.
    """
    schema: TableSchema
    _rows: dict[int, Row] = field(default_factory=dict, repr=False)

    def __len__(self) -> int:
        return len(self._rows)

    def insert(self, row: Row) -> int:
        """
        Validate and store a row.

        The cell at position 0 is replaced with Key(pk), whatever the caller put there.

        Args:
            row: Candidate row (position 0 is a placeholder key).

        Returns:
            The assigned primary key.

        Raises:
            ValidationError: if the row does not match the schema; the store is unchanged.
            IntegrityFault: if the computed key is already taken.
        """
        self.schema.validate_row(row)

        pk = len(self._rows) + 1
        if pk in self._rows:
            raise IntegrityFault(f"primary key {pk} already assigned")

        self._rows[pk] = row.with_cell(0, Key(pk))
        logger.debug("inserted row pk=%d", pk)
        return pk

    def rows(self) -> Iterator[Row]:
        """Iterate stored rows in ascending primary key order."""
        return iter(self._rows.values())

    def get(self, pk: int) -> Row | None:
        """Return the row stored under `pk`, or None."""
        return self._rows.get(pk)

    def display(self) -> str:
        """
        Render the table as text: a header of column names, then one line per row.

        Columns are separated by vertical bars and padded to their widest value.
        """
        grid = PrettyTable()
        grid.field_names = unique_headers(self.schema.column_names())
        grid.align = "l"
        for row in self._rows.values():
            grid.add_row([str(cell) for cell in row])
        return grid.get_string()


def unique_headers(names: list[str]) -> list[str]:
    """
    Make column headers unique for rendering.

    Schemas may repeat a column name, but PrettyTable field names must be
    unique; repeats get a numeric suffix: ["a", "a"] -> ["a", "a_2"].
    """
    seen: dict[str, int] = {}
    out: list[str] = []
    for name in names:
        n = seen.get(name, 0) + 1
        seen[name] = n
        out.append(name if n == 1 else f"{name}_{n}")
    return out
