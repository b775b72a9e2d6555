"""
epilogue/schema.py

Column layout and row validation for Epilogue tables.

Responsibilities:
- Describe a table's ordered, typed columns (TableSchema)
- Fix position 0 to the primary key column "pk"
- Validate rows positionally against the schema before they are stored

Design notes:
- Column name uniqueness is NOT enforced; callers are responsible for it.
- A schema is treated as immutable once its table holds rows (convention only).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from .errors import RowLengthMismatch, TypeMismatch
from .values import Cell, ColumnType

PRIMARY_KEY_COLUMN = "pk"


@dataclass(frozen=True)
class Column:
    """
    A named, typed position in a table schema.

    Attributes:
        name: Column name.
        column_type: Declared ColumnType.
    """
    name: str
    column_type: ColumnType


@dataclass(frozen=True)
class Row:
    """
    An ordered sequence of cells, aligned positionally with a TableSchema.

    Position 0 holds the primary key. Callers supply a Key(0) placeholder
    which the table overwrites on insert.
    """
    cells: tuple[Cell, ...]

    def __init__(self, cells: Sequence[Cell]):
        object.__setattr__(self, "cells", tuple(cells))

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __getitem__(self, position: int) -> Cell:
        return self.cells[position]

    def with_cell(self, position: int, cell: Cell) -> "Row":
        """Return a copy of this row with one cell replaced."""
        cells = list(self.cells)
        cells[position] = cell
        return Row(cells)


@dataclass
class TableSchema:
    """
    Ordered column layout of a table.

    Attributes:
        columns: Column list; columns[0] is always the primary key column.
    """
    columns: list[Column] = field(
        default_factory=lambda: [Column(PRIMARY_KEY_COLUMN, ColumnType.KEY)]
    )

    def add_column(self, name: str, column_type: ColumnType) -> "TableSchema":
        """Append a column. Returns self so definitions can be chained."""
        self.columns.append(Column(name, column_type))
        return self

    def column_names(self) -> list[str]:
        """Return column names in schema order."""
        return [c.name for c in self.columns]

    def position_of(self, name: str) -> int | None:
        """Return the first schema position named `name`, or None."""
        for i, c in enumerate(self.columns):
            if c.name == name:
                return i
        return None

    def validate_row(self, row: Row) -> None:
        """
        Validate a row against this schema.

        Cells and columns are compared pairwise by position; the first type
        disagreement is reported. Rows must also have exactly one cell per column.

        Args:
            row: Candidate row.

        Raises:
            TypeMismatch: on the first position whose cell type differs.
            RowLengthMismatch: if the row is shorter or longer than the schema.
        """
        for i, (cell, column) in enumerate(zip(row, self.columns)):
            actual = cell.type_of()
            if actual != column.column_type:
                raise TypeMismatch(i, column.column_type, actual)

        if len(row) != len(self.columns):
            raise RowLengthMismatch(len(self.columns), len(row))
