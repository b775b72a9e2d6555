"""
epilogue/exec/planner.py

SELECT planning and table-scan execution.

Responsibilities:
- Resolve projected column names to schema positions
- Resolve the optional WHERE column to a schema position and build a Predicate
- Scan the table in primary key order, filter, and project

Design notes:
- Predicates are plain tagged values (Unconditional | ColumnEquals) evaluated
  by isinstance dispatch rather than closures.
- Projection keeps SCHEMA order. "SELECT year, title" returns (title, year)
  for a (pk, title, year) table. This is the established observable behavior.
- Comparisons use typed cell equality: String('2015') never matches Integer(2015).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..errors import UnknownColumn
from ..schema import Row
from ..storage.table import Table
from ..values import Cell

logger = logging.getLogger(__name__)


class Predicate:
    """Base class marker for row filters."""


@dataclass(frozen=True)
class Unconditional(Predicate):
    """Matches every row."""


@dataclass(frozen=True)
class ColumnEquals(Predicate):
    """
    Matches rows whose cell at `position` equals `value`.

    Attributes:
        position: Schema position of the filtered column.
        value: Literal cell to compare against.
    """
    position: int
    value: Cell


def evaluate(predicate: Predicate, row: Row) -> bool:
    """Evaluate a predicate against one row."""
    if isinstance(predicate, Unconditional):
        return True
    if isinstance(predicate, ColumnEquals):
        return row[predicate.position] == predicate.value
    raise TypeError(f"Unsupported predicate: {type(predicate).__name__}")


@dataclass(frozen=True)
class SelectPlan:
    """
    A resolved table scan.

    Attributes:
        table: Table to scan.
        positions: Output schema positions, ascending (schema order).
        predicate: Row filter.
    """
    table: Table
    positions: tuple[int, ...]
    predicate: Predicate

    @property
    def column_names(self) -> list[str]:
        """Names of the projected columns, in output order."""
        columns = self.table.schema.columns
        return [columns[i].name for i in self.positions]

    def execute(self) -> list[tuple[Cell, ...]]:
        """
        Run the scan.

        Returns:
            Projected rows of matching table rows, in ascending primary key order.
            An empty list is a valid result.
        """
        results: list[tuple[Cell, ...]] = []
        for row in self.table.rows():
            if not evaluate(self.predicate, row):
                continue
            results.append(tuple(row[i] for i in self.positions))
        return results


def plan_select(
    table: Table,
    column_names: Sequence[str] | None,
    predicate: tuple[str, Cell] | None = None,
) -> SelectPlan:
    """
    Build a SelectPlan for a single-table scan.

    Args:
        table: Table to scan.
        column_names: Requested columns, or None for every schema column.
        predicate: Optional (column_name, value) equality filter.

    Returns:
        SelectPlan ready to execute.

    Raises:
        UnknownColumn: if a projected or filtered column is not in the schema.
    """
    schema = table.schema
    schema_names = schema.column_names()

    if column_names is None:
        requested = set(schema_names)
    else:
        for name in column_names:
            if name not in schema_names:
                raise UnknownColumn(name)
        requested = set(column_names)

    positions = tuple(i for i, name in enumerate(schema_names) if name in requested)

    if predicate is None:
        pred: Predicate = Unconditional()
    else:
        column_name, value = predicate
        position = schema.position_of(column_name)
        if position is None:
            raise UnknownColumn(column_name)
        pred = ColumnEquals(position=position, value=value)

    logger.debug("planned table scan: positions=%s predicate=%r", positions, pred)
    return SelectPlan(table=table, positions=positions, predicate=pred)
