"""
epilogue/results.py

Result objects returned by Database.execute()/execute_script().

The engine returns one of:
- Inserted: for INSERT statements (rows affected is always 1)
- Selected: for SELECT statements

Both are members of the QueryOutcome union.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .values import Cell


@dataclass(frozen=True)
class Inserted:
    """
    Represents successful execution of an INSERT statement.

    Attributes:
        count: Number of rows inserted.
        message: Human-readable status message.
    """
    count: int = 1
    message: str = "1 row inserted"


@dataclass(frozen=True)
class Selected:
    """
    Represents the output of a SELECT statement.

    Attributes:
        columns: Output column names, in schema order.
        rows: Projected rows; each row is a tuple of Cells aligned with `columns`.
    """
    columns: list[str]
    rows: list[tuple[Cell, ...]]


QueryOutcome = Union[Selected, Inserted]
