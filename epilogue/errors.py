"""
epilogue/errors.py

Centralized exception types for the Epilogue data store.

This module defines:
- A common base exception for all user-facing errors
- A lightweight Position structure for reporting parse errors with line/column context
- Specialized error types used across parser/executor/storage layers
- IntegrityFault, an internal-consistency failure that is NOT a user error
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .values import ColumnType


class EpilogueError(Exception):
    """
    Base class for all Epilogue errors.

    Catching this exception allows callers (REPL, embedding code) to handle all
    DB errors without accidentally swallowing unrelated system exceptions.
    """


@dataclass(frozen=True)
class Position:
    """
    Represents a location in an input statement string.

    Attributes:
        line: 1-based line number
        col:  1-based column number
    """
    line: int
    col: int


class ParseError(EpilogueError):
    """
    Raised when tokenization/parsing fails because the text does not match the grammar.

    Args:
        message: Human readable explanation, naming the expected construct.
        position: Optional Position indicating where the error occurred.
    """

    def __init__(self, message: str, position: Position | None = None):
        self.message = message
        self.position = position
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.position is None:
            return f"ParseError: {self.message}"
        return f"ParseError at line {self.position.line}, col {self.position.col}: {self.message}"


class ExecutionError(EpilogueError):
    """
    Raised when a statement is syntactically valid but cannot be executed.

    Examples:
      - Missing table/column
      - Type mismatch detected while inserting
    """


class UnknownTable(ExecutionError):
    """Raised when the database has no table with the requested name."""

    def __init__(self, table_name: str):
        self.table_name = table_name
        super().__init__(f"no table named {table_name}")


class PlanError(ExecutionError):
    """Raised when a SELECT cannot be turned into an executable plan."""


class UnknownColumn(PlanError):
    """Raised when a projection or predicate column has no match in the schema."""

    def __init__(self, column_name: str):
        self.column_name = column_name
        super().__init__(f"no column named {column_name}")


class ValidationError(ExecutionError):
    """Raised when a row does not conform to its table schema."""


class TypeMismatch(ValidationError):
    """
    A row cell's type disagrees with the column type at the same position.

    Attributes:
        position: 0-based position of the offending cell.
        expected: Declared ColumnType of the schema column.
        actual: ColumnType of the supplied cell.
    """

    def __init__(self, position: int, expected: ColumnType, actual: ColumnType):
        self.position = position
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"type mismatch at {position}: expected {expected.label}, got {actual.label}"
        )


class RowLengthMismatch(ValidationError):
    """A row has a different number of cells than its schema has columns."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"row length mismatch: expected {expected} cells, got {actual}")


class IntegrityFault(RuntimeError):
    """
    Internal consistency violation (e.g. a primary key assigned twice).

    Not an EpilogueError: handlers for user errors never catch it.
    """
