"""
epilogue/values.py

Typed cell values stored in table rows.

A Cell is exactly one of:
- Key(value)      unsigned integer, used for the primary key column
- Integer(value)  signed integer
- String(value)   text

Equality is structural AND typed: Key(1) != Integer(1). Frozen dataclasses give
us this for free, since generated __eq__ compares the exact class first.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColumnType(Enum):
    """Declared type of a schema position."""
    KEY = "Key"
    INTEGER = "Integer"
    STRING = "String"

    @property
    def label(self) -> str:
        """Display name used in error messages and schema listings."""
        return self.value


class Cell:
    """Base class marker for all cell values."""

    __slots__ = ()

    def type_of(self) -> ColumnType:
        raise NotImplementedError


@dataclass(frozen=True)
class Key(Cell):
    """Primary key cell."""
    value: int

    def __post_init__(self) -> None:
        # bool is a subclass of int in Python, so explicitly reject.
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Key expects an int, got {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"Key must be unsigned, got {self.value}")

    def type_of(self) -> ColumnType:
        return ColumnType.KEY

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Integer(Cell):
    """Signed integer cell."""
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Integer expects an int, got {type(self.value).__name__}")

    def type_of(self) -> ColumnType:
        return ColumnType.INTEGER

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class String(Cell):
    """Text cell."""
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"String expects a str, got {type(self.value).__name__}")

    def type_of(self) -> ColumnType:
        return ColumnType.STRING

    def __str__(self) -> str:
        return self.value
