"""
epilogue/ast.py

AST (Abstract Syntax Tree) node definitions for the Epilogue statement language.

The parser converts token streams into instances of these dataclasses.
The executor then uses the AST to run inserts and table scans.

Design notes:
- Only two statements exist: SELECT and INSERT.
- The column clause is either Star (all columns) or an explicit ordered name list.
- WHERE supports a single equality predicate (column = literal).
- Literal values are already typed Cells (Integer or String).
"""

from __future__ import annotations

from dataclasses import dataclass

from .values import Cell


# ---------- Core nodes ----------

class Statement:
    """Base class marker for all statements."""


class ColumnClause:
    """Base class marker for SELECT column clauses."""


@dataclass(frozen=True)
class Star(ColumnClause):
    """SELECT * : every schema column, in schema order."""


@dataclass(frozen=True)
class Names(ColumnClause):
    """
    Explicit column list.

    Attributes:
        names: Column names in the order they were written.
    """
    names: tuple[str, ...]


@dataclass(frozen=True)
class WhereClause:
    """
    WHERE <column> = <literal>.

    Attributes:
        column_name: Column on the left side.
        value: Literal cell on the right side.
    """
    column_name: str
    value: Cell


# ---------- Statements ----------

@dataclass(frozen=True)
class Select(Statement):
    """
    SELECT statement.

    Attributes:
        column_clause: Star or Names.
        table_name: Table to scan.
        where_clause: Optional equality filter; None means an unconditional scan.
    """
    column_clause: ColumnClause
    table_name: str
    where_clause: WhereClause | None = None


@dataclass(frozen=True)
class Insert(Statement):
    """INSERT statement. `values` excludes the primary key."""
    table_name: str
    values: tuple[Cell, ...]
