"""
Epilogue: a minimal in-memory relational data store.

    >>> db = Database.with_books()
    >>> db.execute("INSERT INTO books VALUES ('Permutation City', 1994);")
    Inserted(count=1, message='1 row inserted')
"""

from .db import Database, execute
from .parser import parse_script, parse_sql, parse_statement
from .results import Inserted, QueryOutcome, Selected
from .schema import Column, Row, TableSchema
from .storage.table import Table
from .values import Cell, ColumnType, Integer, Key, String

__all__ = [
    "Cell",
    "Column",
    "ColumnType",
    "Database",
    "Inserted",
    "Integer",
    "Key",
    "QueryOutcome",
    "Row",
    "Selected",
    "String",
    "Table",
    "TableSchema",
    "execute",
    "parse_script",
    "parse_sql",
    "parse_statement",
]
