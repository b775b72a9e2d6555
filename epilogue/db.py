"""
epilogue/db.py

Public Database API for the Epilogue data store.

Responsibilities:
- Provide a simple library interface:
    - db.add_table(name, table)
    - db.execute(sql) -> Selected | Inserted
    - db.execute_script(sql_script) -> list[Selected | Inserted]
    - execute(db, statement) for already-parsed statements
- Own the name -> Table mapping (no global registry)

This module is intentionally minimal so it can be used from the REPL or embedded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .ast import Statement
from .exec.executor import Executor
from .parser import parse_script, parse_sql
from .results import QueryOutcome
from .schema import TableSchema
from .storage.table import Table
from .values import ColumnType

logger = logging.getLogger(__name__)


@dataclass
class Database:
    """
    In-memory database: a set of named tables.

    Attributes:
        tables: Mapping of table name -> Table.
    """
    tables: dict[str, Table] = field(default_factory=dict)

    @classmethod
    def with_books(cls) -> "Database":
        """
        Create a database holding an empty demo table:

            books (pk Key, title String, year Integer)
        """
        schema = TableSchema()
        schema.add_column("title", ColumnType.STRING)
        schema.add_column("year", ColumnType.INTEGER)
        db = cls()
        db.add_table("books", Table(schema))
        return db

    def add_table(self, name: str, table: Table) -> None:
        """Register `table` under `name`, replacing any table already there."""
        self.tables[name] = table
        logger.info("registered table %s (%s)", name, ", ".join(table.schema.column_names()))

    def table(self, name: str) -> Table:
        """
        Look up a table by name.

        Raises:
            UnknownTable: if no table has that name.
        """
        return Executor(tables=self.tables).require_table(name)

    def execute_statement(self, stmt: Statement) -> QueryOutcome:
        """Execute an already-parsed statement."""
        return Executor(tables=self.tables).execute(stmt)

    def execute(self, sql: str) -> QueryOutcome:
        """
        Execute a single statement.

        Args:
            sql: Text containing exactly one ';'-terminated statement.

        Returns:
            Selected for SELECT, or Inserted for INSERT.

        Raises:
            ParseError: on parse errors.
            ExecutionError: on execution failure.
        """
        return self.execute_statement(parse_sql(sql))

    def execute_script(self, sql: str) -> list[QueryOutcome]:
        """
        Execute a script containing one or more ';'-terminated statements.

        Statements run in order; execution stops at the first error, leaving
        earlier statements applied.

        Returns:
            List of results in statement order.
        """
        stmts = parse_script(sql)
        ex = Executor(tables=self.tables)
        return [ex.execute(s) for s in stmts]


def execute(db: Database, statement: Statement) -> QueryOutcome:
    """Dispatch a parsed statement against `db`."""
    return db.execute_statement(statement)
