"""
epilogue/exec/executor.py

Statement execution engine for the Epilogue data store.

Responsibilities:
- Execute AST statements produced by the parser:
    - INSERT: build a row behind a placeholder key and store it
    - SELECT: plan a table scan and run it
- Look up target tables in the database's table mapping
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ast import Insert, Names, Select, Statement
from ..errors import ExecutionError, UnknownTable
from ..results import Inserted, QueryOutcome, Selected
from ..schema import Row
from ..storage.table import Table
from ..values import Key
from .planner import plan_select


@dataclass
class Executor:
    """
    Executes parsed AST statements against a set of named tables.

    Args:
        tables: Mapping of table name -> Table, owned by the Database.
    """
    tables: dict[str, Table]

    def execute(self, stmt: Statement) -> QueryOutcome:
        """
        Execute a single statement.

        Args:
            stmt: AST statement.

        Returns:
            Selected for SELECT or Inserted for INSERT.

        Raises:
            ExecutionError subclasses on failure.
        """
        if isinstance(stmt, Select):
            return self._select(stmt)
        if isinstance(stmt, Insert):
            return self._insert(stmt)

        raise ExecutionError(f"Unsupported statement: {type(stmt).__name__}")

    def require_table(self, table_name: str) -> Table:
        """Fetch a table by name or raise UnknownTable."""
        table = self.tables.get(table_name)
        if table is None:
            raise UnknownTable(table_name)
        return table

    def _insert(self, stmt: Insert) -> Inserted:
        table = self.require_table(stmt.table_name)
        table.insert(Row((Key(0), *stmt.values)))
        return Inserted(count=1)

    def _select(self, stmt: Select) -> Selected:
        """
        SELECT execution.

        - '*' expands to every schema column
        - the WHERE clause, if any, becomes a single equality predicate
        """
        table = self.require_table(stmt.table_name)

        column_names = None
        if isinstance(stmt.column_clause, Names):
            column_names = stmt.column_clause.names

        predicate = None
        if stmt.where_clause is not None:
            predicate = (stmt.where_clause.column_name, stmt.where_clause.value)

        plan = plan_select(table, column_names, predicate)
        return Selected(columns=plan.column_names, rows=plan.execute())
