"""
epilogue/repl.py

Interactive REPL (Read-Eval-Print Loop) for the Epilogue data store.

Responsibilities:
- Provide a CLI shell for executing statements against an in-memory database
  seeded with the demo `books` table.
- Support multiline input until a semicolon ';' is entered outside of quotes.
- Display SELECT results in a readable table format.
- Keep line history in a history file when readline is available.
- Provide small meta-commands for introspection:
    - .help
    - .exit / .quit
    - .tables
    - .schema <table>
    - .print <table>

Configuration (environment):
    EPILOGUE_LOG_LEVEL  logging level name or number (default WARNING)
    EPILOGUE_HISTORY    history file path (default ~/.epilogue_history)

Usage:
    python -m epilogue [history_file]
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from prettytable import PrettyTable

try:
    import readline
except ImportError:
    # readline is optional; if missing, REPL still works without history.
    readline = None  # type: ignore[assignment]

from .db import Database
from .errors import EpilogueError
from .parser import parse_script
from .results import Inserted, QueryOutcome, Selected
from .storage.table import unique_headers

logger = logging.getLogger(__name__)

PROMPT = "Epilogue>> "
PROMPT_CONT = "....> "

LOG_LEVEL_ENV = "EPILOGUE_LOG_LEVEL"
HISTORY_ENV = "EPILOGUE_HISTORY"
DEFAULT_HISTORY = "~/.epilogue_history"


def read_log_level(raw: str | None) -> int:
    """
    Interpret a log level setting.

    Accepts level names (case-insensitive) or integers; anything else maps to WARNING.
    """
    if not raw:
        return logging.WARNING
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def history_path(argv: list[str]) -> Path:
    """History file from argv[1], else EPILOGUE_HISTORY, else the default."""
    if len(argv) > 1:
        return Path(argv[1]).expanduser()
    return Path(os.environ.get(HISTORY_ENV, DEFAULT_HISTORY)).expanduser()


def load_history(path: Path) -> None:
    if readline is None:
        return
    try:
        readline.read_history_file(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("could not read history file %s: %s", path, e)


def save_history(path: Path) -> None:
    if readline is None:
        return
    try:
        readline.write_history_file(path)
    except OSError as e:
        logger.warning("could not write history file %s: %s", path, e)


def is_complete_statement(buf: str) -> bool:
    """
    Decide whether the current buffer contains at least one complete statement.

    A statement is considered complete when a semicolon ';' appears outside of
    single-quoted string literals.

    Args:
        buf: Current accumulated input buffer.

    Returns:
        True if complete, else False.
    """
    in_str = False
    for ch in buf:
        if ch == "'":
            in_str = not in_str
        elif ch == ";" and not in_str:
            return True
    return False


def format_selected(res: Selected) -> str:
    """
    Render a Selected result as an aligned text table.

    Args:
        res: Result of a SELECT.

    Returns:
        A formatted string suitable for printing to console.
    """
    grid = PrettyTable()
    grid.field_names = unique_headers(res.columns)
    grid.align = "l"
    for row in res.rows:
        grid.add_row([str(cell) for cell in row])
    return grid.get_string()


def print_result(res: QueryOutcome) -> None:
    """
    Print a Database execution result.

    Args:
        res: Selected or Inserted.
    """
    if isinstance(res, Inserted):
        print(res.message)
        return

    if isinstance(res, Selected):
        print(format_selected(res))
        print(f"({len(res.rows)} row(s))")
        return

    print(res)


def cmd_tables(db: Database) -> None:
    """Meta-command: list all tables."""
    names = sorted(db.tables.keys())
    if not names:
        print("(no tables)")
        return
    for n in names:
        print(n)


def cmd_schema(db: Database, table: str) -> None:
    """Meta-command: print a table's columns and types."""
    t = db.tables.get(table)
    if t is None:
        print(f"Table not found: {table}")
        return

    print(f"TABLE {table}")
    for i, c in enumerate(t.schema.columns):
        suffix = " PRIMARY KEY" if i == 0 else ""
        print(f"  - {c.name} {c.column_type.label}{suffix}")


def cmd_print(db: Database, table: str) -> None:
    """Meta-command: print every stored row of a table."""
    t = db.tables.get(table)
    if t is None:
        print(f"Table not found: {table}")
        return
    print(t.display())


def print_help() -> None:
    print("Meta commands:")
    print("  .help              show this help")
    print("  .tables            list tables")
    print("  .schema <table>    show table columns")
    print("  .print <table>     show every row of a table")
    print("  .exit / .quit      exit")
    print()
    print("Statements end with ';'. Example:")
    print("  INSERT INTO books VALUES ('Permutation City', 1994);")
    print("  SELECT title FROM books WHERE year = 1994;")
    print("  SELECT * FROM books;")


def run_meta_command(db: Database, line: str) -> bool:
    """
    Run a '.'-prefixed meta-command.

    Returns:
        False if the REPL should exit, True otherwise.
    """
    parts = line.split()
    cmd = parts[0].lower()

    if cmd in (".exit", ".quit"):
        return False

    if cmd == ".help":
        print_help()
    elif cmd == ".tables":
        cmd_tables(db)
    elif cmd in (".schema", ".print"):
        if len(parts) != 2:
            print(f"Usage: {cmd} <table>")
        elif cmd == ".schema":
            cmd_schema(db, parts[1])
        else:
            cmd_print(db, parts[1])
    else:
        print(f"Unknown command: {cmd}. Type .help")
    return True


def run_buffer(db: Database, buf: str) -> None:
    """Execute a buffer as a script, printing results or the error."""
    try:
        for stmt in parse_script(buf):
            print_result(db.execute_statement(stmt))
    except EpilogueError as e:
        print(e)


def repl(db: Database) -> int:
    """
    Run the interactive REPL.

    Args:
        db: Database to run statements against.

    Returns:
        Process exit code (0 on normal exit).
    """
    print("Welcome to Epilogue!")
    print("There is a table 'books' with string column 'title' and integer column 'year'.")
    print("Type .help for commands. End statements with ';'.")

    buf = ""
    while True:
        try:
            prompt = PROMPT if not buf else PROMPT_CONT
            line = input(prompt)
        except EOFError:
            print()
            return 0
        except KeyboardInterrupt:
            # Clear current buffer on Ctrl+C
            print()
            buf = ""
            continue

        line_stripped = line.strip()

        # Meta commands only apply if we're not in the middle of a multi-line buffer.
        if not buf and line_stripped.startswith("."):
            if not run_meta_command(db, line_stripped):
                return 0
            continue

        buf += line + "\n"
        if not is_complete_statement(buf):
            continue

        try:
            run_buffer(db, buf)
        except Exception:
            logger.exception("internal error while executing %r", buf)
            raise
        buf = ""


def main(argv: list[str]) -> int:
    """
    CLI entrypoint.

    Args:
        argv: sys.argv list.

    Returns:
        Exit code.
    """
    logging.basicConfig(
        level=read_log_level(os.environ.get(LOG_LEVEL_ENV)),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    hist = history_path(argv)
    load_history(hist)
    try:
        return repl(Database.with_books())
    finally:
        save_history(hist)
