import logging

from epilogue import Database
from epilogue import repl as repl_mod
from epilogue.repl import (
    format_selected,
    history_path,
    is_complete_statement,
    read_log_level,
    run_buffer,
    run_meta_command,
)


def test_is_complete_statement_ignores_quoted_semicolons():
    assert not is_complete_statement("INSERT INTO books VALUES ('a;")
    assert is_complete_statement("INSERT INTO books VALUES ('a;', 1);")


def test_read_log_level():
    assert read_log_level(None) == logging.WARNING
    assert read_log_level("debug") == logging.DEBUG
    assert read_log_level("20") == 20
    assert read_log_level("chatty") == logging.WARNING


def test_history_path(monkeypatch, tmp_path):
    monkeypatch.setenv("EPILOGUE_HISTORY", str(tmp_path / "hist"))
    assert history_path(["epilogue"]) == tmp_path / "hist"
    assert history_path(["epilogue", str(tmp_path / "other")]) == tmp_path / "other"


def test_run_buffer_prints_results_and_errors(capsys):
    db = Database.with_books()
    run_buffer(db, "INSERT INTO books VALUES ('Permutation City', 1994);\nSELECT title FROM books;")
    out = capsys.readouterr().out
    assert "1 row inserted" in out
    assert "| Permutation City |" in out
    assert "(1 row(s))" in out

    run_buffer(db, "SELECT nope FROM books;")
    assert "no column named nope" in capsys.readouterr().out


def test_format_selected():
    db = Database.with_books()
    db.execute("INSERT INTO books VALUES ('Diaspora', 1997);")
    text = format_selected(db.execute("SELECT title, year FROM books;"))
    assert text.splitlines()[1] == "| title    | year |"


def test_meta_commands(capsys):
    db = Database.with_books()
    db.execute("INSERT INTO books VALUES ('Diaspora', 1997);")

    assert run_meta_command(db, ".tables")
    assert run_meta_command(db, ".schema books")
    assert run_meta_command(db, ".print books")
    assert run_meta_command(db, ".print films")
    out = capsys.readouterr().out
    assert "books" in out
    assert "  - pk Key PRIMARY KEY" in out
    assert "  - year Integer" in out
    assert "| 1  | Diaspora | 1997 |" in out
    assert "Table not found: films" in out

    assert not run_meta_command(db, ".exit")


def test_repl_loop_handles_multiline_input(monkeypatch, capsys):
    lines = iter(["INSERT INTO books VALUES ('Diaspora',", "1997);", ".quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    db = Database.with_books()

    assert repl_mod.repl(db) == 0
    assert len(db.table("books")) == 1
    assert "1 row inserted" in capsys.readouterr().out


def test_repl_exits_on_eof(monkeypatch):
    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    assert repl_mod.repl(Database.with_books()) == 0
