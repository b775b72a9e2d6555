import pytest

from epilogue import Database, Inserted, Integer, Key, Selected, String, execute, parse_sql
from epilogue.errors import ExecutionError, ParseError, TypeMismatch, UnknownTable


def test_insert_statement_end_to_end(db):
    res = db.execute("INSERT INTO books VALUES ('Permutation City', 1994);")
    assert isinstance(res, Inserted)
    assert res.count == 1

    books = db.table("books")
    assert books.get(1) is not None
    assert [str(c) for c in books.get(1)] == ["1", "Permutation City", "1994"]


def test_execute_parsed_statement(db):
    assert execute(db, parse_sql("INSERT INTO books VALUES ('Diaspora', 1997);")) == Inserted(count=1)
    res = execute(db, parse_sql("SELECT * FROM books;"))
    assert isinstance(res, Selected)
    assert res.rows == [(Key(1), String("Diaspora"), Integer(1997))]


def test_type_mismatch_leaves_table_unchanged(db):
    with pytest.raises(TypeMismatch):
        db.execute("INSERT INTO books VALUES (1994, 'Permutation City');")
    assert len(db.table("books")) == 0


def test_unknown_table(db):
    with pytest.raises(UnknownTable) as excinfo:
        db.execute("SELECT * FROM films;")
    assert excinfo.value.table_name == "films"
    assert str(excinfo.value) == "no table named films"

    with pytest.raises(UnknownTable):
        db.execute("INSERT INTO films VALUES ('Primer', 2004);")


def test_parse_errors_have_no_side_effects(db):
    with pytest.raises(ParseError):
        db.execute("INSERT INTO books VALUES ('Quarantine', 1992)")
    assert len(db.table("books")) == 0


def test_execute_script_runs_in_order(db):
    results = db.execute_script(
        "INSERT INTO books VALUES ('Quarantine', 1992);"
        "INSERT INTO books VALUES ('Distress', 1995);"
        "SELECT title FROM books WHERE year = 1995;"
    )
    assert results[:2] == [Inserted(count=1), Inserted(count=1)]
    assert results[2].rows == [(String("Distress"),)]


def test_add_table_replaces_existing(db):
    fresh = Database.with_books().table("books")
    db.execute("INSERT INTO books VALUES ('Zendegi', 2010);")
    db.add_table("books", fresh)
    assert db.execute("SELECT * FROM books;").rows == []


def test_errors_are_execution_errors():
    assert issubclass(UnknownTable, ExecutionError)
    assert issubclass(TypeMismatch, ExecutionError)
