import pytest

from epilogue import Database, Row, String, Integer, Key


@pytest.fixture
def db():
    return Database.with_books()


@pytest.fixture
def books(db):
    table = db.table("books")
    for title, year in [("Ancillary Justice", 2013), ("The Fifth Season", 2015), ("Seveneves", 2015)]:
        table.insert(Row([Key(0), String(title), Integer(year)]))
    return table
