import pytest

from epilogue import Integer, String, parse_script, parse_sql, parse_statement
from epilogue.ast import Insert, Names, Select, Star, WhereClause
from epilogue.errors import ParseError, Position
from epilogue.lexer import TokenType, tokenize


def test_select_star_without_where():
    remainder, stmt = parse_statement("SELECT * FROM books;")
    assert remainder == ""
    assert stmt == Select(column_clause=Star(), table_name="books", where_clause=None)


def test_select_names_with_where():
    _, stmt = parse_statement("SELECT title, year FROM books WHERE year = 2015;")
    assert stmt == Select(
        column_clause=Names(("title", "year")),
        table_name="books",
        where_clause=WhereClause("year", Integer(2015)),
    )


def test_where_without_spaces_around_equals():
    _, stmt = parse_statement("SELECT title FROM books WHERE year=2013;")
    assert stmt.where_clause == WhereClause("year", Integer(2013))


def test_insert_statement():
    _, stmt = parse_statement("INSERT INTO books VALUES ('Permutation City', 1994);")
    assert stmt == Insert(table_name="books", values=(String("Permutation City"), Integer(1994)))


def test_string_literal_is_taken_verbatim():
    _, stmt = parse_statement("INSERT INTO t VALUES ('  a, b; \"c\" ');")
    assert stmt.values == (String('  a, b; "c" '),)


def test_integer_literal_keeps_numeric_value():
    _, stmt = parse_statement("INSERT INTO t VALUES (007);")
    assert stmt.values == (Integer(7),)


def test_remainder_is_left_untouched():
    remainder, stmt = parse_statement("SELECT * FROM a; SELECT ~ garbage")
    assert isinstance(stmt, Select)
    assert remainder == " SELECT ~ garbage"


def test_keywords_are_case_sensitive():
    with pytest.raises(ParseError):
        parse_statement("select * from books;")


def test_missing_semicolon_reports_position():
    with pytest.raises(ParseError) as excinfo:
        parse_statement("SELECT title FROM books")
    assert excinfo.value.position == Position(1, 24)
    assert "';'" in str(excinfo.value)


def test_missing_table_name_reports_expected_construct():
    with pytest.raises(ParseError) as excinfo:
        parse_statement("SELECT * FROM ;")
    assert excinfo.value.position == Position(1, 15)
    assert "Expected table name" in excinfo.value.message


def test_position_tracks_lines():
    with pytest.raises(ParseError) as excinfo:
        parse_statement("SELECT *\nFROM books\nWHERE year = ;")
    assert excinfo.value.position == Position(3, 14)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "DELETE FROM books;",
        "INSERT INTO books VALUES ();",
        "INSERT INTO books VALUES ('unterminated);",
        "SELECT title, FROM books;",
        "SELECT * FROM books WHERE year = -1;",
        "SELECT * FROM books WHERE year = title;",
    ],
)
def test_invalid_statements(text):
    with pytest.raises(ParseError):
        parse_statement(text)


def test_parse_sql_rejects_trailing_statement():
    assert isinstance(parse_sql("SELECT * FROM books;  \n"), Select)
    with pytest.raises(ParseError, match="single statement"):
        parse_sql("SELECT * FROM books; SELECT * FROM books;")


def test_parse_script():
    stmts = parse_script(
        "INSERT INTO books VALUES ('A', 1);\nINSERT INTO books VALUES ('B', 2);\nSELECT * FROM books;"
    )
    assert [type(s) for s in stmts] == [Insert, Insert, Select]
    assert parse_script("   ") == []


def test_tokenize_ends_with_eof():
    tokens = tokenize("SELECT *")
    assert [t.typ for t in tokens] == [TokenType.SELECT, TokenType.STAR, TokenType.EOF]
