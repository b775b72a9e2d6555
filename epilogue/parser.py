"""
epilogue/parser.py

Recursive-descent parser for the Epilogue statement language.

Responsibilities:
- Convert statement text into AST nodes (see epilogue/ast.py)
- Provide clear parse errors with line/column positions
- Support exactly two statements:
    SELECT ( * | ident (, ident)* ) FROM ident [WHERE ident = literal] ;
    INSERT INTO ident VALUES ( literal (, literal)* ) ;
- Literals: digit runs -> Integer cells, '...' -> String cells

Notes:
- At each alternative point the parser tries alternatives in a fixed order and
  commits to the first match: '*' before a name list, integer before string
  literal, SELECT before INSERT.
- Tokens are pulled lazily, so parse_statement never looks past the ';' that
  ends the statement; the rest of the text is returned untouched.
"""

from __future__ import annotations

from typing import Iterator

from .ast import ColumnClause, Insert, Names, Select, Star, Statement, WhereClause
from .errors import ParseError
from .lexer import Token, TokenType, iter_tokens
from .values import Cell, Integer, String


class Parser:
    """
    Stateful parser over a lazily produced token stream.

    Attributes:
        text: The full input text.
    """

    def __init__(self, text: str):
        self.text = text
        self._tokens: Iterator[Token] = iter_tokens(text)
        self._lookahead: list[Token] = []
        self._last: Token | None = None

    def peek(self) -> Token:
        """Return the current token without consuming it."""
        if not self._lookahead:
            self._lookahead.append(next(self._tokens))
        return self._lookahead[0]

    def at(self, typ: TokenType) -> bool:
        """Check whether current token is of a specific type."""
        return self.peek().typ == typ

    def consume(self) -> Token:
        """Consume and return the current token."""
        t = self.peek()
        # EOF is sticky: the token stream ends after it.
        if t.typ != TokenType.EOF:
            self._lookahead.pop(0)
        self._last = t
        return t

    def expect(self, typ: TokenType, msg: str) -> Token:
        """Consume a token of the expected type, otherwise raise a parse error."""
        t = self.peek()
        if t.typ != typ:
            raise ParseError(f"{msg}, found {_describe(t)}", t.pos)
        return self.consume()

    def match(self, typ: TokenType) -> bool:
        """If current token matches typ, consume it and return True."""
        if self.at(typ):
            self.consume()
            return True
        return False

    def remainder(self) -> str:
        """Text after the last consumed token."""
        if self._last is None:
            return self.text
        return self.text[self._last.end:]

    # ---------------- entry points ----------------

    def at_end(self) -> bool:
        """True when only whitespace remains."""
        return self.at(TokenType.EOF)

    def parse_statement(self) -> Statement:
        """Try SELECT, then INSERT."""
        t = self.peek()
        if t.typ == TokenType.SELECT:
            return self.parse_select()
        if t.typ == TokenType.INSERT:
            return self.parse_insert()
        raise ParseError(f"Expected SELECT or INSERT, found {_describe(t)}", t.pos)

    # ---------------- SELECT ----------------

    def parse_select(self) -> Select:
        """
        Parse:
          SELECT <column_clause> FROM <ident> [WHERE <ident> = <literal>] ;
        """
        self.expect(TokenType.SELECT, "Expected SELECT")
        columns = self.parse_column_clause()
        self.expect(TokenType.FROM, "Expected FROM")
        table = str(self.expect(TokenType.IDENT, "Expected table name").value)

        where = None
        if self.match(TokenType.WHERE):
            where = self.parse_where_clause_after_where()

        self.expect(TokenType.SEMI, "Expected ';' at end of statement")
        return Select(column_clause=columns, table_name=table, where_clause=where)

    def parse_column_clause(self) -> ColumnClause:
        """
        Parse:
          '*' OR ident (',' ident)*
        """
        if self.match(TokenType.STAR):
            return Star()
        names = [str(self.expect(TokenType.IDENT, "Expected '*' or column name").value)]
        while self.match(TokenType.COMMA):
            names.append(str(self.expect(TokenType.IDENT, "Expected column name").value))
        return Names(tuple(names))

    def parse_where_clause_after_where(self) -> WhereClause:
        """
        Parse:
          <ident> = <literal>
        """
        column = str(self.expect(TokenType.IDENT, "Expected column name after WHERE").value)
        self.expect(TokenType.EQ, "Expected '=' in WHERE condition")
        return WhereClause(column_name=column, value=self.parse_literal())

    # ---------------- INSERT ----------------

    def parse_insert(self) -> Insert:
        """
        Parse:
          INSERT INTO <ident> VALUES ( <literal> (, <literal>)* ) ;
        """
        self.expect(TokenType.INSERT, "Expected INSERT")
        self.expect(TokenType.INTO, "Expected INTO after INSERT")
        table = str(self.expect(TokenType.IDENT, "Expected table name").value)
        self.expect(TokenType.VALUES, "Expected VALUES")

        self.expect(TokenType.LPAREN, "Expected '(' before values")
        values = [self.parse_literal()]
        while self.match(TokenType.COMMA):
            values.append(self.parse_literal())
        self.expect(TokenType.RPAREN, "Expected ')' after values")

        self.expect(TokenType.SEMI, "Expected ';' at end of statement")
        return Insert(table_name=table, values=tuple(values))

    # ---------------- atoms ----------------

    def parse_literal(self) -> Cell:
        """
        Parse a literal value: integer first, then string.

        Raises:
            ParseError if the token is not a supported literal.
        """
        t = self.peek()
        if t.typ == TokenType.INT:
            return Integer(int(self.consume().value))
        if t.typ == TokenType.STRING:
            return String(str(self.consume().value))
        raise ParseError(f"Expected literal (integer or 'string'), found {_describe(t)}", t.pos)


def _describe(t: Token) -> str:
    if t.typ == TokenType.EOF:
        return "end of input"
    return repr(t.lexeme)


# ---------- public helpers ----------

def parse_statement(text: str) -> tuple[str, Statement]:
    """
    Parse the first statement in `text`.

    Args:
        text: Statement text; anything after the terminating ';' is left alone.

    Returns:
        (remainder, statement) where remainder is the unparsed text after ';'.

    Raises:
        ParseError: if the text does not start with a valid statement.
    """
    parser = Parser(text)
    stmt = parser.parse_statement()
    return parser.remainder(), stmt


def parse_sql(text: str) -> Statement:
    """
    Parse exactly one statement.

    Raises:
        ParseError: if parsing fails or anything but whitespace follows the ';'.
    """
    parser = Parser(text)
    stmt = parser.parse_statement()
    if not parser.at_end():
        raise ParseError("Expected a single statement", parser.peek().pos)
    return stmt


def parse_script(text: str) -> list[Statement]:
    """
    Parse zero or more statements, each terminated by ';'.

    Returns:
        List of AST Statements in source order.
    """
    parser = Parser(text)
    stmts: list[Statement] = []
    while not parser.at_end():
        stmts.append(parser.parse_statement())
    return stmts
