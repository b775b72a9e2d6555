"""
epilogue/lexer.py

Tokenizer (lexer) for the Epilogue statement language.

Responsibilities:
- Convert statement text into a stream of tokens with line/column positions
- Recognize keywords, identifiers, literals, and punctuation used by the grammar
- Provide reliable error messages for unexpected characters and unterminated strings

Notes:
- Keywords are case-sensitive: SELECT is a keyword, select is an identifier.
- Identifiers are runs of alphanumeric characters.
- String literals use single quotes: 'hello'. There is no escaping.
- Integer literals are runs of digits; there is no sign.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from .errors import ParseError, Position


class TokenType(Enum):
    """Token categories recognized by the lexer."""
    EOF = auto()

    # Identifiers + literals
    IDENT = auto()
    INT = auto()
    STRING = auto()

    # Symbols
    LPAREN = auto()   # (
    RPAREN = auto()   # )
    COMMA = auto()    # ,
    SEMI = auto()     # ;
    EQ = auto()       # =
    STAR = auto()     # *

    # Keywords
    SELECT = auto()
    FROM = auto()
    WHERE = auto()
    INSERT = auto()
    INTO = auto()
    VALUES = auto()


KEYWORDS: dict[str, TokenType] = {
    "SELECT": TokenType.SELECT,
    "FROM": TokenType.FROM,
    "WHERE": TokenType.WHERE,
    "INSERT": TokenType.INSERT,
    "INTO": TokenType.INTO,
    "VALUES": TokenType.VALUES,
}

SYMBOLS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    ";": TokenType.SEMI,
    "=": TokenType.EQ,
    "*": TokenType.STAR,
}


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    Attributes:
        typ: TokenType
        lexeme: The original text fragment
        value: Parsed value for literals/idents:
               - IDENT -> str
               - INT -> int
               - STRING -> str (without quotes)
        pos: Position in input (line/col)
        end: Offset in the input just past this token
    """
    typ: TokenType
    lexeme: str
    value: object | None
    pos: Position
    end: int


def iter_tokens(text: str) -> Iterator[Token]:
    """
    Lazily tokenize statement text.

    Tokens are produced on demand, so text after the point where a parser
    stops pulling is never examined.

    Args:
        text: Raw statement input.

    Yields:
        Token objects, ending with an EOF token.

    Raises:
        ParseError: for unexpected characters or unterminated strings.
    """
    i = 0
    line = 1
    col = 1

    def cur_pos() -> Position:
        return Position(line=line, col=col)

    def advance(n: int = 1) -> None:
        """Advance the cursor by n characters while tracking line/column."""
        nonlocal i, line, col
        for _ in range(n):
            if i >= len(text):
                return
            ch = text[i]
            i += 1
            if ch == "\n":
                line += 1
                col = 1
            else:
                col += 1

    while i < len(text):
        ch = text[i]

        if ch.isspace():
            advance(1)
            continue

        if ch in SYMBOLS:
            start = cur_pos()
            advance(1)
            yield Token(SYMBOLS[ch], ch, None, start, i)
            continue

        # String literal: '...'
        if ch == "'":
            start = cur_pos()
            close = text.find("'", i + 1)
            if close == -1:
                raise ParseError("Unterminated string literal", start)
            s = text[i + 1:close]
            advance(close + 1 - i)
            yield Token(TokenType.STRING, f"'{s}'", s, start, i)
            continue

        # Integer literal
        if ch.isdecimal():
            start = cur_pos()
            j = i
            while j < len(text) and text[j].isdecimal():
                j += 1
            lex = text[i:j]
            advance(j - i)
            yield Token(TokenType.INT, lex, int(lex), start, i)
            continue

        # Identifier / keyword
        if ch.isalnum():
            start = cur_pos()
            j = i
            while j < len(text) and text[j].isalnum():
                j += 1
            lex = text[i:j]
            advance(j - i)
            if lex in KEYWORDS:
                yield Token(KEYWORDS[lex], lex, lex, start, i)
            else:
                yield Token(TokenType.IDENT, lex, lex, start, i)
            continue

        raise ParseError(f"Unexpected character: {ch!r}", cur_pos())

    yield Token(TokenType.EOF, "", None, cur_pos(), len(text))


def tokenize(text: str) -> list[Token]:
    """
    Tokenize statement text into a list of Token objects.

    Returns:
        List of Token, always terminated with an EOF token.
    """
    return list(iter_tokens(text))
