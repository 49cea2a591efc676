"""
Token categories and the keyword table for the pygmaea language.

Exports:
    - TokenType: closed enumeration of lexical categories.
    - KEYWORDS: reserved word text -> TokenType.
    - lookup_ident: classify an identifier-shaped run of characters.
"""

from enum import Enum


class TokenType(Enum):
    """Lexical categories produced by the lexer.

    The value of each member is its display name, used in token dumps and
    parser diagnostics.
    """

    PLUS = "Plus"
    MINUS = "Minus"
    ASTERISK = "Asterisk"
    SLASH = "Slash"
    ASSIGN = "Assign"
    BANG = "Bang"
    LESS_THAN = "LessThan"
    GREATER_THAN = "GreaterThan"
    EQUAL = "Equal"
    NOT_EQUAL = "NotEqual"
    COMMA = "Comma"
    SEMICOLON = "Semicolon"
    LPAREN = "LParen"
    RPAREN = "RParen"
    LBRACE = "LBrace"
    RBRACE = "RBrace"
    TRUE = "True"
    FALSE = "False"
    LET = "Let"
    FUNCTION = "Function"
    IF = "If"
    ELSE = "Else"
    RETURN = "Return"
    INT = "Int"
    IDENT = "Ident"
    EOF = "EOF"
    ILLEGAL = "Illegal"

    def __str__(self) -> str:
        return self.value

    def is_keyword(self) -> bool:
        """True for categories produced by the identifier reader (keywords and IDENT)."""
        return self in _IDENTIFIER_READER_TYPES

    def is_int(self) -> bool:
        return self is TokenType.INT

    def is_eof(self) -> bool:
        return self is TokenType.EOF


_IDENTIFIER_READER_TYPES = frozenset(
    {
        TokenType.TRUE,
        TokenType.FALSE,
        TokenType.LET,
        TokenType.FUNCTION,
        TokenType.IF,
        TokenType.ELSE,
        TokenType.RETURN,
        TokenType.IDENT,
    }
)


KEYWORDS: dict[str, TokenType] = {
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "let": TokenType.LET,
    "fn": TokenType.FUNCTION,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}

# Single characters that map straight to a category. `=` and `!` are absent:
# they need one character of lookahead.
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
}


def lookup_ident(ident: str) -> TokenType:
    """Returns the keyword category for `ident`, or IDENT if it is not reserved."""
    return KEYWORDS.get(ident, TokenType.IDENT)


__all__ = ["KEYWORDS", "SINGLE_CHAR_TOKENS", "TokenType", "lookup_ident"]
