"""
Lexical analyzer for the pygmaea programming language.

This module converts raw source text into a stream of tokens, one call at a time:

Classes:
    Token: An immutable (type, literal) pair.
    Lexer: Pulls characters from the source and produces Tokens on demand.

Features:
    - Skips ASCII whitespace between tokens
    - One character of lookahead for the two-character operators `==` and `!=`
    - Greedy integer and identifier runs; identifiers are checked against the keyword table
    - Unrecognized characters become ILLEGAL tokens, the lexer itself never raises
    - Once input is exhausted every call returns an EOF token

Example:
    >>> lexer = Lexer("let x = 5;")
    >>> lexer.next_token()
    Token(Let, let)

Exports:
    - Token
    - Lexer
    - tokenize
    - TokenType
"""

from collections.abc import Iterator
from typing import Any

from pygmaea.pygmaea_constants import SINGLE_CHAR_TOKENS, TokenType, lookup_ident

WHITESPACE = " \t\n\r\x0c"


class Token:
    """Represents a single lexical token.

    Attributes:
        type (TokenType): The token's category.
        literal (str): The exact source text the token was scanned from.
    """

    __slots__ = ("type", "literal")

    def __init__(self, type_: TokenType, literal: str) -> None:
        object.__setattr__(self, "type", type_)
        object.__setattr__(self, "literal", literal)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Token is immutable, cannot set {name!r}")

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.literal})"

    def __str__(self) -> str:
        return f"[Type:{self.type}, Literal: {self.literal}]"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.literal == other.literal
        )

    def __hash__(self) -> int:
        return hash((self.type, self.literal))


def is_letter(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalpha())


def is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


class Lexer:
    """Lexical analyzer for pygmaea.

    The cursor is `position` (index of `ch`, the character under examination)
    and `read_position` (index of the next character to read). After every
    read `read_position == position + 1`.

    Attributes:
        input (str): The full source text.
        position (int): Index of the character currently under examination.
        read_position (int): Index of the next character to read.
        ch (str | None): The character under examination, None past the end.
    """

    def __init__(self, source: str) -> None:
        self.input = source
        self.position = 0
        self.read_position = 0
        self.ch: str | None = None
        self.read_char()

    def read_char(self) -> None:
        """Moves the cursor forward by one character."""
        if self.read_position < len(self.input):
            self.ch = self.input[self.read_position]
        else:
            self.ch = None
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self) -> str | None:
        """Returns the character after `ch` without consuming it."""
        if self.read_position < len(self.input):
            return self.input[self.read_position]
        return None

    def skip_whitespace(self) -> None:
        while self.ch is not None and self.ch in WHITESPACE:
            self.read_char()

    def read_identifier(self) -> str:
        start = self.position
        while self.ch is not None and is_letter(self.ch):
            self.read_char()
        return self.input[start : self.position]

    def read_number(self) -> str:
        start = self.position
        while self.ch is not None and is_digit(self.ch):
            self.read_char()
        return self.input[start : self.position]

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the source.

        Returns:
            Token: The next token, or an EOF token once the input is exhausted.
        """
        self.skip_whitespace()
        ch = self.ch

        if ch is None:
            token = Token(TokenType.EOF, "")
        elif ch == "=" or ch == "!":
            if self.peek_char() == "=":
                self.read_char()
                kind = TokenType.EQUAL if ch == "=" else TokenType.NOT_EQUAL
                token = Token(kind, ch + "=")
            else:
                token = Token(TokenType.ASSIGN if ch == "=" else TokenType.BANG, ch)
        elif ch in SINGLE_CHAR_TOKENS:
            token = Token(SINGLE_CHAR_TOKENS[ch], ch)
        elif is_digit(ch):
            token = Token(TokenType.INT, self.read_number())
        elif is_letter(ch):
            ident = self.read_identifier()
            token = Token(lookup_ident(ident), ident)
        else:
            token = Token(TokenType.ILLEGAL, ch)

        # Identifier and number reads already moved past their run.
        if not (token.type.is_keyword() or token.type.is_int()):
            self.read_char()
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yields tokens up to, but not including, EOF."""
        while True:
            token = self.next_token()
            if token.type.is_eof():
                return
            yield token


def tokenize(source: str) -> list[Token]:
    """Scans `source` completely. The returned list always ends with the EOF token."""
    lexer = Lexer(source)
    tokens = list(lexer)
    tokens.append(lexer.next_token())
    return tokens


__all__ = ["Lexer", "Token", "TokenType", "tokenize"]
