"""
Diagnostics produced while parsing pygmaea source.

Parser failures are values: each rule that gives up raises one of the
`ParseError` subclasses below, and whoever wraps that failure appends it to
`Parser.errors`. `Parser.parse_program` catches them at the statement
boundary, so callers only ever see them in the error list.

Classes:
    ParseError: Base class for all recoverable parse diagnostics.
    NoneTokenError: A required token was missing.
    PeekTokenError: The token at a fixed grammar position had the wrong type.
    NoPrefixParseError: No prefix rule exists for the token.
    StatementParseError: A statement rule gave up (kind in StatementKind).
    ExpressionParseError: An expression sub-rule gave up (kind in ExpressionKind).
    LexicalInvariantError: Fatal; lexer and parser disagree on a token.
"""

from enum import Enum

from pygmaea.pygmaea_constants import TokenType
from pygmaea.pygmaea_lexer import Token


class StatementKind(Enum):
    LET = "LetStatement"
    RETURN = "ReturnStatement"
    EXPRESSION = "ExpressionStatement"


class ExpressionKind(Enum):
    PREFIX = "prefix"
    INFIX = "infix expression"


class ParseError(Exception):
    """Base class for recoverable parse diagnostics."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class NoneTokenError(ParseError):
    def __init__(self) -> None:
        super().__init__()

    def __str__(self) -> str:
        return "expected token to be exist. got None instead."


class PeekTokenError(ParseError):
    """The token at a fixed grammar position was not of the expected type.

    Attributes:
        expected (TokenType): The type the grammar requires.
        actual (Token | None): The token that was found instead.
    """

    def __init__(self, expected: TokenType, actual: Token | None) -> None:
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        got = self.actual.type if self.actual is not None else None
        return f"expected next token to be {self.expected}, got {got} instead."


class NoPrefixParseError(ParseError):
    def __init__(self, token: Token) -> None:
        super().__init__(token)
        self.token = token

    def __str__(self) -> str:
        return f"no prefix parse for {self.token.type}."


class StatementParseError(ParseError):
    def __init__(self, kind: StatementKind) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"failed to parse {self.kind.value}."


class ExpressionParseError(ParseError):
    def __init__(self, kind: ExpressionKind) -> None:
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return f"failed to parse {self.kind.value}."


class LexicalInvariantError(ValueError):
    """Raised when a token's text contradicts its type, e.g. an INT that is not a 64-bit integer.

    This is a programming error, not a syntax error, and is never collected
    into `Parser.errors`.
    """

    def __init__(self, token: Token, reason: str) -> None:
        super().__init__(f"could not parse {token.literal!r} as {token.type}: {reason}")
        self.token = token


__all__ = [
    "ExpressionKind",
    "ExpressionParseError",
    "LexicalInvariantError",
    "NoPrefixParseError",
    "NoneTokenError",
    "ParseError",
    "PeekTokenError",
    "StatementKind",
    "StatementParseError",
]
