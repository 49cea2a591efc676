"""
Operator binding levels for the pygmaea expression parser.

`Precedence` is a total order, lowest to highest:
LOWEST < EQUALS < LESS_GREATER < SUM < PRODUCT < PREFIX < CALL.
"""

from enum import IntEnum

from pygmaea.pygmaea_constants import TokenType


class Precedence(IntEnum):
    LOWEST = 0
    EQUALS = 1
    LESS_GREATER = 2
    SUM = 3
    PRODUCT = 4
    PREFIX = 5
    CALL = 6


PRECEDENCES: dict[TokenType, Precedence] = {
    TokenType.EQUAL: Precedence.EQUALS,
    TokenType.NOT_EQUAL: Precedence.EQUALS,
    TokenType.LESS_THAN: Precedence.LESS_GREATER,
    TokenType.GREATER_THAN: Precedence.LESS_GREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.ASTERISK: Precedence.PRODUCT,
}


def lookup_precedence(token_type: TokenType) -> Precedence | None:
    """Returns the infix binding level of `token_type`, or None if it cannot continue an expression."""
    return PRECEDENCES.get(token_type)


__all__ = ["PRECEDENCES", "Precedence", "lookup_precedence"]
