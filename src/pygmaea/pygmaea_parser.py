"""
pygmaea Language Parser

Parses pygmaea tokens into a program: a flat list of statement nodes.

The parser pulls tokens one at a time from a `Lexer` (or any iterable of
`Token` objects) and keeps exactly one token of lookahead: `current_token`
is the next unconsumed token and `peek_token` is the one after it. That
invariant holds before and after every rule; nothing ever looks further
ahead and nothing is pushed back.

Supported Constructs
--------------------
- Statements:
    * `let <ident> = <expr>;`
    * `return <expr>;`
    * `<expr>` with an optional trailing `;`

- Expressions (Pratt / precedence climbing):
    * Identifiers, integer literals, `true`, `false`
    * Prefix `!` and unary `-`
    * Infix `==  !=  <  >  +  -  *  /`, left-associative, with the binding
      levels from `pygmaea_precedence`

Parser Behavior
---------------
- Failures never abort the parse. A rule that gives up raises a
  `ParseError`; the rule wrapping it appends the inner error to `errors`
  and raises its own error chained from it. `parse_program` records the
  statement-level failure, skips one token and carries on, so one malformed
  statement cannot hide the rest of the input.
- The only fatal condition is `LexicalInvariantError` (an INT token whose
  text is not a 64-bit integer), which propagates to the caller.

Entry Points
------------
- `Parser.parse_program()`: Parse until EOF, returning the statements that parsed.
- `parse(source)`: Convenience wrapper returning `(program, errors)`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pygmaea.pygmaea_ast import (
    Boolean,
    Expression,
    ExpressionStatement,
    Identifier,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)
from pygmaea.pygmaea_constants import TokenType
from pygmaea.pygmaea_errors import (
    ExpressionKind,
    ExpressionParseError,
    NoneTokenError,
    NoPrefixParseError,
    ParseError,
    PeekTokenError,
    StatementKind,
    StatementParseError,
)
from pygmaea.pygmaea_lexer import Lexer, Token
from pygmaea.pygmaea_precedence import Precedence, lookup_precedence


class Parser:
    """
    pygmaea Parser Class

    Attributes
    ----------
    current_token : Token | None
        The next unconsumed token. None only if the token source ran dry
        without producing EOF.
    peek_token : Token | None
        The token after `current_token`.
    errors : list[ParseError]
        Diagnostics accumulated during the parse, in the order they were
        recorded. Never cleared.

    Raises
    ------
    LexicalInvariantError
        From `parse_program` when an INT token cannot be read as an integer.
    """

    def __init__(self, source: Lexer | Iterable[Token]) -> None:
        if isinstance(source, Lexer):
            self._tokens: Iterator[Token] = _lexer_tokens(source)
        else:
            self._tokens = iter(source)
        self.current_token: Token | None = None
        self.peek_token: Token | None = None
        self.errors: list[ParseError] = []

        self.next_token()
        self.next_token()

    def next_token(self) -> None:
        """Shifts `peek_token` into `current_token` and pulls a fresh peek."""
        self.current_token = self.peek_token
        self.peek_token = next(self._tokens, None)

    def current_token_is(self, token_type: TokenType) -> bool:
        return self.current_token is not None and self.current_token.type == token_type

    def peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token is not None and self.peek_token.type == token_type

    def peek_error(self, token_type: TokenType, actual: Token | None) -> None:
        self.errors.append(PeekTokenError(token_type, actual))

    def take_current(self) -> Token:
        """Returns the current token, or raises NoneTokenError if the source ran dry."""
        if self.current_token is None:
            raise NoneTokenError()
        return self.current_token

    def parse_program(self) -> Program:
        """Parse statements until EOF and return the ones that parsed."""
        program: Program = []
        while self.current_token is not None and not self.current_token.type.is_eof():
            try:
                program.append(self.parse_statement())
            except ParseError as e:
                self.errors.append(e)
            self.next_token()
        return program

    def parse_statement(self) -> Statement:
        if self.current_token_is(TokenType.LET):
            return self.parse_let_statement()
        if self.current_token_is(TokenType.RETURN):
            return self.parse_return_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self) -> LetStatement:
        """Parse `let <ident> = <expr>`."""
        if not self.peek_token_is(TokenType.IDENT):
            self.peek_error(TokenType.IDENT, self.peek_token)
            raise StatementParseError(StatementKind.LET)

        let_token = self.take_current()
        self.next_token()

        try:
            name = Identifier(self.take_current())
        except NoneTokenError as e:
            self.errors.append(e)
            raise StatementParseError(StatementKind.LET) from e
        self.next_token()

        if not self.current_token_is(TokenType.ASSIGN):
            self.peek_error(TokenType.ASSIGN, self.current_token)
            raise StatementParseError(StatementKind.LET)
        self.next_token()

        try:
            value = self.parse_expression(Precedence.LOWEST)
        except ParseError as e:
            self.errors.append(e)
            raise StatementParseError(StatementKind.LET) from e
        return LetStatement(let_token, name, value)

    def parse_return_statement(self) -> ReturnStatement:
        """Parse `return <expr>`."""
        return_token = self.take_current()
        self.next_token()

        try:
            value = self.parse_expression(Precedence.LOWEST)
        except ParseError as e:
            self.errors.append(e)
            raise StatementParseError(StatementKind.RETURN) from e
        return ReturnStatement(return_token, value)

    def parse_expression_statement(self) -> ExpressionStatement:
        """Parse a bare expression; the trailing semicolon is optional."""
        first = self.current_token
        try:
            expression = self.parse_expression(Precedence.LOWEST)
        except ParseError as e:
            self.errors.append(e)
            raise StatementParseError(StatementKind.EXPRESSION) from e
        assert first is not None  # parse_expression raised otherwise

        statement = ExpressionStatement(first, expression)
        if self.peek_token_is(TokenType.SEMICOLON):
            self.next_token()
        return statement

    def parse_expression(self, precedence: Precedence) -> Expression:
        """Parse an expression whose operators all bind tighter than `precedence`.

        The right operand of an infix operator is parsed at that operator's
        own level, so a following operator of the same level is not absorbed
        and equal-precedence chains associate to the left.
        """
        token = self.take_current()
        self.next_token()

        expression = self.parse_prefix_expression(token)

        while not self.current_token_is(TokenType.SEMICOLON) and self._binds_tighter(
            precedence
        ):
            operator = self.take_current()
            level = lookup_precedence(operator.type)
            if level is None:  # pragma: no cover
                return expression
            self.next_token()
            expression = self.parse_infix_expression(expression, operator, level)

        return expression

    def _binds_tighter(self, precedence: Precedence) -> bool:
        if self.current_token is None:
            return False
        level = lookup_precedence(self.current_token.type)
        return level is not None and precedence < level

    def parse_prefix_expression(self, token: Token) -> Expression:
        """Dispatch on the leading token of an expression."""
        if token.type == TokenType.IDENT:
            return Identifier(token)
        if token.type == TokenType.INT:
            return IntegerLiteral(token)
        if token.type in (TokenType.BANG, TokenType.MINUS):
            try:
                right = self.parse_expression(Precedence.PREFIX)
            except ParseError as e:
                self.errors.append(e)
                raise ExpressionParseError(ExpressionKind.PREFIX) from e
            return PrefixExpression(token, right)
        if token.type in (TokenType.TRUE, TokenType.FALSE):
            return self.parse_boolean(token)
        raise NoPrefixParseError(token)

    def parse_infix_expression(
        self, left: Expression, operator: Token, precedence: Precedence
    ) -> InfixExpression:
        try:
            right = self.parse_expression(precedence)
        except ParseError as e:
            self.errors.append(e)
            raise ExpressionParseError(ExpressionKind.INFIX) from e
        return InfixExpression(operator, left, right)

    def parse_boolean(self, token: Token) -> Boolean:
        return Boolean(token, token.type == TokenType.TRUE)


def _lexer_tokens(lexer: Lexer) -> Iterator[Token]:
    # Unlike iter(lexer), keeps yielding EOF forever.
    while True:
        yield lexer.next_token()


def parse(source: str) -> tuple[Program, list[ParseError]]:
    """Parse `source` and return the program together with its diagnostics."""
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    return program, parser.errors


__all__ = ["Parser", "parse"]
