"""
Defines the abstract syntax tree (AST) nodes for the pygmaea programming language.

The node set is closed. Statements:
    LetStatement:        `let <name> = <value>;`
    ReturnStatement:     `return <value>;`
    ExpressionStatement: a bare expression

Expressions:
    Identifier, IntegerLiteral, Boolean, PrefixExpression, InfixExpression

`Statement` and `Expression` are Union aliases over exactly these classes, so a
type checker flags any consumer that forgets a variant.

Every node keeps the token it was built from (`token_literal()` returns that
token's text) and renders deterministically through `str()`:

    infix       (left op right)
    prefix      (opright)
    let         let name = value;
    return      return value;

The parenthesised rendering is the externally observable encoding of the
parse structure, used when testing precedence.

Example:
    >>> from pygmaea.pygmaea_parser import parse
    >>> program, errors = parse("-a * b")
    >>> render_program(program)
    '((-a) * b)'
"""

from typing import Any, TypedDict, Union

from pygmaea.pygmaea_errors import LexicalInvariantError
from pygmaea.pygmaea_lexer import Token

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ASTDict(TypedDict, total=False):
    """
    Serialized form of a node, as returned by `to_dict()`.

    Fields:
        kind (str): The node kind (e.g. "let", "infix", "identifier").
        literal (str): Literal text of the originating token.
        value (Any): Leaf value, or the nested value expression of let/return.
        name (ASTDict): The bound identifier of a let statement.
        operator (str): Operator text of prefix and infix expressions.
        left (ASTDict): Left operand of an infix expression.
        right (ASTDict): Operand of a prefix expression, right operand of an infix one.
        expression (ASTDict): The wrapped expression of an expression statement.
    """

    kind: str
    literal: str
    value: Any
    name: "ASTDict"
    operator: str
    left: "ASTDict"
    right: "ASTDict"
    expression: "ASTDict"


class Node:
    """Base of all AST nodes.

    Attributes:
        kind (str): The syntactic construct, fixed per subclass.
        token (Token): The token this node was built from.
    """

    kind = "node"
    _fields: tuple[str, ...] = ()

    def __init__(self, token: Token) -> None:
        self.token = token

    def token_literal(self) -> str:
        return self.token.literal

    def __eq__(self, other: Any) -> bool:
        if type(self) is not type(other):
            return False
        return self.token == other.token and all(
            getattr(self, f) == getattr(other, f) for f in self._fields
        )

    def __repr__(self) -> str:
        parts = [f"{f}={getattr(self, f)!r}" for f in self._fields]
        return f"{type(self).__name__}({', '.join(parts)})"

    def to_dict(self) -> ASTDict:
        data: dict[str, Any] = {"kind": self.kind, "literal": self.token_literal()}
        for f in self._fields:
            val = getattr(self, f)
            data[f] = val.to_dict() if isinstance(val, Node) else val
        return data  # type: ignore[return-value]


# Expressions


class Identifier(Node):
    kind = "identifier"
    _fields = ("value",)

    def __init__(self, token: Token) -> None:
        super().__init__(token)
        self.value: str = token.literal

    def __str__(self) -> str:
        return self.value


class IntegerLiteral(Node):
    """An integer leaf, holding a signed 64-bit value.

    Raises:
        LexicalInvariantError: If the token text is not a decimal integer within
            the signed 64-bit range. The lexer only tags digit runs as INT, so
            this means lexer and parser disagree.
    """

    kind = "integer"
    _fields = ("value",)

    def __init__(self, token: Token) -> None:
        super().__init__(token)
        literal = token.literal
        if not (literal.isascii() and literal.isdigit()):
            raise LexicalInvariantError(token, "not a digit run")
        value = int(literal)
        if not INT64_MIN <= value <= INT64_MAX:
            raise LexicalInvariantError(token, "out of 64-bit range")
        self.value: int = value

    def __str__(self) -> str:
        return str(self.value)


class Boolean(Node):
    kind = "boolean"
    _fields = ("value",)

    def __init__(self, token: Token, value: bool) -> None:
        super().__init__(token)
        self.value = value

    def __str__(self) -> str:
        return "true" if self.value else "false"


class PrefixExpression(Node):
    kind = "prefix"
    _fields = ("operator", "right")

    def __init__(self, token: Token, right: "Expression") -> None:
        super().__init__(token)
        self.operator: str = token.literal
        self.right = right

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


class InfixExpression(Node):
    kind = "infix"
    _fields = ("left", "operator", "right")

    def __init__(self, token: Token, left: "Expression", right: "Expression") -> None:
        super().__init__(token)
        self.left = left
        self.operator: str = token.literal
        self.right = right

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


Expression = Union[Identifier, IntegerLiteral, Boolean, PrefixExpression, InfixExpression]


# Statements


class LetStatement(Node):
    kind = "let"
    _fields = ("name", "value")

    def __init__(self, token: Token, name: Identifier, value: Expression) -> None:
        super().__init__(token)
        self.name = name
        self.value = value

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.name} = {self.value};"


class ReturnStatement(Node):
    kind = "return"
    _fields = ("value",)

    def __init__(self, token: Token, value: Expression) -> None:
        super().__init__(token)
        self.value = value

    def __str__(self) -> str:
        return f"{self.token_literal()} {self.value};"


class ExpressionStatement(Node):
    """Wraps a bare expression. Its token is the expression's first token."""

    kind = "expression"
    _fields = ("expression",)

    def __init__(self, token: Token, expression: Expression) -> None:
        super().__init__(token)
        self.expression = expression

    def __str__(self) -> str:
        return str(self.expression)


Statement = Union[LetStatement, ReturnStatement, ExpressionStatement]

Program = list[Statement]


def render_program(program: Program) -> str:
    """Concatenates the rendering of every statement, with no separator."""
    return "".join(str(statement) for statement in program)


__all__ = [
    "ASTDict",
    "Boolean",
    "Expression",
    "ExpressionStatement",
    "Identifier",
    "InfixExpression",
    "IntegerLiteral",
    "LetStatement",
    "Node",
    "PrefixExpression",
    "Program",
    "ReturnStatement",
    "Statement",
    "render_program",
]
