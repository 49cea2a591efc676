import pytest
from hypothesis import given
from hypothesis import strategies as st

from pygmaea.pygmaea_constants import KEYWORDS, TokenType, lookup_ident
from pygmaea.pygmaea_lexer import Lexer, Token, tokenize

T = TokenType

FIXTURE_SOURCE = """let five = 5;
        let ten = 10;

        let add = fn(x, y){
            x + y;
        };

        let result = add(five, ten);
        !-/*5;
        5 < 10 > 5;

        if (5 < 10) {
            return true;
        } else {
            return false;
        }

        10 == 10;
        10 !=9;
        """

FIXTURE_EXPECTED = [
    (T.LET, "let"), (T.IDENT, "five"), (T.ASSIGN, "="), (T.INT, "5"), (T.SEMICOLON, ";"),
    (T.LET, "let"), (T.IDENT, "ten"), (T.ASSIGN, "="), (T.INT, "10"), (T.SEMICOLON, ";"),
    (T.LET, "let"), (T.IDENT, "add"), (T.ASSIGN, "="), (T.FUNCTION, "fn"),
    (T.LPAREN, "("), (T.IDENT, "x"), (T.COMMA, ","), (T.IDENT, "y"), (T.RPAREN, ")"),
    (T.LBRACE, "{"), (T.IDENT, "x"), (T.PLUS, "+"), (T.IDENT, "y"), (T.SEMICOLON, ";"),
    (T.RBRACE, "}"), (T.SEMICOLON, ";"),
    (T.LET, "let"), (T.IDENT, "result"), (T.ASSIGN, "="), (T.IDENT, "add"),
    (T.LPAREN, "("), (T.IDENT, "five"), (T.COMMA, ","), (T.IDENT, "ten"), (T.RPAREN, ")"),
    (T.SEMICOLON, ";"),
    (T.BANG, "!"), (T.MINUS, "-"), (T.SLASH, "/"), (T.ASTERISK, "*"), (T.INT, "5"),
    (T.SEMICOLON, ";"),
    (T.INT, "5"), (T.LESS_THAN, "<"), (T.INT, "10"), (T.GREATER_THAN, ">"), (T.INT, "5"),
    (T.SEMICOLON, ";"),
    (T.IF, "if"), (T.LPAREN, "("), (T.INT, "5"), (T.LESS_THAN, "<"), (T.INT, "10"),
    (T.RPAREN, ")"), (T.LBRACE, "{"),
    (T.RETURN, "return"), (T.TRUE, "true"), (T.SEMICOLON, ";"),
    (T.RBRACE, "}"), (T.ELSE, "else"), (T.LBRACE, "{"),
    (T.RETURN, "return"), (T.FALSE, "false"), (T.SEMICOLON, ";"),
    (T.RBRACE, "}"),
    (T.INT, "10"), (T.EQUAL, "=="), (T.INT, "10"), (T.SEMICOLON, ";"),
    (T.INT, "10"), (T.NOT_EQUAL, "!="), (T.INT, "9"), (T.SEMICOLON, ";"),
    (T.EOF, ""),
]  # fmt: skip


def test_fixture_token_sequence() -> None:
    lexer = Lexer(FIXTURE_SOURCE)
    for i, (type_, literal) in enumerate(FIXTURE_EXPECTED):
        tok = lexer.next_token()
        assert tok.type == type_, f"tests[{i}] - type wrong, got {tok!r}"
        assert tok.literal == literal, f"tests[{i}] - literal wrong, got {tok!r}"


def test_fixture_literals_cover_all_non_whitespace() -> None:
    joined = "".join(literal for _, literal in FIXTURE_EXPECTED)
    assert joined == "".join(FIXTURE_SOURCE.split())


def test_single_char_tokens() -> None:
    code = "+ - * / < > ( ) { } , ; = !"
    expected = [
        T.PLUS,
        T.MINUS,
        T.ASTERISK,
        T.SLASH,
        T.LESS_THAN,
        T.GREATER_THAN,
        T.LPAREN,
        T.RPAREN,
        T.LBRACE,
        T.RBRACE,
        T.COMMA,
        T.SEMICOLON,
        T.ASSIGN,
        T.BANG,
    ]
    assert [tok.type for tok in Lexer(code)] == expected


@pytest.mark.parametrize(
    "source,type_",
    [("==", T.EQUAL), ("!=", T.NOT_EQUAL)],
)
def test_two_char_operator_is_one_token(source: str, type_: TokenType) -> None:
    assert tokenize(source) == [Token(type_, source), Token(T.EOF, "")]


def test_two_char_operators_without_spaces() -> None:
    tokens = tokenize("a==b!=c")
    assert [t.type for t in tokens] == [
        T.IDENT,
        T.EQUAL,
        T.IDENT,
        T.NOT_EQUAL,
        T.IDENT,
        T.EOF,
    ]


def test_assign_then_equal_run() -> None:
    # Longest match from the left: "===" is "==" followed by "=".
    assert [t.literal for t in tokenize("===")] == ["==", "=", ""]


def test_bang_before_non_equal() -> None:
    assert [t.type for t in tokenize("!!x")] == [T.BANG, T.BANG, T.IDENT, T.EOF]


def test_minus_is_never_absorbed_into_number() -> None:
    assert tokenize("-15") == [
        Token(T.MINUS, "-"),
        Token(T.INT, "15"),
        Token(T.EOF, ""),
    ]


def test_number_token() -> None:
    tok = Lexer("838383").next_token()
    assert tok == Token(T.INT, "838383")


def test_no_floats() -> None:
    assert [t.type for t in tokenize("1.5")] == [T.INT, T.ILLEGAL, T.INT, T.EOF]


def test_identifier_with_underscore() -> None:
    tok = Lexer("_my_var").next_token()
    assert tok == Token(T.IDENT, "_my_var")


def test_digits_do_not_continue_identifier() -> None:
    assert tokenize("x1") == [Token(T.IDENT, "x"), Token(T.INT, "1"), Token(T.EOF, "")]


@pytest.mark.parametrize("word,type_", sorted(KEYWORDS.items()))
def test_keywords(word: str, type_: TokenType) -> None:
    assert Lexer(word).next_token() == Token(type_, word)


def test_keywords_are_case_sensitive() -> None:
    assert Lexer("Let").next_token() == Token(T.IDENT, "Let")


def test_keyword_prefix_is_identifier() -> None:
    assert Lexer("letter").next_token() == Token(T.IDENT, "letter")


def test_lookup_ident() -> None:
    assert lookup_ident("fn") is T.FUNCTION
    assert lookup_ident("function") is T.IDENT


@pytest.mark.parametrize("ch", ["@", "#", "$", "`", "[", "é", "\x0b"])
def test_illegal_character(ch: str) -> None:
    assert tokenize(f"{ch}x") == [
        Token(T.ILLEGAL, ch),
        Token(T.IDENT, "x"),
        Token(T.EOF, ""),
    ]


def test_skip_whitespace() -> None:
    tokens = tokenize(" \t\r\n\x0c 123 \n")
    assert tokens == [Token(T.INT, "123"), Token(T.EOF, "")]


def test_token_eof_on_empty_input() -> None:
    assert Lexer("").next_token() == Token(T.EOF, "")


def test_eof_is_idempotent() -> None:
    lexer = Lexer("x")
    assert lexer.next_token() == Token(T.IDENT, "x")
    for _ in range(10):
        assert lexer.next_token() == Token(T.EOF, "")


def test_iteration_stops_before_eof() -> None:
    assert list(Lexer("a b")) == [Token(T.IDENT, "a"), Token(T.IDENT, "b")]


def test_cursor_invariant_after_each_token() -> None:
    lexer = Lexer("let x == !y;")
    while not lexer.next_token().type.is_eof():
        assert lexer.read_position == lexer.position + 1


def test_token_equality_and_hash() -> None:
    assert Token(T.IDENT, "a") == Token(T.IDENT, "a")
    assert Token(T.IDENT, "a") != Token(T.IDENT, "b")
    assert Token(T.IDENT, "let") != Token(T.LET, "let")
    assert len({Token(T.INT, "1"), Token(T.INT, "1")}) == 1


def test_token_is_immutable() -> None:
    tok = Token(T.INT, "1")
    with pytest.raises(AttributeError):
        tok.literal = "2"  # type: ignore[misc]


def test_token_repr_and_str() -> None:
    tok = Token(T.LESS_THAN, "<")
    assert repr(tok) == "Token(LessThan, <)"
    assert str(tok) == "[Type:LessThan, Literal: <]"


def test_token_type_classification() -> None:
    keyword_like = {T.TRUE, T.FALSE, T.LET, T.FUNCTION, T.IF, T.ELSE, T.RETURN, T.IDENT}
    for type_ in TokenType:
        assert type_.is_keyword() == (type_ in keyword_like)
        assert type_.is_int() == (type_ is T.INT)
        assert type_.is_eof() == (type_ is T.EOF)


def test_token_type_count() -> None:
    assert len(TokenType) == 27


@given(st.text())
def test_lexer_never_raises_and_terminates(source: str) -> None:
    tokens = tokenize(source)
    assert tokens[-1].type is T.EOF
    assert all(t.type is not T.EOF for t in tokens[:-1])
    assert len(tokens) <= len(source) + 1


@given(st.text(alphabet="0123456789", min_size=1))
def test_digit_runs_are_single_int(digits: str) -> None:
    assert tokenize(digits) == [Token(T.INT, digits), Token(T.EOF, "")]


@given(st.from_regex(r"[A-Za-z_]+", fullmatch=True))
def test_letter_runs_are_single_word(word: str) -> None:
    tokens = tokenize(word)
    assert len(tokens) == 2
    assert tokens[0].literal == word
    assert tokens[0].type is lookup_ident(word)
