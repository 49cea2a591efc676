import getpass
import io
import sys
import traceback

from pygmaea.pygmaea_ast import Program
from pygmaea.pygmaea_errors import LexicalInvariantError, ParseError
from pygmaea.pygmaea_lexer import Lexer
from pygmaea.pygmaea_parser import Parser

PROMPT = ">> "
EXIT_COMMANDS = (":exit", ":quit", ":q")
MODES = ("tokens", "parse")


def username() -> str:
    try:
        return getpass.getuser()
    except OSError:
        return "stranger"


def print_traceback() -> None:
    buf = io.StringIO()
    traceback.print_exc(file=buf)
    print("[error] >>>")
    print(buf.getvalue())


def print_tokens(src: str) -> None:
    for tok in Lexer(src):
        print(tok)


def print_errors(errors: list[ParseError]) -> None:
    for err in errors:
        print(f"[error] >>> {err}", file=sys.stderr)


def print_program(src: str) -> Program:
    parser = Parser(Lexer(src))
    program = parser.parse_program()
    for statement in program:
        print(statement)
    if parser.errors:
        print_errors(parser.errors)
    return program


def handle_mode_command(src: str) -> str | None:
    """Returns the new mode if `src` is `:tokens` or `:parse`, else None."""
    if src.startswith(":") and src[1:] in MODES:
        print(f"[mode] >>> {src[1:]}")
        return src[1:]
    return None


def start_repl(mode: str = "parse") -> None:
    if mode not in MODES:
        raise ValueError(f"Unknown REPL mode: {mode}")
    print(f"Hello {username()}! This is the pygmaea programming language!")
    print("Feel free to type in commands")

    while True:
        try:
            line = input(PROMPT)
        except (KeyboardInterrupt, EOFError):
            print()
            break

        src = line.strip()
        if not src:
            continue
        if src in EXIT_COMMANDS:
            break
        new_mode = handle_mode_command(src)
        if new_mode is not None:
            mode = new_mode
            continue

        try:
            if mode == "tokens":
                print_tokens(line)
            else:
                print_program(line)
        except LexicalInvariantError:
            print_traceback()


def main() -> None:
    start_repl()


if __name__ == "__main__":
    main()
