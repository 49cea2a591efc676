"""
pygmaea CLI Entrypoint.

This module provides the command-line interface for inspecting pygmaea source.
Nothing is evaluated: the CLI shows tokens, the rendered parse, or the AST.

Features:
    - Read source from `.pgm`/`.monkey` files or inline strings.
    - Dump the raw token stream, the parenthesised rendering, or the AST as JSON.
    - Report parse diagnostics on stderr; exit status 1 when there were any.
    - Launch the interactive REPL.

Example usage:
    pygmaea hello.pgm
    pygmaea -s "a + b * c"
    pygmaea -s "let x = 5;" -m ast
    pygmaea --repl --mode tokens

Functions:
    run_pygmaea(source: str, is_string: bool = False, mode: str = "parse") -> int:
        Lex and parse `source` and print the selected view. Returns the exit status.

    main(argv: list[str] | None = None) -> int:
        Parses CLI arguments and invokes the REPL or `run_pygmaea`.
"""

import argparse
import json
import sys

from pygmaea.pygmaea_errors import LexicalInvariantError
from pygmaea.pygmaea_lexer import Lexer
from pygmaea.pygmaea_parser import Parser

SOURCE_SUFFIXES = (".pgm", ".monkey")
OUTPUT_MODES = ("tokens", "parse", "ast")


def run_pygmaea(source: str, is_string: bool = False, mode: str = "parse") -> int:
    """
    Run the pygmaea front end over `source` and print the result.

    Args:
        source (str): The source code, or a path to a `.pgm`/`.monkey` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path.
        mode (str): `tokens`, `parse` or `ast`. Defaults to `parse`.

    Returns:
        int: 0 on a clean parse, 1 if any diagnostics were reported.

    Raises:
        ValueError: If `is_string` is False and `source` has an unsupported suffix,
            or if `mode` is unknown.
    """
    if mode not in OUTPUT_MODES:
        raise ValueError(f"Unknown output mode: {mode}")
    if not is_string and not source.endswith(SOURCE_SUFFIXES):
        raise ValueError("Only .pgm and .monkey files are supported.")
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    if mode == "tokens":
        for tok in Lexer(source):
            print(tok)
        return 0

    parser = Parser(Lexer(source))
    program = parser.parse_program()

    if mode == "ast":
        print(json.dumps([statement.to_dict() for statement in program], indent=2))
    else:
        for statement in program:
            print(statement)

    for err in parser.errors:
        print(f"[error] >>> {err}", file=sys.stderr)
    return 1 if parser.errors else 0


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the pygmaea CLI.

    Launches the REPL when no arguments are passed or `--repl` is given,
    otherwise runs `run_pygmaea` on the given source.
    """
    args_list = sys.argv[1:] if argv is None else argv
    if not args_list:
        from pygmaea.pygmaea_repl import start_repl

        start_repl()
        return 0

    parser = argparse.ArgumentParser(prog="pygmaea")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=OUTPUT_MODES,
        default="parse",
        help="What to print: tokens, rendered statements, or JSON AST (default: parse)",
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Launch the interactive REPL",
    )

    args = parser.parse_args(args_list)

    if args.repl or args.source is None:
        from pygmaea.pygmaea_repl import start_repl

        start_repl(mode="tokens" if args.mode == "tokens" else "parse")
        return 0

    try:
        return run_pygmaea(source=args.source, is_string=args.string, mode=args.mode)
    except LexicalInvariantError:
        raise
    except (ValueError, OSError) as e:
        parser.error(str(e))


if __name__ == "__main__":
    sys.exit(main())
