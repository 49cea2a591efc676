import os
from typing import Any

import pytest

from pygmaea.pygmaea_lexer import Lexer
from pygmaea.pygmaea_parser import Parser

# Start coverage in subprocesses spawned by CLI tests
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()


@pytest.fixture(autouse=True)  # type: ignore[misc]
def fixed_user(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("getpass.getuser", lambda: "tester")


@pytest.fixture  # type: ignore[misc]
def make_parser() -> Any:
    def _make(source: str) -> Parser:
        return Parser(Lexer(source))

    return _make
