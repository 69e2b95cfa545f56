"""Shared fixtures for the Veerji compiler tests."""

import pytest

from lexer import Token, TokenType
from veerji_ast import PrintStatement, Program

HELLO_LINE = "ਲਿਖੋ ☬ Hello, World!\n"


@pytest.fixture
def hello_line():
    return HELLO_LINE


@pytest.fixture
def hello_tokens():
    return [
        Token(TokenType.PRINT, "ਲਿਖੋ"),
        Token(TokenType.SEPARATOR, "☬"),
        Token(TokenType.STRING, "Hello, World!"),
    ]


@pytest.fixture
def two_statement_program():
    program = Program()
    program.append(PrintStatement("first"))
    program.append(PrintStatement("ਦੂਜਾ"))
    return program


@pytest.fixture
def source_file(tmp_path):
    """Write a .veerji file and return its path."""
    def _write(text):
        path = tmp_path / "program.veerji"
        path.write_text(text, encoding="utf-8")
        return path
    return _write
