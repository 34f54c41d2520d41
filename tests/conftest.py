"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from ansimark.errors import DirectiveError
from ansimark.interpret import stylize
from ansimark.lexer import tokenize
from ansimark.styles import Style
from ansimark.tokens import Token


@pytest.fixture
def lex():
    """Return a helper that tokenizes source with the default delimiter."""

    def _lex(source: str, delimiter: str = "\\") -> list[Token]:
        return tokenize(source, delimiter)

    return _lex


@pytest.fixture
def resolve():
    """Return a helper that tokenizes and stylizes source.

    Diagnostics are collected instead of printed; the helper returns
    (styles, diagnostics).
    """

    def _resolve(source: str, delimiter: str = "\\") -> tuple[list[Style], list[DirectiveError]]:
        diagnostics: list[DirectiveError] = []
        styles = stylize(tokenize(source, delimiter), diagnostics.append)
        return styles, diagnostics

    return _resolve


def assert_kinds(tokens: list[Token], expected: list[str]) -> None:
    """Assert token kinds, written as "T" for text and "D" for directive."""
    actual = ["D" if t.is_directive else "T" for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
