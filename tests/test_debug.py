"""Tests for the --debug token and style dump."""

from __future__ import annotations

import io

import pytest

from ansimark.debug import dump_styles, dump_tokens
from ansimark.interpret import stylize
from ansimark.lexer import tokenize


class TestDumpTokens:
    def test_one_line_per_token(self) -> None:
        out = io.StringIO()
        dump_tokens(tokenize("a\\red\\b"), file=out)
        assert out.getvalue() == (
            "Tokens\n"
            "  Text 1:1 'a'\n"
            "  Directive 1:3 'red'\n"
            "  Text 1:7 'b'\n"
        )

    def test_folded_directive_value(self) -> None:
        out = io.StringIO()
        dump_tokens(tokenize("\\a\\\\b\\"), file=out)
        assert "Directive 1:2 'a\\\\b'" in out.getvalue()


class TestDumpStyles:
    def test_every_variant(self) -> None:
        out = io.StringIO()
        dump_styles(stylize(tokenize("\\bold,red,onblue\\x\\reset\\")), file=out)
        assert out.getvalue() == (
            "Styles\n"
            "  Attribute(bold)\n"
            "  Foreground(red)\n"
            "  Background(blue)\n"
            "  Text('x')\n"
            "  Reset\n"
            "  Text('')\n"
        )

    def test_unknown_style_type_rejected(self) -> None:
        with pytest.raises(TypeError, match="Cannot describe"):
            dump_styles([object()], file=io.StringIO())
