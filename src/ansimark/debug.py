"""--debug token and style dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from ansimark.styles import Attribute, Background, Foreground, Reset, Style, Text
from ansimark.tokens import Token


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token: kind, line:column and content."""
    file.write("Tokens\n")
    for tok in tokens:
        kind = "Directive" if tok.is_directive else "Text"
        start = tok.span.start
        file.write(f"  {kind} {start.line}:{start.column} {tok.value!r}\n")


def dump_styles(styles: Iterable[Style], *, file: TextIO = sys.stderr) -> None:
    """Print one line per resolved style."""
    file.write("Styles\n")
    for style in styles:
        file.write(f"  {_describe(style)}\n")


def _describe(style: Style) -> str:
    if isinstance(style, Text):
        return f"Text({style.value!r})"
    if isinstance(style, Attribute):
        return f"Attribute({style.attr.value})"
    if isinstance(style, Foreground):
        return f"Foreground({style.color.value})"
    if isinstance(style, Background):
        return f"Background({style.color.value})"
    if isinstance(style, Reset):
        return "Reset"
    raise TypeError(f"Cannot describe {type(style).__name__}")
