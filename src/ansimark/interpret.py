"""Directive interpreter: maps tokens to resolved styles."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable

from ansimark.errors import DirectiveError
from ansimark.styles import (
    Attribute,
    Background,
    Foreground,
    Reset,
    Style,
    Text,
    parse_attr,
    parse_color,
)
from ansimark.tokens import Token

Reporter = Callable[[DirectiveError], None]


def print_diagnostic(exc: DirectiveError) -> None:
    """Default reporter: one line on stderr."""
    print(exc.message, file=sys.stderr)


def stylize(tokens: Iterable[Token], report: Reporter | None = None) -> list[Style]:
    """Resolve a token stream into styles, in order.

    Unknown compact directives are passed to *report* (stderr by default)
    and dropped. Unknown shorthand keywords are skipped silently.
    """
    if report is None:
        report = print_diagnostic

    styles: list[Style] = []
    for token in tokens:
        if not token.is_directive:
            styles.append(Text(token.value, token.span))
            continue

        content = token.value
        if content.startswith("/"):
            try:
                styles.append(_compact(content, token))
            except DirectiveError as exc:
                report(exc)
        else:
            styles.extend(_shorthand(content, token))
    return styles


def _compact(content: str, token: Token) -> Style:
    """Resolve /f<color>, /b<color>, /a<attr> or /r."""
    category = content[1:2]
    word = content[2:]
    span = token.span

    if category == "r":
        return Reset(span)
    if category == "f":
        color = parse_color(word)
        if color is not None:
            return Foreground(color, span)
    elif category == "b":
        color = parse_color(word)
        if color is not None:
            return Background(color, span)
    elif category == "a":
        attr = parse_attr(word)
        if attr is not None:
            return Attribute(attr, span)

    raise DirectiveError(f"unknown attribute: '{content}'", span, token.source)


def _shorthand(content: str, token: Token) -> list[Style]:
    """Resolve comma-separated keywords: reset, attributes, colors, on<color>."""
    span = token.span
    result: list[Style] = []
    for word in content.split(","):
        if word == "reset":
            result.append(Reset(span))
            continue
        attr = parse_attr(word)
        if attr is not None:
            result.append(Attribute(attr, span))
            continue
        color = parse_color(word)
        if color is not None:
            result.append(Foreground(color, span))
            continue
        if word.startswith("on"):
            color = parse_color(word[2:])
            if color is not None:
                result.append(Background(color, span))
    return result
