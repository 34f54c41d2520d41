"""Resolved style values produced by the directive interpreter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ansimark.tokens import Span


class Color(Enum):
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"


class Attr(Enum):
    BOLD = "bold"
    DIM = "dim"
    ITALIC = "italic"
    UNDERLINE = "underline"
    BLINK = "blink"
    RAPID_BLINK = "rapid-blink"
    CONCEAL = "conceal"
    STRIKE = "strike"
    INVERT = "invert"


_COLORS = {c.value: c for c in Color}
_ATTRS = {a.value: a for a in Attr}


def parse_color(word: str) -> Color | None:
    """Return the Color named by *word*, or None."""
    return _COLORS.get(word)


def parse_attr(word: str) -> Attr | None:
    """Return the Attr named by *word*, or None."""
    return _ATTRS.get(word)


@dataclass(frozen=True, slots=True)
class Text:
    """Plain text, passed through verbatim."""

    value: str
    span: Span


@dataclass(frozen=True, slots=True)
class Attribute:
    attr: Attr
    span: Span


@dataclass(frozen=True, slots=True)
class Foreground:
    color: Color
    span: Span


@dataclass(frozen=True, slots=True)
class Background:
    color: Color
    span: Span


@dataclass(frozen=True, slots=True)
class Reset:
    span: Span


Style = Text | Attribute | Foreground | Background | Reset
