"""Terminal renderer: converts resolved styles to ANSI-escaped text."""

from __future__ import annotations

from collections.abc import Iterable

from colorama import Back, Fore
from colorama import Style as AnsiStyle
from colorama.ansi import code_to_chars

from ansimark.styles import Attr, Attribute, Background, Color, Foreground, Reset, Style, Text

# SGR parameters for text attributes
_ATTR_CODES = {
    Attr.BOLD: 1,
    Attr.DIM: 2,
    Attr.ITALIC: 3,
    Attr.UNDERLINE: 4,
    Attr.BLINK: 5,
    Attr.RAPID_BLINK: 6,
    Attr.INVERT: 7,
    Attr.CONCEAL: 8,
    Attr.STRIKE: 9,
}


def render(styles: Iterable[Style], *, strip: bool = False) -> str:
    """Render styles to a string; with *strip*, emit the text only."""
    parts: list[str] = []
    for style in styles:
        if isinstance(style, Text):
            parts.append(style.value)
        elif strip:
            continue
        else:
            parts.append(_escape(style))
    return "".join(parts)


def _escape(style: Style) -> str:
    if isinstance(style, Attribute):
        return code_to_chars(_ATTR_CODES[style.attr])
    if isinstance(style, Foreground):
        return _fore(style.color)
    if isinstance(style, Background):
        return _back(style.color)
    if isinstance(style, Reset):
        return AnsiStyle.RESET_ALL
    raise TypeError(f"Cannot render {type(style).__name__}")


def _fore(color: Color) -> str:
    return getattr(Fore, color.name)


def _back(color: Color) -> str:
    return getattr(Back, color.name)
