"""ansimark: delimiter-based markup for styled terminal text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ansimark.tokens import DEFAULT_DELIMITER

if TYPE_CHECKING:
    from ansimark.interpret import Reporter

__version__ = "0.1.0"


def render_markup(
    source: str,
    delimiter: str = DEFAULT_DELIMITER,
    *,
    strip: bool = False,
    report: Reporter | None = None,
) -> str:
    """Tokenize, interpret, and render ansimark source to terminal text."""
    from ansimark.interpret import stylize
    from ansimark.lexer import tokenize
    from ansimark.render import render

    tokens = tokenize(source, delimiter)
    return render(stylize(tokens, report), strip=strip)
