"""Token data structures and source positions."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_DELIMITER = "\\"


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A text or directive region of the source.

    The token only records where the region lives; ``raw`` and ``value``
    slice the shared source string on demand.
    """

    is_directive: bool
    span: Span
    source: str = field(repr=False, compare=False)
    delimiter: str = field(default=DEFAULT_DELIMITER, repr=False, compare=False)

    @property
    def raw(self) -> str:
        return self.source[self.span.start.offset : self.span.end.offset]

    @property
    def value(self) -> str:
        """Region content with doubled delimiters folded to one."""
        raw = self.raw
        if self.is_directive:
            doubled = self.delimiter * 2
            if doubled in raw:
                return raw.replace(doubled, self.delimiter)
        return raw
