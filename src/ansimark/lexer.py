"""ansimark lexer: splits source text into text and directive regions."""

from __future__ import annotations

from enum import Enum, auto

from ansimark.tokens import DEFAULT_DELIMITER, Position, Span, Token


class _State(Enum):
    TEXT = auto()
    DIRECTIVE = auto()
    DIRECTIVE_DELIM = auto()  # delimiter seen inside a directive, close or fold pending


class Lexer:
    """Tokenize ansimark source into a list of Token objects.

    The delimiter opens a directive in text mode. Inside a directive a
    single delimiter closes it, while a doubled delimiter stands for one
    literal delimiter and keeps the directive open.
    """

    def __init__(self, source: str, delimiter: str = DEFAULT_DELIMITER) -> None:
        if len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
        self._source = source
        self._delimiter = delimiter
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[Token] = []
        self._state = _State.TEXT
        self._start = Position(1, 1, 0)
        # Position of the delimiter that may close the current directive
        self._pending = Position(1, 1, 0)

    def tokenize(self) -> list[Token]:
        """Scan the full source and return the token list.

        The final token is always emitted, even when empty.
        """
        while self._pos < len(self._source):
            ch = self._source[self._pos]
            if self._state == _State.TEXT:
                self._scan_text(ch)
            elif self._state == _State.DIRECTIVE:
                self._scan_directive(ch)
            else:
                self._scan_directive_delim(ch)

        if self._state == _State.DIRECTIVE_DELIM:
            self._close_directive()

        self._tokens.append(self._make_token(self._start, self._current_pos()))
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _after(self, pos: Position) -> Position:
        """Return the position just past the delimiter at *pos*."""
        if self._delimiter == "\n":
            return Position(pos.line + 1, 1, pos.offset + 1)
        return Position(pos.line, pos.column + 1, pos.offset + 1)

    def _make_token(self, start: Position, end: Position) -> Token:
        return Token(
            self._state != _State.TEXT,
            Span(start, end),
            self._source,
            self._delimiter,
        )

    def _flush(self, end: Position) -> None:
        """Emit the region from the current start to *end*, unless empty."""
        if end.offset > self._start.offset:
            self._tokens.append(self._make_token(self._start, end))

    # ------------------------------------------------------------------
    # States
    # ------------------------------------------------------------------

    def _scan_text(self, ch: str) -> None:
        if ch == self._delimiter:
            self._flush(self._current_pos())
            self._advance()
            self._start = self._current_pos()
            self._state = _State.DIRECTIVE
            return
        self._advance()

    def _scan_directive(self, ch: str) -> None:
        if ch == self._delimiter:
            self._pending = self._current_pos()
            self._state = _State.DIRECTIVE_DELIM
        self._advance()

    def _scan_directive_delim(self, ch: str) -> None:
        if ch == self._delimiter:
            # Doubled delimiter: literal, directive stays open
            self._advance()
            self._state = _State.DIRECTIVE
            return
        self._close_directive()
        self._advance()

    def _close_directive(self) -> None:
        """Finalize the pending delimiter as the directive's closer."""
        self._flush(self._pending)
        self._start = self._after(self._pending)
        self._state = _State.TEXT


def tokenize(source: str, delimiter: str = DEFAULT_DELIMITER) -> list[Token]:
    """Convenience function: tokenize source and return token list."""
    return Lexer(source, delimiter).tokenize()
