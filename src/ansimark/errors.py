"""Diagnostic and configuration error types."""

from __future__ import annotations

from ansimark.tokens import Span


class DirectiveError(Exception):
    """An unrecognized compact-form directive, with span and source context.

    Raised inside the interpreter and always recovered there: the
    directive is dropped and the error handed to the diagnostic reporter.
    """

    def __init__(self, message: str, span: Span, source: str) -> None:
        self.message = message
        self.span = span
        self.source = source
        super().__init__(message)

    def format(self, filename: str = "<stdin>") -> str:
        """Render the message with the directive's line and a caret underline."""
        start, end = self.span.start, self.span.end
        # Lines break on "\n" only, as in the lexer
        lines = self.source.split("\n")
        source_line = lines[start.line - 1] if start.line <= len(lines) else ""

        if end.line == start.line:
            width = max(1, end.column - start.column)
        else:
            width = max(1, len(source_line) - start.column + 1)

        line_num = str(start.line)
        gutter = " " * (len(line_num) + 1)
        return (
            f"warning: {self.message}\n"
            f"{gutter}--> {filename}:{start.line}:{start.column}\n"
            f"{gutter}|\n"
            f"{line_num} | {source_line}\n"
            f"{gutter}| {' ' * (start.column - 1)}{'^' * width}"
        )


class ConfigError(Exception):
    """Raised when a config file holds an invalid value."""
