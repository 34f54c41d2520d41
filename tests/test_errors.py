"""Test diagnostic formatting with source context."""

from ansimark.errors import DirectiveError
from ansimark.interpret import stylize
from ansimark.lexer import tokenize


def _first_error(source: str) -> DirectiveError:
    errors: list[DirectiveError] = []
    stylize(tokenize(source), errors.append)
    assert errors, "expected a diagnostic"
    return errors[0]


class TestErrorFormatting:
    def test_message(self):
        err = _first_error("\\/q\\")
        assert str(err) == "unknown attribute: '/q'"

    def test_format_contains_warning_prefix(self):
        formatted = _first_error("\\/q\\").format()
        assert formatted.startswith("warning: unknown attribute: '/q'")

    def test_format_contains_line(self):
        formatted = _first_error("some text \\/q\\ more").format()
        assert "some text \\/q\\ more" in formatted

    def test_format_contains_position(self):
        formatted = _first_error("ab\\/q\\").format()
        assert "<stdin>:1:4" in formatted

    def test_format_with_custom_filename(self):
        formatted = _first_error("\\/q\\").format("banner.txt")
        assert "--> banner.txt:1:2" in formatted

    def test_format_carets_cover_directive(self):
        formatted = _first_error("ab\\/xyz\\").format()
        last = formatted.splitlines()[-1]
        assert last.endswith("   ^^^^")

    def test_multiline_error_position(self):
        err = _first_error("line1\nline2\n\\/q\\")
        assert err.span.start.line == 3
        assert "3:2" in err.format()


class TestLineModel:
    def test_carriage_return_does_not_split_line(self):
        err = _first_error("a\rb\\/q\\")
        assert err.span.start.line == 1
        formatted = err.format()
        assert "--> <stdin>:1:5" in formatted
        assert "1 | a\rb\\/q\\" in formatted
        assert formatted.split("\n")[-1] == "  |     ^^"

    def test_form_feed_does_not_split_line(self):
        formatted = _first_error("x\fy \\/q\\").format()
        assert "1 | x\fy \\/q\\" in formatted

    def test_crlf_source_shows_following_line(self):
        formatted = _first_error("one\r\n\\/q\\").format()
        assert "--> <stdin>:2:2" in formatted
        assert "2 | \\/q\\" in formatted
