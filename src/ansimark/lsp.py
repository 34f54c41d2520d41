"""Minimal LSP server for ansimark — diagnostics only."""

from __future__ import annotations

from pathlib import Path

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.uris import to_fs_path

from ansimark.cli import config_delimiter, load_config
from ansimark.errors import ConfigError, DirectiveError
from ansimark.interpret import stylize
from ansimark.lexer import tokenize
from ansimark.tokens import DEFAULT_DELIMITER, Span
from ansimark.tokens import Position as SourcePosition

server = LanguageServer("ansimark-lsp", "0.1.0", text_document_sync_kind=TextDocumentSyncKind.Full)


def _document_delimiter(uri: str) -> str:
    """Delimiter from the ansimark.toml beside the document, else the default."""
    path = to_fs_path(uri)
    if path is None:
        return DEFAULT_DELIMITER
    try:
        return config_delimiter(load_config(None, Path(path).parent))
    except (ConfigError, OSError):
        return DEFAULT_DELIMITER


def _position(pos: SourcePosition, lines: list[str]) -> Position:
    # LSP characters are UTF-16 code units, columns are code points
    prefix = lines[pos.line - 1][: pos.column - 1] if pos.line <= len(lines) else ""
    return Position(line=pos.line - 1, character=len(prefix.encode("utf-16-le")) // 2)


def _range(span: Span, lines: list[str]) -> Range:
    return Range(start=_position(span.start, lines), end=_position(span.end, lines))


def _validate(ls: LanguageServer, uri: str) -> None:
    """Tokenize and interpret the document, then publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    delimiter = _document_delimiter(uri)
    lines = doc.source.split("\n")
    diagnostics: list[Diagnostic] = []

    def report(exc: DirectiveError) -> None:
        diagnostics.append(
            Diagnostic(
                range=_range(exc.span, lines),
                message=exc.message,
                severity=DiagnosticSeverity.Warning,
                source="ansimark",
            )
        )

    toks = tokenize(doc.source, delimiter)
    stylize(toks, report)

    last = toks[-1]
    if last.is_directive:
        diagnostics.append(
            Diagnostic(
                range=_range(last.span, lines),
                message="unterminated directive",
                severity=DiagnosticSeverity.Information,
                source="ansimark",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
