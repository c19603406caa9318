"""Minimal LSP server for dslscan — lexical diagnostics only."""

from __future__ import annotations

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

from dslscan import __version__
from dslscan.check import ERROR, Problem, check

server = LanguageServer(
    "dslscan-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def to_diagnostic(problem: Problem) -> Diagnostic:
    """Convert a lint problem to a one-character-wide LSP diagnostic."""
    return Diagnostic(
        range=Range(
            start=Position(line=problem.line, character=problem.column),
            end=Position(line=problem.line, character=problem.column + 1),
        ),
        message=problem.message,
        severity=(
            DiagnosticSeverity.Error if problem.severity == ERROR else DiagnosticSeverity.Warning
        ),
        source="dslscan",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish its diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics = [to_diagnostic(problem) for problem in check(doc.source)]
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
