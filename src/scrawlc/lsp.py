"""Minimal LSP server for Scrawl, publishing scanner diagnostics only."""

from __future__ import annotations

import logging

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

from scrawlc import __version__
from scrawlc.errors import ScannerError
from scrawlc.scanner import scan

logger = logging.getLogger(__name__)

server = LanguageServer(
    "scrawlc-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full
)


def _validate(ls: LanguageServer, uri: str) -> None:
    """Scan the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    try:
        tokens = scan(doc.source)
    except ScannerError as exc:
        # Scanner positions are already 0-based
        line = exc.position.line
        col = exc.position.column
        logger.debug("%s: %s after %d tokens", uri, exc.message, len(exc.tokens))
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=col),
                    end=Position(line=line, character=col + 1),
                ),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="scrawlc",
            )
        )
    else:
        logger.debug("%s: %d tokens", uri, len(tokens))

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
