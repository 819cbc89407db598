"""Minimal LSP server for numlit: diagnostics and quick fixes."""

from __future__ import annotations

from pathlib import Path

from lsprotocol.types import (
    TEXT_DOCUMENT_CODE_ACTION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    CodeAction,
    CodeActionKind,
    CodeActionOptions,
    CodeActionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
    TextEdit,
    WorkspaceEdit,
)
from pygls.lsp.server import LanguageServer

from numlit import __version__
from numlit.cli import grouping_options, load_config
from numlit.errors import MalformedLiteral, ScanError
from numlit.findings import Finding
from numlit.lint import analyze_source
from numlit.options import LintOptions
from numlit.tokens import Span

server = LanguageServer("numlit-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _range(span: Span) -> Range:
    """Convert a 1-based span to a 0-based LSP range."""
    return Range(
        start=Position(line=span.start.line - 1, character=span.start.column - 1),
        end=Position(line=span.end.line - 1, character=span.end.column - 1),
    )


def _to_diagnostic(finding: Finding) -> Diagnostic:
    message = finding.message
    if finding.help:
        message += f" ({finding.help})"
    return Diagnostic(
        range=_range(finding.span),
        message=message,
        severity=DiagnosticSeverity.Warning,
        code=finding.code,
        source="numlit",
        data=list(finding.suggestions) or None,
    )


def _diagnostics(
    source: str, filename: str, options: LintOptions | None = None
) -> list[Diagnostic]:
    try:
        reports = analyze_source(source, filename, options)
    except ScanError as exc:
        line = exc.position.line - 1
        col = exc.position.column - 1
        return [
            Diagnostic(
                range=Range(
                    start=Position(line=line, character=col),
                    end=Position(line=line, character=col + 1),
                ),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="numlit",
            )
        ]
    except MalformedLiteral as exc:
        return [
            Diagnostic(
                range=_range(exc.span),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source="numlit",
            )
        ]

    return [_to_diagnostic(f) for report in reports for f in report.findings]


def _config_error(message: str) -> Diagnostic:
    return Diagnostic(
        range=Range(start=Position(line=0, character=0), end=Position(line=0, character=0)),
        message=message,
        severity=DiagnosticSeverity.Error,
        source="numlit",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Analyze the document's literals and publish diagnostics.

    Group widths come from the numlit.toml next to the document, as with the CLI.
    """
    doc = ls.workspace.get_text_document(uri)
    filename = uri.rsplit("/", 1)[-1] if "/" in uri else uri

    config_dir = Path(doc.path).parent if doc.path else Path(".")
    try:
        options = grouping_options(load_config(None, config_dir))
    except ValueError as exc:  # includes TOMLDecodeError
        diagnostics = [_config_error(f"invalid config file: {exc}")]
    else:
        diagnostics = _diagnostics(doc.source, filename, options)

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(
    TEXT_DOCUMENT_CODE_ACTION,
    CodeActionOptions(code_action_kinds=[CodeActionKind.QuickFix]),
)
def code_action(ls: LanguageServer, params: CodeActionParams) -> list[CodeAction]:
    return _quick_fixes(params.text_document.uri, params.context.diagnostics)


def _quick_fixes(uri: str, diagnostics: list[Diagnostic]) -> list[CodeAction]:
    """Offer one quick fix per suggested replacement of a numlit diagnostic."""
    actions: list[CodeAction] = []
    for diagnostic in diagnostics:
        if diagnostic.source != "numlit" or not diagnostic.data:
            continue
        for suggestion in diagnostic.data:
            actions.append(
                CodeAction(
                    title=f"Replace with `{suggestion}`",
                    kind=CodeActionKind.QuickFix,
                    diagnostics=[diagnostic],
                    edit=WorkspaceEdit(
                        changes={uri: [TextEdit(range=diagnostic.range, new_text=suggestion)]}
                    ),
                )
            )
    return actions


def main() -> None:
    server.start_io()
