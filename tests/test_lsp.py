"""Tests for the LSP server: diagnostic generation and quick fixes."""

from __future__ import annotations

from pathlib import Path

import pytest
from lsprotocol.types import (
    CodeActionKind,
    DiagnosticSeverity,
    PublishDiagnosticsParams,
    TextDocumentItem,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace

from numlit.lsp import _diagnostics, _quick_fixes, _validate


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace and captured diagnostics."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    published: list[PublishDiagnosticsParams] = []
    ls.text_document_publish_diagnostics = lambda params: published.append(params)

    def put(source: str, uri: str = "file:///main.rs") -> None:
        ws.put_text_document(
            TextDocumentItem(uri=uri, language_id="rust", version=0, text=source)
        )

    return ls, published, put


# ---------------------------------------------------------------------------
# Findings → Warning severity
# ---------------------------------------------------------------------------


class TestFindings:
    def test_mixed_case_hex(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("let a = 0xabCD;")
        _validate(ls, "file:///main.rs")

        assert len(published) == 1
        diags = published[0].diagnostics
        assert len(diags) == 1
        d = diags[0]
        assert d.severity == DiagnosticSeverity.Warning
        assert d.code == "mixed_case_hex"
        assert d.source == "numlit"
        assert "hexadecimal" in d.message
        assert d.data is None
        # 0xabCD spans columns 9..15 (1-based) → characters 8..14 (0-based)
        assert d.range.start.line == 0
        assert d.range.start.character == 8
        assert d.range.end.character == 14

    def test_suggestions_in_data(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("fn f() {}\nlet a = 0123;")
        _validate(ls, "file:///main.rs")

        (d,) = published[0].diagnostics
        assert d.code == "zero_prefixed_literal"
        assert d.data == ["123", "0o123"]
        assert d.range.start.line == 1

    def test_multiple_findings_in_order(self) -> None:
        diags = _diagnostics("let a = 000_123usize;", "main.rs")
        assert [d.code for d in diags] == [
            "unseparated_literal_suffix",
            "zero_prefixed_literal",
        ]


# ---------------------------------------------------------------------------
# Scan and malformed-literal errors → Error severity
# ---------------------------------------------------------------------------


class TestErrors:
    def test_scan_error(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put('let s = "open')
        _validate(ls, "file:///main.rs")

        (d,) = published[0].diagnostics
        assert d.severity == DiagnosticSeverity.Error
        assert "unterminated" in d.message
        assert d.range.start.character == 8

    def test_malformed_literal(self) -> None:
        (d,) = _diagnostics("let a = 0b102;", "main.rs")
        assert d.severity == DiagnosticSeverity.Error
        assert "invalid digit" in d.message
        assert d.range.start.character == 8


# ---------------------------------------------------------------------------
# Clean document → empty diagnostics
# ---------------------------------------------------------------------------


class TestCleanDocument:
    def test_valid_document(self, lsp_env) -> None:
        ls, published, put = lsp_env
        put("// 0123 in a comment\nlet a = 1_000_000_u64;\n")
        _validate(ls, "file:///main.rs")

        assert len(published) == 1
        assert published[0].diagnostics == []


# ---------------------------------------------------------------------------
# numlit.toml next to the document
# ---------------------------------------------------------------------------


class TestConfig:
    SOURCE = "let a = 1_0000_0000;\n"

    def test_default_widths_without_config(self, lsp_env, tmp_path: Path) -> None:
        ls, published, put = lsp_env
        uri = (tmp_path / "main.rs").as_uri()
        put(self.SOURCE, uri)
        _validate(ls, uri)

        (d,) = published[0].diagnostics
        assert d.code == "large_digit_groups"

    def test_grouping_table_applies(self, lsp_env, tmp_path: Path) -> None:
        (tmp_path / "numlit.toml").write_text("[grouping]\ndecimal_group_size = 4\n")
        ls, published, put = lsp_env
        uri = (tmp_path / "main.rs").as_uri()
        put(self.SOURCE, uri)
        _validate(ls, uri)

        assert published[0].diagnostics == []

    def test_invalid_config_is_reported(self, lsp_env, tmp_path: Path) -> None:
        (tmp_path / "numlit.toml").write_text("[grouping]\ndecimal_group_size = 0\n")
        ls, published, put = lsp_env
        uri = (tmp_path / "main.rs").as_uri()
        put(self.SOURCE, uri)
        _validate(ls, uri)

        (d,) = published[0].diagnostics
        assert d.severity == DiagnosticSeverity.Error
        assert "invalid config file" in d.message
        assert "decimal_group_size" in d.message


# ---------------------------------------------------------------------------
# Quick fixes
# ---------------------------------------------------------------------------


class TestQuickFixes:
    def test_one_action_per_suggestion(self) -> None:
        diags = _diagnostics("let a = 0123;", "main.rs")
        actions = _quick_fixes("file:///main.rs", diags)

        assert [a.title for a in actions] == ["Replace with `123`", "Replace with `0o123`"]
        for action in actions:
            assert action.kind == CodeActionKind.QuickFix
            (edit,) = action.edit.changes["file:///main.rs"]
            assert edit.range == diags[0].range
        assert actions[1].edit.changes["file:///main.rs"][0].new_text == "0o123"

    def test_no_action_without_suggestion(self) -> None:
        diags = _diagnostics("let a = 0xabCD;", "main.rs")
        assert _quick_fixes("file:///main.rs", diags) == []
