"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from numlit.decompose import DecomposedLiteral, decompose
from numlit.findings import Finding, FindingKind
from numlit.lint import analyze
from numlit.options import LintOptions
from numlit.scanner import scan_literals


@pytest.fixture
def lint():
    """Return a helper that analyzes one literal and returns its findings."""

    def _lint(raw: str, options: LintOptions | None = None) -> list[Finding]:
        return analyze(raw, options=options)

    return _lint


@pytest.fixture
def kinds(lint):
    """Return a helper that analyzes one literal and returns its finding kinds."""

    def _kinds(raw: str, options: LintOptions | None = None) -> list[FindingKind]:
        return [f.kind for f in lint(raw, options)]

    return _kinds


@pytest.fixture
def dec():
    """Return a helper that decomposes one literal."""

    def _dec(raw: str) -> DecomposedLiteral:
        return decompose(raw)

    return _dec


@pytest.fixture
def scan():
    """Return a helper that scans source and returns raw literal texts."""

    def _scan(source: str) -> list[str]:
        return [t.raw for t in scan_literals(source)]

    return _scan
