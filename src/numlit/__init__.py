"""numlit: style checks for numeric literal spelling."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numlit.findings import Finding
    from numlit.options import LintOptions
    from numlit.tokens import Span

__version__ = "0.1.0"


def check(raw: str, span: Span | None = None, options: LintOptions | None = None) -> list[Finding]:
    """Decompose one literal and return its findings in check order."""
    from numlit.lint import analyze

    return analyze(raw, span, options)
