"""Render findings as compiler-style text with source context."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from numlit.errors import format_snippet
from numlit.findings import Finding, FindingKind

LEVELS = ("allow", "warn", "deny")

_LEVEL_LABELS = {"warn": "warning", "deny": "error"}


def render_finding(
    finding: Finding,
    source: str,
    filename: str = "input.rs",
    level: str = "warn",
) -> str:
    """Render one finding with the offending line underlined."""
    label = _LEVEL_LABELS.get(level, "warning")
    text = format_snippet(
        f"{label}[{finding.code}]: {finding.message}",
        source,
        finding.span.start,
        finding.span.end,
        filename,
    )
    lines = [text]
    if finding.help:
        lines.append(f"  = help: {finding.help}")
    for suggestion in finding.suggestions:
        lines.append(f"  = help: try `{suggestion}`")
    return "\n".join(lines)


def render_report(
    findings: Iterable[Finding],
    source: str,
    filename: str = "input.rs",
    levels: Mapping[FindingKind, str] | None = None,
) -> str:
    """Render all non-allowed findings followed by a summary line.

    Returns an empty string when nothing is reported.
    """
    levels = levels or {}
    blocks: list[str] = []
    counts = {"warn": 0, "deny": 0}
    for finding in findings:
        level = levels.get(finding.kind, "warn")
        if level == "allow":
            continue
        counts[level] += 1
        blocks.append(render_finding(finding, source, filename, level))

    if not blocks:
        return ""

    summary = []
    if counts["deny"]:
        summary.append(f"{counts['deny']} error{'s' if counts['deny'] != 1 else ''}")
    if counts["warn"]:
        summary.append(f"{counts['warn']} warning{'s' if counts['warn'] != 1 else ''}")
    blocks.append(f"{filename}: {', '.join(summary)} emitted")
    return "\n\n".join(blocks) + "\n"
