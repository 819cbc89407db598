"""Finding aggregation: run every applicable check over a literal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from numlit.checks import check_mixed_case_hex, check_suffix_separation, check_zero_prefixed
from numlit.decompose import DecomposedLiteral, decompose
from numlit.findings import Finding
from numlit.grouping import check_digit_grouping
from numlit.options import LintOptions
from numlit.tokens import LiteralToken, Span


@dataclass(frozen=True, slots=True)
class LiteralReport:
    """Findings for one literal, with the decomposition they were computed from."""

    literal: DecomposedLiteral
    findings: tuple[Finding, ...]

    @property
    def unrecognized_suffix(self) -> str | None:
        """Trailing alphabetic text that is not a known suffix, left for the caller to judge."""
        return self.literal.unrecognized_suffix


def analyze_literal(
    raw: str,
    span: Span | None = None,
    options: LintOptions | None = None,
) -> LiteralReport:
    """Decompose *raw* and run the checks in fixed order.

    Order: hex casing, suffix separation, zero prefix, digit grouping.
    Raises :class:`~numlit.errors.MalformedLiteral` for text that is not a
    legal literal.
    """
    lit = decompose(raw, span)
    results = (
        check_mixed_case_hex(lit),
        check_suffix_separation(lit),
        check_zero_prefixed(lit),
        check_digit_grouping(lit, options),
    )
    return LiteralReport(lit, tuple(f for f in results if f is not None))


def analyze(
    raw: str,
    span: Span | None = None,
    options: LintOptions | None = None,
) -> list[Finding]:
    """Return the findings for one literal."""
    return list(analyze_literal(raw, span, options).findings)


def analyze_tokens(
    tokens: Iterable[LiteralToken], options: LintOptions | None = None
) -> Iterator[LiteralReport]:
    """Lazily analyze a sequence of literal tokens."""
    for token in tokens:
        yield analyze_literal(token.raw, token.span, options)


def analyze_source(
    source: str, filename: str = "input.rs", options: LintOptions | None = None
) -> list[LiteralReport]:
    """Scan *source* for numeric literals and analyze each one."""
    from numlit.scanner import scan_literals

    return list(analyze_tokens(scan_literals(source, filename), options))
