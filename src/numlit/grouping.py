"""Digit grouping check and canonical regrouping."""

from __future__ import annotations

from collections.abc import Sequence

from numlit.decompose import DecomposedLiteral
from numlit.findings import MESSAGES, Finding, FindingKind
from numlit.options import LintOptions
from numlit.tokens import SEPARATOR, Radix


def classify_grouping(groups: Sequence[str], width: int) -> FindingKind | None:
    """Classify an underscore partition against canonical group *width*.

    Returns ``None`` when the grouping is canonical, otherwise the kind of
    grouping problem.
    """
    lead, tail = groups[0], groups[1:]
    sizes = {len(group) for group in tail}

    if sizes == {width} and len(lead) <= width:
        return None
    if len(sizes) == 1:
        (size,) = sizes
        if size > width:
            return FindingKind.LARGE_DIGIT_GROUPS
        if size < width:
            return FindingKind.INCONSISTENT_DIGIT_GROUPING
    elif len(sizes) > 1:
        return FindingKind.INCONSISTENT_DIGIT_GROUPING

    # The tail is canonical but the leftmost group is longer than a full group
    if len(lead) > width:
        return FindingKind.LARGE_DIGIT_GROUPS
    return FindingKind.INCONSISTENT_DIGIT_GROUPING


def regroup(digits: str, width: int, *, pad: bool) -> str:
    """Split *digits* into groups of *width* counted from the right.

    With *pad*, the digits are first left-padded with zeros to a multiple of
    *width*; otherwise the leftmost group is shorter.
    """
    if pad and len(digits) % width:
        digits = digits.rjust(len(digits) + width - len(digits) % width, "0")
    head = len(digits) % width
    groups = [digits[:head]] if head else []
    groups.extend(digits[i : i + width] for i in range(head, len(digits), width))
    return SEPARATOR.join(groups)


def check_digit_grouping(
    lit: DecomposedLiteral, options: LintOptions | None = None
) -> Finding | None:
    """Report integer-part digit groups that are too large or uneven."""
    groups = lit.integer_groups
    if not lit.has_separators or len(groups) < 2:
        return None

    options = options if options is not None else LintOptions()
    width = options.group_size(lit.radix)
    kind = classify_grouping(groups, width)
    if kind is None:
        return None

    # A zero pad is only safe behind an explicit radix prefix
    grouped = regroup(lit.digits, width, pad=lit.radix is not Radix.DECIMAL)
    suggestion = lit.prefix + grouped + lit.fraction + lit.exponent + lit.suffix_text
    return Finding(
        kind=kind,
        span=lit.span,
        message=MESSAGES[kind],
        suggestions=(suggestion,),
        help=f"consider grouping digits in groups of {width}",
    )
