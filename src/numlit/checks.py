"""Casing, suffix-separation and octal-ambiguity checks.

Each check is a pure function of a :class:`DecomposedLiteral` returning a
:class:`Finding` or ``None``.
"""

from __future__ import annotations

from numlit.decompose import DecomposedLiteral
from numlit.findings import MESSAGES, Finding, FindingKind
from numlit.tokens import LiteralKind, Radix, is_hex_letter


def check_mixed_case_hex(lit: DecomposedLiteral) -> Finding | None:
    """Report hex literals mixing `a-f` and `A-F` digits."""
    if lit.radix is not Radix.HEX:
        return None
    letters = [ch for ch in lit.digit_run if is_hex_letter(ch)]
    if any(ch.islower() for ch in letters) and any(ch.isupper() for ch in letters):
        # Either casing could be the project convention, so no rewrite is offered
        return Finding(
            kind=FindingKind.MIXED_CASE_HEX,
            span=lit.span,
            message=MESSAGES[FindingKind.MIXED_CASE_HEX],
            help="use all lowercase or all uppercase hex digits",
        )
    return None


def check_suffix_separation(lit: DecomposedLiteral) -> Finding | None:
    """Report a type suffix glued directly to the last digit."""
    if lit.suffix is None or lit.suffix_separated:
        return None
    kind = "float" if lit.kind is LiteralKind.FLOAT else "integer"
    return Finding(
        kind=FindingKind.UNSEPARATED_LITERAL_SUFFIX,
        span=lit.span,
        message=MESSAGES[FindingKind.UNSEPARATED_LITERAL_SUFFIX].format(kind=kind),
        help=f"add an underscore before `{lit.suffix.text}`",
    )


def check_zero_prefixed(lit: DecomposedLiteral) -> Finding | None:
    """Report decimal integers with a leading zero that read like C octal.

    Suggests the decimal reading first, then the ``0o`` reading. The octal
    suggestion is omitted when the digits contain ``8`` or ``9``, since they
    have no octal value, so such literals get a single suggestion.
    """
    if lit.radix is not Radix.DECIMAL or lit.kind is not LiteralKind.INTEGER:
        return None
    digits = lit.digits
    if len(digits) <= 1 or digits[0] != "0":
        return None
    if not any(ch in "123456789" for ch in digits):
        # 0, 00, 0_000 all mean zero whichever way they are read
        return None

    trimmed = digits.lstrip("0")
    suggestions = [trimmed + lit.suffix_text]
    if not any(ch in "89" for ch in digits):
        suggestions.append(Radix.OCTAL.prefix + trimmed + lit.suffix_text)
    return Finding(
        kind=FindingKind.ZERO_PREFIXED_LITERAL,
        span=lit.span,
        message=MESSAGES[FindingKind.ZERO_PREFIXED_LITERAL],
        suggestions=tuple(suggestions),
        help=(
            "if you mean to use a decimal constant, remove the leading zeros; "
            f"if you mean to use an octal constant, use `{Radix.OCTAL.prefix}`"
        ),
    )
