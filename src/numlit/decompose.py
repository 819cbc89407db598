"""Literal decomposition: raw literal text to a structured record.

Every analyzer works from a :class:`DecomposedLiteral`; nothing else looks at
the raw text again.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from numlit.errors import MalformedLiteral
from numlit.tokens import PREFIXES, SEPARATOR, SUFFIXES, LiteralKind, Radix, Span, Suffix

# Decimal body: integer part, optional fraction, optional exponent, leftover.
_DECIMAL_BODY = re.compile(
    r"(?P<int>[0-9][0-9_]*)"
    r"(?P<frac>\.[0-9_]*)?"
    r"(?P<exp>[eE][+-]?_*[0-9][0-9_]*)?"
    r"(?P<rest>.*)",
    re.DOTALL,
)

# A trailing alphabetic run that is not a known suffix, e.g. a typo like `u31`
_ALPHA_TAIL = re.compile(r"[A-Za-z][A-Za-z0-9_]*")

_SEPARATOR_RUN = re.compile(f"{SEPARATOR}+")


@dataclass(frozen=True, slots=True)
class DecomposedLiteral:
    """A numeric literal broken into radix, digit groups and suffix."""

    raw: str
    radix: Radix
    kind: LiteralKind
    digit_run: str
    raw_groups: tuple[str, ...]
    suffix: Suffix | None
    span: Span
    has_separators: bool
    suffix_separated: bool = False
    integer_groups: tuple[str, ...] = ()
    fraction: str = ""
    exponent: str = ""
    unrecognized_suffix: str | None = None

    @property
    def prefix(self) -> str:
        return self.radix.prefix

    @property
    def suffix_text(self) -> str:
        """The suffix as written, including its leading separator if any."""
        if self.suffix is None:
            return ""
        return (SEPARATOR if self.suffix_separated else "") + self.suffix.text

    @property
    def digits(self) -> str:
        """Integer-part digits without separators."""
        return "".join(self.integer_groups)


def decompose(raw: str, span: Span | None = None) -> DecomposedLiteral:
    """Decompose *raw* literal text.

    Raises :class:`MalformedLiteral` if *raw* is not a legal numeric literal.
    A trailing alphabetic run that is not a recognized suffix is kept in the
    digit run and reported through ``unrecognized_suffix``.
    """
    if span is None:
        span = Span.of_text(raw)

    if not raw:
        raise MalformedLiteral("empty literal", raw, span)
    if raw.startswith(SEPARATOR):
        raise MalformedLiteral("literal cannot start with a separator", raw, span)

    radix = Radix.DECIMAL
    body = raw
    for prefix, candidate in PREFIXES.items():
        if raw.startswith(prefix):
            radix = candidate
            body = raw[len(prefix) :]
            break

    suffix = _match_suffix(body, radix)
    suffix_separated = False
    if suffix is not None:
        body = body[: -len(suffix.text)]
        suffix_separated = body.endswith(SEPARATOR)
    has_separators = SEPARATOR in body
    if suffix_separated:
        # The suffix owns its separator
        body = body.rstrip(SEPARATOR)

    if radix is Radix.DECIMAL:
        int_part, fraction, exponent, tail = _split_decimal(body, raw, span)
    else:
        if "." in body:
            raise MalformedLiteral(
                f"{radix.name.lower()} literal cannot have a fractional part", raw, span
            )
        int_part, fraction, exponent, tail = _split_radix(body, radix)

    if not int_part.replace(SEPARATOR, ""):
        raise MalformedLiteral("literal has no digits", raw, span)

    unrecognized = None
    if tail:
        if not _ALPHA_TAIL.fullmatch(tail):
            raise MalformedLiteral(
                f"invalid digit {tail[0]!r} in {radix.name.lower()} literal", raw, span
            )
        unrecognized = tail
        # The digit run absorbs the unknown tail
        if fraction or exponent:
            exponent += tail
        else:
            int_part += tail

    is_float = bool(fraction or exponent) or (suffix is not None and suffix.is_float)
    kind = LiteralKind.FLOAT if is_float else LiteralKind.INTEGER

    full_body = int_part + fraction + exponent
    raw_groups = _split_groups(full_body)
    integer_groups = _split_groups(int_part)
    digit_run = "".join(raw_groups)

    return DecomposedLiteral(
        raw=raw,
        radix=radix,
        kind=kind,
        digit_run=digit_run,
        raw_groups=raw_groups,
        suffix=suffix,
        span=span,
        has_separators=has_separators,
        suffix_separated=suffix_separated,
        integer_groups=integer_groups,
        fraction=fraction,
        exponent=exponent,
        unrecognized_suffix=unrecognized,
    )


def _match_suffix(body: str, radix: Radix) -> Suffix | None:
    """Return the longest recognized suffix at the end of *body*, if any."""
    for text, suffix in SUFFIXES.items():
        if suffix.is_float and radix is not Radix.DECIMAL:
            # f32/f64 are plain hex digits, and invalid for other radices
            continue
        if body.endswith(text) and len(body) > len(text):
            return suffix
    return None


def _split_decimal(body: str, raw: str, span: Span) -> tuple[str, str, str, str]:
    m = _DECIMAL_BODY.fullmatch(body)
    if m is None:
        raise MalformedLiteral("literal has no digits", raw, span)
    return m.group("int"), m.group("frac") or "", m.group("exp") or "", m.group("rest")


def _split_radix(body: str, radix: Radix) -> tuple[str, str, str, str]:
    valid = radix.digits | {SEPARATOR}
    end = 0
    while end < len(body) and body[end] in valid:
        end += 1
    return body[:end], "", "", body[end:]


def _split_groups(text: str) -> tuple[str, ...]:
    return tuple(group for group in _SEPARATOR_RUN.split(text) if group)
