"""Finding kinds, messages and the immutable Finding record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from numlit.tokens import Span


class FindingKind(Enum):
    """Defect kinds. Values are stable tags used for allow/warn/deny configuration."""

    MIXED_CASE_HEX = "mixed_case_hex"
    UNSEPARATED_LITERAL_SUFFIX = "unseparated_literal_suffix"
    ZERO_PREFIXED_LITERAL = "zero_prefixed_literal"
    LARGE_DIGIT_GROUPS = "large_digit_groups"
    INCONSISTENT_DIGIT_GROUPING = "inconsistent_digit_grouping"

    @property
    def tag(self) -> str:
        return self.value

    @classmethod
    def from_tag(cls, tag: str) -> FindingKind:
        """Look up a kind by tag, accepting `-` for `_`."""
        try:
            return cls(tag.strip().lower().replace("-", "_"))
        except ValueError:
            known = ", ".join(k.tag for k in cls)
            raise ValueError(f"unknown lint {tag!r} (expected one of: {known})") from None


MESSAGES: dict[FindingKind, str] = {
    FindingKind.MIXED_CASE_HEX: "inconsistent casing in hexadecimal literal",
    FindingKind.UNSEPARATED_LITERAL_SUFFIX: "{kind} type suffix should be separated by an underscore",
    FindingKind.ZERO_PREFIXED_LITERAL: "this is a decimal constant",
    FindingKind.LARGE_DIGIT_GROUPS: "digit groups should be smaller",
    FindingKind.INCONSISTENT_DIGIT_GROUPING: "digits grouped inconsistently by underscores",
}


@dataclass(frozen=True, slots=True)
class Finding:
    """One style problem in one literal, with up to two full-literal replacements."""

    kind: FindingKind
    span: Span
    message: str
    suggestions: tuple[str, ...] = ()
    help: str | None = None

    @property
    def code(self) -> str:
        return self.kind.tag
