"""Analyzer configuration options."""

from __future__ import annotations

from dataclasses import dataclass

from numlit.tokens import Radix

DEFAULT_DECIMAL_GROUP_SIZE = 3
DEFAULT_RADIX_GROUP_SIZE = 4


@dataclass(frozen=True, slots=True)
class LintOptions:
    """Canonical digit group widths used by the grouping check."""

    decimal_group_size: int = DEFAULT_DECIMAL_GROUP_SIZE
    radix_group_size: int = DEFAULT_RADIX_GROUP_SIZE

    def __post_init__(self) -> None:
        for name in ("decimal_group_size", "radix_group_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    def group_size(self, radix: Radix) -> int:
        if radix is Radix.DECIMAL:
            return self.decimal_group_size
        return self.radix_group_size
