"""Token types, radix and suffix tables, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Radix(Enum):
    DECIMAL = auto()
    HEX = auto()  # 0x
    OCTAL = auto()  # 0o
    BINARY = auto()  # 0b

    @property
    def prefix(self) -> str:
        return _RADIX_PREFIX[self]

    @property
    def digits(self) -> frozenset[str]:
        return _RADIX_DIGITS[self]


_RADIX_PREFIX = {
    Radix.DECIMAL: "",
    Radix.HEX: "0x",
    Radix.OCTAL: "0o",
    Radix.BINARY: "0b",
}

_RADIX_DIGITS = {
    Radix.DECIMAL: frozenset("0123456789"),
    Radix.HEX: frozenset("0123456789abcdefABCDEF"),
    Radix.OCTAL: frozenset("01234567"),
    Radix.BINARY: frozenset("01"),
}

# Prefix text -> radix; decimal has no prefix and is never inferred from a leading zero
PREFIXES = {prefix: radix for radix, prefix in _RADIX_PREFIX.items() if prefix}


class LiteralKind(Enum):
    INTEGER = auto()
    FLOAT = auto()


class Suffix(Enum):
    # Integer suffixes
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    ISIZE = "isize"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    USIZE = "usize"

    # Float suffixes
    F32 = "f32"
    F64 = "f64"

    @property
    def text(self) -> str:
        return self.value

    @property
    def is_float(self) -> bool:
        return self in _FLOAT_SUFFIXES


_FLOAT_SUFFIXES = frozenset({Suffix.F32, Suffix.F64})

# Suffix text -> member, longest first so that trailing matches prefer e.g. u128 over u8
SUFFIXES: dict[str, Suffix] = {
    s.text: s for s in sorted(Suffix, key=lambda s: len(s.text), reverse=True)
}

SEPARATOR = "_"


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position (end exclusive)."""

    start: Position
    end: Position

    @classmethod
    def of_text(cls, text: str) -> Span:
        """Span covering *text* as if it were the whole first line of a source."""
        return cls(Position(1, 1, 0), Position(1, len(text) + 1, len(text)))


@dataclass(frozen=True, slots=True)
class LiteralToken:
    """A numeric literal as it appears in source, with its location."""

    raw: str
    span: Span


def is_ident_start(ch: str) -> bool:
    """Return True if ch can start an identifier."""
    return ch.isalpha() or ch == "_"


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier or a literal body."""
    return ch.isalnum() or ch == "_"


def is_hex_letter(ch: str) -> bool:
    """Return True if ch is an alphabetic hexadecimal digit."""
    return ch in "abcdefABCDEF"
