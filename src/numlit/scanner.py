"""Literal scanner: finds numeric literal tokens in Rust-like source text.

Only numeric literals are emitted. Comments, strings, character literals,
lifetimes and identifiers are skipped so that digits inside them are never
mistaken for literals.
"""

from __future__ import annotations

from numlit.errors import ScanError
from numlit.tokens import LiteralToken, Position, Span, is_ident_char, is_ident_start

_RADIX_PREFIXES = ("0x", "0o", "0b")


class Scanner:
    """Scan source text into a list of LiteralToken objects."""

    def __init__(self, source: str, filename: str = "input.rs") -> None:
        self._source = source
        self._filename = filename
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[LiteralToken] = []

    def scan(self) -> list[LiteralToken]:
        """Scan the full source and return the literal tokens in order."""
        while self._pos < len(self._source):
            self._scan_next()
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _error(self, message: str, pos: Position | None = None) -> ScanError:
        if pos is None:
            pos = self._current_pos()
        return ScanError(message, pos, self._source)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_next(self) -> None:
        ch = self._peek()

        if ch == "\0":
            raise self._error("NUL character in source")

        if ch == "/" and self._peek(1) == "/":
            self._skip_line_comment()
            return

        if ch == "/" and self._peek(1) == "*":
            self._skip_block_comment()
            return

        if ch == '"':
            self._skip_string()
            return

        if ch == "'":
            self._skip_char_or_lifetime()
            return

        if ch.isdigit():
            self._scan_number()
            return

        if is_ident_start(ch):
            self._scan_prefixed_or_identifier()
            return

        self._advance()

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _skip_line_comment(self) -> None:
        while self._pos < len(self._source) and self._peek() != "\n":
            self._advance()

    def _skip_block_comment(self) -> None:
        start = self._current_pos()
        self._advance()
        self._advance()
        depth = 1
        while depth:
            if self._pos >= len(self._source):
                raise self._error("unterminated block comment", start)
            if self._peek() == "/" and self._peek(1) == "*":
                self._advance()
                self._advance()
                depth += 1
            elif self._peek() == "*" and self._peek(1) == "/":
                self._advance()
                self._advance()
                depth -= 1
            else:
                self._advance()

    # ------------------------------------------------------------------
    # Strings, characters, lifetimes
    # ------------------------------------------------------------------

    def _skip_string(self) -> None:
        start = self._current_pos()
        self._advance()  # opening quote
        while self._pos < len(self._source):
            ch = self._advance()
            if ch == "\\":
                if self._pos < len(self._source):
                    self._advance()
            elif ch == '"':
                return
        raise self._error("unterminated string literal", start)

    def _skip_raw_string(self, start: Position) -> None:
        """Skip ``r#*"..."#*`` with the cursor on the first ``#`` or quote."""
        hashes = 0
        while self._peek() == "#":
            self._advance()
            hashes += 1
        self._advance()  # opening quote
        closing = '"' + "#" * hashes
        while self._pos < len(self._source):
            if self._source.startswith(closing, self._pos):
                for _ in closing:
                    self._advance()
                return
            self._advance()
        raise self._error("unterminated raw string literal", start)

    def _skip_char_or_lifetime(self) -> None:
        start = self._current_pos()
        if self._peek(1) == "\\":
            self._advance()  # opening quote
            while self._pos < len(self._source) and self._peek() != "\n":
                ch = self._advance()
                if ch == "\\":
                    self._advance()
                elif ch == "'":
                    return
            raise self._error("unterminated character literal", start)

        if self._peek(2) == "'":
            # 'x'
            self._advance()
            self._advance()
            self._advance()
            return

        # Lifetime or label: 'a, 'static
        self._advance()
        while self._pos < len(self._source) and is_ident_char(self._peek()):
            self._advance()

    # ------------------------------------------------------------------
    # Identifiers and prefixed strings
    # ------------------------------------------------------------------

    def _scan_prefixed_or_identifier(self) -> None:
        start = self._current_pos()
        ch = self._peek()

        if ch in "bc" and self._peek(1) == '"':
            self._advance()
            self._skip_string()
            return

        if ch == "b" and self._peek(1) == "'":
            self._advance()
            self._skip_char_or_lifetime()
            return

        offset = 1 if ch in "bc" and self._peek(1) == "r" else 0
        if self._peek(offset) == "r" and self._is_raw_string_start(offset + 1):
            for _ in range(offset + 1):
                self._advance()
            self._skip_raw_string(start)
            return

        # Identifiers may contain digits (x1, u8) that are not literals
        while self._pos < len(self._source) and is_ident_char(self._peek()):
            self._advance()

    def _is_raw_string_start(self, offset: int) -> bool:
        while self._peek(offset) == "#":
            offset += 1
        return self._peek(offset) == '"'

    # ------------------------------------------------------------------
    # Numeric literals
    # ------------------------------------------------------------------

    def _scan_number(self) -> None:
        start = self._current_pos()
        prefixed = self._source.startswith(_RADIX_PREFIXES, self._pos)
        # t.0.1 is chained tuple indexing, not the float 0.1
        seen_dot = (
            self._source.endswith(".", 0, start.offset)
            and not self._source.endswith("..", 0, start.offset)
        )

        while True:
            while self._pos < len(self._source) and is_ident_char(self._peek()):
                self._advance()
            if prefixed:
                break

            text = self._source[start.offset : self._pos]
            if (
                text[-1] in "eE"
                and not any(c.isalpha() for c in text[:-1])
                and self._peek() in ("+", "-")
                and self._peek(1).isdigit()
            ):
                self._advance()  # exponent sign
                continue

            # 1.5 and 1. are floats; 1..2 is a range and 1.max(2) a method call
            if (
                not seen_dot
                and self._peek() == "."
                and self._peek(1) != "."
                and not is_ident_start(self._peek(1))
                and all(c.isdigit() or c == "_" for c in text)
            ):
                self._advance()
                seen_dot = True
                continue
            break

        raw = self._source[start.offset : self._pos]
        self._tokens.append(LiteralToken(raw, Span(start, self._current_pos())))


def scan_literals(source: str, filename: str = "input.rs") -> list[LiteralToken]:
    """Convenience function: scan source text and return its numeric literals."""
    return Scanner(source, filename).scan()
