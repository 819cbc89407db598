"""Error types with formatted source context."""

from __future__ import annotations

from numlit.tokens import Position, Span


def format_snippet(
    header: str,
    source: str,
    start: Position,
    end: Position | None = None,
    filename: str = "input.rs",
) -> str:
    """Format *header* followed by a gutter view of the source line at *start*.

    The underline covers ``start..end`` when both are on the same line,
    otherwise it runs to the end of the start line.
    """
    lines = source.splitlines(keepends=True)
    line_idx = start.line - 1
    col = start.column

    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx].rstrip("\n").rstrip("\r")
    else:
        source_line = ""

    if end is not None and end.line == start.line:
        underline_len = max(1, end.column - col)
    else:
        underline_len = max(1, len(source_line) - col + 1)

    pad = " " * (col - 1)
    carets = "^" * underline_len

    line_num = str(start.line)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"{header}\n"
        f"{' ' * gutter_width}--> {filename}:{start.line}:{col}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}{carets}"
    )


class MalformedLiteral(Exception):
    """Raised when literal text is not a legal numeric literal.

    The analyzer trusts its lexer to hand it legal literals, so this signals a
    lexer/analyzer mismatch rather than a style problem.
    """

    def __init__(self, message: str, raw: str, span: Span | None = None) -> None:
        self.message = message
        self.raw = raw
        self.span = span if span is not None else Span.of_text(raw)
        super().__init__(self.format())

    def format(self, filename: str = "input.rs", source: str | None = None) -> str:
        if source is None:
            # Without the surrounding file, show the literal on its own
            return format_snippet(
                f"error: {self.message}",
                self.raw,
                Position(1, 1, 0),
                Position(1, len(self.raw) + 1, len(self.raw)),
                filename,
            )
        return format_snippet(
            f"error: {self.message}", source, self.span.start, self.span.end, filename
        )


class ScanError(Exception):
    """Raised on the first scanning error, with position and source context."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "input.rs") -> str:
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        if 0 <= line_idx < len(lines):
            line_len = len(lines[line_idx].rstrip("\n").rstrip("\r"))
        else:
            line_len = 0
        # Underline at least 1 char, at most 2, staying within the line
        width = max(1, min(2, line_len - self.position.column + 1))
        end = Position(
            self.position.line, self.position.column + width, self.position.offset + width
        )
        return format_snippet(
            f"error: {self.message}", self.source, self.position, end, filename
        )
