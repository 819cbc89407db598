"""--debug decomposition dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from numlit.decompose import DecomposedLiteral


def dump_literal(lit: DecomposedLiteral, *, file: TextIO = sys.stderr) -> None:
    """Print a human-readable view of a decomposed literal to *file*."""
    start = lit.span.start
    file.write(f"Literal {lit.raw!r} at {start.line}:{start.column}\n")
    file.write(f"  radix={lit.radix.name} kind={lit.kind.name}\n")
    file.write(f"  digit_run={lit.digit_run!r}\n")
    file.write(f"  groups={list(lit.raw_groups)!r}\n")
    if lit.integer_groups != lit.raw_groups:
        file.write(f"  integer_groups={list(lit.integer_groups)!r}\n")
    if lit.fraction:
        file.write(f"  fraction={lit.fraction!r}\n")
    if lit.exponent:
        file.write(f"  exponent={lit.exponent!r}\n")
    if lit.suffix is not None:
        sep = " (separated)" if lit.suffix_separated else ""
        file.write(f"  suffix={lit.suffix.text}{sep}\n")
    if lit.unrecognized_suffix is not None:
        file.write(f"  unrecognized_suffix={lit.unrecognized_suffix!r}\n")
