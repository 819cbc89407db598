"""Command-line interface for numlit."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from numlit.errors import MalformedLiteral, ScanError
from numlit.findings import FindingKind
from numlit.lint import LiteralReport, analyze_source
from numlit.options import DEFAULT_DECIMAL_GROUP_SIZE, DEFAULT_RADIX_GROUP_SIZE, LintOptions
from numlit.render import LEVELS, render_report


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_files: list[Path]
    lint_options: LintOptions = field(default_factory=LintOptions)
    levels: dict[FindingKind, str] = field(default_factory=dict)
    debug: bool = False


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="numlit",
        description="Check the style of numeric literals in Rust-like source files",
    )
    p.add_argument("inputs", nargs="+", metavar="FILE", help="Source files to check")
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover numlit.toml)",
    )
    p.add_argument(
        "--decimal-group-size",
        type=int,
        default=None,
        metavar="N",
        help=f"Digits per group in decimal literals (default: {DEFAULT_DECIMAL_GROUP_SIZE})",
    )
    p.add_argument(
        "--radix-group-size",
        type=int,
        default=None,
        metavar="N",
        help=f"Digits per group in hex/octal/binary literals (default: {DEFAULT_RADIX_GROUP_SIZE})",
    )
    p.add_argument(
        "-A",
        "--allow",
        action="append",
        default=[],
        metavar="LINT",
        help="Do not report LINT (repeatable)",
    )
    p.add_argument(
        "-W",
        "--warn",
        action="append",
        default=[],
        metavar="LINT",
        help="Report LINT as a warning (repeatable)",
    )
    p.add_argument(
        "-D",
        "--deny",
        action="append",
        default=[],
        metavar="LINT",
        help="Report LINT as an error and exit 1 (repeatable)",
    )
    p.add_argument("--debug", action="store_true", help="Dump decomposed literals to stderr")
    return p


def parse_lint_arg(s: str) -> FindingKind:
    """Parse a lint name such as ``mixed_case_hex`` or ``mixed-case-hex``."""
    try:
        return FindingKind.from_tag(s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "numlit.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def grouping_options(
    config: dict[str, Any],
    *,
    decimal_group_size: int | None = None,
    radix_group_size: int | None = None,
) -> LintOptions:
    """Build LintOptions from the config ``[grouping]`` table, then explicit overrides.

    Raises ValueError for an invalid group size.
    """
    sizes: dict[str, Any] = {}
    cfg_grouping = config.get("grouping")
    if isinstance(cfg_grouping, dict):
        for key in ("decimal_group_size", "radix_group_size"):
            if key in cfg_grouping:
                sizes[key] = cfg_grouping[key]
    if decimal_group_size is not None:
        sizes["decimal_group_size"] = decimal_group_size
    if radix_group_size is not None:
        sizes["radix_group_size"] = radix_group_size
    return LintOptions(**sizes)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags. Among CLI flags, deny
    beats warn beats allow.
    """
    input_files = [Path(p) for p in args.inputs]
    input_dir = input_files[0].parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from None

    try:
        lint_options = grouping_options(
            config,
            decimal_group_size=args.decimal_group_size,
            radix_group_size=args.radix_group_size,
        )
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None

    # Lint levels: config < CLI
    levels: dict[FindingKind, str] = {}
    cfg_lints = config.get("lints")
    if isinstance(cfg_lints, dict):
        for name, level in cfg_lints.items():
            if level not in LEVELS:
                raise argparse.ArgumentTypeError(
                    f"invalid level {level!r} for lint {name!r} (expected allow, warn or deny)"
                )
            levels[parse_lint_arg(str(name))] = level
    for level, names in (("allow", args.allow), ("warn", args.warn), ("deny", args.deny)):
        for name in names:
            levels[parse_lint_arg(name)] = level

    return CliOptions(
        input_files=input_files,
        lint_options=lint_options,
        levels=levels,
        debug=args.debug,
    )


def check_source(source: str, path: Path, options: CliOptions) -> list[LiteralReport]:
    """Analyze the literals of one file."""
    return analyze_source(source, str(path), options.lint_options)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    status = 0
    for path in options.input_files:
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as exc:
            print(f"error: cannot read {path}: {exc.strerror}", file=sys.stderr)
            status = 2
            continue
        except UnicodeDecodeError as exc:
            print(f"error: cannot decode {path}: {exc.reason}", file=sys.stderr)
            status = 2
            continue

        try:
            reports = check_source(source, path, options)
        except ScanError as exc:
            print(exc.format(str(path)), file=sys.stderr)
            status = 2
            continue
        except MalformedLiteral as exc:
            print(exc.format(str(path), source=source), file=sys.stderr)
            status = 2
            continue

        findings = []
        for report in reports:
            if options.debug:
                from numlit.debug import dump_literal

                dump_literal(report.literal, file=sys.stderr)
            if report.unrecognized_suffix is not None:
                start = report.literal.span.start
                print(
                    f"note: {path}:{start.line}:{start.column}: "
                    f"unrecognized suffix `{report.unrecognized_suffix}` "
                    f"in `{report.literal.raw}`",
                    file=sys.stderr,
                )
            findings.extend(report.findings)

        output = render_report(findings, source, str(path), options.levels)
        if output:
            sys.stdout.write(output)
        if status == 0 and any(options.levels.get(f.kind) == "deny" for f in findings):
            status = 1

    return status
