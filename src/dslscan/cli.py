"""Command-line interface for dslscan."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from dataclasses import dataclass
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

from dslscan.check import check_tokens, has_errors, render_problem
from dslscan.debug import dump_lines, dump_tokens, lines_to_json, tokens_to_json
from dslscan.lexer import Lexer

logger = logging.getLogger(__name__)

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    format: str
    show_lines: bool
    run_check: bool
    verbose: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="dslscan",
        description="Tokenize DSL source and report lexical problems",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Token dump format (default: text)",
    )
    p.add_argument(
        "--lines",
        action="store_true",
        default=None,
        help="Also dump the line index",
    )
    p.add_argument(
        "--check",
        action="store_true",
        default=None,
        help="Report unterminated strings and unbalanced brackets",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover dslscan.toml)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "dslscan.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    fmt = "text"
    show_lines = False
    cfg_dump = config.get("dump")
    if isinstance(cfg_dump, dict):
        cfg_format = cfg_dump.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid dump format in config (expected one of {', '.join(FORMATS)}): "
                    f"{cfg_format}"
                )
            fmt = cfg_format
        cfg_lines = cfg_dump.get("lines")
        if isinstance(cfg_lines, bool):
            show_lines = cfg_lines
    if args.format is not None:
        fmt = args.format
    if args.lines is not None:
        show_lines = args.lines

    run_check = False
    cfg_check = config.get("check")
    if isinstance(cfg_check, dict):
        cfg_enabled = cfg_check.get("enabled")
        if isinstance(cfg_enabled, bool):
            run_check = cfg_enabled
    if args.check is not None:
        run_check = args.check

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        show_lines=show_lines,
        run_check=run_check,
        verbose=args.verbose,
    )


def render_dump(lexer: Lexer, options: CliOptions) -> str:
    """Render the token dump (and line index, if requested) as a string."""
    if options.format == "json":
        payload: dict[str, Any] = {"tokens": tokens_to_json(lexer.tokens)}
        if options.show_lines:
            payload["lines"] = lines_to_json(lexer.lines)
        return json.dumps(payload, indent=2) + "\n"

    buf = StringIO()
    dump_tokens(lexer.tokens, file=buf)
    if options.show_lines:
        buf.write("\n")
        dump_lines(lexer.lines, file=buf)
    return buf.getvalue()


def run_file(options: CliOptions, err: TextIO) -> tuple[str, int]:
    """Scan a file, returning the dump and the exit code for its lint result."""
    source = options.input_file.read_text(encoding="utf-8")
    lexer = Lexer(source)
    logger.info("%s: %d tokens, %d lines", options.input_file, len(lexer.tokens), len(lexer.lines))

    code = 0
    if options.run_check:
        problems = check_tokens(lexer.tokens)
        for problem in problems:
            err.write(render_problem(problem, lexer.lines) + "\n")
        if has_errors(problems):
            code = 1

    return render_dump(lexer, options), code


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        output, code = run_file(options, sys.stderr)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        try:
            options.output_file.write_text(output, encoding="utf-8")
        except OSError as exc:
            print(f"error: cannot write {options.output_file}: {exc}", file=sys.stderr)
            return 2
    else:
        sys.stdout.write(output)

    return code
