"""Command-line interface for ansimark."""

from __future__ import annotations

import argparse
import os
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from colorama import just_fix_windows_console

from ansimark.errors import ConfigError, DirectiveError
from ansimark.tokens import DEFAULT_DELIMITER

STDIN = "-"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: str
    output_file: Path | None
    delimiter: str
    strip: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="ansimark",
        description="Render delimiter-based style markup as ANSI terminal text",
    )
    p.add_argument(
        "input",
        nargs="?",
        default=STDIN,
        help="Input file, or - for standard input (default: -)",
    )
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-d",
        "--delimiter",
        default=None,
        metavar="CHAR",
        help=f"Directive delimiter character (default: {DEFAULT_DELIMITER})",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover ansimark.toml)",
    )
    color = p.add_mutually_exclusive_group()
    color.add_argument("--strip", action="store_true", help="Drop styles, emit plain text")
    color.add_argument("--color", action="store_true", help="Emit styles even if NO_COLOR is set")
    p.add_argument(
        "--debug",
        action="store_true",
        help="Dump tokens and styles to stderr, show diagnostics with context",
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "ansimark.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{path}: {exc}") from exc


def config_delimiter(config: dict[str, Any]) -> str:
    """Return the delimiter a loaded config selects, or the default."""
    cfg_delim = config.get("delimiter")
    if cfg_delim is None:
        return DEFAULT_DELIMITER
    if not isinstance(cfg_delim, str) or len(cfg_delim) != 1:
        raise ConfigError(f"delimiter must be a single character, got {cfg_delim!r}")
    return cfg_delim


def resolve_options(
    args: argparse.Namespace, environ: dict[str, str] | None = None
) -> CliOptions:
    """Merge config file, environment and CLI args into CliOptions.

    Precedence: defaults < config file < NO_COLOR < CLI flags.
    """
    if environ is None:
        environ = dict(os.environ)

    if args.input == STDIN:
        input_dir = Path(".")
    else:
        input_dir = Path(args.input).parent
        if not input_dir.parts:
            input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Delimiter: default < config < CLI
    delimiter = config_delimiter(config)
    if args.delimiter is not None:
        if len(args.delimiter) != 1:
            raise ConfigError(f"delimiter must be a single character, got {args.delimiter!r}")
        delimiter = args.delimiter

    # Strip: default < config < NO_COLOR < CLI
    strip = False
    cfg_strip = config.get("strip")
    if cfg_strip is not None:
        if not isinstance(cfg_strip, bool):
            raise ConfigError(f"strip must be true or false, got {cfg_strip!r}")
        strip = cfg_strip
    if environ.get("NO_COLOR"):
        strip = True
    if args.strip:
        strip = True
    elif args.color:
        strip = False

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=args.input,
        output_file=output_file,
        delimiter=delimiter,
        strip=strip,
        debug=args.debug,
    )


def read_source(input_file: str) -> str:
    """Read the whole input, from stdin when *input_file* is ``-``."""
    if input_file == STDIN:
        return sys.stdin.read()
    return Path(input_file).read_text(encoding="utf-8")


def render_source(source: str, options: CliOptions) -> str:
    """Tokenize, interpret, and render source according to *options*."""
    from ansimark.debug import dump_styles, dump_tokens
    from ansimark.interpret import print_diagnostic, stylize
    from ansimark.lexer import tokenize
    from ansimark.render import render

    filename = "<stdin>" if options.input_file == STDIN else options.input_file

    def report_with_context(exc: DirectiveError) -> None:
        print(exc.format(filename), file=sys.stderr)

    tokens = tokenize(source, options.delimiter)
    if options.debug:
        dump_tokens(tokens)
    styles = stylize(tokens, report_with_context if options.debug else print_diagnostic)
    if options.debug:
        dump_styles(styles)
    return render(styles, strip=options.strip)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (ConfigError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        source = read_source(options.input_file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 1

    output = render_source(source, options)

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        just_fix_windows_console()
        sys.stdout.write(output)

    return 0
