"""Command-line interface for scrawlc."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from scrawlc.errors import ScannerError
from scrawlc.tokens import Token

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    output_format: str
    start: int | None
    verbose: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="scrawlc",
        description="Scrawl compiler front end: scan a source file into tokens",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument("-v", "--verbose", action="store_true", help="Report scanning progress")
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    p.add_argument("--json", action="store_true", help="Print tokens as JSON")
    p.add_argument(
        "--start",
        type=int,
        default=None,
        metavar="OFFSET",
        help="Start scanning at this character offset",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover scrawlc.toml)",
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "scrawlc.toml"

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

    cfg_verbose = config.get("verbose", False)
    if not isinstance(cfg_verbose, bool):
        raise argparse.ArgumentTypeError(
            f"invalid verbose in config (expected true or false): {cfg_verbose!r}"
        )
    verbose = cfg_verbose or args.verbose

    output_format = "text"
    cfg_output = config.get("output")
    if cfg_output is not None and not isinstance(cfg_output, dict):
        raise argparse.ArgumentTypeError(
            f"invalid output in config (expected a table): {cfg_output!r}"
        )
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in OUTPUT_FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config (expected text or json): {cfg_format}"
                )
            output_format = cfg_format
    if args.json:
        output_format = "json"

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        start=args.start,
        verbose=verbose,
        debug=args.debug,
    )


def configure_logging(options: CliOptions) -> None:
    if options.debug:
        level = logging.DEBUG
    elif options.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr, format="%(message)s", force=True)


def scan_file(options: CliOptions) -> list[Token]:
    """Read and scan the input file."""
    from scrawlc.debug import dump_tokens
    from scrawlc.scanner import Scanner
    from scrawlc.tokens import Position

    source = options.input_file.read_text(encoding="utf-8")
    logger.debug("read %d characters from %s", len(source), options.input_file)

    position = None
    if options.start is not None:
        position = Position.locate(source, options.start)
        logger.debug("starting at offset %d (%s)", options.start, position)

    logger.info("  [1/1] Scanning %s", options.input_file)
    try:
        tokens = Scanner(source, position).scan()
    except ScannerError:
        logger.info("  [1/1] Scanning %s ... failed", options.input_file)
        raise
    logger.info("  [1/1] Scanning %s ... succeeded", options.input_file)

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    return tokens


def render_tokens(tokens: list[Token], output_format: str) -> str:
    from scrawlc.debug import format_listing, tokens_to_json

    if output_format == "json":
        return json.dumps(tokens_to_json(tokens), indent=2) + "\n"
    return format_listing(tokens)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    configure_logging(options)

    if not options.input_file.is_file():
        print(f"error: {options.input_file} is not a file", file=sys.stderr)
        return 2

    try:
        tokens = scan_file(options)
    except ScannerError as exc:
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: could not read {options.input_file}; {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"error: invalid --start: {exc}", file=sys.stderr)
        return 2

    out = render_tokens(tokens, options.output_format)
    if options.output_file:
        try:
            options.output_file.write_text(out, encoding="utf-8")
        except OSError as exc:
            print(f"error: could not write {options.output_file}; {exc}", file=sys.stderr)
            return 2
    else:
        sys.stdout.write(out)

    return 0
