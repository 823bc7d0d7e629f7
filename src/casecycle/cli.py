#!/usr/bin/env python3
"""
casecycle: Rotate identifiers and text through case styles

Common usage:
  echo hello-world | casecycle            # HELLO_WORLD
  echo hello-world | casecycle -n 2       # helloWorld
  echo hello-world | casecycle -b         # hello_world (kebab is skipped, no change)
  casecycle --lines -i names.txt
  casecycle --list-styles --cycle const,pascal,snake

Each step converts the original text to the next style in the cycle, skipping
styles that would not visibly change the text. The cycle can also be set with
`case-cycle` in `.casecycle.toml`, `casecycle.toml`, or `[tool.casecycle]` in
`pyproject.toml`.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from casecycle.config import CaseCycleConfig, find_config_file, load_config
from casecycle.cycle import Direction
from casecycle.cycle_api import cycle_file
from casecycle.transforms import convert_text
from casecycle.variants import normalize_case_cycle

_SAMPLE_TEXT = "helloWorld-example"


@dataclass
class Options:
    """Command-line options for the casecycle tool."""

    files: list[str]
    output: str
    backward: bool
    steps: int
    case_cycle: list[str] | None
    lines: bool
    inplace: bool
    nobackup: bool
    list_styles: bool
    version: bool
    verbose: bool


def _split_names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns a tuple of (options, explicit_flags) where `explicit_flags` tracks
    which flags the user explicitly passed (for config merge precedence).
    """
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=str,
        default=["-"],
        help="Input files (default: '-' for stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="-",
        help="Output file (use '-' for stdout)",
    )
    parser.add_argument(
        "-b",
        "--backward",
        action="store_true",
        help="Cycle backward through the styles instead of forward",
    )
    parser.add_argument(
        "-n",
        "--steps",
        type=int,
        default=1,
        help="Number of cycle steps to apply (default: %(default)s)",
    )
    parser.add_argument(
        "--cycle",
        type=_split_names,
        dest="case_cycle",
        default=None,
        metavar="NAMES",
        help="Comma-separated style order, e.g. 'original,const,camel,snake,kebab'. "
        "'original' is always included",
    )
    parser.add_argument(
        "-l",
        "--lines",
        action="store_true",
        help="Treat each line as a separate selection",
    )
    parser.add_argument(
        "-i", "--inplace", action="store_true", help="Edit the file in place (ignores --output)"
    )
    parser.add_argument(
        "--nobackup",
        action="store_true",
        help="Do not make a backup of the original file when using --inplace",
    )
    parser.add_argument(
        "--list-styles",
        action="store_true",
        dest="list_styles",
        help="Print the effective style cycle with a sample of each style and exit",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each step to stderr",
    )
    opts = parser.parse_args(args)

    # Re-parse with sentinel defaults to detect which config-backed flags were supplied.
    _SENTINEL = object()
    sentinel_parser = argparse.ArgumentParser(add_help=False)
    sentinel_parser.add_argument("--cycle", dest="case_cycle", default=_SENTINEL)
    sentinel_parser.add_argument("-l", "--lines", action="store_true", default=_SENTINEL)
    sentinel_opts, _ = sentinel_parser.parse_known_args(args if args is not None else sys.argv[1:])

    explicit_flags: set[str] = set()
    for name in ("case_cycle", "lines"):
        if getattr(sentinel_opts, name, _SENTINEL) is not _SENTINEL:
            explicit_flags.add(name)

    return (
        Options(
            files=opts.files or ["-"],
            output=opts.output,
            backward=opts.backward,
            steps=opts.steps,
            case_cycle=opts.case_cycle,
            lines=opts.lines,
            inplace=opts.inplace,
            nobackup=opts.nobackup,
            list_styles=opts.list_styles,
            version=opts.version,
            verbose=opts.verbose,
        ),
        explicit_flags,
    )


def _apply_config(options: Options, config: CaseCycleConfig, explicit_flags: set[str]) -> None:
    """
    Fill in settings from the config file. Flags given on the command line win over
    the config file, which wins over built-in defaults.
    """
    if config.case_cycle is not None and "case_cycle" not in explicit_flags:
        options.case_cycle = config.case_cycle
    if config.lines is not None and "lines" not in explicit_flags:
        options.lines = config.lines


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the casecycle CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("casecycle")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config_path = find_config_file(Path.cwd())
    if config_path:
        try:
            config = load_config(config_path)
        except Exception as e:
            print(f"Error: Could not read config {config_path}: {e}", file=sys.stderr)
            return 1
        _apply_config(options, config, explicit_flags)

    order = normalize_case_cycle(options.case_cycle)

    if options.list_styles:
        for variant in order:
            print(f"{variant.value:<10} {convert_text(_SAMPLE_TEXT, variant)}")
        return 0

    if options.steps < 0:
        print("Error: --steps must be zero or more", file=sys.stderr)
        return 1

    if len(options.files) > 1 and options.output != "-" and not options.inplace:
        print("Error: --output takes a single input file", file=sys.stderr)
        return 1

    direction = Direction.backward if options.backward else Direction.forward
    try:
        for path in options.files:
            variant = cycle_file(
                path,
                output=options.output,
                inplace=options.inplace,
                nobackup=options.nobackup,
                steps=options.steps,
                direction=direction,
                order=order,
                lines=options.lines,
            )
            print(f"Converted to {variant.value}", file=sys.stderr)
    except ValueError as e:
        # Errors like using --inplace with stdin.
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
