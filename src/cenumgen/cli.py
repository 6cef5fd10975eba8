"""Command-line interface for cenumgen."""

import argparse
import logging
import sys

from .config import resolve_config, settings
from .exceptions import CEnumGenError, ConfigurationError
from .generator import generate


class GeneratorArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad arguments as ConfigurationError."""

    def error(self, message):
        raise ConfigurationError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = GeneratorArgumentParser(
        prog="cenumgen",
        description="Generate a Swift enum from the #define constants of a C header",
    )
    parser.add_argument("--input", help="C header to scan")
    parser.add_argument("--output", help="Swift file to write")
    parser.add_argument("--enum", help="Name of the generated enum")
    parser.add_argument(
        "--match", help="Only include #define names that match this regex"
    )
    parser.add_argument(
        "--drop-prefix",
        action="append",
        metavar="PREFIX",
        help="Drop this prefix from the C name (repeatable)",
    )
    parser.add_argument(
        "--drop-suffix",
        action="append",
        metavar="SUFFIX",
        help="Drop this suffix from the C name (repeatable)",
    )
    parser.add_argument(
        "--case-style",
        metavar="STYLE",
        help="lowerCamel (default), upperCamel, keep",
    )
    parser.add_argument(
        "--access",
        metavar="LEVEL",
        help="public, internal, package, fileprivate, private",
    )
    parser.add_argument(
        "--import",
        dest="imports",
        action="append",
        metavar="MODULE",
        help="Add an import to the generated file (repeatable)",
    )
    parser.add_argument("--config", help="Load settings from a JSON config file")
    parser.add_argument(
        "--expand",
        action="store_true",
        help="Write the RawRepresentable extension instead of the macro markers",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def configure_logging(verbose: bool):
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(name)s: %(message)s")


def report_warnings(warnings: list[str]):
    for warning in warnings:
        print(f"warning: {warning}", file=sys.stderr)


def main(argv=None):
    """Main entry point for the CLI."""
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
        configure_logging(args.verbose)
        config = resolve_config(args)
        result = generate(config)
    except CEnumGenError as e:
        report_warnings(e.warnings)
        print(f"error: {e}", file=sys.stderr)
        parser.print_help(sys.stderr)
        sys.exit(1)

    report_warnings(result.warnings)


if __name__ == "__main__":
    main()
