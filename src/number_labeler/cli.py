"""
Command-Line Interface for the number labeler.

Prints one element of the labeled sequence per line on stdout.

Usage:
    number-labeler
    number-labeler 100 --preset fizzbuzz
    number-labeler 30 -r 4=Four -r 7=Seven
    number-labeler --preset fizzbuzz | head -n 20
"""

import argparse
import os
import sys
from typing import List, Optional

from number_labeler import __version__
from number_labeler.config import Config, create_default_config
from number_labeler.core.replacements import ReplacementPreset, parse_replacement
from number_labeler.exceptions import LabelerError
from number_labeler.logging_config import setup_logging
from number_labeler.main import LabelingPipeline


def _replacement_arg(text: str) -> tuple[int, str]:
    """argparse type for DIVISOR=LABEL."""
    try:
        return parse_replacement(text)
    except LabelerError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="number-labeler",
        description="Print numbers from 1 to an upper bound, replacing multiples of "
                    "chosen divisors with labels.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "upper_bound",
        nargs="?",
        type=int,
        default=sys.maxsize,
        help="Last number to print (default: %(default)s); negative prints nothing",
        metavar="UPPER_BOUND",
    )

    # Replacement options
    parser.add_argument(
        "-r", "--replace",
        type=_replacement_arg,
        action="append",
        default=[],
        help="Replace multiples of DIVISOR with LABEL (can be specified multiple times)",
        metavar="DIVISOR=LABEL",
    )

    parser.add_argument(
        "-p", "--preset",
        choices=[preset.value for preset in ReplacementPreset],
        default=ReplacementPreset.NONE.value,
        help="Built-in replacements applied before --replace (default: %(default)s)",
    )

    # Output options
    parser.add_argument(
        "-n", "--limit",
        type=int,
        help="Stop after printing N lines",
        metavar="N",
    )

    parser.add_argument(
        "--crlf",
        action="store_true",
        help="Terminate lines with CRLF instead of LF",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging on stderr",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log errors",
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for stderr output (default: %(default)s)",
    )

    return parser


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = create_parser()
    return parser.parse_args(args)


def args_to_config(args: argparse.Namespace) -> Config:
    """Convert parsed arguments to Config object."""
    config = create_default_config()

    config.upper_bound = args.upper_bound
    config.replacements = dict(args.replace)
    config.preset = ReplacementPreset(args.preset)
    config.limit = args.limit
    config.line_ending = "\r\n" if args.crlf else "\n"

    config.verbose = args.verbose
    config.quiet = args.quiet
    config.log_level = args.log_level
    if args.verbose:
        config.log_level = "DEBUG"
    elif args.quiet:
        config.log_level = "ERROR"

    return config


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    parsed = parse_args(args)
    config = args_to_config(parsed)

    # Validate configuration
    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Configuration error: {error}", file=sys.stderr)
        return 1

    setup_logging(level=config.log_level, verbose=config.verbose)

    result = LabelingPipeline(config).run(sys.stdout)

    if not result.success:
        for error in result.errors:
            print(f"Error: {error}", file=sys.stderr)
        return 1

    if result.interrupted:
        _silence_stdout()

    return 0


if __name__ == "__main__":
    sys.exit(main())
