"""Command-line interface.

Usage:
    depcycle <filename> [--format {rust,simple,json}] [--stats] [--locale CODE]
                        [--fail-on-cycle] [-v]

Prints "Cyclic dependency" or "No Cyclic dependency" on stdout.

Exit codes:
    0: The check ran (a cycle was found or not)
    1: Invalid invocation, unreadable file, parse or resource error
    3: A cycle was found and --fail-on-cycle was given

Python 3.13+.
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from depcycle.check import check_file
from depcycle.config import CheckConfig
from depcycle.constants import DEFAULT_ENCODING, DEFAULT_LOCALE
from depcycle.diagnostics import (
    DepcycleError,
    DiagnosticFormatter,
    ErrorTemplate,
    InputError,
    OutputFormat,
)
from depcycle.report import format_summary

__all__ = ["EXIT_CYCLE", "EXIT_ERROR", "EXIT_OK", "build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
# argparse already uses 2 for usage errors
EXIT_CYCLE = 3

PROG = "depcycle"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Report whether a dependency file declares a cyclic dependency.",
        epilog=(
            "Each line of the file has the form '<name>: <dep>, <dep>, ...'.\n"
            "Names only mentioned as dependencies need no line of their own."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Collected as a list so a wrong count gets the dedicated message
    parser.add_argument("files", nargs="*", metavar="filename", help="dependency file")
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="diagnostic output format for errors (default: rust)",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help=f"input file encoding (default: {DEFAULT_ENCODING})",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="append node and edge counts to the verdict",
    )
    parser.add_argument(
        "--locale",
        default=DEFAULT_LOCALE,
        help=f"locale for --stats numbers (default: {DEFAULT_LOCALE})",
    )
    parser.add_argument(
        "--fail-on-cycle",
        action="store_true",
        help=f"exit with status {EXIT_CYCLE} when a cycle is found",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log debug information to stderr",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _report_error(error: DepcycleError, formatter: DiagnosticFormatter) -> None:
    if isinstance(error, InputError) or error.diagnostic is None:
        # Input errors keep their plain wording
        print(error.diagnostic.message if error.diagnostic else error, file=sys.stderr)
    else:
        print(formatter.format(error.diagnostic), file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the process exit status."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    formatter = DiagnosticFormatter(
        output_format=OutputFormat(args.format),
        color=sys.stderr.isatty(),
    )

    try:
        config = CheckConfig(encoding=args.encoding)
    except ValueError as e:
        print(f"{PROG}: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        if len(args.files) != 1:
            raise InputError(ErrorTemplate.invalid_argument_count(PROG))
        result = check_file(args.files[0], config)
    except DepcycleError as e:
        logger.debug("Check failed", exc_info=True)
        _report_error(e, formatter)
        return EXIT_ERROR

    if args.stats:
        print(format_summary(result, args.locale))
    else:
        print(result.message)

    if result.has_cycle and args.fail_on_cycle:
        return EXIT_CYCLE
    return EXIT_OK
