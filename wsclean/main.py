"""
Main module for wsclean.

Contains the main function and argument parsing for the wsclean command-line interface.
"""

import argparse
import sys

from argparse_formatter import FlexiFormatter

from ._version import __version__
from .cleaning import FileReport, FileStatus, pluralize, process_file
from .core import (
    DEFAULT_TAB_SIZE,
    CleanerConfig,
    CleaningError,
    ConfigurationError,
)

_RED = "\033[91m"
_YELLOW = "\033[93m"
_RESET = "\033[0m"


def _colour(text: str, code: str) -> str:
    if sys.stderr.isatty():
        return f"{code}{text}{_RESET}"
    return text


def _print_error(message: str) -> None:
    print(_colour(message, _RED), file=sys.stderr)


def _print_warning(message: str) -> None:
    print(f"{_colour('[Warning]:', _YELLOW)} {message}", file=sys.stderr)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"tab size must be at least 1, got {number}")
    return number


def create_parser():
    """Create and return the argument parser."""

    parser = argparse.ArgumentParser(
        prog="wsclean",
        description="wsclean: trim trailing whitespace and convert indentation in text files",
        formatter_class=FlexiFormatter,
        epilog="""
Files are cleaned in place. Binary files (any byte outside 0x09-0x7E in the
first 1024 bytes) and anything that is not a regular file are skipped.

Examples:

wsclean notes.txt
wsclean -e -ts 2 src/*.py
wsclean -c -t -at Makefile
""",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("files", nargs="*", help="Files to clean in place")

    indent_group = parser.add_argument_group("Indentation options")
    indent_group.add_argument(
        "-e",
        "--expand",
        action="store_true",
        default=False,
        help="Expand leading tabs into spaces",
    )
    indent_group.add_argument(
        "-c",
        "--contract",
        action="store_true",
        default=False,
        help="Contract leading runs of spaces into tabs",
    )
    indent_group.add_argument(
        "-ts",
        "--tab-size",
        type=_positive_int,
        default=DEFAULT_TAB_SIZE,
        help=f"Number of spaces per tab (default: {DEFAULT_TAB_SIZE})",
    )

    eof_group = parser.add_argument_group("End of file options")
    eof_group.add_argument(
        "-t",
        "--strip-trailing-blank",
        action="store_true",
        default=False,
        help="Strip blank lines from the end of the file",
    )
    eof_group.add_argument(
        "-at",
        "--add-trailing-newline",
        action="store_true",
        default=False,
        help="Ensure the file ends with a single newline",
    )

    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        default=False,
        help="Report what would change without writing any files",
    )

    return parser


def format_modifications(filename, trims: int, tabs: int, dry_run=False) -> str:
    """
    Summarise the changes made to a file, or to all files.

    Args:
        filename (str): File name, or an empty string for the overall total
        trims (int): Lines with trailing whitespace removed
        tabs (int): Lines with converted indentation
        dry_run (bool): Phrase the summary as a prediction

    Returns:
        str: A single human-readable line
    """
    verb = "Would fix" if dry_run else "Fixed"
    message = f"{verb} {trims} {pluralize('line', trims)}"
    if tabs > 0:
        message += f" and {tabs} {pluralize('tab', tabs)}"
    if filename:
        message += f" in {filename}"
    return message


def _report_file(report: FileReport) -> None:
    if report.status is FileStatus.NOT_REGULAR:
        print(f"Couldn't clean {report.path}")
    elif report.status is FileStatus.BINARY:
        print(f"Didn't clean binary file {report.path}")
    elif report.status is FileStatus.FAILED:
        _print_warning(report.error)
    for notice in report.notices:
        print(f"{notice} in {report.path}")


def clean_files(files, config: CleanerConfig):
    """
    Clean each file in turn and print per-file and total summaries.

    Args:
        files (list[str]): Paths to clean
        config (CleanerConfig): Active configuration

    Returns:
        tuple[int, int]: Total trimmed lines and converted tab lines
    """
    total_trims, total_tabs = 0, 0
    for filename in files:
        try:
            report = process_file(filename, config)
        except CleaningError as exc:
            report = FileReport(filename, FileStatus.FAILED, error=str(exc))

        _report_file(report)
        print(
            format_modifications(
                filename, report.trimmed, report.tabs, dry_run=config.dry_run
            )
        )
        total_trims += report.trimmed
        total_tabs += report.tabs

    print(format_modifications("", total_trims, total_tabs, dry_run=config.dry_run))
    return total_trims, total_tabs


def main(sysargs=None):
    """Entry point for the wsclean CLI."""
    if sysargs is None:
        sysargs = sys.argv[1:]

    parser = create_parser()

    try:
        args = parser.parse_args(sysargs)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 0
        return code

    try:
        config = CleanerConfig.from_args(args)
    except ConfigurationError as e:
        _print_error(str(e))
        return 1

    if not args.files:
        print("No files to work on.")
        return 0

    clean_files(args.files, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
