"""
Whitespace cleaning routines for wsclean.

Splits file contents into lines, trims trailing whitespace, converts
leading indentation between tabs and spaces, applies the trailing blank
line policy and writes the result back in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .core import CleanerConfig, CleaningError, is_regular_file, is_text

TRAILING = " \t"
# Latin-1 maps every byte to exactly one character, so lengths count bytes
# and untouched bytes are written back unchanged.
ENCODING = "latin-1"


class FileStatus(Enum):
    CLEANED = "cleaned"
    UNCHANGED = "unchanged"
    EMPTY = "empty"
    NOT_REGULAR = "not_regular"
    BINARY = "binary"
    FAILED = "failed"


@dataclass
class CleanStats:
    """Counts gathered while cleaning one buffer."""

    trimmed: int = 0
    tabs: int = 0
    notices: list[str] = field(default_factory=list)


@dataclass
class FileReport:
    """Outcome of processing a single path."""

    path: str
    status: FileStatus
    trimmed: int = 0
    tabs: int = 0
    notices: list[str] = field(default_factory=list)
    error: str | None = None


def pluralize(word: str, count: int) -> str:
    return word if count == 1 else word + "s"


def split_lines(text: str) -> list[str]:
    """
    Split text on newlines.

    A single trailing newline is dropped first, so "a\\nb\\n" gives
    ["a", "b"] rather than ending in an empty element.
    """
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def join_lines(lines: list[str]) -> str:
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def trim_trailing(line: str) -> str:
    return line.rstrip(TRAILING)


def expand_tabs(line: str, tab_size: int) -> str:
    """
    Replace each leading tab with tab_size spaces.

    Only the run of tabs at the very start of the line is expanded; the
    first other character ends the scan and the rest is copied as is.
    """
    rest = line.lstrip("\t")
    leading = len(line) - len(rest)
    return " " * (leading * tab_size) + rest


def contract_tabs(line: str, tab_size: int) -> str:
    """
    Replace each leading run of exactly tab_size spaces with a tab.

    Leftover spaces shorter than a full run stay where they are.
    """
    indent = " " * tab_size
    runs = 0
    while line.startswith(indent):
        line = line[tab_size:]
        runs += 1
    return "\t" * runs + line


def _is_blank(line: str) -> bool:
    return not line.strip(TRAILING)


def strip_trailing_blank_lines(lines: list[str]) -> list[str]:
    end = len(lines)
    while end > 0 and _is_blank(lines[end - 1]):
        end -= 1
    return lines[:end]


def apply_newline_policy(
    lines: list[str], terminated: bool, config: CleanerConfig, stats: CleanStats
) -> list[str]:
    """
    Apply the trailing blank line options.

    Every rewritten file still ends in a newline; the options only decide
    which trailing lines survive and which changes get a notice.

    Args:
        lines (list[str]): Lines with the final terminator removed
        terminated (bool): Whether the original text ended in a newline
        config (CleanerConfig): Active configuration
        stats (CleanStats): Receives a notice for every change

    Returns:
        list[str]: Adjusted lines
    """
    if config.strip_trailing_blank:
        stripped = strip_trailing_blank_lines(lines)
        removed = len(lines) - len(stripped)
        if removed:
            stats.notices.append(
                f"Stripped {removed} trailing blank {pluralize('line', removed)}"
            )
        lines = stripped

    if config.ensure_trailing_newline and lines and not terminated:
        stats.notices.append("Added trailing newline")
    return lines


def clean_line(line: str, config: CleanerConfig, stats: CleanStats) -> str:
    trimmed = trim_trailing(line)
    if len(trimmed) < len(line):
        stats.trimmed += 1

    if config.contract_tabs:
        converted = contract_tabs(trimmed, config.tab_size)
    elif config.expand_tabs:
        converted = expand_tabs(trimmed, config.tab_size)
    else:
        return trimmed

    if len(converted) != len(trimmed):
        stats.tabs += 1
    return converted


def clean_text(text: str, config: CleanerConfig) -> tuple[str, CleanStats]:
    """
    Clean a whole document.

    The trailing newline policy runs first, then each line is trimmed and
    has its indentation converted.

    Args:
        text (str): Decoded file contents
        config (CleanerConfig): Active configuration

    Returns:
        tuple[str, CleanStats]: Cleaned text and the collected counts
    """
    stats = CleanStats()
    lines = apply_newline_policy(
        split_lines(text), text.endswith("\n"), config, stats
    )
    cleaned = [clean_line(line, config, stats) for line in lines]
    return join_lines(cleaned), stats


def process_file(path, config: CleanerConfig) -> FileReport:
    """
    Clean one file in place.

    Args:
        path (str | Path): File to clean
        config (CleanerConfig): Active configuration

    Returns:
        FileReport: What happened to the file

    Raises:
        CleaningError: If the file cannot be read or written
    """
    name = str(path)
    if not is_regular_file(path):
        return FileReport(name, FileStatus.NOT_REGULAR)

    target = Path(path)
    try:
        data = target.read_bytes()
    except OSError as exc:
        raise CleaningError(f"couldn't read {name}: {exc}", path=name) from exc

    if not is_text(data):
        return FileReport(name, FileStatus.BINARY)
    if not data:
        return FileReport(name, FileStatus.EMPTY)

    text, stats = clean_text(data.decode(ENCODING), config)
    output = text.encode(ENCODING)
    report = FileReport(
        name,
        FileStatus.CLEANED if output != data else FileStatus.UNCHANGED,
        trimmed=stats.trimmed,
        tabs=stats.tabs,
        notices=stats.notices,
    )
    if report.status is FileStatus.UNCHANGED or config.dry_run:
        return report

    try:
        target.write_bytes(output)
    except OSError as exc:
        raise CleaningError(f"couldn't write {name}: {exc}", path=name) from exc
    return report
