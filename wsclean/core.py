"""
Core configuration and helpers for wsclean.

Contains the cleaner configuration, the exception hierarchy and the
file classification routines.
"""

import os
import stat
from dataclasses import dataclass

BINARY_PROBE_SIZE = 1024
DEFAULT_TAB_SIZE = 4


@dataclass(frozen=True)
class CleanerConfig:
    """Options controlling how each file is cleaned."""

    expand_tabs: bool = False
    contract_tabs: bool = False
    tab_size: int = DEFAULT_TAB_SIZE
    strip_trailing_blank: bool = False
    ensure_trailing_newline: bool = False
    dry_run: bool = False

    @classmethod
    def from_args(cls, args):
        """
        Build a configuration from parsed command-line arguments.

        Args:
            args (argparse.Namespace): Parsed arguments

        Returns:
            CleanerConfig: Validated configuration
        """
        config = cls(
            expand_tabs=args.expand,
            contract_tabs=args.contract,
            tab_size=args.tab_size,
            strip_trailing_blank=args.strip_trailing_blank,
            ensure_trailing_newline=args.add_trailing_newline,
            dry_run=args.dry_run,
        )
        config.validate()
        return config

    def validate(self) -> None:
        """
        Check that the selected options can be used together.

        Raises:
            ConfigurationError: If the options conflict
        """
        if self.expand_tabs and self.contract_tabs:
            raise ConfigurationError("Can't contract and expand tabs.")
        if self.tab_size < 1:
            raise ConfigurationError(
                f"Tab size must be a positive integer, got {self.tab_size}"
            )


def is_text(data: bytes) -> bool:
    """
    Classify a buffer as text by inspecting its leading bytes.

    Args:
        data (bytes): File contents; only the first BINARY_PROBE_SIZE bytes
            are examined

    Returns:
        bool: False if any probed byte is below 0x09 or above 0x7E
    """
    return not any(b < 0x09 or b > 0x7E for b in data[:BINARY_PROBE_SIZE])


def is_regular_file(path) -> bool:
    """Return True if path can be stat'ed and is a regular file."""
    try:
        mode = os.stat(path).st_mode
    except (OSError, ValueError):
        return False
    return stat.S_ISREG(mode)


class WsCleanError(Exception):
    """Base exception class for wsclean."""

    pass


class ConfigurationError(WsCleanError):
    """Raised when command-line options conflict."""

    pass


class CleaningError(WsCleanError):
    """Raised when a file cannot be read or written."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path
