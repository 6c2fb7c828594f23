"""Tests for wsclean.core module."""

import os
from argparse import Namespace

import pytest

from wsclean.core import (
    BINARY_PROBE_SIZE,
    CleanerConfig,
    CleaningError,
    ConfigurationError,
    WsCleanError,
    is_regular_file,
    is_text,
)


def _namespace(**overrides):
    values = dict(
        expand=False,
        contract=False,
        tab_size=4,
        strip_trailing_blank=False,
        add_trailing_newline=False,
        dry_run=False,
    )
    values.update(overrides)
    return Namespace(**values)


class TestIsText:
    """Test the text/binary classifier."""

    def test_empty_buffer_is_text(self):
        assert is_text(b"")

    def test_printable_ascii_with_tabs_and_newlines(self):
        assert is_text(b"\tindent\nplain text ~\r\n")

    @pytest.mark.parametrize("byte", [0x00, 0x08, 0x7F, 0xC3, 0xFF])
    def test_out_of_range_byte_is_binary(self, byte):
        assert not is_text(b"abc" + bytes([byte]) + b"def")

    def test_only_probe_window_is_inspected(self):
        data = b"a" * BINARY_PROBE_SIZE + b"\x00"
        assert is_text(data)

    def test_last_byte_of_probe_window_counts(self):
        data = b"a" * (BINARY_PROBE_SIZE - 1) + b"\x00"
        assert not is_text(data)


class TestIsRegularFile:
    """Test the stat-based regular file check."""

    def test_regular_file(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x\n", encoding="utf-8")
        assert is_regular_file(target)
        assert is_regular_file(str(target))

    def test_directory_is_not_regular(self, tmp_path):
        assert not is_regular_file(tmp_path)

    def test_missing_file_is_not_regular(self, tmp_path):
        assert not is_regular_file(tmp_path / "missing.txt")

    @pytest.mark.skipif(not os.path.exists("/dev/null"), reason="no /dev/null")
    def test_device_is_not_regular(self):
        assert not is_regular_file("/dev/null")


class TestCleanerConfig:
    """Test CleanerConfig construction and validation."""

    def test_defaults(self):
        config = CleanerConfig()
        assert config.tab_size == 4
        assert not config.expand_tabs
        assert not config.contract_tabs

    def test_from_args_maps_fields(self):
        config = CleanerConfig.from_args(
            _namespace(contract=True, tab_size=8, add_trailing_newline=True)
        )
        assert config.contract_tabs
        assert config.tab_size == 8
        assert config.ensure_trailing_newline

    def test_from_args_rejects_expand_and_contract(self):
        with pytest.raises(ConfigurationError, match="Can't contract and expand"):
            CleanerConfig.from_args(_namespace(expand=True, contract=True))

    def test_validate_rejects_zero_tab_size(self):
        with pytest.raises(ConfigurationError, match="positive integer"):
            CleanerConfig(contract_tabs=True, tab_size=0).validate()

    def test_config_is_immutable(self):
        config = CleanerConfig()
        with pytest.raises(AttributeError):
            config.tab_size = 8


class TestExceptions:
    """Test custom exception classes."""

    def test_hierarchy(self):
        assert issubclass(ConfigurationError, WsCleanError)
        assert issubclass(CleaningError, WsCleanError)

    def test_cleaning_error_keeps_path(self):
        error = CleaningError("couldn't read x", path="x")
        assert str(error) == "couldn't read x"
        assert error.path == "x"
