"""
Tests for size strings — used for the minimum size and block size options.
"""
import pytest
from bayan.utils.convert_utils import ConvertUtils


class TestParseSize:
    """Test parsing of option values such as "4K" into bytes."""

    def test_bytes_without_suffix(self):
        """Plain numbers should be interpreted as bytes."""
        assert ConvertUtils.parse_size("0") == 0
        assert ConvertUtils.parse_size("1") == 1
        assert ConvertUtils.parse_size("4096") == 4096

    def test_binary_suffixes(self):
        assert ConvertUtils.parse_size("1B") == 1
        assert ConvertUtils.parse_size("4K") == 4096
        assert ConvertUtils.parse_size("64KB") == 64 * 1024
        assert ConvertUtils.parse_size("1.5K") == 1536
        assert ConvertUtils.parse_size("1M") == 1024 * 1024
        assert ConvertUtils.parse_size("2G") == 2 * 1024 ** 3

    def test_case_and_whitespace(self):
        assert ConvertUtils.parse_size(" 64kb ") == 64 * 1024
        assert ConvertUtils.parse_size("\t1 Mb\n") == 1024 * 1024

    def test_fraction_truncated(self):
        assert ConvertUtils.parse_size("0.5") == 0
        assert ConvertUtils.parse_size("1.0001K") == 1024

    @pytest.mark.parametrize("value", ["", "big", "-1", "-1K", "1.2.3KB", "1KB2", "1XB", "KB", "1TB"])
    def test_rejects_invalid_formats(self, value):
        with pytest.raises(ValueError, match="Invalid size format"):
            ConvertUtils.parse_size(value)


class TestFormatSize:
    """Test the short form used in CLI messages."""

    def test_bytes(self):
        assert ConvertUtils.format_size(0) == "0B"
        assert ConvertUtils.format_size(1023) == "1023B"

    def test_whole_units_without_decimals(self):
        assert ConvertUtils.format_size(4096) == "4K"
        assert ConvertUtils.format_size(1024 * 1024) == "1M"
        assert ConvertUtils.format_size(1024 ** 3) == "1G"

    def test_fractional_units(self):
        assert ConvertUtils.format_size(1536) == "1.50K"
        assert ConvertUtils.format_size(1500) == "1.46K"

    def test_largest_unit_is_gigabytes(self):
        assert ConvertUtils.format_size(1024 ** 4) == "1024G"

    @pytest.mark.parametrize("size", [512, 4096, 65536, 3 * 1024 ** 2])
    def test_output_parses_back(self, size):
        assert ConvertUtils.parse_size(ConvertUtils.format_size(size)) == size
