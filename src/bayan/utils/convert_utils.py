"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
Size strings for the --min-size and --block-size options, and their display form.
"""
import re

_SIZE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*([KMG]?)B?", re.IGNORECASE)
_MULTIPLIERS = {"": 1, "K": 1024, "M": 1024 ** 2, "G": 1024 ** 3}
_DISPLAY_UNITS = ("K", "M", "G")


class ConvertUtils:
    @staticmethod
    def parse_size(size_str: str) -> int:
        """
        Parse a byte count with an optional binary suffix: '512', '4K', '64KB', '1.5M', '2G'.
        Fractions are truncated to whole bytes. Raises ValueError for anything else,
        including negative numbers.
        """
        text = str(size_str).strip()
        match = _SIZE_PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(
                f"Invalid size format: '{text}'. Use a byte count or a K/M/G suffix (512, 4K, 1.5MB)"
            )
        number, unit = match.groups()
        return int(float(number) * _MULTIPLIERS[unit.upper()])

    @staticmethod
    def format_size(size_bytes: int) -> str:
        """
        Short form accepted back by parse_size: 4096 -> '4K', 1536 -> '1.50K', 700 -> '700B'.
        """
        if size_bytes < 1024:
            return f"{max(size_bytes, 0)}B"

        value = float(size_bytes)
        unit = ""
        for unit in _DISPLAY_UNITS:
            value /= 1024
            if value < 1024:
                break

        if value.is_integer():
            return f"{int(value)}{unit}"
        return f"{value:.2f}{unit}"
