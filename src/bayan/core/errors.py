"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exceptions raised by the bayan core engine.
"""


class ConfigurationError(ValueError):
    """Invalid scan parameters: bad sizes, unknown hash algorithm, malformed name pattern."""


class BlockReadError(OSError):
    """A file block could not be read from storage (vanished file, permission denied, ...).

    End of file is not an error: the block cache returns None for it.
    """

    def __init__(self, path: str, offset: int, reason: str):
        super().__init__(f"Cannot read {path} at offset {offset}: {reason}")
        self.path = path
        self.offset = offset
        self.reason = reason
