"""
Dump configuration.
"""

from dataclasses import dataclass

from .errors import InvalidConfig


@dataclass(frozen=True)
class DumpConfig:
    """Display parameters for one dump pass.

    Attributes:
        width: Bytes per row
        offset: Byte offset to start dumping from
        count: Maximum number of bytes to dump (0 = rest of the source)
        skip_duplicates: Collapse runs of identical full-width rows
        double_space: Follow every emitted line with a blank line
    """

    width: int = 16
    offset: int = 0
    count: int = 0
    skip_duplicates: bool = True
    double_space: bool = False

    def validate(self) -> "DumpConfig":
        """Raise InvalidConfig if any field is out of range."""
        if self.width < 1:
            raise InvalidConfig(f"Invalid width: {self.width} (must be at least 1)")
        if self.offset < 0:
            raise InvalidConfig(f"Invalid offset: {self.offset} (must not be negative)")
        if self.count < 0:
            raise InvalidConfig(f"Invalid count: {self.count} (must not be negative)")
        return self
