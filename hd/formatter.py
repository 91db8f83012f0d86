"""
Row formatting: address field, grouped hex bytes and printable-ASCII column.

Example line for a 16-byte row:

    00000000:  48 65 6c 6c 6f 2c 20 77  6f 72 6c 64 21 0a 00 01  Hello, world!...
"""

from dataclasses import dataclass

from .config import DumpConfig

GROUP_SIZE = 8
MARKER = " * "

# Lookup tables indexed by byte value
_HEX = [f'{i:02x} ' for i in range(256)]
_PRINTABLE = ['.'] * 256
for _i in range(0x20, 0x7f):
    _PRINTABLE[_i] = chr(_i)
del _i

_BLANK_HEX = '   '


@dataclass(frozen=True)
class Row:
    """One row of the dump: its absolute start address and the bytes read for it."""

    address: int
    data: bytes

    @property
    def valid_length(self) -> int:
        return len(self.data)


def _line_end(config: DumpConfig) -> str:
    return '\n\n' if config.double_space else '\n'


def format_address(address: int, wide_address: bool) -> str:
    return f'{address:016x}: ' if wide_address else f'{address:08x}: '


def format_row(row: Row, config: DumpConfig, wide_address: bool) -> str:
    """
    Format one row as a line of text.

    Columns past the row's valid bytes are padded with blanks so a short
    final row stays aligned with the full rows above it.

    Args:
        row: Row to render, at most config.width bytes long
        config: Dump configuration (width and double spacing are used)
        wide_address: Render the address as 16 hex digits instead of 8

    Returns:
        The line including its newline (two newlines when double-spacing)
    """
    width = config.width
    data = row.data
    valid = len(data)

    parts = [format_address(row.address, wide_address)]
    for i in range(width):
        if i % GROUP_SIZE == 0:
            parts.append(' ')
        parts.append(_HEX[data[i]] if i < valid else _BLANK_HEX)

    parts.append(' ')
    parts.extend(_PRINTABLE[b] for b in data)
    parts.append(' ' * (width - valid))
    parts.append(_line_end(config))
    return ''.join(parts)


def format_marker(config: DumpConfig) -> str:
    """Line printed in place of a run of duplicate rows."""
    return MARKER + _line_end(config)
