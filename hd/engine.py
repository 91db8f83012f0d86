"""
Dump engine: reads a byte source in chunks and emits formatted rows.
"""

import logging
from typing import Callable, Optional, Tuple

from .byte_source import ByteSource, MemoryByteSource
from .config import DumpConfig
from .duplicates import Decision, DuplicateDetector
from .errors import AllocationFailure, OffsetBeyondEnd, SeekFailed, SourceError, SourceUnavailable
from .formatter import Row, format_marker, format_row

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1 << 20
NARROW_ADDRESS_MAX = 0xFFFFFFFF

Sink = Callable[[str], object]


class DumpEngine:
    """Runs one dump pass per call to run()."""

    def __init__(self, config: DumpConfig):
        """
        Initialize engine.

        Args:
            config: Display parameters, validated when run() starts
        """
        self.config = config

    def effective_range(self, size: int) -> Tuple[int, int]:
        """Clamp offset and count against the source size.

        Returns:
            (offset, effective_count)
        """
        offset = self.config.offset
        if offset > size:
            raise OffsetBeyondEnd(f"Offset {offset:#x} is beyond end of source (size {size:#x})")
        available = size - offset
        count = min(self.config.count or available, available)
        return offset, count

    def chunk_bytes(self) -> int:
        """Bytes requested per read: a whole number of rows, at least one."""
        width = self.config.width
        return max(1, CHUNK_SIZE // width) * width

    def run(self, source: ByteSource, sink: Sink) -> None:
        """
        Dump the configured range of source, handing each line to sink.

        Raises:
            EngineError: On invalid configuration or any source failure. Lines
                already given to sink before the failure stay there.
        """
        config = self.config.validate()
        width = config.width

        try:
            size = source.size()
        except SourceError as e:
            raise SourceUnavailable(e.message, e.strerror) from e

        offset, remaining = self.effective_range(size)
        if remaining > 0 and offset > 0:
            try:
                source.seek(offset)
            except SourceError as e:
                raise SeekFailed(e.message, e.strerror) from e

        wide_address = (offset + remaining) > NARROW_ADDRESS_MAX
        chunk_size = self.chunk_bytes()
        logger.debug("Dumping %#x bytes from offset %#x (size %#x), %s addresses, "
                     "%d-byte chunks", remaining, offset, size,
                     'wide' if wide_address else 'narrow', chunk_size)

        detector = DuplicateDetector(width, config.skip_duplicates)
        marker = format_marker(config)
        address = offset
        rows = markers = 0

        while remaining > 0:
            request = min(chunk_size, remaining)
            try:
                data = source.read(request)
                for start in range(0, len(data), width):
                    row = Row(address, data[start:start + width])
                    decision = detector.feed(row)
                    if decision is Decision.PRINT:
                        sink(format_row(row, config, wide_address))
                        rows += 1
                    elif decision is Decision.EMIT_MARKER:
                        sink(marker)
                        markers += 1
                    address += width
            except MemoryError as e:
                raise AllocationFailure(f"Out of memory dumping {width}-byte rows "
                                        f"in {request:#x}-byte chunks") from e

            remaining -= len(data)
            if len(data) < request:
                break

        logger.debug("Emitted %d rows and %d duplicate markers", rows, markers)


def run(config: DumpConfig, source: ByteSource, sink: Sink) -> None:
    """Dump source with config, handing each formatted line to sink."""
    DumpEngine(config).run(source, sink)


def dumps(data, config: Optional[DumpConfig] = None) -> str:
    """Return the dump of an in-memory buffer as a single string."""
    lines = []
    with MemoryByteSource(data) as source:
        run(config or DumpConfig(), source, lines.append)
    return ''.join(lines)
