"""
Byte sources the dump engine reads from.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, Union

from .errors import SourceError, SourceUnavailable

logger = logging.getLogger(__name__)


class ByteSource(Protocol):
    """Sequential, seekable read access to a finite byte range."""

    def size(self) -> int:
        ...

    def seek(self, position: int) -> None:
        ...

    def read(self, max_bytes: int) -> bytes:
        ...


class FileByteSource:
    """Byte source backed by a file on disk or an open binary stream."""

    def __init__(self, file_path: Union[str, Path, None] = None,
                 stream: Optional[BinaryIO] = None):
        """
        Initialize file source.

        Args:
            file_path: Path to the file to open in __enter__
            stream: Already open binary stream to read instead (not closed on exit)
        """
        if (file_path is None) == (stream is None):
            raise ValueError("Exactly one of file_path or stream is required")
        self.file_path = Path(file_path) if file_path is not None else None
        self.file: Optional[BinaryIO] = stream
        self._owns_file = stream is None

    def __enter__(self):
        """Context manager entry."""
        if self._owns_file:
            try:
                self.file = open(self.file_path, 'rb')
            except OSError as e:
                raise SourceUnavailable.from_os_error(
                    f"Cannot open {self.file_path}", e) from e
            logger.debug("Opened %s", self.file_path)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if self._owns_file and self.file:
            self.file.close()
            self.file = None

    @property
    def name(self) -> str:
        if self.file_path is not None:
            return str(self.file_path)
        return getattr(self.file, 'name', '<stream>')

    def _require_open(self) -> BinaryIO:
        if not self.file:
            raise RuntimeError("File not open. Use as context manager.")
        return self.file

    def size(self) -> int:
        """Get total file size."""
        f = self._require_open()
        try:
            pos = f.tell()
            size = f.seek(0, io.SEEK_END)
            f.seek(pos)
        except (OSError, ValueError) as e:
            raise SourceUnavailable(f"Cannot determine size of {self.name}", str(e)) from e
        return size

    def seek(self, position: int) -> None:
        """Move the read cursor to an absolute position."""
        f = self._require_open()
        size = self.size()
        if position > size:
            raise SourceError(f"Cannot seek {self.name} to {position:#x}, "
                              f"size is {size:#x}")
        try:
            f.seek(position)
        except OSError as e:
            raise SourceError.from_os_error(f"Cannot seek {self.name}", e) from e
        logger.debug("Seeked %s to %#x", self.name, position)

    def read(self, max_bytes: int) -> bytes:
        """Read up to max_bytes; fewer only at end of file."""
        f = self._require_open()
        parts = []
        wanted = max_bytes
        try:
            while wanted > 0:
                data = f.read(wanted)
                if not data:
                    break
                parts.append(data)
                wanted -= len(data)
        except OSError as e:
            raise SourceError.from_os_error(f"Cannot read {self.name}", e) from e
        if len(parts) == 1:
            return parts[0]
        return b''.join(parts)


class MemoryByteSource:
    """Byte source over an in-memory buffer."""

    def __init__(self, data):
        self._data = memoryview(data).cast('B')
        self._pos = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._pos = 0

    def size(self) -> int:
        return len(self._data)

    def seek(self, position: int) -> None:
        if position < 0 or position > len(self._data):
            raise SourceError(f"Cannot seek to {position:#x}, size is {len(self._data):#x}")
        self._pos = position

    def read(self, max_bytes: int) -> bytes:
        data = self._data[self._pos:self._pos + max_bytes].tobytes()
        self._pos += len(data)
        return data
