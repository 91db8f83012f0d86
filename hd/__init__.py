"""
hd - display binary files in hexadecimal and ASCII.
"""

__version__ = '1.0.0'

from .byte_source import ByteSource, FileByteSource, MemoryByteSource
from .config import DumpConfig
from .duplicates import Decision, DuplicateDetector
from .engine import DumpEngine, dumps, run
from .errors import (
    AllocationFailure,
    EngineError,
    InvalidConfig,
    OffsetBeyondEnd,
    SeekFailed,
    SourceError,
    SourceUnavailable,
)
from .formatter import Row, format_marker, format_row
