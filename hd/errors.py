"""
Error kinds raised by the dump engine and its byte sources.

Each kind carries the process exit code the command-line front end maps it to.
"""

from typing import Optional


class EngineError(Exception):
    """Base class for every failure that ends a dump pass."""

    exit_code = 1

    def __init__(self, message: str, strerror: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.strerror = strerror

    def __str__(self) -> str:
        if self.strerror:
            return f"{self.message}: {self.strerror}"
        return self.message


class InvalidConfig(EngineError):
    """Width, offset or count failed validation."""

    exit_code = 1


class OffsetBeyondEnd(EngineError):
    """Requested start offset lies past the end of the source."""

    exit_code = 2


class AllocationFailure(EngineError):
    """The read buffer could not be allocated."""

    exit_code = 3


class SourceError(EngineError):
    """I/O failure while reading the byte source."""

    exit_code = 2

    @classmethod
    def from_os_error(cls, message: str, err: OSError) -> "SourceError":
        return cls(message, err.strerror or str(err))


class SourceUnavailable(SourceError):
    """The source could not be opened or its size determined."""


class SeekFailed(SourceError):
    """The initial seek to the start offset failed."""
