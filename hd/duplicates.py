"""
Duplicate-row elision.
"""

import enum
from typing import Optional

from .formatter import Row


class Decision(enum.Enum):
    PRINT = "print"
    SUPPRESS = "suppress"
    EMIT_MARKER = "emit_marker"


class State(enum.Enum):
    NO_PRIOR_ROW = "no_prior_row"
    HAVE_ROW = "have_row"
    IN_DUPLICATE_RUN = "in_duplicate_run"


class DuplicateDetector:
    """
    Decides per row whether it is printed, replaced by the marker, or dropped.

    Only full-width rows take part in comparison. The first repeat of the
    previous full-width row yields EMIT_MARKER, further repeats SUPPRESS, and
    the first differing row is printed and becomes the new baseline.
    """

    def __init__(self, width: int, skip_duplicates: bool = True):
        self.width = width
        self.skip_duplicates = skip_duplicates
        self._state = State.NO_PRIOR_ROW
        self._previous: Optional[bytes] = None

    @property
    def state(self) -> State:
        return self._state

    @property
    def last_full_row(self) -> Optional[bytes]:
        return self._previous

    @property
    def in_duplicate_run(self) -> bool:
        return self._state is State.IN_DUPLICATE_RUN

    def feed(self, row: Row) -> Decision:
        if not self.skip_duplicates:
            return Decision.PRINT

        full = row.valid_length == self.width

        if self._state is State.NO_PRIOR_ROW:
            if full:
                self._previous = bytes(row.data)
                self._state = State.HAVE_ROW
            return Decision.PRINT

        if full and row.data == self._previous:
            if self._state is State.HAVE_ROW:
                self._state = State.IN_DUPLICATE_RUN
                return Decision.EMIT_MARKER
            return Decision.SUPPRESS

        # A short row is always the last one; it ends the run but never
        # becomes the baseline.
        if full:
            self._previous = bytes(row.data)
        self._state = State.HAVE_ROW
        return Decision.PRINT
