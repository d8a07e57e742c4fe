"""
Single-character lookahead over an in-memory document.

The reader never needs more than one pending pushback: it marks the cursor,
reads ahead, then either commits what it read or resets to the mark.
"""

from typing import Any

from ._errors import EndOfInputError
from ._errors import Position


class LookaheadSource:
    """
    Cursor over document text with mark/reset pushback.

    Reading past the last character raises EndOfInputError instead of
    producing a sentinel.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos: Position = 0
        self.length = len(text)
        self._mark: Position | None = None
        self.closed = False

    def __enter__(self) -> "LookaheadSource":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    @property
    def at_end(self) -> bool:
        return self.pos >= self.length

    def peek_mark(self) -> None:
        """Remembers the current position for a later reset()."""
        if self._mark is not None:
            raise RuntimeError("peek_mark() called while a mark is pending")
        self._mark = self.pos

    def read_char(self) -> str:
        """Consumes and returns the next character."""
        if self.closed:
            raise ValueError("read from a closed source")
        if self.pos >= self.length:
            raise EndOfInputError(self.text, self.pos)
        char = self.text[self.pos]
        self.pos += 1
        return char

    def reset(self) -> None:
        """Rewinds to the pending mark, un-reading everything since."""
        if self._mark is None:
            raise RuntimeError("reset() called without a pending mark")
        self.pos = self._mark
        self._mark = None

    def commit(self) -> None:
        """Keeps everything read since the mark and drops the mark."""
        self._mark = None

    def close(self) -> None:
        """Releases the document text; later reads raise ValueError."""
        self.closed = True
        self.text = ""
        self.length = 0
        self._mark = None
