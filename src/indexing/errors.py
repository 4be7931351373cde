from __future__ import annotations

from typing import Any, Optional


class SectionIndexError(Exception):
    """Base class for errors raised by the section index."""


class EmptyKeyError(SectionIndexError, ValueError):
    """Raised when an element's compare string is empty and no header function is set."""

    def __init__(self, element: Any) -> None:
        super().__init__(f"Cannot derive a header from an empty compare string (element={element!r})")
        self.element = element


class IndexOutOfRangeError(SectionIndexError, IndexError):
    """Raised when a section or row coordinate is outside the index bounds."""

    def __init__(self, section: int, row: Optional[int] = None, *, limit: int) -> None:
        if row is None:
            message = f"Section {section} out of range (0..{limit - 1})"
        else:
            message = f"Row {row} out of range for section {section} (0..{limit - 1})"
        super().__init__(message)
        self.section = section
        self.row = row
        self.limit = limit


__all__ = ["EmptyKeyError", "IndexOutOfRangeError", "SectionIndexError"]
