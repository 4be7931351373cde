"""Alphabetically indexed sections for sectioned list views."""

from .indexing import EmptyKeyError, IndexOutOfRangeError, SectionIndex
from .models.section import Section, SortOrder

__all__ = ["EmptyKeyError", "IndexOutOfRangeError", "Section", "SectionIndex", "SortOrder"]
