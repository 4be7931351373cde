from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, List, Optional, Sequence

from src.models.section import E, ElementSlot, ReservedSlot, Section, SortOrder

from .builder import build_sections
from .errors import IndexOutOfRangeError
from .headers import HeaderCompare

logger = logging.getLogger(__name__)


class SectionIndex(Generic[E]):
    """Alphabetical sections over a list, addressed by (section, row) coordinates.

    A list view drives it with ``number_of_sections``, ``rows_in_section`` and
    ``title_for_header_in_section``, then ``element_at`` on selection. Rows and
    sections the view manages itself are kept aligned through
    ``reserve_section`` and ``reserve_row``.
    """

    def __init__(
        self,
        elements: Iterable[E] = (),
        *,
        key: Callable[[E], str] = str,
        header: Optional[Callable[[E], str]] = None,
        compare: Optional[HeaderCompare] = None,
        sort_order: Optional[SortOrder] = None,
    ) -> None:
        self._sections: List[Section[E]] = build_sections(
            elements,
            key=key,
            header=header,
            compare=compare,
            sort_order=sort_order,
        )

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        return f"SectionIndex(sections={self.section_titles()!r})"

    def number_of_sections(self) -> int:
        return len(self._sections)

    def rows_in_section(self, section: int) -> int:
        return self._section(section).element_count

    def title_for_header_in_section(self, section: int) -> Optional[str]:
        return self._section(section).header

    def element_at(self, section: int, row: int) -> Optional[E]:
        """Return the element at a coordinate, or None for a reserved row."""

        target = self._section(section)
        limit = self.addressable_rows(section)
        if not 0 <= row < limit:
            raise IndexOutOfRangeError(section, row, limit=limit)
        if row >= len(target.slots):
            return None
        slot = target.slots[row]
        if isinstance(slot, ElementSlot):
            return slot.value
        return None

    def addressable_rows(self, section: int) -> int:
        """Number of rows ``element_at`` accepts, including reserved ones."""

        target = self._section(section)
        if target.is_reserved:
            return max(target.element_count, len(target.slots))
        return len(target.slots)

    def is_reserved_row(self, section: int, row: int) -> bool:
        """True when the row is a placeholder rather than an indexed element."""

        target = self._section(section)
        limit = self.addressable_rows(section)
        if not 0 <= row < limit:
            raise IndexOutOfRangeError(section, row, limit=limit)
        return row >= len(target.slots) or isinstance(target.slots[row], ReservedSlot)

    def section_titles(self) -> List[Optional[str]]:
        return [section.header for section in self._sections]

    def elements_in_section(self, section: int) -> List[E]:
        return self._section(section).elements()

    def prepend_section(self, header: str, elements: Sequence[E]) -> None:
        """Insert a populated section before all others; header uniqueness is up to the caller."""

        items = list(elements)
        self._sections.insert(0, Section.from_elements(header, items))
        logger.debug("Prepended section %r with %d elements", header, len(items))

    def reserve_section(self, at_section: int, row_count: int) -> None:
        """Insert a header-less placeholder section reporting ``row_count`` rows."""

        if not 0 <= at_section <= len(self._sections):
            raise IndexOutOfRangeError(at_section, limit=len(self._sections) + 1)
        if row_count < 0:
            raise ValueError(f"row_count must be non-negative, got {row_count}")
        self._sections.insert(at_section, Section.reserved(row_count))
        logger.debug("Reserved section %d with %d rows", at_section, row_count)

    def reserve_row(self, section: int, row: int) -> None:
        """Insert a placeholder row, shifting later rows down.

        The section's reported row count is left unchanged; callers that add
        rows to the view account for them.
        """

        target = self._section(section)
        if not 0 <= row <= len(target.slots):
            raise IndexOutOfRangeError(section, row, limit=len(target.slots) + 1)
        target.slots.insert(row, ReservedSlot())
        logger.debug("Reserved row %d in section %d", row, section)

    def _section(self, section: int) -> Section[E]:
        if not 0 <= section < len(self._sections):
            raise IndexOutOfRangeError(section, limit=len(self._sections))
        return self._sections[section]


__all__ = ["SectionIndex"]
