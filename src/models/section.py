from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, Optional, TypeVar, Union

E = TypeVar("E")


class SortOrder(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True, slots=True)
class ElementSlot(Generic[E]):
    """A row holding a real element owned by the index."""

    value: E


@dataclass(frozen=True, slots=True)
class ReservedSlot:
    """A row kept free for content the hosting list manages itself."""


Slot = Union[ElementSlot[E], ReservedSlot]


@dataclass(slots=True)
class Section(Generic[E]):
    """One header group of the index with its rows and declared row count."""

    header: Optional[str]
    slots: List[Slot] = field(default_factory=list)
    element_count: Optional[int] = None

    def __post_init__(self) -> None:
        if self.element_count is None:
            self.element_count = len(self.slots)

    @classmethod
    def from_elements(cls, header: Optional[str], elements: List[E]) -> "Section[E]":
        return cls(header=header, slots=[ElementSlot(element) for element in elements])

    @classmethod
    def reserved(cls, row_count: int) -> "Section[E]":
        return cls(header=None, slots=[], element_count=row_count)

    @property
    def is_reserved(self) -> bool:
        return self.header is None

    def elements(self) -> List[E]:
        return [slot.value for slot in self.slots if isinstance(slot, ElementSlot)]


__all__ = ["E", "ElementSlot", "ReservedSlot", "Section", "Slot", "SortOrder"]
