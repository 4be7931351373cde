from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field

from src.models.section import SortOrder


class PinnedSectionConfig(BaseModel):
    header: str
    elements: List[Any] = Field(default_factory=list)


class ReservedSectionConfig(BaseModel):
    section: int = Field(ge=0)
    rows: int = Field(default=0, ge=0)


class ReservedRowConfig(BaseModel):
    section: int = Field(ge=0)
    row: int = Field(ge=0)


class IndexConfig(BaseModel):
    """Describes how a file of records is turned into a SectionIndex."""

    key_field: str | None = Field(
        default=None,
        description="Record field holding the compare string; None uses the record itself",
    )
    header_field: str | None = Field(
        default=None,
        description="Record field used verbatim as the header instead of the first letter",
    )
    sort_order: SortOrder = SortOrder.ASCENDING
    pinned: List[PinnedSectionConfig] = Field(default_factory=list)
    reserved_sections: List[ReservedSectionConfig] = Field(default_factory=list)
    reserved_rows: List[ReservedRowConfig] = Field(default_factory=list)


__all__ = [
    "IndexConfig",
    "PinnedSectionConfig",
    "ReservedRowConfig",
    "ReservedSectionConfig",
]
