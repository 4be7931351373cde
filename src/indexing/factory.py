from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence

from src.models.configs import IndexConfig

from .section_index import SectionIndex


def _field_getter(field: Optional[str]) -> Optional[Callable[[Any], str]]:
    if field is None:
        return None

    def getter(record: Any) -> str:
        if isinstance(record, Mapping):
            value = record.get(field)
            return "" if value is None else str(value)
        return str(record)

    return getter


def build_index(records: Sequence[Any], config: IndexConfig | None = None) -> SectionIndex[Any]:
    """Build a SectionIndex from records and apply the configured pins and reservations.

    Pinned sections are prepended so that the first configured pin ends up
    first. Reserved sections and then reserved rows are applied against the
    layout left by the previous step.
    """

    config = config or IndexConfig()
    index: SectionIndex[Any] = SectionIndex(
        records,
        key=_field_getter(config.key_field) or str,
        header=_field_getter(config.header_field),
        sort_order=config.sort_order,
    )

    for pinned in reversed(config.pinned):
        index.prepend_section(pinned.header, pinned.elements)
    for reserved in config.reserved_sections:
        index.reserve_section(reserved.section, reserved.rows)
    for reserved_row in config.reserved_rows:
        index.reserve_row(reserved_row.section, reserved_row.row)
    return index


__all__ = ["build_index"]
