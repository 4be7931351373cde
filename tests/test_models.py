import pytest
from pydantic import ValidationError

from src.models.configs import IndexConfig, ReservedRowConfig
from src.models.section import ElementSlot, ReservedSlot, Section, SortOrder


def test_section_from_elements_counts_rows():
    section = Section.from_elements("A", ["apple", "avocado"])

    assert section.header == "A"
    assert section.slots == [ElementSlot("apple"), ElementSlot("avocado")]
    assert section.element_count == 2
    assert not section.is_reserved


def test_reserved_section_reports_declared_rows_without_slots():
    section = Section.reserved(3)

    assert section.header is None
    assert section.slots == []
    assert section.element_count == 3
    assert section.is_reserved


def test_section_elements_skip_reserved_slots():
    section = Section(header="B", slots=[ElementSlot("banana"), ReservedSlot(), ElementSlot("berry")])

    assert section.elements() == ["banana", "berry"]
    assert section.element_count == 3


def test_index_config_defaults():
    config = IndexConfig()

    assert config.key_field is None
    assert config.header_field is None
    assert config.sort_order is SortOrder.ASCENDING
    assert config.pinned == []


def test_index_config_rejects_negative_coordinates():
    with pytest.raises(ValidationError):
        ReservedRowConfig(section=-1, row=0)
