"""Header partitioning and coordinate addressing for sectioned lists."""

from .errors import EmptyKeyError, IndexOutOfRangeError, SectionIndexError
from .builder import build_sections, header_for
from .section_index import SectionIndex
from .factory import build_index
from .config_loader import load_index_config, load_records

__all__ = [
    "EmptyKeyError",
    "IndexOutOfRangeError",
    "SectionIndex",
    "SectionIndexError",
    "build_index",
    "build_sections",
    "header_for",
    "load_index_config",
    "load_records",
]
