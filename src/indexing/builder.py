from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional

from src.models.section import E, Section, SortOrder

from .headers import HeaderCompare, canonical_header, first_letter, sort_headers

logger = logging.getLogger(__name__)


def header_for(
    element: E,
    key: Callable[[E], str],
    header: Optional[Callable[[E], str]] = None,
) -> str:
    """Compute the raw (not yet canonical) header of one element."""

    if header is not None:
        return header(element)
    return first_letter(key(element), element)


def build_sections(
    elements: Iterable[E],
    *,
    key: Callable[[E], str] = str,
    header: Optional[Callable[[E], str]] = None,
    compare: Optional[HeaderCompare] = None,
    sort_order: Optional[SortOrder] = None,
) -> List[Section[E]]:
    """Partition elements into header sections ordered by header.

    Every element lands in exactly one bucket, keyed by its uppercased
    header, so membership is case-insensitive. Source order is kept inside
    each bucket. Bucket ordering is decided separately by ``sort_headers``.
    """

    buckets: Dict[str, List[E]] = {}
    for element in elements:
        bucket = canonical_header(header_for(element, key, header))
        buckets.setdefault(bucket, []).append(element)

    ordered = sort_headers(buckets.keys(), compare=compare, sort_order=sort_order)
    sections = [Section.from_elements(name, buckets[name]) for name in ordered]
    logger.debug(
        "Indexed %d elements into %d sections",
        sum(len(items) for items in buckets.values()),
        len(sections),
    )
    return sections


__all__ = ["build_sections", "header_for"]
