from __future__ import annotations

import unicodedata
from functools import cmp_to_key
from typing import Callable, Iterable, List, Optional

from src.models.section import SortOrder

from .errors import EmptyKeyError

HeaderCompare = Callable[[str, str], int]


def first_letter(compare_string: str, element: object = None) -> str:
    """Return the uppercased first character used as a default section header."""

    if not compare_string:
        raise EmptyKeyError(element)
    text = unicodedata.normalize("NFC", compare_string)
    end = 1
    while end < len(text) and unicodedata.combining(text[end]):
        end += 1
    return text[:end].upper()


def canonical_header(header: str) -> str:
    """Uppercase NFC form; canonically equivalent spellings share one bucket."""

    return unicodedata.normalize("NFC", header.upper())


def sort_headers(
    headers: Iterable[str],
    *,
    compare: Optional[HeaderCompare] = None,
    sort_order: Optional[SortOrder] = None,
) -> List[str]:
    """Order canonical headers by an explicit comparison, a sort order, or plain ascending order."""

    if compare is not None and sort_order is not None:
        raise ValueError("Pass either compare or sort_order, not both")
    if compare is not None:
        return sorted(headers, key=cmp_to_key(compare))
    descending = sort_order is not None and SortOrder(sort_order) is SortOrder.DESCENDING
    return sorted(headers, reverse=descending)


__all__ = ["HeaderCompare", "canonical_header", "first_letter", "sort_headers"]
