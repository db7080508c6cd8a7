from __future__ import annotations

from typing import Optional, Sequence, TypeVar

from .. import config
from ..exceptions import OutOfRange

T = TypeVar("T")


def paginate(
    items: Sequence[T],
    page_number: Optional[int] = None,
    page_size: Optional[int] = None,
) -> list[T]:
    """Return one zero-based page of ``items``.

    Defaults come from :mod:`roster.config`. A page that starts at or past
    the end is empty. A negative page number or a non-positive page size
    raises :class:`OutOfRange`.
    """
    page = config.DEFAULT_PAGE_NUMBER if page_number is None else page_number
    size = config.DEFAULT_PAGE_SIZE if page_size is None else page_size
    if page < 0:
        raise OutOfRange(f"page number must be >= 0, got {page}")
    if size <= 0:
        raise OutOfRange(f"page size must be positive, got {size}")

    start = page * size
    if start >= len(items):
        return []
    return list(items[start : min(start + size, len(items))])
