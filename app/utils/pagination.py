from typing import Sequence, TypeVar

T = TypeVar("T")


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def next_page(page: int, limit: int, total: int) -> int | None:
    """Number of the following page, or None when this page reaches the end."""
    return page + 1 if page * limit < total else None


def paginate(items: Sequence[T], page: int, limit: int) -> list[T]:
    """Slice an already sorted sequence down to one page."""
    start = page_offset(page, limit)
    return list(items[start:start + limit])
