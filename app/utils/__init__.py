"""Utility functions."""

from app.utils.numbers import percentage, safe_ratio
from app.utils.pagination import next_page, page_offset, paginate
from app.utils.timestamps import utcnow

__all__ = [
    "percentage",
    "safe_ratio",
    "next_page",
    "page_offset",
    "paginate",
    "utcnow",
]
