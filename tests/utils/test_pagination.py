from app.utils.numbers import percentage, safe_ratio
from app.utils.pagination import next_page, page_offset, paginate


def test_next_page_when_more_rows_remain():
    assert next_page(page=1, limit=10, total=25) == 2
    assert next_page(page=2, limit=10, total=25) == 3


def test_next_page_is_none_on_last_page():
    assert next_page(page=3, limit=10, total=25) is None
    assert next_page(page=1, limit=10, total=10) is None
    assert next_page(page=1, limit=10, total=0) is None


def test_paginate_slices_sorted_items():
    items = list(range(1, 8))
    assert page_offset(3, 3) == 6
    assert paginate(items, 1, 3) == [1, 2, 3]
    assert paginate(items, 3, 3) == [7]
    assert paginate(items, 4, 3) == []


def test_ratios_handle_zero_denominator():
    assert safe_ratio(3, 0) == 0.0
    assert safe_ratio(2, 3) == 0.67
    assert percentage(1, 3) == 33.3
    assert percentage(0, 0) == 0.0
