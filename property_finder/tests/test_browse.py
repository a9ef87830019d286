from __future__ import annotations

import pytest

from property_finder.browse import GAP, browse, matching_properties, paginate, visible_pages
from property_finder.catalog.models import FilterCriteria, Property
from property_finder.catalog.query import CatalogQuery
from property_finder.catalog.store import Catalog


def _prop(pid: int, city: str, kind: str = "Apartment", price: float = 100000) -> Property:
    return Property(
        id=pid, title=f"Listing {pid} in {city}", city=city, kind=kind,
        price=price, rooms=2, area=60,
    )


query = CatalogQuery(Catalog(
    [_prop(i, "Rosario" if i % 2 else "Salta", price=50000 + i * 10000) for i in range(1, 30)]
))


def _ids(props):
    return [p.id for p in props]


def test_blank_text_skips_search():
    assert len(matching_properties(query, None)) == 29
    assert len(matching_properties(query, "")) == 29
    assert len(matching_properties(query, "   ")) == 29


def test_search_and_filter_are_conjunctive():
    results = matching_properties(query, "rosario", FilterCriteria(max_price=120000))
    assert _ids(results) == [1, 3, 5, 7]


def test_filter_only():
    results = matching_properties(query, criteria=FilterCriteria(city="Salta", min_price=300000))
    assert _ids(results) == [26, 28]


def test_browse_first_page():
    page = browse(query, page_size=12)
    assert _ids(page.items) == list(range(1, 13))
    assert page.total_items == 29
    assert page.total_pages == 3
    assert not page.has_previous
    assert page.has_next


def test_browse_last_page_is_partial():
    page = browse(query, page=3, page_size=12)
    assert _ids(page.items) == [25, 26, 27, 28, 29]
    assert page.has_previous
    assert not page.has_next


def test_out_of_range_pages_are_clamped():
    assert browse(query, page=0).page == 1
    assert browse(query, page=99, page_size=12).page == 3


def test_empty_results_have_one_page():
    page = browse(query, text="nowhere")
    assert page.items == []
    assert page.total_items == 0
    assert page.total_pages == 1
    assert page.page == 1


def test_paginate_rejects_bad_page_size():
    with pytest.raises(ValueError):
        paginate([], page_size=0)


# ── Pager window ─────────────────────────────────────────────────────────


def test_visible_pages_single_page():
    assert visible_pages(1, 1) == [1]


def test_visible_pages_small_total():
    assert visible_pages(2, 4) == [1, 2, 3, 4]


def test_visible_pages_near_start():
    assert visible_pages(1, 10) == [1, 2, 3, GAP, 10]


def test_visible_pages_middle():
    assert visible_pages(5, 10) == [1, GAP, 3, 4, 5, 6, 7, GAP, 10]


def test_visible_pages_near_end():
    assert visible_pages(10, 10) == [1, GAP, 8, 9, 10]
