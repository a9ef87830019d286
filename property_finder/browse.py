"""
Consumer-side browsing policy on top of the catalog query engine.

- Blank search text means "no search": every record passes.
- Search and structured filters are combined conjunctively.
- Results are paginated with 1-based page numbers.
"""
from __future__ import annotations

import math

from pydantic import BaseModel

from .catalog.models import FilterCriteria, Property
from .catalog.query import CatalogQuery

DEFAULT_PAGE_SIZE = 12
GAP = "..."


class Page(BaseModel):
    items: list[Property]
    page: int
    page_size: int
    total_items: int
    total_pages: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def matching_properties(
    query: CatalogQuery,
    text: str | None = None,
    criteria: FilterCriteria | None = None,
) -> list[Property]:
    """Properties passing both the text search and the filter, in catalog order."""
    if text is None or not text.strip():
        results = query.list_all()
    else:
        results = query.search(text)

    if criteria is not None:
        allowed = {prop.id for prop in query.filter(criteria)}
        results = [prop for prop in results if prop.id in allowed]

    return results


def paginate(items: list[Property], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page:
    """Slice ``items`` into one page; out-of-range pages are clamped."""
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")

    total_pages = max(1, math.ceil(len(items) / page_size))
    page = min(max(page, 1), total_pages)
    start = (page - 1) * page_size

    return Page(
        items=items[start:start + page_size],
        page=page,
        page_size=page_size,
        total_items=len(items),
        total_pages=total_pages,
    )


def browse(
    query: CatalogQuery,
    text: str | None = None,
    criteria: FilterCriteria | None = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Page:
    return paginate(matching_properties(query, text, criteria), page, page_size)


def visible_pages(current: int, total: int, delta: int = 2) -> list[int | str]:
    """
    Page numbers to show in a pager: first and last page always, the pages
    within ``delta`` of ``current``, and ``"..."`` where pages are skipped.
    """
    window = list(range(max(2, current - delta), min(total - 1, current + delta) + 1))

    pages: list[int | str] = [1, GAP] if current - delta > 2 else [1]
    pages.extend(window)

    if current + delta < total - 1:
        pages.extend([GAP, total])
    elif total > 1:
        pages.append(total)

    return pages
