#!/usr/bin/env python3
"""
Property Finder — command-line entry point.

Browse the listing catalog, search and filter it, and show a property with
its most similar listings.

Usage:
    property-finder list --page 2
    property-finder search "casa" --city Rosario --min-rooms 3
    property-finder show 17 --limit 3
    property-finder cities

Environment Variables:
    PROPERTY_CATALOG_PATH   — JSON catalog to load instead of the bundled one
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .browse import DEFAULT_PAGE_SIZE, Page, browse, visible_pages
from .catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .catalog.loader import load_catalog
from .catalog.models import CatalogError, FilterCriteria, Property, PropertyKind
from .catalog.query import CatalogQuery
from .recommendations.retrieval import Recommender

DETAIL_RECOMMENDATION_LIMIT = 3


def format_price(price: float) -> str:
    """Render a price as ``$ 1,234,567``."""
    return f"$ {round(price):,}"


def _format_row(prop: Property) -> str:
    return (
        f"#{prop.id:<4} {prop.title} | {prop.city} | {prop.kind.value} | "
        f"{prop.rooms} rooms | {prop.area:g} m² | {format_price(prop.price)}"
    )


def _print_page(page: Page) -> None:
    if not page.items:
        print("No properties match.")
        return
    for prop in page.items:
        print(_format_row(prop))
    pager = " ".join(
        f"[{p}]" if p == page.page else str(p)
        for p in visible_pages(page.page, page.total_pages)
    )
    print(f"\n{page.total_items} properties, page {page.page} of {page.total_pages}   {pager}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="property-finder",
        description="Search property listings and find similar ones.",
    )
    parser.add_argument("--catalog", type=Path, help="Path to a JSON listing catalog")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    def _paging(p: argparse.ArgumentParser) -> None:
        p.add_argument("--page", type=int, default=1)
        p.add_argument("--page-size", type=int, default=DEFAULT_PAGE_SIZE)

    _paging(sub.add_parser("list", help="List every property"))

    search = sub.add_parser("search", help="Search and filter properties")
    search.add_argument("text", nargs="?", default="", help="Matches title, city or kind")
    search.add_argument("--city")
    search.add_argument("--kind", choices=[k.value for k in PropertyKind])
    search.add_argument("--min-price", type=float)
    search.add_argument("--max-price", type=float)
    search.add_argument("--min-rooms", type=int)
    _paging(search)

    show = sub.add_parser("show", help="Show a property and similar listings")
    show.add_argument("id", type=int)
    show.add_argument("--limit", type=int, default=DETAIL_RECOMMENDATION_LIMIT)

    sub.add_parser("cities", help="List the cities in the catalog")

    return parser


def _show(query: CatalogQuery, property_id: int, limit: int) -> int:
    prop = query.get_by_id(property_id)
    if prop is None:
        print(f"No property with id {property_id}", file=sys.stderr)
        return 1

    print(prop.title)
    print(f"  {prop.city} · {prop.kind.value} · {prop.rooms} rooms · {prop.area:g} m²")
    print(f"  {format_price(prop.price)}")

    recommendations = Recommender(query.catalog).recommend(prop, limit=limit)
    print("\nSimilar properties:")
    if not recommendations:
        print("  none found")
    for rec in recommendations:
        print(f"  {_format_row(rec.property)}")
        print(f"      score {rec.score:.2f}: {', '.join(rec.reasons)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    config = CatalogConfig(data_path=args.catalog) if args.catalog else DEFAULT_CATALOG_CONFIG
    try:
        catalog = load_catalog(config)
    except CatalogError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    query = CatalogQuery(catalog)

    if args.command == "cities":
        for city in query.cities():
            print(city)
        return 0

    if args.command == "show":
        if args.limit < 1:
            print("--limit must be at least 1", file=sys.stderr)
            return 2
        return _show(query, args.id, args.limit)

    if args.page_size < 1:
        print("--page-size must be at least 1", file=sys.stderr)
        return 2

    if args.command == "list":
        page = browse(query, page=args.page, page_size=args.page_size)
    else:
        try:
            criteria = FilterCriteria(
                city=args.city,
                kind=args.kind,
                min_price=args.min_price,
                max_price=args.max_price,
                min_rooms=args.min_rooms,
            )
        except ValidationError as exc:
            print(f"Invalid filter: {exc.errors()[0]['msg']}", file=sys.stderr)
            return 2
        page = browse(
            query,
            text=args.text,
            criteria=criteria,
            page=args.page,
            page_size=args.page_size,
        )

    _print_page(page)
    return 0


if __name__ == "__main__":
    sys.exit(main())
