"""
Catalog Query Engine.

Read-only search and structured filtering over a Catalog. Results are always
a subsequence of the catalog in its stored order; nothing here mutates the
catalog or its frame.
"""
from __future__ import annotations

import pandas as pd

from .models import FilterCriteria, Property
from .store import Catalog


class CatalogQuery:
    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def list_all(self) -> list[Property]:
        return list(self._catalog.properties)

    def get_by_id(self, property_id: int) -> Property | None:
        for prop in self._catalog:
            if prop.id == property_id:
                return prop
        return None

    def search(self, text: str) -> list[Property]:
        """
        Case-insensitive literal substring match on title, city or kind label.

        The empty string is contained in every string, so ``search("")``
        returns the whole catalog. Skipping the search for blank input is a
        caller policy (see ``property_finder.browse``).
        """
        if not len(self._catalog):
            return []
        df = self._catalog.frame
        term = text.lower()
        mask = (
            df["title_lower"].str.contains(term, regex=False)
            | df["city_lower"].str.contains(term, regex=False)
            | df["kind_lower"].str.contains(term, regex=False)
        )
        return self._catalog.select(mask)

    def filter(self, criteria: FilterCriteria | None = None) -> list[Property]:
        """Return properties satisfying every present criterion (inclusive bounds)."""
        if not len(self._catalog):
            return []
        return self._catalog.select(self._criteria_mask(criteria))

    def _criteria_mask(self, criteria: FilterCriteria | None) -> pd.Series:
        df = self._catalog.frame
        mask = pd.Series(True, index=df.index)
        if criteria is None:
            return mask

        if criteria.city is not None:
            mask = mask & (df["city"] == criteria.city)

        if criteria.kind is not None:
            mask = mask & (df["kind"] == criteria.kind.value)

        if criteria.min_price is not None:
            mask = mask & (df["price"] >= criteria.min_price)

        if criteria.max_price is not None:
            mask = mask & (df["price"] <= criteria.max_price)

        if criteria.min_rooms is not None:
            mask = mask & (df["rooms"] >= criteria.min_rooms)

        return mask

    def cities(self) -> list[str]:
        """Sorted unique city names, for populating a city facet."""
        return sorted({prop.city for prop in self._catalog})
