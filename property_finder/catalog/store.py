from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator

import pandas as pd

from .models import CatalogError, Property

_FRAME_COLUMNS = ["id", "title", "city", "kind", "price", "rooms", "area"]


def _build_frame(properties: tuple[Property, ...]) -> pd.DataFrame:
    rows = [
        {
            "id": p.id,
            "title": p.title,
            "city": p.city,
            "kind": p.kind.value,
            "price": p.price,
            "rooms": p.rooms,
            "area": p.area,
        }
        for p in properties
    ]
    df = pd.DataFrame(rows, columns=_FRAME_COLUMNS)

    # Lowercase text columns once for case-insensitive search
    df["title_lower"] = df["title"].astype(str).str.lower()
    df["city_lower"] = df["city"].astype(str).str.lower()
    df["kind_lower"] = df["kind"].astype(str).str.lower()

    return df


class Catalog:
    """
    Immutable, ordered collection of Property records.

    Row ``i`` of :attr:`frame` always describes ``properties[i]``, so boolean
    masks over the frame map straight back to records in catalog order.
    """

    def __init__(self, properties: Iterable[Property]) -> None:
        records = tuple(properties)
        duplicates = sorted(i for i, n in Counter(p.id for p in records).items() if n > 1)
        if duplicates:
            raise CatalogError(f"Duplicate property ids in catalog: {duplicates}")
        self._properties = records
        self._frame = _build_frame(records)

    @property
    def properties(self) -> tuple[Property, ...]:
        return self._properties

    @property
    def frame(self) -> pd.DataFrame:
        """Tabular view for vectorised predicates. Callers must not mutate it."""
        return self._frame

    def select(self, mask: pd.Series) -> list[Property]:
        """Return the records whose rows are True in ``mask``, in catalog order."""
        return [self._properties[pos] for pos in mask[mask].index]

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[Property]:
        return iter(self._properties)

    def __repr__(self) -> str:
        return f"Catalog({len(self._properties)} properties)"
