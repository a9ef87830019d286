from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List

import pandas as pd
from pydantic import ValidationError

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import CatalogError, Property
from .store import Catalog

logger = logging.getLogger(__name__)

CANONICAL_COLUMNS: List[str] = [
    "id",
    "title",
    "city",
    "kind",
    "price",
    "rooms",
    "area",
    "image",
]

REQUIRED_COLUMNS: List[str] = CANONICAL_COLUMNS[:-1]

# Raw column names accepted for each canonical field, canonical name first.
# The Spanish names are those of the original listings export.
COLUMN_ALIASES: dict[str, List[str]] = {
    "id": ["id"],
    "title": ["title", "titulo"],
    "city": ["city", "ciudad"],
    "kind": ["kind", "type", "tipo"],
    "price": ["price", "precio"],
    "rooms": ["rooms", "ambientes"],
    "area": ["area", "metros_cuadrados", "m2"],
    "image": ["image", "imagen"],
}

KIND_LABELS: dict[str, str] = {
    "house": "House",
    "casa": "House",
    "apartment": "Apartment",
    "departamento": "Apartment",
}


def _normalize_kind(raw: Any) -> Any:
    if not isinstance(raw, str):
        return raw
    # Unknown labels pass through untouched and fail model validation
    return KIND_LABELS.get(raw.strip().lower(), raw)


def _to_canonical(df: pd.DataFrame) -> pd.DataFrame:
    def _first_present(columns: List[str]) -> str | None:
        for col in columns:
            if col in df.columns:
                return col
        return None

    canonical = pd.DataFrame(index=df.index)
    for field, aliases in COLUMN_ALIASES.items():
        col = _first_present(aliases)
        if col is None:
            if field in REQUIRED_COLUMNS:
                raise CatalogError(
                    f"Catalog is missing required column {field!r} "
                    f"(accepted names: {', '.join(aliases)})"
                )
            canonical[field] = ""
        else:
            canonical[field] = df[col]

    canonical["kind"] = canonical["kind"].apply(_normalize_kind)
    canonical["image"] = canonical["image"].fillna("").astype(str)
    return canonical[CANONICAL_COLUMNS]


def build_catalog(records: list[dict[str, Any]]) -> Catalog:
    """Validate raw canonical records into a Catalog, reporting the first bad one."""
    properties: list[Property] = []
    for position, record in enumerate(records):
        try:
            properties.append(Property(**record))
        except ValidationError as exc:
            raise CatalogError(
                f"Invalid property record at position {position} "
                f"(id={record.get('id')!r}): {exc.error_count()} validation error(s)"
            ) from exc
    return Catalog(properties)


def load_catalog(config: CatalogConfig | Path | str = DEFAULT_CATALOG_CONFIG) -> Catalog:
    """
    Load the static listing catalog.

    Steps:
    - Read the JSON array of listings.
    - Map raw fields into the canonical Property schema.
    - Validate every record and reject duplicate ids.
    """
    if not isinstance(config, CatalogConfig):
        config = CatalogConfig(data_path=Path(config))

    path = config.data_path
    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        df = pd.read_json(
            path,
            orient="records",
            dtype=False,
            convert_dates=False,
            encoding=config.encoding,
        )
    except ValueError as exc:
        raise CatalogError(f"Catalog file is not a JSON array of records: {path}") from exc

    if df.empty:
        logger.info("Loaded empty catalog from %s", path)
        return Catalog([])

    canonical = _to_canonical(df)
    catalog = build_catalog(canonical.to_dict(orient="records"))

    logger.info("Loaded %d properties from %s", len(catalog), path)
    return catalog
