from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent / "data" / "properties.json"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the static listing catalog is read from.
    """

    data_path: Path = Path(os.getenv("PROPERTY_CATALOG_PATH", str(_BUNDLED_CATALOG)))
    encoding: str = "utf-8"


DEFAULT_CATALOG_CONFIG = CatalogConfig()
