from __future__ import annotations

import logging

from ..catalog.models import Property
from ..catalog.store import Catalog
from .config import DEFAULT_SIMILARITY_CONFIG, SimilarityConfig
from .models import Recommendation
from .similarity import similarity_reasons, similarity_score

logger = logging.getLogger(__name__)


class Recommender:
    """
    Ranks the properties of a catalog by similarity to a reference property.

    Ordering contract: descending score, ties broken by catalog position
    (earlier first). Truncation to ``limit`` happens after sorting.
    """

    def __init__(
        self,
        catalog: Catalog,
        config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG,
    ) -> None:
        self._catalog = catalog
        self._config = config

    def recommend(self, reference: Property, limit: int | None = None) -> list[Recommendation]:
        if limit is None:
            limit = self._config.default_limit
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        candidates: list[Recommendation] = []
        for prop in self._catalog:
            if prop.id == reference.id:
                continue

            score = similarity_score(reference, prop, self._config)
            if score > self._config.min_score:
                candidates.append(Recommendation(
                    property=prop,
                    score=score,
                    reasons=tuple(similarity_reasons(reference, prop, self._config)),
                ))

        # sorted() is stable, so equal scores keep catalog order
        ranked = sorted(candidates, key=lambda r: r.score, reverse=True)[:limit]

        logger.debug(
            "Recommendations for property %s: %d eligible, %d returned",
            reference.id, len(candidates), len(ranked),
        )
        return ranked
