from __future__ import annotations

import math

from ..catalog.models import Property
from .config import DEFAULT_SIMILARITY_CONFIG, SimilarityConfig

FACTORS = ("city", "kind", "price", "rooms")


def relative_price_diff(a: Property, b: Property) -> float:
    """|p1 - p2| / max(p1, p2); prices are positive so the max is never 0."""
    return abs(a.price - b.price) / max(a.price, b.price)


def room_diff(a: Property, b: Property) -> int:
    return abs(a.rooms - b.rooms)


def _matched_factors(
    a: Property,
    b: Property,
    config: SimilarityConfig,
) -> dict[str, float]:
    """
    Map each satisfied factor to its closeness in [0, 1].

    Keys are inserted in the fixed order city, kind, price, rooms.
    """
    matched: dict[str, float] = {}

    if a.city == b.city:
        matched["city"] = 1.0

    if a.kind == b.kind:
        matched["kind"] = 1.0

    price_diff = relative_price_diff(a, b)
    if price_diff <= config.price_tolerance:
        matched["price"] = 1.0 - price_diff

    rooms = room_diff(a, b)
    if rooms <= config.room_tolerance:
        matched["rooms"] = max(0.0, 1.0 - rooms)

    return matched


def similarity_score(
    a: Property,
    b: Property,
    config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG,
) -> float:
    """Weighted multi-factor similarity of two properties, normalised to [0, 1]."""
    w = config.weights
    matched = _matched_factors(a, b, config)

    # fsum so the default weights total exactly 1.0
    score = math.fsum(w[factor] * closeness for factor, closeness in matched.items())
    total = math.fsum(w[factor] for factor in FACTORS)

    return score / total


def similarity_reasons(
    a: Property,
    b: Property,
    config: SimilarityConfig = DEFAULT_SIMILARITY_CONFIG,
) -> list[str]:
    """One label per satisfied condition, in the order city, kind, price, rooms."""
    return [config.reason_labels[factor] for factor in _matched_factors(a, b, config)]
