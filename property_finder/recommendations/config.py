from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SimilarityConfig:
    """
    Weights and thresholds for the similar-properties scorer.

    The score is normalised by the sum of ``weights``, so changing a weight
    keeps scores in [0, 1].
    """

    weights: dict[str, float] = field(
        default_factory=lambda: {"city": 0.4, "kind": 0.3, "price": 0.2, "rooms": 0.1}
    )
    price_tolerance: float = 0.2  # max relative price difference
    room_tolerance: int = 1  # max absolute room-count difference
    min_score: float = 0.3  # candidates must score strictly above this
    default_limit: int = 2
    reason_labels: dict[str, str] = field(
        default_factory=lambda: {
            "city": "Same city",
            "kind": "Same kind",
            "price": "Similar price",
            "rooms": "Same room count",
        }
    )


DEFAULT_SIMILARITY_CONFIG = SimilarityConfig()
