from __future__ import annotations

import pytest

from property_finder.catalog.models import Property
from property_finder.recommendations.config import SimilarityConfig
from property_finder.recommendations.similarity import (
    relative_price_diff,
    similarity_reasons,
    similarity_score,
)


def _prop(pid: int, city: str = "X", kind: str = "House", price: float = 100000, rooms: int = 3) -> Property:
    return Property(
        id=pid, title=f"Listing {pid}", city=city, kind=kind,
        price=price, rooms=rooms, area=100,
    )


def test_close_match_scores_all_factors():
    a = _prop(1, price=100000, rooms=3)
    b = _prop(2, price=105000, rooms=3)

    expected = 0.4 + 0.3 + 0.2 * (1 - 5000 / 105000) + 0.1
    assert similarity_score(a, b) == pytest.approx(expected)
    assert similarity_score(a, b) == pytest.approx(0.990476, abs=1e-6)
    assert similarity_reasons(a, b) == [
        "Same city", "Same kind", "Similar price", "Same room count",
    ]


def test_unrelated_properties_score_zero():
    a = _prop(1, city="X", kind="House", price=100000, rooms=3)
    c = _prop(2, city="Y", kind="Apartment", price=200000, rooms=8)

    assert similarity_score(a, c) == 0.0
    assert similarity_reasons(a, c) == []


def test_identical_attributes_score_one():
    a = _prop(1)
    assert similarity_score(a, _prop(2)) == pytest.approx(1.0)
    assert similarity_score(a, _prop(2)) <= 1.0


def test_price_at_tolerance_contributes():
    a = _prop(1, price=100000)
    b = _prop(2, price=80000)  # relative diff exactly 0.2

    assert relative_price_diff(a, b) == pytest.approx(0.2)
    assert "Similar price" in similarity_reasons(a, b)
    assert similarity_score(a, b) == pytest.approx(0.4 + 0.3 + 0.2 * 0.8 + 0.1)


def test_price_beyond_tolerance_contributes_nothing():
    a = _prop(1, price=100000)
    b = _prop(2, price=75000)

    assert "Similar price" not in similarity_reasons(a, b)
    assert similarity_score(a, b) == pytest.approx(0.4 + 0.3 + 0.1)


def test_one_room_apart_gives_reason_but_no_weight():
    a = _prop(1, rooms=3)
    b = _prop(2, rooms=4)

    assert similarity_reasons(a, b)[-1] == "Same room count"
    assert similarity_score(a, b) == pytest.approx(0.4 + 0.3 + 0.2)


def test_two_rooms_apart_is_not_a_match():
    a = _prop(1, rooms=3)
    b = _prop(2, rooms=5)

    assert "Same room count" not in similarity_reasons(a, b)
    assert similarity_score(a, b) == pytest.approx(0.4 + 0.3 + 0.2)


def test_reasons_follow_fixed_order():
    a = _prop(1, city="X", kind="House", price=100000, rooms=3)
    b = _prop(2, city="Y", kind="House", price=101000, rooms=9)

    assert similarity_reasons(a, b) == ["Same kind", "Similar price"]


@pytest.mark.parametrize(
    "a, b",
    [
        (_prop(1, price=100000, rooms=3), _prop(2, price=112000, rooms=2)),
        (_prop(1, city="Y", price=90000), _prop(2, kind="Apartment", price=70000)),
        (_prop(1, rooms=0), _prop(2, city="Z", rooms=1, price=99000)),
    ],
)
def test_similarity_is_symmetric(a, b):
    assert similarity_score(a, b) == pytest.approx(similarity_score(b, a))
    assert similarity_reasons(a, b) == similarity_reasons(b, a)


def test_score_is_normalised_by_weight_sum():
    doubled = SimilarityConfig(weights={"city": 0.8, "kind": 0.6, "price": 0.4, "rooms": 0.2})
    a = _prop(1, price=100000)
    b = _prop(2, city="Y", price=100000)

    assert similarity_score(a, b, doubled) == pytest.approx(similarity_score(a, b))
    assert similarity_score(a, b, doubled) == pytest.approx(0.6)


def test_custom_reason_labels():
    config = SimilarityConfig(reason_labels={
        "city": "Misma ciudad",
        "kind": "Mismo tipo de propiedad",
        "price": "Precio similar",
        "rooms": "Misma cantidad de ambientes",
    })
    assert similarity_reasons(_prop(1), _prop(2), config)[0] == "Misma ciudad"
