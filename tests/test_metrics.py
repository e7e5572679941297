from __future__ import annotations

from listing_insights.analytics.metrics import (
    AnalysisMetrics,
    InsightSummary,
    compute_insights,
    compute_metrics,
    frequency_table,
    mode,
    round_half_up,
)
from listing_insights.data.models import listings_to_frame


def test_empty_subset_returns_zero_metrics():
    metrics = compute_metrics(listings_to_frame([]))
    assert metrics == AnalysisMetrics(
        total_listings=0,
        average_price=0,
        median_price=0,
        most_common_room_type="",
        most_popular_neighbourhood="",
        average_reviews=0,
        average_availability=0,
    )


def test_median_odd_and_even(make_frame):
    odd = make_frame(dict(price=30), dict(price=10), dict(price=20))
    even = make_frame(dict(price=40), dict(price=10), dict(price=30), dict(price=20))
    assert compute_metrics(odd).median_price == 20
    assert compute_metrics(even).median_price == 25


def test_averages_round_half_up(make_frame):
    df = make_frame(
        dict(price=100, number_of_reviews=1, availability_365=0),
        dict(price=101, number_of_reviews=2, availability_365=1),
    )
    metrics = compute_metrics(df)
    assert metrics.total_listings == 2
    assert metrics.average_price == 101  # 100.5
    assert metrics.median_price == 101
    assert metrics.average_reviews == 2  # 1.5
    assert metrics.average_availability == 1  # 0.5


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
    assert round_half_up(0.5) == 1
    assert round_half_up(7) == 7
    assert round_half_up(0.49999999999999994) == 0
    assert round_half_up(100.5) == 101


def test_mode_tie_goes_to_first_seen(make_frame):
    df = make_frame(
        dict(room_type="A"),
        dict(room_type="B"),
        dict(room_type="A"),
        dict(room_type="B"),
    )
    assert compute_metrics(df).most_common_room_type == "A"
    assert mode(["B", "A", "A", "B"]) == "B"
    assert mode([]) == ""


def test_most_popular_neighbourhood_uses_region(make_frame):
    df = make_frame(
        dict(neighbourhood_group="Brooklyn", neighbourhood="Bushwick"),
        dict(neighbourhood_group="Manhattan", neighbourhood="Harlem"),
        dict(neighbourhood_group="Manhattan", neighbourhood="Chelsea"),
        dict(neighbourhood_group="Brooklyn", neighbourhood="Bushwick"),
        dict(neighbourhood_group="Manhattan", neighbourhood="Inwood"),
    )
    assert compute_metrics(df).most_popular_neighbourhood == "Manhattan"


def test_frequency_table_keeps_first_seen_order():
    counts = frequency_table(["x", "y", "x", "z", "y", "x"])
    assert list(counts.items()) == [("x", 3), ("y", 2), ("z", 1)]


def test_metrics_are_idempotent(make_frame):
    df = make_frame(dict(price=80), dict(price=120, room_type="Shared room"), dict(price=95))
    before = df.copy()
    assert compute_metrics(df) == compute_metrics(df)
    assert compute_insights(df) == compute_insights(df)
    assert df.equals(before)


def test_insights(make_frame):
    df = make_frame(
        dict(number_of_reviews=150, availability_365=0, minimum_nights=2),
        dict(number_of_reviews=100, availability_365=10, minimum_nights=3),
        dict(number_of_reviews=20, availability_365=0, minimum_nights=30),
        dict(number_of_reviews=5, availability_365=300, minimum_nights=1),
    )
    insights = compute_insights(df)
    assert insights.highly_reviewed_listings == 2
    assert insights.average_minimum_nights == 9  # 36 / 4
    assert insights.fully_booked_listings == 2
    assert insights.fully_booked_pct == 50.0


def test_insights_empty_subset():
    assert compute_insights(listings_to_frame([])) == InsightSummary()
