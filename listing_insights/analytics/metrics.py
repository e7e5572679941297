"""
Summary metrics over a (filtered) listings subset.

All functions are pure: they read the frame they are given and return fresh
values, so they can be called on every rerun without caching.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Hashable, Iterable

import pandas as pd

from listing_insights.config import HIGHLY_REVIEWED_THRESHOLD


@dataclass(frozen=True)
class AnalysisMetrics:
    total_listings: int = 0
    average_price: int = 0
    median_price: int = 0
    most_common_room_type: str = ""
    most_popular_neighbourhood: str = ""
    average_reviews: int = 0
    average_availability: int = 0


@dataclass(frozen=True)
class InsightSummary:
    highly_reviewed_listings: int = 0
    average_minimum_nights: int = 0
    fully_booked_listings: int = 0
    fully_booked_pct: float = 0.0


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; 2.5 must become 3 here.
    # Decimal(value) is the exact binary value, so 0.49999999999999994 stays 0.
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def frequency_table(values: Iterable[Hashable]) -> Dict[Hashable, int]:
    """Count occurrences in one pass; keys keep first-seen order."""
    counts: Dict[Hashable, int] = {}
    for value in values:
        counts[value] = counts.get(value, 0) + 1
    return counts


def mode(values: Iterable[Hashable]) -> str:
    """
    Most frequent value. On ties the value seen first wins, because only a
    strictly greater count replaces the current best.
    """
    best = ""
    best_count = 0
    for value, count in frequency_table(values).items():
        if count > best_count:
            best, best_count = value, count
    return str(best) if best_count else ""


def _mean(series: pd.Series) -> int:
    return round_half_up(float(pd.to_numeric(series, errors="coerce").fillna(0).mean()))


def median_price(prices: pd.Series) -> int:
    ordered = sorted(float(p) for p in pd.to_numeric(prices, errors="coerce").dropna())
    if not ordered:
        return 0
    middle = len(ordered) // 2
    if len(ordered) % 2:
        return round_half_up(ordered[middle])
    return round_half_up((ordered[middle - 1] + ordered[middle]) / 2)


def compute_metrics(df: pd.DataFrame) -> AnalysisMetrics:
    if df.empty:
        return AnalysisMetrics()

    return AnalysisMetrics(
        total_listings=int(len(df)),
        average_price=_mean(df["price"]),
        median_price=median_price(df["price"]),
        most_common_room_type=mode(df["room_type"].tolist()),
        # Region level (neighbourhood_group), not the finer neighbourhood column.
        most_popular_neighbourhood=mode(df["neighbourhood_group"].tolist()),
        average_reviews=_mean(df["number_of_reviews"]),
        average_availability=_mean(df["availability_365"]),
    )


def compute_insights(df: pd.DataFrame) -> InsightSummary:
    if df.empty:
        return InsightSummary()

    reviews = pd.to_numeric(df["number_of_reviews"], errors="coerce")
    availability = pd.to_numeric(df["availability_365"], errors="coerce")
    fully_booked = int((availability == 0).sum())
    return InsightSummary(
        highly_reviewed_listings=int((reviews >= HIGHLY_REVIEWED_THRESHOLD).sum()),
        average_minimum_nights=_mean(df["minimum_nights"]),
        fully_booked_listings=fully_booked,
        fully_booked_pct=round(fully_booked / len(df) * 100, 1),
    )
