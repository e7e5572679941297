"""
Grouped counts for the distribution charts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Sequence, Tuple, Union

import pandas as pd

from listing_insights.analytics.metrics import frequency_table

GroupKey = Union[str, Callable[[Mapping[str, Any]], Any]]


@dataclass(frozen=True)
class PriceBucket:
    label: str
    low: float
    high: float


# Contiguous for integer prices; each bucket takes everything above the
# previous bucket's upper bound up to its own.
PRICE_BUCKETS: List[PriceBucket] = [
    PriceBucket("$0-50", 0, 50),
    PriceBucket("$51-100", 51, 100),
    PriceBucket("$101-150", 101, 150),
    PriceBucket("$151-200", 151, 200),
    PriceBucket("$201-300", 201, 300),
    PriceBucket("$301+", 301, math.inf),
]


def group_counts(df: pd.DataFrame, key: GroupKey) -> Dict[Any, int]:
    """
    Count listings per category in first-seen order.

    `key` is either a column name or a callable applied to each row mapping.
    """
    if df.empty:
        return {}
    if callable(key):
        values = [key(row) for row in df.to_dict(orient="records")]
    else:
        values = df[key].tolist()
    return frequency_table(values)


def listings_by_region(df: pd.DataFrame) -> Dict[Any, int]:
    return group_counts(df, "neighbourhood_group")


def listings_by_room_type(df: pd.DataFrame) -> Dict[Any, int]:
    return group_counts(df, "room_type")


def bucket_for_price(price: float) -> str:
    for bucket in PRICE_BUCKETS:
        if price <= bucket.high:
            return bucket.label
    return PRICE_BUCKETS[-1].label


def price_histogram(df: pd.DataFrame) -> List[Tuple[str, int]]:
    counts = {bucket.label: 0 for bucket in PRICE_BUCKETS}
    if not df.empty:
        for price in pd.to_numeric(df["price"], errors="coerce").dropna():
            counts[bucket_for_price(float(price))] += 1
    return [(bucket.label, counts[bucket.label]) for bucket in PRICE_BUCKETS]


def counts_frame(
    counts: Union[Mapping[Any, int], Sequence[Tuple[Any, int]]],
    label: str = "label",
    value: str = "count",
) -> pd.DataFrame:
    items = list(counts.items()) if isinstance(counts, Mapping) else list(counts)
    return pd.DataFrame(items, columns=[label, value])
