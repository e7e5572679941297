"""
Filter utilities that apply the dashboard filters to the listings dataset.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from listing_insights.data.models import Listing

EMPTY_PRICE_BOUNDS: Tuple[float, float] = (0.0, 1000.0)


@dataclass(frozen=True)
class ListingFilters:
    neighbourhood_groups: Tuple[str, ...] = ()
    room_types: Tuple[str, ...] = ()
    price_range: Tuple[float, float] = EMPTY_PRICE_BOUNDS
    min_reviews: int = 0
    min_availability: int = 0


def neighbourhood_group_options(df: pd.DataFrame) -> List[str]:
    if df.empty or "neighbourhood_group" not in df:
        return []
    values = df["neighbourhood_group"].dropna().astype(str)
    return sorted(v for v in values.unique().tolist() if v)


def room_type_options(df: pd.DataFrame) -> List[str]:
    if df.empty or "room_type" not in df:
        return []
    values = df["room_type"].dropna().astype(str)
    return sorted(v for v in values.unique().tolist() if v)


def price_bounds(df: pd.DataFrame) -> Tuple[float, float]:
    if df.empty or "price" not in df:
        return EMPTY_PRICE_BOUNDS
    prices = pd.to_numeric(df["price"], errors="coerce").dropna()
    if prices.empty:
        return EMPTY_PRICE_BOUNDS
    return float(prices.min()), float(prices.max())


def default_filters(df: pd.DataFrame) -> ListingFilters:
    """
    Unrestricted configuration for `df`: every facet accepted, the price range
    spanning the dataset and zero minimums.
    """
    return ListingFilters(price_range=price_bounds(df))


def _at_least(value: Optional[float], bound: float) -> bool:
    return value is not None and value >= bound


def accepts(listing: Listing, filters: ListingFilters) -> bool:
    if filters.neighbourhood_groups and listing.neighbourhood_group not in filters.neighbourhood_groups:
        return False
    if filters.room_types and listing.room_type not in filters.room_types:
        return False
    price_min, price_max = filters.price_range
    if listing.price is None or not (price_min <= listing.price <= price_max):
        return False
    if not _at_least(listing.number_of_reviews, filters.min_reviews):
        return False
    if not _at_least(listing.availability_365, filters.min_availability):
        return False
    return True


def filter_mask(df: pd.DataFrame, filters: ListingFilters) -> pd.Series:
    """Row-wise `accepts` over the whole frame as a boolean Series."""
    mask = pd.Series(True, index=df.index, dtype=bool)
    if df.empty:
        return mask

    if filters.neighbourhood_groups:
        mask &= df["neighbourhood_group"].isin(filters.neighbourhood_groups)

    if filters.room_types:
        mask &= df["room_type"].isin(filters.room_types)

    price_min, price_max = filters.price_range
    price_series = pd.to_numeric(df["price"], errors="coerce")
    mask &= (price_series >= price_min) & (price_series <= price_max)

    reviews = pd.to_numeric(df["number_of_reviews"], errors="coerce")
    mask &= reviews >= filters.min_reviews

    availability = pd.to_numeric(df["availability_365"], errors="coerce")
    mask &= availability >= filters.min_availability

    return mask.fillna(False).astype(bool)


def apply_filters(df: pd.DataFrame, filters: ListingFilters) -> pd.DataFrame:
    """
    Return the listings accepted by `filters`, keeping the store order.

    An inverted price range is not corrected; it simply matches nothing.
    """
    if df.empty:
        filtered = df.copy()
    else:
        filtered = df.loc[filter_mask(df, filters)].copy()
    filtered.attrs["applied_filters"] = serialize_filters(filters)
    return filtered


def serialize_filters(filters: ListingFilters) -> Dict[str, Any]:
    """
    Convert the ListingFilters dataclass to a JSON-serialisable dictionary. It is
    attached to filtered frames as `attrs["applied_filters"]` and logged by the app.
    """
    return {
        "neighbourhood_groups": list(filters.neighbourhood_groups),
        "room_types": list(filters.room_types),
        "price_range": [float(filters.price_range[0]), float(filters.price_range[1])],
        "min_reviews": int(filters.min_reviews),
        "min_availability": int(filters.min_availability),
    }


def describe_active_filters(filters: ListingFilters, defaults: ListingFilters) -> List[str]:
    badges: List[str] = []
    if filters.neighbourhood_groups:
        badges.append("Borough: " + ", ".join(filters.neighbourhood_groups))
    if filters.room_types:
        badges.append("Room Type: " + ", ".join(filters.room_types))
    if tuple(filters.price_range) != tuple(defaults.price_range):
        price_min, price_max = filters.price_range
        badges.append(f"Price: ${price_min:,.0f} – ${price_max:,.0f}")
    if filters.min_reviews > defaults.min_reviews:
        badges.append(f"Reviews ≥ {filters.min_reviews}")
    if filters.min_availability > defaults.min_availability:
        badges.append(f"Availability ≥ {filters.min_availability} days")
    return badges
