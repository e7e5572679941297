"""
Listing record definition and helpers to move between records and DataFrames.
"""

from __future__ import annotations

import datetime as dt
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Iterable, List, Mapping, Optional, Tuple

import pandas as pd


@dataclass(frozen=True)
class Listing:
    id: int
    listing_id: int
    name: str
    host_id: int
    host_name: str
    neighbourhood_group: str
    neighbourhood: str
    latitude: float
    longitude: float
    room_type: str
    price: float
    minimum_nights: int
    number_of_reviews: int
    availability_365: int
    calculated_host_listings_count: int
    last_review: Optional[dt.date] = None
    reviews_per_month: Optional[float] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Listing":
        values = {}
        for field in fields(cls):
            value = row.get(field.name) if hasattr(row, "get") else row[field.name]
            values[field.name] = _clean_value(field.name, value)
        return cls(**values)


LISTING_COLUMNS: Tuple[str, ...] = tuple(field.name for field in fields(Listing))

INT_COLUMNS = [
    "id",
    "listing_id",
    "host_id",
    "minimum_nights",
    "number_of_reviews",
    "availability_365",
    "calculated_host_listings_count",
]
FLOAT_COLUMNS = ["latitude", "longitude", "price", "reviews_per_month"]
TEXT_COLUMNS = ["name", "host_name", "neighbourhood_group", "neighbourhood", "room_type"]


def _is_missing(value: Any) -> bool:
    if value is None or value is pd.NaT:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return False


def _clean_value(name: str, value: Any) -> Any:
    if _is_missing(value):
        if name in TEXT_COLUMNS:
            return ""
        return None
    if name == "last_review":
        if isinstance(value, pd.Timestamp):
            return value.date()
        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, dt.date):
            return value
        parsed = pd.to_datetime(value, errors="coerce")
        return None if pd.isna(parsed) else parsed.date()
    if name in INT_COLUMNS:
        return int(value)
    if name in FLOAT_COLUMNS:
        return float(value)
    return str(value)


def coerce_listing_dtypes(df: pd.DataFrame) -> pd.DataFrame:
    """Coerce known listing columns to their store dtypes (modifies `df`)."""
    for col in INT_COLUMNS + FLOAT_COLUMNS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    for col in TEXT_COLUMNS:
        if col in df.columns:
            df[col] = df[col].fillna("").astype(str)
    if "last_review" in df.columns:
        df["last_review"] = pd.to_datetime(df["last_review"], errors="coerce")
    return df


def listings_to_frame(listings: Iterable[Listing]) -> pd.DataFrame:
    records: List[dict] = [asdict(listing) for listing in listings]
    if not records:
        return pd.DataFrame(columns=list(LISTING_COLUMNS))
    df = pd.DataFrame.from_records(records, columns=list(LISTING_COLUMNS))
    return coerce_listing_dtypes(df)


def frame_to_listings(df: pd.DataFrame) -> List[Listing]:
    return [Listing.from_row(row) for row in df.to_dict(orient="records")]
