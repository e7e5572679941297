import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple, Union

import pandas as pd
import streamlit as st

from listing_insights.config import DEFAULT_DATA_PATH, get_setting
from listing_insights.data.models import LISTING_COLUMNS, coerce_listing_dtypes

logger = logging.getLogger(__name__)

SENTINELS: Set[str] = {"", "None", "none", "N/A", "n/a", "NA", "na", "null", "Null", "-", "—"}

REQUIRED_COLUMNS: List[str] = [
    "id",
    "host_id",
    "neighbourhood_group",
    "room_type",
    "price",
    "number_of_reviews",
    "availability_365",
]

# Count-like columns where a blank cell means zero.
ZERO_FILL_COLUMNS: List[str] = [
    "minimum_nights",
    "number_of_reviews",
    "availability_365",
    "calculated_host_listings_count",
]

ID_COLUMNS: List[str] = ["id", "listing_id", "host_id"]


class DatasetError(ValueError):
    """Raised when the listings file cannot be used as a listing store."""


def _normalize_sentinels(df: pd.DataFrame) -> pd.DataFrame:
    """Replace sentinel string tokens with None (in-place) and record counts in df.attrs.

    Adds / updates:
        df.attrs['sentinel_replacements'] = {column: count_replaced, ...}
    """
    replacements = {}
    for col in df.columns:
        if df[col].dtype == object:
            mask = df[col].apply(lambda v: isinstance(v, str) and v.strip() in SENTINELS)
            count = int(mask.sum())
            if count:
                replacements[col] = count
                df.loc[mask, col] = None
    if replacements:
        existing = df.attrs.get("sentinel_replacements", {})
        existing.update(replacements)
        df.attrs["sentinel_replacements"] = existing
    return df


def read_listings_csv(path: Union[str, Path]) -> pd.DataFrame:
    """Read a listings CSV and return a normalised, ordered listing store."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Listings file not found: {path}")

    logger.info("Loading listings from %s", path)
    df = pd.read_csv(path, dtype=object, keep_default_na=False)
    raw_rows = len(df)

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise DatasetError(f"Listings file {path} is missing required columns: {missing}")

    df = _normalize_sentinels(df)
    sentinel_replacements = dict(df.attrs.get("sentinel_replacements", {}))

    if "listing_id" not in df.columns:
        df["listing_id"] = df["id"]
    else:
        df["listing_id"] = df["listing_id"].fillna(df["id"])
    for col in LISTING_COLUMNS:
        if col not in df.columns:
            df[col] = None

    df = coerce_listing_dtypes(df[list(LISTING_COLUMNS)].copy())
    for col in ZERO_FILL_COLUMNS:
        df[col] = df[col].fillna(0).astype(int)

    unpriced = df["price"].isna()
    dropped = int(unpriced.sum())
    if dropped:
        logger.warning("Dropping %d listing(s) without a numeric price from %s", dropped, path.name)
        df = df.loc[~unpriced]

    unidentified = df["id"].isna() | df["host_id"].isna()
    dropped_unidentified = int(unidentified.sum())
    if dropped_unidentified:
        logger.warning(
            "Dropping %d listing(s) without a numeric id or host_id from %s",
            dropped_unidentified,
            path.name,
        )
        df = df.loc[~unidentified]
    df = df.reset_index(drop=True)
    df["listing_id"] = df["listing_id"].fillna(df["id"])
    for col in ID_COLUMNS:
        df[col] = df[col].astype(int)

    df.attrs["diagnostics"] = {
        "source": str(path),
        "raw_row_count": raw_rows,
        "dataframe_row_count": int(len(df)),
        "dropped_without_price": dropped,
        "dropped_without_id": dropped_unidentified,
        "unique_hosts": int(df["host_id"].nunique()),
        "sentinel_replacements": sentinel_replacements,
        "last_review_non_null": int(df["last_review"].notna().sum()),
    }
    logger.info("Loaded %d listings (%d raw rows)", len(df), raw_rows)
    return df


def load_listings(path: Optional[Union[str, Path]] = None) -> pd.DataFrame:
    """Wrapper that resolves the dataset location and calls the cached implementation."""
    resolved = path or get_setting("LISTINGS_CSV_PATH") or DEFAULT_DATA_PATH
    df, diagnostics = _load_listings_impl(str(resolved))
    # attrs do not survive the cache round-trip
    df.attrs["diagnostics"] = diagnostics
    return df


@st.cache_data(show_spinner=False)
def _load_listings_impl(path: str) -> Tuple[pd.DataFrame, Dict[str, Any]]:
    """Load once per path; the store is read-only after this point."""
    df = read_listings_csv(path)
    return df, dict(df.attrs.get("diagnostics", {}))
