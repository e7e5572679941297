"""
Application-wide configuration constants and helper utilities.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import streamlit as st


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


# Ordered tab definitions for the dashboard
TABS: List[TabConfig] = [
    TabConfig("overview", "Overview"),
    TabConfig("insights", "Insights & Top Hosts"),
    TabConfig("listings", "Listings"),
]

DEFAULT_DATA_PATH = Path(__file__).resolve().parent / "data" / "sample_listings.csv"

TOP_HOSTS_LIMIT = 5
TABLE_MAX_ROWS = 15
HIGHLY_REVIEWED_THRESHOLD = 100


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec:
            v = sec.get(name)  # type: ignore[index]
            return str(v) if v is not None else default
    except Exception:
        # st.secrets raises when no secrets.toml exists
        pass
    return default
