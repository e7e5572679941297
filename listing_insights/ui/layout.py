"""
Layout helpers for the Streamlit application (page setup and sidebar filters).
"""

from __future__ import annotations

import math
from typing import List, Tuple

import pandas as pd
import streamlit as st

from listing_insights.data.filters import (
    ListingFilters,
    neighbourhood_group_options,
    room_type_options,
)

STATE_PREFIX = "li_"


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="NYC Short-Term Rental Market Analysis",
        layout="wide",
        page_icon=":house:",
    )


def _multiselect_with_counts(
    label: str,
    key: str,
    options: List[str],
    series: pd.Series,
) -> List[str]:
    if not options:
        return []
    counts = series.value_counts(dropna=False).to_dict()
    return st.sidebar.multiselect(
        label=label,
        options=options,
        default=[],
        key=key,
        placeholder="All",
        format_func=lambda v: f"{v} ({int(counts.get(v, 0))})",
    )


def _suggest_step(min_val: float, max_val: float) -> float:
    span = max_val - min_val
    if span <= 0:
        return 1.0
    exponent = math.floor(math.log10(span)) - 2
    return float(10 ** max(0, exponent))


def _price_range_input(base: Tuple[float, float]) -> Tuple[float, float]:
    base_min, base_max = base
    step = _suggest_step(base_min, base_max)
    col_min, col_max = st.sidebar.columns(2)
    with col_min:
        min_input = st.number_input(
            "Min Price ($)",
            min_value=float(base_min),
            max_value=float(base_max),
            value=float(base_min),
            step=step,
            format="%0.0f",
            key=f"{STATE_PREFIX}price_min",
        )
    with col_max:
        max_input = st.number_input(
            "Max Price ($)",
            min_value=float(base_min),
            max_value=float(base_max),
            value=float(base_max),
            step=step,
            format="%0.0f",
            key=f"{STATE_PREFIX}price_max",
        )
    if max_input < min_input:
        st.sidebar.warning("Max price is below min price; no listings can match.")
    return float(min_input), float(max_input)


def _clear_state_prefixes(prefixes: List[str]) -> None:
    for prefix in prefixes:
        for key in list(st.session_state.keys()):
            if key.startswith(prefix):
                del st.session_state[key]


def sidebar_filters_ui(df: pd.DataFrame, defaults: ListingFilters) -> ListingFilters:
    """
    Render the sidebar filter controls and return a new ListingFilters built
    from the current widget values.
    """
    st.sidebar.header("Filters")

    if st.sidebar.button("Reset", key="reset_filters", type="primary"):
        _clear_state_prefixes([STATE_PREFIX])
        st.rerun()

    neighbourhood_groups = _multiselect_with_counts(
        "Borough",
        key=f"{STATE_PREFIX}neighbourhood_group",
        options=neighbourhood_group_options(df),
        series=df.get("neighbourhood_group", pd.Series(dtype=str)),
    )
    room_types = _multiselect_with_counts(
        "Room Type",
        key=f"{STATE_PREFIX}room_type",
        options=room_type_options(df),
        series=df.get("room_type", pd.Series(dtype=str)),
    )

    st.sidebar.subheader("Price Range")
    price_range = _price_range_input(defaults.price_range)

    min_reviews = st.sidebar.number_input(
        "Minimum Reviews",
        min_value=0,
        value=defaults.min_reviews,
        step=1,
        key=f"{STATE_PREFIX}min_reviews",
    )
    min_availability = st.sidebar.number_input(
        "Minimum Availability (days/year)",
        min_value=0,
        max_value=365,
        value=defaults.min_availability,
        step=1,
        key=f"{STATE_PREFIX}min_availability",
    )

    return ListingFilters(
        neighbourhood_groups=tuple(neighbourhood_groups),
        room_types=tuple(room_types),
        price_range=price_range,
        min_reviews=int(min_reviews),
        min_availability=int(min_availability),
    )
