from __future__ import annotations

import pandas as pd
import streamlit as st

from listing_insights.analytics.grouping import (
    PRICE_BUCKETS,
    counts_frame,
    listings_by_region,
    listings_by_room_type,
    price_histogram,
)
from listing_insights.analytics.metrics import compute_metrics
from listing_insights.ui.components.charts import DEFAULT_COLOR_SEQUENCE, bar_chart, render_plotly
from listing_insights.ui.components.formatting import format_number
from listing_insights.ui.components.kpi import KpiCard, render_kpi_cards
from listing_insights.ui.pages.context import PageContext


def _distribution_chart(counts: pd.DataFrame, title: str, color: str, ordered: bool = False):
    category_orders = {"label": counts["label"].tolist()} if ordered else None
    return bar_chart(
        counts,
        x="label",
        y="count",
        title=title,
        xaxis_title="",
        yaxis_title="Listings",
        category_orders=category_orders,
        bar_color=color,
    )


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Market Overview")
    metrics = compute_metrics(df)

    render_kpi_cards(
        [
            KpiCard(
                "Total Listings",
                value=metrics.total_listings,
                help_text=f"of {format_number(len(context.store_df))} in the dataset",
            ),
            KpiCard("Average Price", value=metrics.average_price, currency=True, help_text="Per night"),
            KpiCard("Median Price", value=metrics.median_price, currency=True, help_text="Market midpoint"),
            KpiCard("Avg Reviews", value=metrics.average_reviews, help_text="Per listing"),
        ],
        columns=4,
    )
    render_kpi_cards(
        [
            KpiCard(
                "Most Common Room Type",
                value_display=metrics.most_common_room_type or "–",
                help_text="Popular choice",
            ),
            KpiCard(
                "Top Borough",
                value_display=metrics.most_popular_neighbourhood or "–",
                help_text="Most listings",
            ),
            KpiCard(
                "Avg Availability",
                value=metrics.average_availability,
                suffix=" days",
                help_text="Bookable days per year",
            ),
        ],
        columns=3,
    )

    if df.empty:
        st.info("No listings match the current filters.")
        return

    col_region, col_room = st.columns(2)
    with col_region:
        region_counts = counts_frame(listings_by_region(df))
        render_plotly(
            _distribution_chart(region_counts, "Listings by Borough", DEFAULT_COLOR_SEQUENCE[0])
        )
    with col_room:
        room_counts = counts_frame(listings_by_room_type(df))
        render_plotly(
            _distribution_chart(room_counts, "Listings by Room Type", DEFAULT_COLOR_SEQUENCE[1])
        )

    price_counts = counts_frame(price_histogram(df))
    render_plotly(
        _distribution_chart(
            price_counts,
            "Price Distribution (per night)",
            DEFAULT_COLOR_SEQUENCE[2],
            ordered=True,
        )
    )
    st.caption(
        "Buckets: " + ", ".join(bucket.label for bucket in PRICE_BUCKETS)
        + ". Empty buckets are shown with zero listings."
    )
