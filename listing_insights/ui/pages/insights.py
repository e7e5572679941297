from __future__ import annotations

import pandas as pd
import streamlit as st

from listing_insights.analytics.leaderboard import hosts_frame, top_hosts
from listing_insights.analytics.metrics import compute_insights
from listing_insights.config import HIGHLY_REVIEWED_THRESHOLD, TOP_HOSTS_LIMIT
from listing_insights.data.filters import describe_active_filters
from listing_insights.ui.components.formatting import format_number, format_percent
from listing_insights.ui.components.tables import render_table
from listing_insights.ui.pages.context import PageContext


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Key Insights")
    if df.empty:
        st.info("No listings match the current filters.")
        return

    insights = compute_insights(df)
    col_trend, col_booking, col_availability = st.columns(3)
    with col_trend:
        st.markdown("**Market Trend**")
        st.write(
            f"{format_number(insights.highly_reviewed_listings)} listings have "
            f"{HIGHLY_REVIEWED_THRESHOLD}+ reviews, indicating strong market presence."
        )
    with col_booking:
        st.markdown("**Booking Pattern**")
        st.write(f"Average minimum stay is {format_number(insights.average_minimum_nights)} nights.")
    with col_availability:
        st.markdown("**Availability Insight**")
        st.write(
            f"{format_percent(insights.fully_booked_pct)} of listings "
            f"({format_number(insights.fully_booked_listings)}) have no open days in the next year."
        )

    st.subheader("Top Hosts")
    scope = describe_active_filters(context.filters, context.defaults)
    st.caption(
        "Hosts with the most listings among " + ("; ".join(scope) if scope else "all listings")
    )
    leaderboard = hosts_frame(top_hosts(df, TOP_HOSTS_LIMIT))
    leaderboard = leaderboard.rename(
        columns={"rank": "#", "host_id": "Host ID", "host_name": "Host", "count": "Listings"}
    )
    render_table(leaderboard, height=220, export_file_name="top_hosts.csv")
