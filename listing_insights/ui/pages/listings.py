from __future__ import annotations

import pandas as pd
import streamlit as st

from listing_insights.config import TABLE_MAX_ROWS
from listing_insights.ui.components.formatting import format_number
from listing_insights.ui.components.tables import render_table
from listing_insights.ui.pages.context import PageContext


DISPLAY_COLUMNS = {
    "name": "Name",
    "host_name": "Host",
    "neighbourhood_group": "Borough",
    "neighbourhood": "Neighbourhood",
    "room_type": "Room Type",
    "price": "Price",
    "number_of_reviews": "Reviews",
    "availability_365": "Availability (days)",
}


def render(df: pd.DataFrame, context: PageContext) -> None:
    st.subheader("Listings Overview")
    st.caption(f"{format_number(len(df))} of {format_number(len(context.store_df))} listings match")
    if df.empty:
        st.info("No listings match the current filters.")
        return

    display = df[list(DISPLAY_COLUMNS)].head(TABLE_MAX_ROWS).rename(columns=DISPLAY_COLUMNS)
    render_table(
        display,
        column_config={"Price": {"type": "currency", "suffix": " /night"}},
        height=560,
        export_file_name="listings_filtered.csv",
        export_df=df,
    )
    if len(df) > TABLE_MAX_ROWS:
        st.caption(f"Showing {TABLE_MAX_ROWS} of {format_number(len(df))} listings")
