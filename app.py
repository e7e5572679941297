import listing_insights.bootstrap_env  # must be first to set env/secrets

import logging

import streamlit as st

from listing_insights.config import TABS, get_setting
from listing_insights.data.filters import (
    apply_filters,
    default_filters,
    describe_active_filters,
)
from listing_insights.data.loader import DatasetError, load_listings
from listing_insights.ui.components.formatting import format_number
from listing_insights.ui.layout import setup_page, sidebar_filters_ui
from listing_insights.ui.pages import insights, listings, overview
from listing_insights.ui.pages.context import PageContext

logging.basicConfig(
    level=(get_setting("LOG_LEVEL", "INFO") or "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

PAGE_RENDERERS = {
    "overview": overview.render,
    "insights": insights.render,
    "listings": listings.render,
}


def _active_filter_summary(badges, total_rows: int, store_rows: int) -> None:
    summary_text = "Active Filters: " + " | ".join(badges) if badges else "Active Filters: All data"
    st.markdown(f"**{summary_text}**")
    st.caption(
        f"Showing {format_number(total_rows, 0)} of {format_number(store_rows, 0)} listings after filters."
    )


def _dataset_notes(diagnostics) -> None:
    dropped_price = diagnostics.get("dropped_without_price", 0)
    dropped_id = diagnostics.get("dropped_without_id", 0)
    with st.sidebar.expander("Dataset", expanded=False):
        st.caption(f"Source: {diagnostics.get('source', '–')}")
        st.caption(
            f"{format_number(diagnostics.get('dataframe_row_count'), 0)} listings loaded from "
            f"{format_number(diagnostics.get('raw_row_count'), 0)} rows, "
            f"{format_number(diagnostics.get('unique_hosts'), 0)} hosts."
        )
        if dropped_price or dropped_id:
            st.caption(
                f"Skipped {dropped_price} row(s) without a price and "
                f"{dropped_id} row(s) without an id or host id."
            )


def main() -> None:
    setup_page()
    st.title("NYC Short-Term Rental Market Analysis")
    st.caption("Insights into New York City lodging market dynamics")

    try:
        store_df = load_listings()
    except (DatasetError, FileNotFoundError) as exc:
        logger.error("Unable to load listings: %s", exc)
        st.error(f"Unable to load listings: {exc}")
        return

    if store_df.empty:
        st.warning("The listings dataset is empty.")
        return

    _dataset_notes(store_df.attrs.get("diagnostics", {}))

    defaults = default_filters(store_df)
    filters = sidebar_filters_ui(store_df, defaults)
    filtered_df = apply_filters(store_df, filters)
    logger.debug("Applied filters: %s", filtered_df.attrs.get("applied_filters"))

    _active_filter_summary(
        describe_active_filters(filters, defaults),
        total_rows=len(filtered_df),
        store_rows=len(store_df),
    )

    context = PageContext(store_df=store_df, filters=filters, defaults=defaults)

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(filtered_df, context)


if __name__ == "__main__":
    main()
