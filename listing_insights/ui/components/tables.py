"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import streamlit as st

from listing_insights.ui.components.formatting import format_currency, format_number, format_percent


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
    height: int = 400,
    show_index: bool = False,
    export_file_name: Optional[str] = "export.csv",
    export_df: Optional[pd.DataFrame] = None,
) -> None:
    if df.empty:
        st.info("No data to display.")
        return

    formatted_df = df.copy()
    if column_config:
        for column, config in column_config.items():
            if column not in formatted_df.columns:
                continue
            fmt_type = config.get("type")
            decimals = int(config.get("decimals", 0))
            if fmt_type == "currency":
                suffix = config.get("suffix", "")
                formatted_df[column] = formatted_df[column].apply(
                    lambda v: format_currency(v, decimals=decimals, suffix=suffix)
                )
            elif fmt_type == "percent":
                formatted_df[column] = formatted_df[column].apply(
                    lambda v: format_percent(v, decimals=decimals)
                )
            elif fmt_type == "number":
                formatted_df[column] = formatted_df[column].apply(
                    lambda v: format_number(v, decimals=decimals)
                )

    st.dataframe(
        formatted_df,
        use_container_width=True,
        height=height,
        hide_index=not show_index,
    )

    if export_file_name:
        source = export_df if export_df is not None else df
        csv_bytes = source.to_csv(index=show_index).encode("utf-8")
        st.download_button(
            "Download CSV",
            data=csv_bytes,
            file_name=export_file_name,
            mime="text/csv",
            key=f"download_{export_file_name}",
        )
