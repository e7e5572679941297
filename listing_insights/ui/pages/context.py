from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from listing_insights.data.filters import ListingFilters


@dataclass
class PageContext:
    store_df: pd.DataFrame
    filters: ListingFilters
    defaults: ListingFilters
