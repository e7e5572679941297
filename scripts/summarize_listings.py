"""Quick summary of a listings file outside Streamlit.

Run with `python scripts/summarize_listings.py [path/to/listings.csv]` to print
the headline metrics, price distribution and top hosts for the full dataset.
"""

from __future__ import annotations

import sys

from listing_insights.analytics.grouping import listings_by_region, price_histogram
from listing_insights.analytics.leaderboard import top_hosts
from listing_insights.analytics.metrics import compute_metrics
from listing_insights.config import DEFAULT_DATA_PATH
from listing_insights.data.loader import read_listings_csv


def main() -> None:
    path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_DATA_PATH
    df = read_listings_csv(path)

    metrics = compute_metrics(df)
    print(f"Listings: {metrics.total_listings}")
    print(f"Average price: ${metrics.average_price}  Median price: ${metrics.median_price}")
    print(f"Most common room type: {metrics.most_common_room_type}")
    print(f"Top borough: {metrics.most_popular_neighbourhood}")
    print(f"Avg reviews: {metrics.average_reviews}  Avg availability: {metrics.average_availability} days")

    print("\nBy borough:")
    for region, count in listings_by_region(df).items():
        print(f"  {region:<15} {count}")

    print("\nPrice distribution:")
    for label, count in price_histogram(df):
        print(f"  {label:<10} {count}")

    print("\nTop hosts:")
    for rank, host in enumerate(top_hosts(df, 5), start=1):
        print(f"  {rank}. {host.host_name} ({host.host_id}): {host.count}")


if __name__ == "__main__":
    main()
