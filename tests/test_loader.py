from __future__ import annotations

import datetime as dt

import pytest

from listing_insights.analytics.grouping import price_histogram
from listing_insights.analytics.leaderboard import HostRanking, top_hosts
from listing_insights.config import DEFAULT_DATA_PATH
from listing_insights.data.filters import apply_filters, default_filters
from listing_insights.data.loader import DatasetError, load_listings, read_listings_csv
from listing_insights.data.models import LISTING_COLUMNS, Listing, frame_to_listings

CSV_HEADER = (
    "id,name,host_id,host_name,neighbourhood_group,neighbourhood,latitude,longitude,"
    "room_type,price,minimum_nights,number_of_reviews,last_review,reviews_per_month,"
    "calculated_host_listings_count,availability_365\n"
)


def test_read_listings_csv_normalises_rows(tmp_path):
    path = tmp_path / "listings.csv"
    path.write_text(
        CSV_HEADER
        + "1,Cozy room,10,Ann,Brooklyn,Bushwick,40.7,-73.9,Private room,85,2,12,2019-06-01,0.5,1,120\n"
        + "2,No price,11,Bob,Queens,Astoria,40.7,-73.9,Private room,N/A,1,3,,,1,10\n"
        + "3,Loft,12,Cy,Manhattan,Chelsea,40.7,-74.0,Entire home/apt,240,3,,null,,2,\n",
        encoding="utf-8",
    )

    df = read_listings_csv(path)

    assert list(df.columns) == list(LISTING_COLUMNS)
    assert df["id"].tolist() == [1, 3]
    assert df["listing_id"].tolist() == [1, 3]
    assert df["number_of_reviews"].tolist() == [12, 0]
    assert df["availability_365"].tolist() == [120, 0]

    diagnostics = df.attrs["diagnostics"]
    assert diagnostics["raw_row_count"] == 3
    assert diagnostics["dropped_without_price"] == 1
    assert diagnostics["dataframe_row_count"] == 2

    listings = frame_to_listings(df)
    assert listings[0].last_review == dt.date(2019, 6, 1)
    assert listings[1].last_review is None
    assert listings[1].reviews_per_month is None


def test_missing_required_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("id,name\n1,x\n", encoding="utf-8")
    with pytest.raises(DatasetError, match="price"):
        read_listings_csv(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_listings_csv(tmp_path / "absent.csv")


def test_bundled_sample_dataset():
    df = read_listings_csv(DEFAULT_DATA_PATH)
    assert len(df) > 0
    assert df["price"].notna().all()
    assert sum(count for _, count in price_histogram(df)) == len(df)
    assert len(apply_filters(df, default_filters(df))) == len(df)


def test_listing_from_row_round_trip(make_listing):
    listing = make_listing(last_review=dt.date(2020, 1, 2), reviews_per_month=1.5)
    row = {field: getattr(listing, field) for field in LISTING_COLUMNS}
    assert Listing.from_row(row) == listing


def test_rows_without_host_id_are_dropped(tmp_path):
    path = tmp_path / "listings.csv"
    path.write_text(
        CSV_HEADER
        + "1,Attic,,Ghost,Brooklyn,Bushwick,40.7,-73.9,Private room,60,1,3,,,1,10\n"
        + "2,Basement,,Ghost,Brooklyn,Bushwick,40.7,-73.9,Private room,70,1,3,,,1,10\n"
        + "3,Garage,,Ghost,Brooklyn,Bushwick,40.7,-73.9,Private room,80,1,3,,,1,10\n"
        + "4,Loft,7,Ann,Manhattan,Chelsea,40.7,-74.0,Entire home/apt,240,3,5,,,1,100\n",
        encoding="utf-8",
    )

    df = read_listings_csv(path)

    assert df["id"].tolist() == [4]
    assert df["host_id"].tolist() == [7]
    assert df.attrs["diagnostics"]["dropped_without_id"] == 3
    assert top_hosts(df, 5) == [HostRanking(host_id=7, host_name="Ann", count=1)]
    assert sum(h.count for h in top_hosts(df, 5)) == len(df)


def test_load_listings_exposes_diagnostics(tmp_path):
    path = tmp_path / "listings.csv"
    path.write_text(
        CSV_HEADER
        + "1,Cozy room,10,Ann,Brooklyn,Bushwick,40.7,-73.9,Private room,85,2,12,,,1,120\n"
        + "2,No price,11,Bob,Queens,Astoria,40.7,-73.9,Private room,,1,3,,,1,10\n",
        encoding="utf-8",
    )

    df = load_listings(path)

    assert len(df) == 1
    assert df.attrs["diagnostics"]["dropped_without_price"] == 1
    assert df.attrs["diagnostics"]["dropped_without_id"] == 0
