from __future__ import annotations

import itertools

import pytest

from listing_insights.data.models import Listing, listings_to_frame


@pytest.fixture
def make_listing():
    ids = itertools.count(1)

    def _make(**overrides) -> Listing:
        listing_id = next(ids)
        values = dict(
            id=listing_id,
            listing_id=1000 + listing_id,
            name=f"Listing {listing_id}",
            host_id=1,
            host_name="Host",
            neighbourhood_group="Manhattan",
            neighbourhood="Harlem",
            latitude=40.8,
            longitude=-73.9,
            room_type="Private room",
            price=100,
            minimum_nights=1,
            number_of_reviews=10,
            availability_365=100,
            calculated_host_listings_count=1,
        )
        values.update(overrides)
        return Listing(**values)

    return _make


@pytest.fixture
def make_frame(make_listing):
    def _frame(*rows):
        return listings_to_frame([make_listing(**row) for row in rows])

    return _frame
