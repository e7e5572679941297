from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from listing_insights.config import DEFAULT_DATA_PATH

APP_PATH = Path(__file__).resolve().parents[1] / "app.py"


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("LISTINGS_CSV_PATH", str(DEFAULT_DATA_PATH))
    return AppTest.from_file(str(APP_PATH), default_timeout=30).run()


def _captions(app):
    return [c.value for c in app.caption] + [c.value for c in app.sidebar.caption]


def test_app_renders_without_errors(app):
    assert not app.exception
    assert not app.error


def test_pages_report_against_the_whole_dataset(app):
    captions = _captions(app)
    assert "53 of 53 listings match" in captions
    assert "Hosts with the most listings among all listings" in captions


def test_dataset_notes_show_skipped_rows(app):
    captions = _captions(app)
    assert "Skipped 1 row(s) without a price and 0 row(s) without an id or host id." in captions
    assert any(caption.startswith("Source: ") and caption.endswith("sample_listings.csv") for caption in captions)
