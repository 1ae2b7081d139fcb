"""Tests for price parsing and feed mapping."""

import math

import polars as pl
import pytest

from src.core.domain_models import STORE_SCHEMA, StoreRecord
from src.core.mapper import find_record, map_feed_item, map_feed_to_df, map_row_to_record
from src.core.normalization import parse_price
from tests.helpers import make_store


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("$2.49", 2.49),
        (" $ 3.00 ", 3.0),
        ("US$4.10", 4.1),
        ("$1,234.50", 1234.5),
        ("0", 0.0),
        (2.5, 2.5),
    ],
)
def test_parse_price(raw: str | float, expected: float) -> None:
    assert parse_price(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", [None, "", "$", "n/a", "$-1.00", "$nan", "$inf", True])
def test_parse_price_rejects_garbage(raw: object) -> None:
    assert parse_price(raw) is None  # type: ignore[arg-type]


def test_map_feed_item_renames_fields() -> None:
    row = map_feed_item(make_store("1001", "$2.99", **{"Product Title": "Milk 1gal"}))

    assert row["id"] == "1001"
    assert row["state_name"] == "Illinois"
    assert row["state_code"] == "IL"
    assert row["price"] == "$2.99"
    assert math.isclose(row["price_value"], 2.99)
    assert row["location_description"] == "North"
    assert row["product_title"] == "Milk 1gal"
    assert row["county"] is None


def test_map_feed_to_df_follows_schema(store_feed: list[dict]) -> None:
    df = map_feed_to_df(store_feed)

    assert dict(df.schema) == STORE_SCHEMA
    assert df.height == len(store_feed)
    assert df.get_column("id").to_list() == ["1", "2", "3", "4", "5"]


def test_map_feed_to_df_tolerates_missing_and_odd_entries() -> None:
    feed = [
        {"store_id": 7, "Price": "$1.50"},
        "not an object",
        make_store("8", "free"),
    ]
    df = map_feed_to_df(feed)  # type: ignore[arg-type]

    assert df.height == 2
    assert df.get_column("id").to_list() == ["7", "8"]
    assert df.get_column("name").to_list() == [None, "Target"]
    assert df.get_column("price_value").to_list() == [1.5, None]


def test_map_feed_to_df_empty() -> None:
    df = map_feed_to_df([])
    assert df.is_empty()
    assert set(df.columns) == set(STORE_SCHEMA)


def test_row_to_record_and_lookup(records: pl.DataFrame) -> None:
    record = map_row_to_record(records, 1)
    assert isinstance(record, StoreRecord)
    assert record.id == "2"
    assert record.city == "Minneapolis"
    assert record.price_value == 4.0

    assert find_record(records, "3").name == "Target Lakeside"  # type: ignore[union-attr]
    assert find_record(records, "missing") is None


def test_record_optional_fields() -> None:
    record = StoreRecord(id="x", address_line2="Suite 5")
    assert record.display_state == "Unknown"
    assert record.extra_address_lines == ["Suite 5"]
