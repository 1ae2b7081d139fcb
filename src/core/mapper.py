"""
Mapping Layer: Transforms the raw store feed into domain models.

This module bridges the gap between raw data (a JSON array of dicts)
and our internal domain representation (Polars DataFrame + Pydantic models).
"""

from typing import Any

import polars as pl
from loguru import logger

from src.core.domain_models import FEED_FIELD_MAP, STORE_SCHEMA, StoreRecord
from src.core.normalization import normalize_text, parse_price


def map_feed_item(item: dict[str, Any]) -> dict[str, Any]:
    """
    Map one feed object to a row of the store table.

    Missing keys become nulls. The raw price string is kept for display,
    its parsed value goes to `price_value`.

    Args:
        item: Feed object as decoded from JSON

    Returns:
        Row dict keyed by `STORE_SCHEMA` columns
    """
    row: dict[str, Any] = {column: None for column in STORE_SCHEMA}
    for feed_key, column in FEED_FIELD_MAP.items():
        row[column] = normalize_text(item.get(feed_key))

    row["price_value"] = parse_price(row["price"])
    return row


def map_feed_to_df(items: list[dict[str, Any]]) -> pl.DataFrame:
    """
    Map the decoded feed to the store table.

    Args:
        items: JSON array of store objects

    Returns:
        Polars DataFrame following `STORE_SCHEMA`, in feed order
    """
    rows = [map_feed_item(item) for item in items if isinstance(item, dict)]

    skipped = len(items) - len(rows)
    if skipped:
        logger.warning(f"Skipped {skipped} feed entries that are not objects")

    df = pl.DataFrame(rows, schema=STORE_SCHEMA)

    unparsed = df.filter(pl.col("price_value").is_null()).height
    if unparsed:
        logger.warning(f"{unparsed} records have a missing or unparseable price")

    return df


def map_row_to_record(df: pl.DataFrame, index: int) -> StoreRecord:
    """Build a StoreRecord for the row at `index`."""
    return StoreRecord.from_row(df.row(index, named=True))


def find_record(df: pl.DataFrame, record_id: str) -> StoreRecord | None:
    """Look up a record by id, or None if it is not in the table."""
    matches = df.filter(pl.col("id") == record_id)
    if matches.is_empty():
        return None
    return map_row_to_record(matches, 0)
