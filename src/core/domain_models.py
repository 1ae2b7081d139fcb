from enum import Enum
from typing import Any

import polars as pl
from pydantic import BaseModel, ConfigDict, Field

# --- Constants & Schemas ---

# Polars schema for the in-memory store table.
# The whole feed lives in one DataFrame; StoreRecord is only built for single rows.
STORE_SCHEMA = {
    "id": pl.Utf8,
    "name": pl.Utf8,
    "city": pl.Utf8,
    "state_name": pl.Utf8,
    "state_code": pl.Utf8,
    "address_line1": pl.Utf8,
    "address_line2": pl.Utf8,
    "address_line3": pl.Utf8,
    "postal_code": pl.Utf8,
    "country": pl.Utf8,
    "county": pl.Utf8,
    "price": pl.Utf8,
    "price_value": pl.Float64,
    "location_description": pl.Utf8,
    "location_code": pl.Utf8,
    "intersection_description": pl.Utf8,
    "product_title": pl.Utf8,
}

# Feed (JSON) key -> column name
FEED_FIELD_MAP = {
    "store_id": "id",
    "name": "name",
    "city": "city",
    "state": "state_name",
    "region": "state_code",
    "address_line1": "address_line1",
    "address_line2": "address_line2",
    "address_line3": "address_line3",
    "postal_code": "postal_code",
    "country": "country",
    "county": "county",
    "Price": "price",
    "quadrant_description": "location_description",
    "quadrant_code": "location_code",
    "intersection_description": "intersection_description",
    "Product Title": "product_title",
}


# --- Enums ---


class SortOrder(str, Enum):
    """Ordering of the derived view by parsed price."""

    NONE = "none"
    ASC = "asc"
    DESC = "desc"


class ViewMode(str, Enum):
    """Layout of the derived view in the dashboard."""

    GRID = "grid"
    LIST = "list"


class LoadStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


# --- Domain Models ---


class PriceBounds(BaseModel):
    """Lowest and highest parsed price of a record set."""

    model_config = ConfigDict(frozen=True)

    min: float = 0.0
    max: float = 0.0

    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def is_degenerate(self) -> bool:
        return self.span <= 0


class StoreRecord(BaseModel):
    """
    One retail location's identifying and pricing data.

    Note: For the full feed prefer the Polars table built with `STORE_SCHEMA`.
    This model backs the selection and detail panel, where a single row is shown.
    Fields are optional because the feed is not validated record by record.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    city: str | None = None
    state_name: str | None = None
    state_code: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    postal_code: str | None = None
    country: str | None = None
    county: str | None = None
    price: str | None = None
    price_value: float | None = Field(default=None, description="Parsed numeric price")
    location_description: str | None = None
    location_code: str | None = None
    intersection_description: str | None = None
    product_title: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "StoreRecord":
        """Build a record from a row dict of the store table."""
        known = {key: row.get(key) for key in STORE_SCHEMA}
        known["id"] = str(known["id"]) if known["id"] is not None else ""
        return cls(**known)

    @property
    def display_state(self) -> str:
        return self.state_name or "Unknown"

    @property
    def extra_address_lines(self) -> list[str]:
        """Secondary address lines that are actually present."""
        return [line for line in (self.address_line2, self.address_line3) if line]
