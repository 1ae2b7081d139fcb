"""Aggregates shown next to the store view."""

from dataclasses import dataclass

import polars as pl

from src.app.logic.price_colors import color_for_price, to_hex
from src.core.domain_models import PriceBounds


@dataclass
class ViewSummary:
    shown: int
    total: int
    state_count: int
    median_price: float | None

    @property
    def caption(self) -> str:
        return f"Showing {self.shown:,} of {self.total:,} locations"


def summarize_view(records: pl.DataFrame, view: pl.DataFrame) -> ViewSummary:
    """Counts for the header line and the CLI summary."""
    prices = view.get_column("price_value").drop_nulls()
    median = float(prices.median()) if not prices.is_empty() else None  # type: ignore[arg-type]
    return ViewSummary(
        shown=view.height,
        total=records.height,
        state_count=view.get_column("state_name").drop_nulls().n_unique(),
        median_price=median,
    )


def price_distribution(view: pl.DataFrame, bounds: PriceBounds) -> pl.DataFrame:
    """Number of stores per distinct price, with the matching badge color."""
    counts = (
        view.drop_nulls("price_value")
        .group_by("price_value")
        .agg(pl.len().alias("stores"))
        .sort("price_value")
    )
    colors = [
        to_hex(color_for_price(price, bounds))
        for price in counts.get_column("price_value").to_list()
    ]
    return counts.with_columns(pl.Series("color", colors, dtype=pl.Utf8))
