"""Tests for the view summary and price distribution."""

import polars as pl

from src.app.logic.filters import FilterCriteria, apply_view_pipeline, price_bounds
from src.app.logic.summary import price_distribution, summarize_view


def test_summary_counts(records: pl.DataFrame) -> None:
    view = apply_view_pipeline(
        records, FilterCriteria(min_price=0.0, max_price=10.0, state_filter="Illinois")
    )
    summary = summarize_view(records, view)

    assert summary.caption == "Showing 3 of 5 locations"
    assert summary.state_count == 1
    assert summary.median_price == 2.5


def test_summary_of_empty_view(records: pl.DataFrame) -> None:
    summary = summarize_view(records, records.clear())

    assert summary.shown == 0
    assert summary.median_price is None


def test_price_distribution_groups_and_colors(records: pl.DataFrame) -> None:
    distribution = price_distribution(records, price_bounds(records))

    assert distribution.get_column("price_value").to_list() == [1.0, 2.5, 3.19, 4.0]
    assert distribution.get_column("stores").to_list() == [1, 2, 1, 1]
    colors = distribution.get_column("color").to_list()
    assert colors[0] == "#00ff00"
    assert colors[-1] == "#ff0000"


def test_price_distribution_empty(records: pl.DataFrame) -> None:
    distribution = price_distribution(records.clear(), price_bounds(records))
    assert distribution.is_empty()
    assert distribution.columns == ["price_value", "stores", "color"]
