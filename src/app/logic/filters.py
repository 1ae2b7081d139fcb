"""Derived-view pipeline: filter and sort the store table.

Pure Polars functions of (records, criteria). Nothing here touches
session state or Streamlit.
"""

from dataclasses import dataclass, replace

import polars as pl

from src.core.domain_models import PriceBounds, SortOrder


@dataclass
class FilterCriteria:
    """User-chosen constraints applied to the store table."""

    search_text: str = ""
    min_price: float = 0.0
    max_price: float = 0.0
    state_filter: str | None = None
    sort_order: SortOrder = SortOrder.NONE

    def __post_init__(self) -> None:
        if self.min_price > self.max_price:
            raise ValueError(
                f"min_price ({self.min_price}) must not exceed max_price ({self.max_price})"
            )


def price_bounds(records: pl.DataFrame) -> PriceBounds:
    """Lowest and highest parsed price, ignoring unparseable prices."""
    prices = records.get_column("price_value").drop_nulls()
    if prices.is_empty():
        return PriceBounds()
    return PriceBounds(min=float(prices.min()), max=float(prices.max()))  # type: ignore[arg-type]


def available_states(records: pl.DataFrame) -> list[str]:
    """Distinct state names, sorted alphabetically."""
    return records.get_column("state_name").drop_nulls().unique().sort().to_list()


def default_criteria(records: pl.DataFrame) -> FilterCriteria:
    """Criteria that let every record with a valid price through."""
    bounds = price_bounds(records)
    return FilterCriteria(min_price=bounds.min, max_price=bounds.max)


def toggle_sort_order(order: SortOrder) -> SortOrder:
    """Ascending flips to descending; anything else becomes ascending."""
    return SortOrder.DESC if order == SortOrder.ASC else SortOrder.ASC


def filter_expression(criteria: FilterCriteria) -> pl.Expr:
    """Build the row predicate for `criteria`.

    Nulls never satisfy the price or state clause.
    """
    predicate = pl.col("price_value").is_between(
        criteria.min_price, criteria.max_price, closed="both"
    )

    if criteria.search_text:
        needle = criteria.search_text.lower()
        name_match = pl.col("name").str.to_lowercase().str.contains(needle, literal=True)
        city_match = pl.col("city").str.to_lowercase().str.contains(needle, literal=True)
        predicate = predicate & (name_match.fill_null(False) | city_match.fill_null(False))

    if criteria.state_filter:
        predicate = predicate & (pl.col("state_name") == criteria.state_filter)

    return predicate.fill_null(False)


def apply_view_pipeline(records: pl.DataFrame, criteria: FilterCriteria) -> pl.DataFrame:
    """Filter then sort the store table.

    Sorting is stable, so equal prices keep feed order. Records without a
    parsed price sort last in either direction.
    """
    filtered = records.filter(filter_expression(criteria))

    if criteria.sort_order == SortOrder.NONE:
        return filtered

    return filtered.sort(
        "price_value",
        descending=criteria.sort_order == SortOrder.DESC,
        nulls_last=True,
        maintain_order=True,
    )


# --- Price range adjustment ---


def value_at_fraction(fraction: float, bounds: PriceBounds) -> float:
    """Map a pointer position in [0, 1] linearly onto the price bounds.

    The fraction is clamped first; the result is rounded to cents.
    """
    clamped = max(0.0, min(1.0, fraction))
    return round(bounds.min + bounds.span * clamped, 2)


def with_min_price(criteria: FilterCriteria, value: float) -> FilterCriteria:
    """Move the lower bound, never past the upper bound."""
    return replace(criteria, min_price=min(value, criteria.max_price))


def with_max_price(criteria: FilterCriteria, value: float) -> FilterCriteria:
    """Move the upper bound, never below the lower bound."""
    return replace(criteria, max_price=max(value, criteria.min_price))


def with_price_range(criteria: FilterCriteria, low: float, high: float) -> FilterCriteria:
    """Set both bounds at once, as a two-handle slider reports them."""
    low, high = sorted((low, high))
    return replace(criteria, min_price=low, max_price=high)
