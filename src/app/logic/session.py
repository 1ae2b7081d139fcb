"""Session-scoped state for the dashboard.

All mutable UI state lives in one DashboardSession kept in Streamlit's
session state. Pages pass it explicitly to logic and view functions.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Any

import polars as pl

from src.app.logic.data_loader import LoadState
from src.app.logic.filters import (
    FilterCriteria,
    apply_view_pipeline,
    available_states,
    default_criteria,
    price_bounds,
)
from src.core.domain_models import PriceBounds, StoreRecord, ViewMode

SESSION_KEY = "store_price_dashboard"


@dataclass
class SelectionState:
    """At most one record picked for the detail panel."""

    selected: StoreRecord | None = None

    def select(self, record: StoreRecord) -> None:
        self.selected = record

    def dismiss(self) -> None:
        self.selected = None

    def is_selected(self, record_id: str) -> bool:
        return self.selected is not None and self.selected.id == record_id


@dataclass
class DashboardSession:
    """Everything a single browser session owns."""

    load_state: LoadState = field(default_factory=LoadState.pending)
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    selection: SelectionState = field(default_factory=SelectionState)
    view_mode: ViewMode = ViewMode.GRID
    show_filters: bool = False

    @property
    def records(self) -> pl.DataFrame:
        return self.load_state.records

    @property
    def bounds(self) -> PriceBounds:
        return price_bounds(self.records)

    @property
    def states(self) -> list[str]:
        return available_states(self.records)

    def apply_load_state(self, state: LoadState) -> None:
        """Store the load outcome; a ready state seeds the filter defaults."""
        self.load_state = state
        if state.is_ready:
            self.criteria = default_criteria(state.records)

    def reset_filters(self) -> None:
        self.criteria = default_criteria(self.records)

    def derived_view(self) -> pl.DataFrame:
        return apply_view_pipeline(self.records, self.criteria)


def get_session(
    session_state: MutableMapping[str, Any],
    default_view_mode: ViewMode = ViewMode.GRID,
) -> DashboardSession:
    """Return the session's DashboardSession, creating it on first access."""
    if SESSION_KEY not in session_state:
        session_state[SESSION_KEY] = DashboardSession(view_mode=default_view_mode)
    session: DashboardSession = session_state[SESSION_KEY]
    return session
