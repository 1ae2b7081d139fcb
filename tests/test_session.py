"""Tests for selection and the session controller."""

from typing import Any

import polars as pl

from src.app.logic.data_loader import LoadState
from src.app.logic.filters import with_min_price
from src.app.logic.session import SESSION_KEY, DashboardSession, SelectionState, get_session
from src.core.domain_models import StoreRecord, ViewMode
from src.core.mapper import map_row_to_record


def test_selecting_replaces_previous_selection(records: pl.DataFrame) -> None:
    selection = SelectionState()
    first = map_row_to_record(records, 0)
    second = map_row_to_record(records, 1)

    selection.select(first)
    selection.select(second)

    assert selection.selected == second
    assert selection.is_selected(second.id)
    assert not selection.is_selected(first.id)


def test_dismiss_clears_selection(records: pl.DataFrame) -> None:
    selection = SelectionState()
    selection.select(map_row_to_record(records, 2))
    selection.dismiss()

    assert selection.selected is None
    assert not selection.is_selected("3")


def test_selection_does_not_touch_records(records: pl.DataFrame) -> None:
    session = DashboardSession()
    session.apply_load_state(LoadState.ready(records))
    before = session.records.clone()

    session.selection.select(map_row_to_record(records, 0))

    assert session.records.equals(before)


def test_ready_state_seeds_criteria(records: pl.DataFrame) -> None:
    session = DashboardSession()
    assert session.load_state.is_pending

    session.apply_load_state(LoadState.ready(records))

    assert session.criteria.min_price == 1.0
    assert session.criteria.max_price == 4.0
    assert session.bounds.max == 4.0
    assert session.states == ["Illinois", "Minnesota", "Wisconsin"]
    assert session.derived_view().height == records.height


def test_failed_state_keeps_empty_view() -> None:
    session = DashboardSession()
    session.apply_load_state(LoadState.failed("HTTP 503"))

    assert session.load_state.is_failed
    assert session.derived_view().is_empty()


def test_reset_filters(records: pl.DataFrame) -> None:
    session = DashboardSession()
    session.apply_load_state(LoadState.ready(records))
    session.criteria = with_min_price(session.criteria, 3.0)
    assert session.derived_view().height == 2

    session.reset_filters()

    assert session.derived_view().height == records.height


def test_get_session_creates_once() -> None:
    state: dict[str, Any] = {}

    session = get_session(state, default_view_mode=ViewMode.LIST)
    session.selection.select(StoreRecord(id="1"))

    again = get_session(state)
    assert again is session
    assert state[SESSION_KEY] is session
    assert again.view_mode == ViewMode.LIST
    assert again.selection.is_selected("1")
