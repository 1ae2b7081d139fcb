"""Rendering of the header, filter panel and grid/list of stores.

Widgets write back into the DashboardSession through on_change callbacks,
so the derived view computed afterwards always reflects the latest input.
"""

from collections.abc import Callable
from dataclasses import replace

import pandas as pd
import polars as pl
import streamlit as st

from src.app.logic.filters import toggle_sort_order, with_price_range
from src.app.logic.price_colors import color_for_price, to_css_rgb
from src.app.logic.session import DashboardSession
from src.app.logic.summary import ViewSummary
from src.app.views.colors import BADGE_TEXT_COLOR, Colors
from src.app.views.common import price_badge_html
from src.core.domain_models import PriceBounds, SortOrder, StoreRecord, ViewMode

ALL_STATES = "All States"

SEARCH_KEY = "filter_search"
PRICE_RANGE_KEY = "filter_price_range"
STATE_KEY = "filter_state"
LIST_TABLE_KEY = "store_list_table"

SORT_LABELS = {
    SortOrder.NONE: "Sort by Price",
    SortOrder.ASC: "Price: Low to High",
    SortOrder.DESC: "Price: High to Low",
}


# --- Header ---


def _set_view_mode(session: DashboardSession, mode: ViewMode) -> None:
    session.view_mode = mode


def _toggle_sort(session: DashboardSession) -> None:
    session.criteria = replace(
        session.criteria, sort_order=toggle_sort_order(session.criteria.sort_order)
    )


def _toggle_filters(session: DashboardSession) -> None:
    session.show_filters = not session.show_filters


def render_header(session: DashboardSession, summary: ViewSummary) -> None:
    """Render the count line and the view/sort/filter toggles."""
    col_count, col_grid, col_list, col_sort, col_filters = st.columns([4, 1, 1, 2, 2])

    col_count.caption(summary.caption)
    col_grid.button(
        "▦ Grid",
        help="Grid view",
        type="primary" if session.view_mode == ViewMode.GRID else "secondary",
        on_click=_set_view_mode,
        args=(session, ViewMode.GRID),
        use_container_width=True,
    )
    col_list.button(
        "☰ List",
        help="List view",
        type="primary" if session.view_mode == ViewMode.LIST else "secondary",
        on_click=_set_view_mode,
        args=(session, ViewMode.LIST),
        use_container_width=True,
    )
    col_sort.button(
        f"⇅ {SORT_LABELS[session.criteria.sort_order]}",
        type="primary" if session.criteria.sort_order != SortOrder.NONE else "secondary",
        on_click=_toggle_sort,
        args=(session,),
        use_container_width=True,
    )
    col_filters.button(
        "Hide Filters" if session.show_filters else "Show Filters",
        on_click=_toggle_filters,
        args=(session,),
        use_container_width=True,
    )


# --- Filters ---


def sync_filter_widgets(session: DashboardSession) -> None:
    """Write the session's criteria into the filter widget keys."""
    criteria = session.criteria
    st.session_state[SEARCH_KEY] = criteria.search_text
    st.session_state[PRICE_RANGE_KEY] = (criteria.min_price, criteria.max_price)
    st.session_state[STATE_KEY] = criteria.state_filter or ALL_STATES


def _on_search_change(session: DashboardSession) -> None:
    session.criteria = replace(session.criteria, search_text=st.session_state[SEARCH_KEY])


def _on_price_range_change(session: DashboardSession) -> None:
    low, high = st.session_state[PRICE_RANGE_KEY]
    session.criteria = with_price_range(session.criteria, low, high)


def _on_state_change(session: DashboardSession) -> None:
    selected = st.session_state[STATE_KEY]
    session.criteria = replace(
        session.criteria, state_filter=None if selected == ALL_STATES else selected
    )


def _on_reset(session: DashboardSession) -> None:
    session.reset_filters()
    sync_filter_widgets(session)


def render_filters(session: DashboardSession, bounds: PriceBounds, states: list[str]) -> None:
    """Render search, price range and state filters."""
    if SEARCH_KEY not in st.session_state:
        sync_filter_widgets(session)

    st.text_input(
        "Search",
        placeholder="Search by store name or city...",
        key=SEARCH_KEY,
        on_change=_on_search_change,
        args=(session,),
    )

    if bounds.is_degenerate:
        st.caption(f"Price Range: all stores priced at ${bounds.min:.2f}")
    else:
        st.slider(
            "Price Range",
            min_value=bounds.min,
            max_value=bounds.max,
            step=0.01,
            format="$%.2f",
            key=PRICE_RANGE_KEY,
            on_change=_on_price_range_change,
            args=(session,),
        )

    st.selectbox(
        "State",
        options=[ALL_STATES, *states],
        key=STATE_KEY,
        on_change=_on_state_change,
        args=(session,),
    )

    st.button("Clear Filters", on_click=_on_reset, args=(session,), type="primary")


# --- Grid & list ---


def render_store_grid(
    view: pl.DataFrame,
    session: DashboardSession,
    bounds: PriceBounds,
    columns: int = 3,
) -> None:
    """Render one card per store, `columns` cards per row.

    Widget keys use the row position; ids in the feed are not guaranteed unique.
    """
    records = [StoreRecord.from_row(row) for row in view.iter_rows(named=True)]

    for start in range(0, len(records), columns):
        row_cols = st.columns(columns)
        for offset, (col, record) in enumerate(zip(row_cols, records[start : start + columns])):
            with col:
                _render_store_card(record, session, bounds, key=f"select_{start + offset}")


def _render_store_card(
    record: StoreRecord, session: DashboardSession, bounds: PriceBounds, key: str
) -> None:
    selected = session.selection.selected == record
    with st.container(border=True):
        col_text, col_badge = st.columns([3, 1])
        with col_text:
            st.markdown(f"**{record.name or 'Unnamed store'}**")
            st.caption(f"{record.city or ''}, {record.display_state}")
        with col_badge:
            st.markdown(
                price_badge_html(record.price, color_for_price(record.price_value, bounds)),
                unsafe_allow_html=True,
            )
        st.button(
            "✓ Selected" if selected else "Details",
            key=key,
            type="primary" if selected else "secondary",
            on_click=session.selection.select,
            args=(record,),
            use_container_width=True,
        )


def price_cell_style(bounds: PriceBounds) -> Callable[[float | None], str]:
    """Styler function coloring a price cell with its badge color."""

    def style(value: float | None) -> str:
        price = None if value is None or pd.isna(value) else float(value)
        color = to_css_rgb(color_for_price(price, bounds))
        return f"background-color: {color}; color: {BADGE_TEXT_COLOR}; font-weight: 600"

    return style


def _on_list_select(view: pl.DataFrame, session: DashboardSession) -> None:
    rows = st.session_state[LIST_TABLE_KEY].selection.rows
    if rows:
        session.selection.select(StoreRecord.from_row(view.row(rows[0], named=True)))


def render_store_list(view: pl.DataFrame, session: DashboardSession, bounds: PriceBounds) -> None:
    """Render the stores as a table; picking a row selects the store."""
    df_display = view.select(
        "name", "city", "state_name", "address_line1", "price", "price_value"
    ).to_pandas()

    cell_style = price_cell_style(bounds)
    # the raw string is shown, the parsed value drives the cell color
    styled = df_display.style.apply(
        lambda _: [cell_style(value) for value in df_display["price_value"]],
        subset=["price"],
    ).map(lambda _: f"color: {Colors.gray}", subset=["address_line1"])

    st.dataframe(
        styled,
        column_order=["name", "city", "state_name", "address_line1", "price"],
        column_config={
            "name": st.column_config.TextColumn("Store", width="medium"),
            "city": st.column_config.TextColumn("City", width="small"),
            "state_name": st.column_config.TextColumn("State", width="small"),
            "address_line1": st.column_config.TextColumn("Address", width="medium"),
            "price": st.column_config.TextColumn("Price", width="small"),
        },
        selection_mode="single-row",
        key=LIST_TABLE_KEY,
        on_select=lambda: _on_list_select(view, session),
        hide_index=True,
        use_container_width=True,
    )
