"""Milk Price Tracker - Streamlit entry point.

Run with: streamlit run src/app/main.py
"""

import streamlit as st
from loguru import logger

from src.app.logic.data_loader import StoreDataLoader
from src.app.logic.details import build_detail_context
from src.app.logic.session import get_session
from src.app.logic.summary import price_distribution, summarize_view
from src.app.views.common import (
    make_price_distribution_chart,
    render_empty_state,
    render_error_state,
    render_price_legend,
)
from src.app.views.store_detail import render_store_detail
from src.app.views.store_view import (
    render_filters,
    render_header,
    render_store_grid,
    render_store_list,
)
from src.config.settings import load_config
from src.core.config import settings
from src.core.domain_models import ViewMode
from src.core.logging_setup import setup_logging

setup_logging(settings.effective_log_level)
config = load_config(settings.config_path)

st.set_page_config(
    page_title=config.ui.title,
    page_icon="🥛",
    layout="wide",
    initial_sidebar_state="expanded",
)

session = get_session(st.session_state, default_view_mode=config.ui.default_view_mode)

if session.load_state.is_pending:
    with st.spinner("Loading store data..."):
        session.apply_load_state(StoreDataLoader(config).load())

if session.load_state.is_failed:
    render_error_state(session.load_state.message)
    st.stop()

st.title(f"🥛 {config.ui.title}")

bounds = session.bounds
view = session.derived_view()
summary = summarize_view(session.records, view)
logger.debug(f"Derived view: {summary.shown} of {summary.total} records")

render_header(session, summary)

if session.show_filters:
    with st.container(border=True):
        render_filters(session, bounds, session.states)

render_price_legend(bounds)

with st.expander("Price distribution"):
    st.plotly_chart(
        make_price_distribution_chart(price_distribution(view, bounds)),
        use_container_width=True,
    )

if view.is_empty():
    render_empty_state("No stores match the current filters.")
elif session.view_mode == ViewMode.GRID:
    render_store_grid(view, session, bounds, columns=config.ui.grid_columns)
else:
    render_store_list(view, session, bounds)

if session.selection.selected is not None:
    render_store_detail(
        build_detail_context(session.selection.selected, config.ui.maps_search_url),
        session.selection,
    )
