"""Common UI components shared across the dashboard.

Pure rendering functions for reusable Streamlit widgets.
"""

import plotly.graph_objects as go
import polars as pl
import streamlit as st

from src.app.logic.price_colors import RGBColor, color_for_price, to_css_rgb, to_hex
from src.app.views.colors import BADGE_TEXT_COLOR, Colors
from src.core.domain_models import PriceBounds

GLOBAL_MARGINS = dict(t=30, l=5, r=5, b=0)
GLOBAL_FONT = dict(
    family="Arial",
    size=14,
)


def render_empty_state(message: str, icon: str = "🥛") -> None:
    """Render empty state placeholder when no stores match.

    Args:
        message: Message to display
        icon: Emoji icon to show
    """
    st.info(f"{icon} {message}")


def render_error_state(message: str) -> None:
    """Render the load failure placeholder."""
    st.markdown(
        f"<div style='text-align:center;color:{Colors.red};padding-top:4rem'>"
        "<p style='font-size:1.25rem;font-weight:600'>Error loading data</p>"
        "</div>",
        unsafe_allow_html=True,
    )
    st.error(message)


def price_badge_html(price_label: str | None, color: RGBColor, size_rem: float = 3.0) -> str:
    """Round badge showing the raw price string on its price color."""
    return (
        f"<div style='display:flex;align-items:center;justify-content:center;"
        f"width:{size_rem}rem;height:{size_rem}rem;border-radius:50%;"
        f"background-color:{to_css_rgb(color)};color:{BADGE_TEXT_COLOR};"
        f"font-weight:600;font-size:0.8rem'>{price_label or 'n/a'}</div>"
    )


def render_price_legend(bounds: PriceBounds) -> None:
    """Render the cheapest-to-most-expensive color scale."""
    low = to_hex(color_for_price(bounds.min, bounds))
    high = to_hex(color_for_price(bounds.max, bounds))
    with st.container(border=True):
        st.markdown("**Price Range**")
        st.markdown(
            f"<div style='display:flex;align-items:center;gap:1rem'>"
            f"<span style='color:{Colors.gray}'>${bounds.min:.2f}</span>"
            f"<div style='flex:1;height:0.5rem;border-radius:0.25rem;"
            f"background:linear-gradient(to right, {low}, {high})'></div>"
            f"<span style='color:{Colors.gray}'>${bounds.max:.2f}</span>"
            f"</div>",
            unsafe_allow_html=True,
        )


def make_price_distribution_chart(distribution: pl.DataFrame) -> go.Figure:
    """Bar chart of stores per price, bars in their badge color."""
    fig = go.Figure(
        go.Bar(
            x=distribution.get_column("price_value").to_list(),
            y=distribution.get_column("stores").to_list(),
            marker_color=distribution.get_column("color").to_list(),
            hovertemplate="$%{x:.2f}: %{y} stores<extra></extra>",
        )
    )
    fig.update_layout(
        height=250,
        margin=GLOBAL_MARGINS,
        showlegend=False,
        font=GLOBAL_FONT,
        xaxis=dict(title="Price", tickprefix="$", tickformat=".2f"),
        yaxis=dict(title="Stores"),
        bargap=0.1,
    )
    return fig
