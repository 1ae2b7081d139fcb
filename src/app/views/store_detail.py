import streamlit as st

from src.app.logic.details import StoreDetailContext
from src.app.logic.session import SelectionState


def render_store_detail(context: StoreDetailContext, selection: SelectionState) -> None:
    """Render the selected store in the sidebar."""
    record = context.record
    with st.sidebar:
        col_title, col_close = st.columns([5, 1])
        col_title.subheader(record.name or "Unnamed store")
        col_close.button("×", key="dismiss_selection", help="Close", on_click=selection.dismiss)

        st.markdown("**Address**")
        for line in context.address_lines:
            st.write(line)
        st.write(context.locality)

        st.markdown("**Price**")
        st.markdown(f"## {record.price or 'n/a'}")

        st.markdown("**Store Details**")
        for label, value in context.facts:
            st.write(f"{label}: {value}")

        st.link_button("📍 View on Google Maps", context.maps_url)
