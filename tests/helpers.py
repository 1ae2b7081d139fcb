"""Builders for feed objects used across tests."""

from typing import Any


def make_store(
    store_id: str,
    price: str,
    name: str | None = "Target",
    city: str | None = "Springfield",
    state: str | None = "Illinois",
    **extra: Any,
) -> dict[str, Any]:
    """Build one feed object shaped like the remote JSON."""
    store: dict[str, Any] = {
        "store_id": store_id,
        "name": name,
        "city": city,
        "region": "IL",
        "address_line1": f"{store_id} Main St",
        "postal_code": "62701",
        "country": "United States",
        "Price": price,
        "quadrant_description": "North",
        "quadrant_code": "N",
    }
    if state is not None:
        store["state"] = state
    store.update(extra)
    return store


