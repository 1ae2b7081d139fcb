from dataclasses import dataclass
from urllib.parse import quote

from src.core.domain_models import StoreRecord

# Characters encodeURIComponent leaves alone besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


@dataclass
class StoreDetailContext:
    record: StoreRecord

    address_lines: list[str]
    locality: str
    facts: list[tuple[str, str]]
    maps_url: str


def maps_search_url(record: StoreRecord, base_url: str) -> str:
    """Map search link for the record's street address, city and state."""
    parts = [record.address_line1, record.city, record.state_name]
    query = " ".join(part or "" for part in parts)
    return f"{base_url}{quote(query, safe=_URI_COMPONENT_SAFE)}"


def build_detail_context(record: StoreRecord, maps_base_url: str) -> StoreDetailContext:
    """Collect what the detail panel shows, skipping absent optional fields."""
    address_lines = [line for line in [record.address_line1, *record.extra_address_lines] if line]
    locality = f"{record.city or ''}, {record.display_state} {record.postal_code or ''}".strip()

    facts = [("Store ID", record.id)]
    optional_facts = [
        ("Location", record.location_description),
        ("Location Code", record.location_code),
        ("Intersection", record.intersection_description),
        ("County", record.county),
        ("Country", record.country),
        ("Product", record.product_title),
    ]
    facts.extend((label, value) for label, value in optional_facts if value)

    return StoreDetailContext(
        record=record,
        address_lines=address_lines,
        locality=locality,
        facts=facts,
        maps_url=maps_search_url(record, maps_base_url),
    )
