from typing import Any

import polars as pl
import pytest

from src.core.mapper import map_feed_to_df
from tests.helpers import make_store


@pytest.fixture
def store_feed() -> list[dict[str, Any]]:
    return [
        make_store("1", "$2.50", name="Target Downtown", city="Chicago", state="Illinois"),
        make_store("2", "$4.00", name="Target Uptown", city="Minneapolis", state="Minnesota"),
        make_store("3", "$1.00", name="Target Lakeside", city="Madison", state="Wisconsin"),
        make_store("4", "$2.50", name="Target North", city="Evanston", state="Illinois"),
        make_store("5", "$3.19", name="Super Target", city="CHICAGO HEIGHTS", state="Illinois"),
    ]


@pytest.fixture
def records(store_feed: list[dict[str, Any]]) -> pl.DataFrame:
    return map_feed_to_df(store_feed)
