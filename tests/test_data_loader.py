"""Tests for the one-shot feed loader and its failure handling."""

from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests

from src.app.logic.data_loader import LoadState, StoreDataLoader
from src.config.settings import Config, FeedConfig
from src.core.domain_models import LoadStatus
from src.etl.extract import FeedError, FeedExtractor

FEED_URL = "https://example.test/stores.json"


def _response(status: int = 200, payload: Any = None, reason: str = "OK") -> MagicMock:
    response = MagicMock()
    response.ok = 200 <= status < 300
    response.status_code = status
    response.reason = reason
    response.json.return_value = payload
    return response


@pytest.fixture
def config() -> Config:
    return Config(feed=FeedConfig(url=FEED_URL, timeout_seconds=5))


def test_successful_load_is_ready(config: Config, store_feed: list[dict]) -> None:
    with patch("src.etl.extract.requests.get", return_value=_response(payload=store_feed)) as get:
        state = StoreDataLoader(config).load()

    get.assert_called_once_with(FEED_URL, timeout=5)
    assert state.status == LoadStatus.READY
    assert state.is_ready
    assert state.records.height == len(store_feed)
    assert state.message == ""


def test_non_success_status_is_failed(config: Config) -> None:
    with patch(
        "src.etl.extract.requests.get", return_value=_response(404, reason="Not Found")
    ) as get:
        state = StoreDataLoader(config).load()

    assert get.call_count == 1
    assert state.is_failed
    assert "404" in state.message
    assert state.records.is_empty()


def test_network_error_is_failed(config: Config) -> None:
    with patch(
        "src.etl.extract.requests.get",
        side_effect=requests.ConnectionError("connection refused"),
    ) as get:
        state = StoreDataLoader(config).load()

    assert get.call_count == 1
    assert state.is_failed
    assert "connection refused" in state.message


def test_invalid_json_is_failed(config: Config) -> None:
    response = _response()
    response.json.side_effect = ValueError("Expecting value")
    with patch("src.etl.extract.requests.get", return_value=response):
        state = StoreDataLoader(config).load()

    assert state.is_failed
    assert "not valid JSON" in state.message


def test_non_list_payload_is_failed(config: Config) -> None:
    with patch("src.etl.extract.requests.get", return_value=_response(payload={"stores": []})):
        state = StoreDataLoader(config).load()

    assert state.is_failed
    assert "expected a list" in state.message


def test_extractor_raises_feed_error() -> None:
    with patch("src.etl.extract.requests.get", return_value=_response(500, reason="Server Error")):
        with pytest.raises(FeedError, match="HTTP 500 Server Error"):
            FeedExtractor().fetch_stores(FEED_URL)


def test_load_state_constructors() -> None:
    assert LoadState.pending().is_pending
    assert LoadState.failed("").message == "Unknown error"
