"""Data extraction layer for the remote store feed.

Wraps a single HTTP GET with requests and validates the response shape
before returning to the caller. There is no retry: one attempt per load.
"""

from typing import Any

import requests
from loguru import logger


class FeedError(Exception):
    """Raised when the store feed cannot be fetched or decoded."""


class FeedExtractor:
    """Fetches the store feed as a list of raw JSON objects."""

    def __init__(self, timeout_seconds: float = 30.0) -> None:
        self.timeout_seconds = timeout_seconds

    def fetch_stores(self, url: str) -> list[dict[str, Any]]:
        """
        Fetch the store feed from `url`.

        Args:
            url: Location of a JSON array of store objects

        Returns:
            Decoded JSON array

        Raises:
            FeedError: On network failure, non-2xx status, invalid JSON
                or a payload that is not a JSON array
        """
        logger.info(f"Fetching store feed from {url}")

        try:
            response = requests.get(url, timeout=self.timeout_seconds)
        except requests.RequestException as e:
            raise FeedError(f"Failed to fetch store data: {e}") from e

        if not response.ok:
            status = f"HTTP {response.status_code} {response.reason or ''}".strip()
            raise FeedError(f"Failed to fetch store data: {status}")

        try:
            payload = response.json()
        except ValueError as e:
            raise FeedError(f"Store data is not valid JSON: {e}") from e

        if not isinstance(payload, list):
            raise FeedError(
                f"Store data has unexpected shape: expected a list, got {type(payload).__name__}"
            )

        logger.info(f"Fetched {len(payload):,} store entries")
        return payload
