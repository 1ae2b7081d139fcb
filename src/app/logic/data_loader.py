"""Store data loader for the Streamlit application.

Performs the one-shot fetch of the store feed and reports the outcome
as a LoadState. Failures never escape as exceptions: they become a
failed state carrying a human-readable message.
"""

from dataclasses import dataclass, field

import polars as pl
from loguru import logger

from src.config.settings import Config
from src.core.domain_models import STORE_SCHEMA, LoadStatus
from src.core.mapper import map_feed_to_df
from src.etl.extract import FeedError, FeedExtractor


def _empty_records() -> pl.DataFrame:
    return pl.DataFrame(schema=STORE_SCHEMA)


@dataclass
class LoadState:
    """Outcome of loading the store feed."""

    status: LoadStatus
    records: pl.DataFrame = field(default_factory=_empty_records)
    message: str = ""

    @classmethod
    def pending(cls) -> "LoadState":
        return cls(status=LoadStatus.PENDING)

    @classmethod
    def ready(cls, records: pl.DataFrame) -> "LoadState":
        return cls(status=LoadStatus.READY, records=records)

    @classmethod
    def failed(cls, message: str) -> "LoadState":
        return cls(status=LoadStatus.FAILED, message=message or "Unknown error")

    @property
    def is_pending(self) -> bool:
        return self.status == LoadStatus.PENDING

    @property
    def is_ready(self) -> bool:
        return self.status == LoadStatus.READY

    @property
    def is_failed(self) -> bool:
        return self.status == LoadStatus.FAILED


class StoreDataLoader:
    """Loads the store feed into the store table.

    One call to `load` performs exactly one fetch attempt.
    """

    def __init__(self, config: Config, extractor: FeedExtractor | None = None) -> None:
        """Initialize with configuration.

        Args:
            config: Application configuration (feed URL and timeout)
            extractor: HTTP extractor, created from config if omitted
        """
        self.config = config
        self.extractor = extractor or FeedExtractor(timeout_seconds=config.feed.timeout_seconds)

    def load(self) -> LoadState:
        """Fetch and map the feed.

        Returns:
            Ready state with the store table, or failed state with a message
        """
        try:
            items = self.extractor.fetch_stores(self.config.feed.url)
        except FeedError as e:
            logger.error(f"Store data loading error: {e}")
            return LoadState.failed(str(e))

        records = map_feed_to_df(items)
        logger.info(f"Loaded {records.height:,} store records")
        return LoadState.ready(records)
