"""Configuration management for the store price viewer.

Centralizes the data feed location and dashboard defaults.
"""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, Field

from src.core.domain_models import ViewMode

DEFAULT_FEED_URL = (
    "https://raw.githubusercontent.com/madhatter349/Target-Milk-Prices---Jan-9-2025"
    "/refs/heads/main/all_store_details_with_products.json"
)


class FeedConfig(BaseModel):
    """Remote store feed configuration."""

    url: str = Field(default=DEFAULT_FEED_URL, description="JSON array of store records")
    timeout_seconds: float = Field(default=30.0, gt=0, description="HTTP request timeout")


class UIConfig(BaseModel):
    """Dashboard defaults."""

    title: str = Field(default="Milk Price Tracker")
    default_view_mode: ViewMode = Field(default=ViewMode.GRID)
    grid_columns: int = Field(default=3, ge=1, le=6)
    maps_search_url: str = Field(default="https://www.google.com/maps/search/")


class Config(BaseModel):
    """Root configuration model."""

    feed: FeedConfig = Field(default_factory=FeedConfig)
    ui: UIConfig = Field(default_factory=UIConfig)


def load_config(config_path: Path = Path("config/config.yaml")) -> Config:
    """Load configuration from YAML file.

    A missing file is not an error: all settings have defaults.

    Args:
        config_path: Path to config.yaml file

    Returns:
        Parsed configuration object

    Raises:
        yaml.YAMLError: If config file is malformed
        pydantic.ValidationError: If a value has the wrong type or range
    """
    if not config_path.exists():
        logger.info(f"No configuration file at {config_path}, using defaults")
        return Config()

    logger.info(f"Loading configuration from {config_path}")

    with config_path.open("r") as f:
        raw_config: dict[str, Any] = yaml.safe_load(f) or {}

    config = Config(**raw_config)
    logger.debug(f"Feed URL: {config.feed.url}")

    return config
