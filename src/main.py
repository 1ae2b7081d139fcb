"""Store Price Viewer - Main Entry Point with CLI Commands.

Supports:
- summary: Fetch the store feed and report what it contains
- export: Run the filter/sort pipeline headlessly and write the result to a file
"""

import argparse
import sys
from pathlib import Path

import polars as pl
from loguru import logger

from src.app.logic.data_loader import LoadState, StoreDataLoader
from src.app.logic.filters import FilterCriteria, apply_view_pipeline, default_criteria
from src.app.logic.summary import summarize_view
from src.config.settings import Config, load_config
from src.core.config import settings
from src.core.domain_models import SortOrder
from src.core.logging_setup import setup_logging


def _load_or_exit(config: Config) -> LoadState:
    state = StoreDataLoader(config).load()
    if state.is_failed:
        logger.error(f"Could not load store data: {state.message}")
        sys.exit(1)
    return state


def build_criteria(args: argparse.Namespace, records: pl.DataFrame) -> FilterCriteria:
    """Dataset defaults overridden by whatever was given on the command line."""
    defaults = default_criteria(records)
    min_price = defaults.min_price if args.min_price is None else args.min_price
    max_price = defaults.max_price if args.max_price is None else args.max_price
    if min_price > max_price:
        raise ValueError(f"--min-price {min_price} is above --max-price {max_price}")

    return FilterCriteria(
        search_text=args.search or "",
        min_price=min_price,
        max_price=max_price,
        state_filter=args.state or None,
        sort_order=SortOrder(args.sort),
    )


def cmd_summary(args: argparse.Namespace) -> None:
    """Fetch the feed and log its size, price bounds and states."""
    logger.info("=== Store Feed Summary ===")
    config = load_config(args.config)
    state = _load_or_exit(config)

    records = state.records
    criteria = default_criteria(records)
    summary = summarize_view(records, records)

    logger.info(f"Records: {summary.total:,}")
    logger.info(f"Price range: ${criteria.min_price:.2f} - ${criteria.max_price:.2f}")
    if summary.median_price is not None:
        logger.info(f"Median price: ${summary.median_price:.2f}")
    logger.info(f"States: {summary.state_count}")
    unpriced = records.filter(pl.col("price_value").is_null()).height
    if unpriced:
        logger.warning(f"Records without a usable price: {unpriced}")
    logger.success("✅ Summary complete")


def cmd_export(args: argparse.Namespace) -> None:
    """Apply filters and sort, then write the derived view."""
    logger.info("=== Exporting Store View ===")
    config = load_config(args.config)
    state = _load_or_exit(config)

    try:
        criteria = build_criteria(args, state.records)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(2)

    view = apply_view_pipeline(state.records, criteria)
    summary = summarize_view(state.records, view)
    logger.info(summary.caption)

    output: Path = args.output
    output.parent.mkdir(parents=True, exist_ok=True)
    if output.suffix == ".parquet":
        view.write_parquet(output)
    else:
        view.write_csv(output)

    logger.success(f"✅ Wrote {view.height:,} records to {output}")


def main() -> None:
    """Main CLI entry point."""
    setup_logging(settings.effective_log_level)

    parser = argparse.ArgumentParser(
        description="Store Price Viewer - Retail price feed explorer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=settings.config_path,
        help="Path to config.yaml (default: %(default)s)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    summary_parser = subparsers.add_parser("summary", help="Fetch the feed and summarize it")
    summary_parser.set_defaults(func=cmd_summary)

    export_parser = subparsers.add_parser("export", help="Export a filtered, sorted view")
    export_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        required=True,
        help="Output file (.csv or .parquet)",
    )
    export_parser.add_argument("--search", help="Case-insensitive match on name or city")
    export_parser.add_argument("--state", help="Exact state name")
    export_parser.add_argument("--min-price", type=float, help="Lowest price to include")
    export_parser.add_argument("--max-price", type=float, help="Highest price to include")
    export_parser.add_argument(
        "--sort",
        choices=[order.value for order in SortOrder],
        default=SortOrder.NONE.value,
        help="Sort by price (default: %(default)s)",
    )
    export_parser.set_defaults(func=cmd_export)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
