import sys
import asyncio
import argparse
import math
from typing import List, Optional

# --- Settings/Logging ---
from src.logging.setup import setup_logging
from src.config.settings import settings

setup_logging()

from loguru import logger

# --- End Settings/Logging ---

import uvicorn
from rich import print
from rich.panel import Panel
from rich.table import Table

from src.aggregation.pipeline import collect_team_stats
from src.models.records import MergedRecord


def build_stats_table(records: List[MergedRecord]) -> Table:
    """Lays out merged team records as a rich table, one row per team."""
    columns: List[str] = []
    for record in records:
        for key in record:
            if key not in columns:
                columns.append(key)

    table = Table(show_lines=False)
    for column in columns:
        table.add_column(column, justify="left" if column == "team" else "right")

    for record in records:
        row = []
        for column in columns:
            value = record.get(column)
            if value is None:
                row.append("-")
            elif isinstance(value, float) and not math.isfinite(value):
                row.append(str(value))
            elif isinstance(value, float):
                row.append(f"{value:.2f}")
            else:
                row.append(str(value))
        table.add_row(*row)
    return table


async def run_once() -> None:
    """Runs a single collection cycle and prints the merged records."""
    records = await collect_team_stats()
    if not records:
        logger.warning("No teams found; nothing to show.")
        return
    print(Panel(f"Collected statistics for {len(records)} teams", title="VEX Team Stats"))
    print(build_stats_table(records))


def serve() -> None:
    """Starts the API server on the configured host and port."""
    logger.info(f"Starting API server on {settings.host}:{settings.port}")
    # log_config=None keeps uvicorn on the intercepted standard logging
    uvicorn.run(
        "src.api.app:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="VEX team statistics aggregator")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run one collection cycle and print the result instead of serving the API.",
    )
    args = parser.parse_args(argv)

    if args.once:
        asyncio.run(run_once())
    else:
        serve()


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
