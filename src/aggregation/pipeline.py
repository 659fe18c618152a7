from typing import List, Optional

import httpx
from loguru import logger

from src.aggregation.aggregator import Aggregator
from src.models.records import MergedRecord
from src.scrapers.base_scraper import create_http_client
from src.scrapers.team_list_scraper import TeamListScraper


async def collect_team_stats(
    client: Optional[httpx.AsyncClient] = None,
) -> List[MergedRecord]:
    """Runs a single cycle: scrape the team list, then fetch and merge stats.

    A client is created for the cycle (and closed afterwards) unless one is
    passed in. Any failure propagates to the caller.
    """
    if client is None:
        async with create_http_client() as owned_client:
            return await collect_team_stats(owned_client)

    logger.info("Starting collection cycle...")
    teams = await TeamListScraper(client).fetch_teams()
    data = await Aggregator(client).aggregate(teams)
    logger.info(f"Collection cycle finished with {len(data)} team records.")
    return data
