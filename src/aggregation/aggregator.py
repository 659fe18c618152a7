from typing import Iterable, List, Optional, Sequence

import httpx
from loguru import logger

from src.models.records import MergedRecord, SourceRecord
from src.scrapers.awards_scraper import AwardsScraper
from src.scrapers.base_scraper import StatsScraper
from src.scrapers.match_score_scraper import MatchScoreScraper
from src.scrapers.rankings_scraper import RankingsScraper
from src.scrapers.skills_scraper import SkillsScraper
from src.utils.misc_utils import gather_or_cancel, shallow_merge


class AggregationError(Exception):
    """Raised when a team ends up with no statistics to merge."""

    pass


def merge_records(
    teams: Sequence[str], records: Iterable[SourceRecord]
) -> List[MergedRecord]:
    """Folds the records of each team into one flat mapping, in ``teams`` order."""
    records = list(records)
    merged: List[MergedRecord] = []
    for team in teams:
        group = [record.to_fields() for record in records if record.team == team]
        if not group:
            logger.error(f"No statistics were collected for team {team}")
            raise AggregationError(f"No statistics to merge for team {team}")
        merged.append(shallow_merge(group))
    return merged


class Aggregator:
    """Runs every statistics scraper and merges their output per team."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        scrapers: Optional[Sequence[StatsScraper]] = None,
    ):
        if scrapers is None:
            # Merge order: later scrapers overwrite same-named fields
            scrapers = [
                SkillsScraper(client),
                RankingsScraper(client),
                MatchScoreScraper(client),
                AwardsScraper(client),
            ]
        self.scrapers = list(scrapers)

    async def aggregate(self, teams: Sequence[str]) -> List[MergedRecord]:
        teams = list(teams)
        if not teams:
            logger.info("No teams to aggregate.")
            return []

        logger.info(
            f"Aggregating {len(self.scrapers)} sources for {len(teams)} teams"
        )
        results = await gather_or_cancel(
            *(scraper.fetch(teams) for scraper in self.scrapers)
        )
        records = [record for source_records in results for record in source_records]
        merged = merge_records(teams, records)
        logger.success(f"Aggregation completed. Merged {len(merged)} team records.")
        return merged

    async def close(self):
        """Closes any HTTP clients the scrapers created for themselves."""
        for scraper in self.scrapers:
            await scraper.close()
