# src/scrapers/rankings_scraper.py

from typing import Any, Dict, List

from src.models.enums import SourceKind
from src.models.records import RankingRecord
from src.models.vexdb import RankingEntry
from src.utils.misc_utils import ieee_divide
from .base_scraper import StatsScraper

# Autonomous bonus points available per match
AUTON_POINTS_PER_MATCH = 4


def average_present(entries: List[RankingEntry], attr: str) -> float:
    """Mean of ``attr`` over the entries that report it."""
    values = [getattr(e, attr) for e in entries if getattr(e, attr) is not None]
    return ieee_divide(sum(values), len(values))


class RankingsScraper(StatsScraper):
    """Event rankings rolled up into season totals and averages."""

    kind = SourceKind.RANKING
    endpoint = "get_rankings"
    entry_model = RankingEntry

    def query_params(self, team: str) -> Dict[str, Any]:
        return {"season": self.season, "team": team}

    def summarize(self, team: str, entries: List[RankingEntry]) -> RankingRecord:
        wins = sum(e.wins for e in entries)
        losses = sum(e.losses for e in entries)
        ties = sum(e.ties for e in entries)
        match_count = wins + losses + ties

        return RankingRecord(
            team=team,
            avg_opr=average_present(entries, "opr"),
            avg_dpr=average_present(entries, "dpr"),
            avg_ccwm=average_present(entries, "ccwm"),
            high_score=max([0, *(e.max_score for e in entries)]),
            wins=wins,
            losses=losses,
            ties=ties,
            win_per=ieee_divide(wins, match_count),
            auto_win_per=ieee_divide(
                sum(e.ap for e in entries), match_count * AUTON_POINTS_PER_MATCH
            ),
        )
