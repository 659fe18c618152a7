# src/scrapers/match_score_scraper.py

from typing import Any, Dict, List

from src.models.enums import SourceKind
from src.models.records import MatchScoreRecord
from src.models.vexdb import MatchEntry
from src.utils.misc_utils import ieee_divide
from .base_scraper import StatsScraper

# VexDB round code for qualification matches
QUALIFICATION_ROUND = 2


def alliance_score(team: str, match: MatchEntry) -> float:
    """Score of the alliance the team played on; anything not red is blue."""
    if team in (match.red1, match.red2):
        return match.redscore
    return match.bluescore


class MatchScoreScraper(StatsScraper):
    """Average alliance score over a team's qualification matches."""

    kind = SourceKind.MATCH_SCORE
    endpoint = "get_matches"
    entry_model = MatchEntry

    def query_params(self, team: str) -> Dict[str, Any]:
        return {"team": team, "season": self.season, "round": QUALIFICATION_ROUND}

    def summarize(self, team: str, entries: List[MatchEntry]) -> MatchScoreRecord:
        total = sum(alliance_score(team, match) for match in entries)
        # No matches gives NaN, reported as-is
        return MatchScoreRecord(team=team, avg_score=ieee_divide(total, len(entries)))
