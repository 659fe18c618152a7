# src/scrapers/skills_scraper.py

from typing import Any, Dict, List

from loguru import logger

from src.models.enums import SkillType, SourceKind
from src.models.records import SkillsRecord
from src.models.vexdb import SkillEntry
from .base_scraper import StatsScraper

# Which record field each skills run type fills in
SKILL_TYPE_TO_FIELD = {
    SkillType.DRIVER: "driver_skills",
    SkillType.PROGRAMMING: "prog_skills",
    SkillType.COMBINED: "total_skills",
}


class SkillsScraper(StatsScraper):
    """Season-ranked skills scores, split into driver, programming and combined."""

    kind = SourceKind.SKILLS
    endpoint = "get_skills"
    entry_model = SkillEntry

    def query_params(self, team: str) -> Dict[str, Any]:
        return {"season_rank": "true", "team": team, "season": self.season}

    def summarize(self, team: str, entries: List[SkillEntry]) -> SkillsRecord:
        scores = {field: 0 for field in SKILL_TYPE_TO_FIELD.values()}
        for entry in entries:
            try:
                field = SKILL_TYPE_TO_FIELD[SkillType(entry.type)]
            except ValueError:
                logger.debug(f"Ignoring skills run of unknown type {entry.type} for {team}")
                continue
            # A later run of the same type wins
            scores[field] = entry.score
        return SkillsRecord(team=team, **scores)
