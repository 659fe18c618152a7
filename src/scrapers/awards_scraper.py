# src/scrapers/awards_scraper.py

from typing import Any, Dict, List

from src.models.enums import AwardCategory, SourceKind
from src.models.records import AwardsRecord
from src.models.vexdb import AwardEntry
from .base_scraper import StatsScraper

# Exact award names as VexDB reports them, for the college and high school divisions
AWARD_NAME_TO_CATEGORY = {
    "Tournament Champions (VRC/VEXU)": AwardCategory.CHAMPIONSHIP,
    "Tournament Champions (High School)": AwardCategory.CHAMPIONSHIP,
    "Robot Skills Champion (VRC/VEXU)": AwardCategory.SKILLS,
    "Robot Skills Champion (High School)": AwardCategory.SKILLS,
    "Excellence Award (VRC/VEXU)": AwardCategory.EXCELLENCE,
    "Excellence Award (High School)": AwardCategory.EXCELLENCE,
    "Design Award (VRC/VEXU)": AwardCategory.DESIGN,
    "Design Award (High School)": AwardCategory.DESIGN,
    "Judges Award (VRC/VEXU)": AwardCategory.JUDGES,
    "Judges Award (High School)": AwardCategory.JUDGES,
}


class AwardsScraper(StatsScraper):
    """Counts of the headline awards a team has won this season."""

    kind = SourceKind.AWARDS
    endpoint = "get_awards"
    entry_model = AwardEntry

    def query_params(self, team: str) -> Dict[str, Any]:
        return {"season": self.season, "team": team}

    def summarize(self, team: str, entries: List[AwardEntry]) -> AwardsRecord:
        counts = {category.value: 0 for category in AwardCategory}
        total = 0
        for award in entries:
            category = AWARD_NAME_TO_CATEGORY.get(award.name)
            if category is None:
                continue
            counts[category.value] += 1
            total += 1
        return AwardsRecord(team=team, totalAwards=total, **counts)
