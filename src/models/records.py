from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field

# Merged output is a plain mapping: the union of every record for one team
MergedRecord = Dict[str, Any]
Number = Union[int, float]


class SourceRecord(BaseModel):
    """Statistics produced by one fetcher for one team."""

    model_config = ConfigDict(populate_by_name=True)

    team: str

    def to_fields(self) -> Dict[str, Any]:
        """Returns the record keyed by its wire (camelCase) field names."""
        return self.model_dump(by_alias=True)


class SkillsRecord(SourceRecord):
    driver_skills: Number = Field(0, alias="driverSkills")
    prog_skills: Number = Field(0, alias="progSkills")
    total_skills: Number = Field(0, alias="totalSkills")


class MatchScoreRecord(SourceRecord):
    avg_score: float = Field(..., alias="avgScore")


class RankingRecord(SourceRecord):
    avg_opr: float = Field(..., alias="avgOPR")
    avg_dpr: float = Field(..., alias="avgDPR")
    avg_ccwm: float = Field(..., alias="avgCCWM")
    high_score: Number = Field(0, alias="highScore")
    wins: int = 0
    losses: int = 0
    ties: int = 0
    win_per: float = Field(..., alias="winPer")
    auto_win_per: float = Field(..., alias="autoWinPer")


class AwardsRecord(SourceRecord):
    total_awards: int = Field(0, alias="totalAwards")
    award_champ: int = Field(0, alias="awardChamp")
    award_skills: int = Field(0, alias="awardSkills")
    award_excel: int = Field(0, alias="awardExcel")
    award_design: int = Field(0, alias="awardDesign")
    award_judge: int = Field(0, alias="awardJudge")
