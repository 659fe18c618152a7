from enum import Enum, IntEnum


class SourceKind(str, Enum):
    SKILLS = "skills"
    MATCH_SCORE = "match_score"
    RANKING = "ranking"
    AWARDS = "awards"


class SkillType(IntEnum):
    """Run type codes used by VexDB's get_skills endpoint."""

    DRIVER = 0
    PROGRAMMING = 1
    COMBINED = 2


class AwardCategory(str, Enum):
    CHAMPIONSHIP = "awardChamp"
    SKILLS = "awardSkills"
    EXCELLENCE = "awardExcel"
    DESIGN = "awardDesign"
    JUDGES = "awardJudge"
