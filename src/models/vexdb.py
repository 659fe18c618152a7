# src/models/vexdb.py
"""Typed views of the VexDB v1 API responses.

Every endpoint answers with ``{"status": 1, "size": n, "result": [...]}``.
Only the fields the statistics fetchers read are declared; anything else in
an entry is ignored.
"""

from typing import Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict

EntryT = TypeVar("EntryT", bound=BaseModel)
Number = Union[int, float]


class VexDBEntry(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class SkillEntry(VexDBEntry):
    """One skills run; ``type`` is 0 driver, 1 programming, 2 combined."""

    team: Optional[str] = None
    type: int
    score: Number


class MatchEntry(VexDBEntry):
    red1: Optional[str] = None
    red2: Optional[str] = None
    blue1: Optional[str] = None
    blue2: Optional[str] = None
    redscore: Number
    bluescore: Number


class RankingEntry(VexDBEntry):
    """Per-event ranking line. OPR/DPR/CCWM are missing for some events."""

    sku: Optional[str] = None
    opr: Optional[float] = None
    dpr: Optional[float] = None
    ccwm: Optional[float] = None
    max_score: Number
    wins: int
    losses: int
    ties: int
    ap: Number


class AwardEntry(VexDBEntry):
    name: str
    sku: Optional[str] = None


class VexDBResponse(BaseModel, Generic[EntryT]):
    model_config = ConfigDict(extra="ignore")

    status: Optional[int] = None
    size: Optional[int] = None
    result: List[EntryT]
