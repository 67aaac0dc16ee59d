from datetime import date

from pydantic import BaseModel

from app.models import MatchStatus
from app.schemas.common import TeamBrief


class MatchResponse(BaseModel):
    id: int
    season_id: int | None = None
    match_date: date | None = None
    status: MatchStatus
    home_team: TeamBrief | None = None
    away_team: TeamBrief | None = None
    home_score: int | None = None
    away_score: int | None = None
    penalty_home_score: int | None = None
    penalty_away_score: int | None = None

    class Config:
        from_attributes = True


class MatchListResponse(BaseModel):
    items: list[MatchResponse]
    total: int
    next_page: int | None = None
