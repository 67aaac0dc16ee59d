from datetime import date
from pydantic import BaseModel

from app.schemas.common import TeamBrief


class SeasonResponse(BaseModel):
    id: int
    name: str
    year: int | None = None
    category: str | None = None
    start_date: date | None = None
    end_date: date | None = None

    class Config:
        from_attributes = True


class SeasonListResponse(BaseModel):
    items: list[SeasonResponse]
    total: int


class StandingEntry(BaseModel):
    position: int
    team: TeamBrief
    matches_played: int
    wins: int
    draws: int
    losses: int
    goals_for: int
    goals_against: int
    goal_difference: int
    points: int


class StandingsResponse(BaseModel):
    season_id: int
    season_name: str
    standings: list[StandingEntry]
