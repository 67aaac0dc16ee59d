from datetime import datetime
from pydantic import BaseModel

from app.schemas.common import SeasonBrief, TeamBrief


class PlayerTotals(BaseModel):
    appearances: int = 0
    goals: int = 0
    assists: int = 0
    goals_conceded: int = 0


class PlayerResponse(BaseModel):
    id: int
    name: str
    jersey_number: int | None = None
    profile_image_url: str | None = None
    team: TeamBrief | None = None
    position: str | None = None
    seasons: list[SeasonBrief] = []
    totals: PlayerTotals = PlayerTotals()
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PlayerListResponse(BaseModel):
    items: list[PlayerResponse]
    total: int
    next_page: int | None = None


class PlayerSeasonStatsResponse(BaseModel):
    """Stored season rollup for one player and team."""
    season_id: int
    season_name: str | None = None
    team: TeamBrief | None = None
    matches_played: int
    goals: int
    assists: int
    yellow_cards: int
    red_cards: int
    minutes_played: int
    saves: int


class PlayerDetailResponse(PlayerResponse):
    season_stats: list[PlayerSeasonStatsResponse] = []
