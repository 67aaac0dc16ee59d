from pydantic import BaseModel

from app.schemas.common import SeasonBrief


class RepresentativePlayer(BaseModel):
    id: int
    name: str
    jersey_number: int | None = None
    appearances: int


class TeamResponse(BaseModel):
    id: int
    name: str
    logo: str | None = None
    founded_year: int | None = None
    description: str | None = None
    seasons: list[SeasonBrief] = []
    representative_players: list[RepresentativePlayer] = []
    championships: list[SeasonBrief] = []
    championships_count: int = 0


class TeamListResponse(BaseModel):
    items: list[TeamResponse]
    total: int
    next_page: int | None = None


class TeamDetailResponse(TeamResponse):
    pass


class TeamSeasonStandingEntry(BaseModel):
    """One season in a team's history; participated is False when the team has no rows."""
    season_id: int
    season_name: str
    year: int | None = None
    category: str | None = None
    participated: bool
    position: int | None = None
    matches_played: int = 0
    points: int = 0
    is_season_ended: bool
