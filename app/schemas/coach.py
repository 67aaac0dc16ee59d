from datetime import date
from pydantic import BaseModel

from app.schemas.common import SeasonBrief, TeamBrief


class CoachMetrics(BaseModel):
    """Head-coach record over matches with a result."""
    total_matches: int = 0
    wins: int = 0
    away_matches: int = 0
    win_rate: int = 0  # percent, rounded


class CoachTeamHistoryEntry(BaseModel):
    team: TeamBrief | None = None
    season: SeasonBrief | None = None
    role: str
    start_date: date | None = None
    end_date: date | None = None
    is_current: bool


class CoachResponse(CoachMetrics):
    id: int
    name: str
    birth_date: date | None = None
    nationality: str | None = None
    profile_image_url: str | None = None
    current_team: TeamBrief | None = None
    has_current_team: bool = False


class CoachListResponse(BaseModel):
    items: list[CoachResponse]
    total: int
    next_page: int | None = None


class CoachDetailResponse(CoachResponse):
    team_history: list[CoachTeamHistoryEntry] = []
