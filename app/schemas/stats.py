"""
Schemas for derived stats: regeneration responses and rankings.
"""

from pydantic import BaseModel

from app.schemas.common import TeamBrief


# ==================== Regeneration ====================

class RegenerationResults(BaseModel):
    """Rows created per derived table (zero for tables not rebuilt)."""
    standings: int = 0
    player_season_stats: int = 0
    team_season_stats: int = 0
    team_seasons: int = 0
    h2h_pair_stats: int = 0


class RegenerationResponse(BaseModel):
    message: str
    results: RegenerationResults
    season_id: int | None
    type: str
    notices: list[str] = []


class RestoreH2HResponse(BaseModel):
    message: str
    total_matches_processed: int
    skipped_matches: int
    h2h_pairs_created: int
    expected_pairs: int


# ==================== Rankings ====================

class TeamRankingEntry(BaseModel):
    rank: int
    team: TeamBrief
    matches_played: int
    wins: int
    draws: int
    losses: int
    goals_for: int
    goals_against: int
    goal_difference: int
    points: int
    win_rate: float  # percent, one decimal
    goals_for_per_match: float
    goals_against_per_match: float
    seasons: list[str] = []


class TeamRankingsResponse(BaseModel):
    season_id: int | None
    sort_by: str
    items: list[TeamRankingEntry]
    total: int
    next_page: int | None = None


class ScoringRankingEntry(BaseModel):
    rank: int
    player_id: int
    player_name: str
    profile_image_url: str | None = None
    teams: list[TeamBrief] = []
    seasons: list[str] = []
    matches_played: int
    goals: int
    assists: int
    attack_points: int
    goals_per_match: float
    assists_per_match: float
    attack_points_per_match: float


class ScoringRankingsResponse(BaseModel):
    season_id: int | None
    sort_by: str
    min_matches: int
    items: list[ScoringRankingEntry]
    total: int
    next_page: int | None = None


class GoalkeeperRankingEntry(BaseModel):
    rank: int
    player_id: int
    player_name: str
    profile_image_url: str | None = None
    teams: list[TeamBrief] = []
    seasons: list[str] = []
    matches_played: int
    goals_conceded: int
    saves: int
    clean_sheets: int
    goals_conceded_per_match: float
    clean_sheet_percentage: float
    save_percentage: float


class GoalkeeperRankingsResponse(BaseModel):
    season_id: int | None
    sort_by: str
    min_matches: int
    items: list[GoalkeeperRankingEntry]
    total: int
    next_page: int | None = None


class OpponentRecord(BaseModel):
    opponent: TeamBrief
    matches_played: int
    goals: int
    assists: int
    attack_points: int
    goals_per_match: float
    assists_per_match: float
    attack_points_per_match: float


class PlayerVsTeamsResponse(BaseModel):
    player_id: int
    player_name: str
    profile_image_url: str | None = None
    season_id: int | None
    team_records: list[OpponentRecord]
