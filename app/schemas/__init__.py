from app.schemas.common import SeasonBrief, TeamBrief
from app.schemas.season import (
    SeasonResponse,
    SeasonListResponse,
    StandingEntry,
    StandingsResponse,
)
from app.schemas.team import (
    TeamResponse,
    TeamListResponse,
    TeamDetailResponse,
    TeamSeasonStandingEntry,
)
from app.schemas.player import (
    PlayerResponse,
    PlayerListResponse,
    PlayerDetailResponse,
    PlayerSeasonStatsResponse,
)
from app.schemas.coach import CoachResponse, CoachListResponse, CoachDetailResponse
from app.schemas.head_to_head import H2HOverallStats, HeadToHeadResponse
from app.schemas.match import MatchListResponse, MatchResponse
from app.schemas.stats import (
    GoalkeeperRankingsResponse,
    PlayerVsTeamsResponse,
    RegenerationResponse,
    RegenerationResults,
    RestoreH2HResponse,
    ScoringRankingsResponse,
    TeamRankingsResponse,
)

__all__ = [
    "SeasonBrief",
    "TeamBrief",
    "SeasonResponse",
    "SeasonListResponse",
    "StandingEntry",
    "StandingsResponse",
    "TeamResponse",
    "TeamListResponse",
    "TeamDetailResponse",
    "TeamSeasonStandingEntry",
    "PlayerResponse",
    "PlayerListResponse",
    "PlayerDetailResponse",
    "PlayerSeasonStatsResponse",
    "CoachResponse",
    "CoachListResponse",
    "CoachDetailResponse",
    "H2HOverallStats",
    "HeadToHeadResponse",
    "MatchResponse",
    "MatchListResponse",
    "GoalkeeperRankingsResponse",
    "PlayerVsTeamsResponse",
    "RegenerationResponse",
    "RegenerationResults",
    "RestoreH2HResponse",
    "ScoringRankingsResponse",
    "TeamRankingsResponse",
]
