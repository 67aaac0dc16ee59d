from app.models.season import Season
from app.models.team import Team
from app.models.player import Player, PlayerTeamHistory, PlayerPosition
from app.models.coach import Coach, TeamCoachHistory, MatchCoach, CoachRole
from app.models.match import Match, MatchStatus
from app.models.player_match_stats import PlayerMatchStats

# Derived tables (rebuilt by the stats regeneration job)
from app.models.standing import Standing
from app.models.team_season_stats import TeamSeasonStats
from app.models.player_season_stats import PlayerSeasonStats
from app.models.team_season import TeamSeason
from app.models.h2h_pair_stats import H2HPairStats

__all__ = [
    "Season",
    "Team",
    "Player",
    "PlayerTeamHistory",
    "PlayerPosition",
    "Coach",
    "TeamCoachHistory",
    "MatchCoach",
    "CoachRole",
    "Match",
    "MatchStatus",
    "PlayerMatchStats",
    # Derived tables
    "Standing",
    "TeamSeasonStats",
    "PlayerSeasonStats",
    "TeamSeason",
    "H2HPairStats",
]
