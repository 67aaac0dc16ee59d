from app.services.regeneration.base import (
    Outcome,
    StatsType,
    UnknownStatsTypeError,
    parse_stats_type,
    resolve_outcome,
)
from app.services.regeneration.head_to_head import H2HAggregator, H2HSummary, compute_h2h
from app.services.regeneration.orchestrator import (
    RegenerationReport,
    StatsRegenerationOrchestrator,
)
from app.services.regeneration.player_stats import (
    PlayerSeasonStatsAggregator,
    collect_player_stats_debug,
    compute_player_season_stats,
)
from app.services.regeneration.standings import StandingsAggregator, compute_standings
from app.services.regeneration.team_stats import TeamSeasonAggregator, TeamSeasonStatsAggregator

__all__ = [
    "Outcome",
    "StatsType",
    "UnknownStatsTypeError",
    "parse_stats_type",
    "resolve_outcome",
    "StandingsAggregator",
    "compute_standings",
    "PlayerSeasonStatsAggregator",
    "compute_player_season_stats",
    "collect_player_stats_debug",
    "TeamSeasonStatsAggregator",
    "TeamSeasonAggregator",
    "H2HAggregator",
    "H2HSummary",
    "compute_h2h",
    "StatsRegenerationOrchestrator",
    "RegenerationReport",
]
