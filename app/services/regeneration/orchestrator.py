"""
Stats regeneration orchestrator.

Runs the derived-table aggregators for a scope in dependency order:
standings, player season stats, team season stats, team seasons, h2h.
"""
import logging
import time
from dataclasses import dataclass, field
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.regeneration.base import StatsType, parse_stats_type
from app.services.regeneration.head_to_head import (
    H2H_SEASON_NOTICE,
    H2HAggregator,
    H2HSummary,
)
from app.services.regeneration.player_stats import PlayerSeasonStatsAggregator
from app.services.regeneration.standings import StandingsAggregator
from app.services.regeneration.team_stats import (
    TeamSeasonAggregator,
    TeamSeasonStatsAggregator,
)

logger = logging.getLogger(__name__)


@dataclass
class RegenerationReport:
    season_id: int | None
    stats_type: StatsType
    results: dict[str, int] = field(default_factory=lambda: {
        "standings": 0,
        "player_season_stats": 0,
        "team_season_stats": 0,
        "team_seasons": 0,
        "h2h_pair_stats": 0,
    })
    notices: list[str] = field(default_factory=list)


class StatsRegenerationOrchestrator:
    """
    Entry point for rebuilding derived stats tables.

    Every aggregator commits on its own, so when one fails the tables
    rebuilt before it keep their new contents.
    """

    # (selector, result key, aggregator class), in execution order
    STEPS = (
        (StatsType.STANDINGS, "standings", StandingsAggregator),
        (StatsType.PLAYER_STATS, "player_season_stats", PlayerSeasonStatsAggregator),
        (StatsType.TEAM_STATS, "team_season_stats", TeamSeasonStatsAggregator),
        (StatsType.TEAM_SEASONS, "team_seasons", TeamSeasonAggregator),
        (StatsType.H2H, "h2h_pair_stats", H2HAggregator),
    )

    def __init__(self, db: AsyncSession):
        self.db = db

    async def regenerate(
        self,
        season_id: int | None = None,
        stats_type: StatsType | str = StatsType.ALL,
    ) -> RegenerationReport:
        """
        Rebuild derived tables.

        Args:
            season_id: Season to rebuild, None for every season
            stats_type: Which table to rebuild, or "all"

        Raises:
            UnknownStatsTypeError: if stats_type is not a known selector
        """
        stats_type = parse_stats_type(stats_type)
        report = RegenerationReport(season_id=season_id, stats_type=stats_type)

        scope = f"season {season_id}" if season_id is not None else "all seasons"
        logger.info(f"Starting stats regeneration ({stats_type.value}) for {scope}")
        started = time.monotonic()

        for selector, key, aggregator_cls in self.STEPS:
            if stats_type not in (StatsType.ALL, selector):
                continue
            logger.info(f"Regenerating {key}...")
            aggregator = aggregator_cls(self.db)
            report.results[key] = await aggregator.run(season_id)
            if selector == StatsType.H2H and season_id is not None:
                report.notices.append(H2H_SEASON_NOTICE)

        logger.info(
            f"Stats regeneration finished in {time.monotonic() - started:.2f}s: "
            f"{report.results}"
        )
        return report

    async def restore_h2h(self) -> H2HSummary:
        """Rebuild only the head-to-head table and report what was processed."""
        aggregator = H2HAggregator(self.db)
        await aggregator.run()
        return aggregator.summary

