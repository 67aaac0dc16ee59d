"""
Player season stats regeneration.

Rolls per-match player rows of completed matches up into one row per
(season, player, team).
"""
import logging
from typing import Any, Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Match, MatchStatus, PlayerMatchStats, PlayerSeasonStats
from app.services.regeneration.base import BaseAggregator

logger = logging.getLogger(__name__)

SUMMED_FIELDS = (
    "goals",
    "assists",
    "yellow_cards",
    "red_cards",
    "minutes_played",
    "saves",
)


def compute_player_season_stats(rows: Iterable[Any]) -> list[dict[str, int]]:
    """
    Aggregate per-match rows into per-season rows.

    Each input row needs ``season_id``, ``player_id``, ``team_id`` and the
    counters in ``SUMMED_FIELDS``. A match counts as played only when the
    player was on the pitch (minutes_played > 0). Rows missing the player,
    team or season are dropped.
    """
    totals: dict[tuple[int, int, int], dict[str, int]] = {}
    skipped = 0

    for row in rows:
        if not row.player_id or not row.team_id or not row.season_id:
            skipped += 1
            continue

        key = (row.season_id, row.player_id, row.team_id)
        stats = totals.get(key)
        if stats is None:
            stats = {
                "season_id": row.season_id,
                "player_id": row.player_id,
                "team_id": row.team_id,
                "matches_played": 0,
            }
            stats.update({field: 0 for field in SUMMED_FIELDS})
            totals[key] = stats

        if (row.minutes_played or 0) > 0:
            stats["matches_played"] += 1

        for field in SUMMED_FIELDS:
            stats[field] += getattr(row, field) or 0

    if skipped:
        logger.debug(f"Skipped {skipped} player match rows without player/team/season")

    return list(totals.values())


def _source_query(season_id: int | None):
    query = (
        select(
            Match.season_id,
            PlayerMatchStats.player_id,
            PlayerMatchStats.team_id,
            PlayerMatchStats.goals,
            PlayerMatchStats.assists,
            PlayerMatchStats.yellow_cards,
            PlayerMatchStats.red_cards,
            PlayerMatchStats.minutes_played,
            PlayerMatchStats.saves,
        )
        .join(Match, PlayerMatchStats.match_id == Match.id)
        .where(Match.status == MatchStatus.completed)
        .order_by(PlayerMatchStats.id)
    )
    if season_id is not None:
        query = query.where(Match.season_id == season_id)
    return query


class PlayerSeasonStatsAggregator(BaseAggregator):
    """Rebuilds player_season_stats from player_match_stats."""

    model = PlayerSeasonStats

    async def _rebuild(self, season_id: int | None) -> int:
        result = await self.db.execute(_source_query(season_id))
        source_rows = result.all()
        logger.info(f"Computing player season stats from {len(source_rows)} player match rows")

        rows = compute_player_season_stats(source_rows)

        created = 0
        for row in rows:
            if await self._create_row(**row):
                created += 1

        logger.info(f"Player season stats rebuilt: {created}/{len(rows)} rows created")
        return created


async def collect_player_stats_debug(
    db: AsyncSession,
    season_id: int | None = None,
    player_id: int | None = None,
    recent_limit: int = 20,
) -> dict[str, Any]:
    """
    Compare stored player season rows with a fresh rollup of recent matches.

    Used to track down stale or wrong season totals without running a
    full regeneration.
    """
    stored_query = (
        select(PlayerSeasonStats)
        .options(
            selectinload(PlayerSeasonStats.player),
            selectinload(PlayerSeasonStats.team),
        )
        .order_by(PlayerSeasonStats.season_id.desc(), PlayerSeasonStats.goals.desc())
    )
    if season_id is not None:
        stored_query = stored_query.where(PlayerSeasonStats.season_id == season_id)
    if player_id is not None:
        stored_query = stored_query.where(PlayerSeasonStats.player_id == player_id)
    stored = (await db.execute(stored_query)).scalars().all()

    recent_query = (
        select(PlayerMatchStats, Match)
        .join(Match, PlayerMatchStats.match_id == Match.id)
        .options(selectinload(PlayerMatchStats.player), selectinload(PlayerMatchStats.team))
        .order_by(Match.match_date.desc(), Match.id.desc())
        .limit(recent_limit)
    )
    if season_id is not None:
        recent_query = recent_query.where(Match.season_id == season_id)
    if player_id is not None:
        recent_query = recent_query.where(PlayerMatchStats.player_id == player_id)
    recent = (await db.execute(recent_query)).all()

    completed = [
        (stat, match) for stat, match in recent if match.status == MatchStatus.completed
    ]
    calculated = compute_player_season_stats(
        _DebugRow(stat, match.season_id) for stat, match in completed
    )

    return {
        "debug_info": {
            "season_id": season_id,
            "player_id": player_id,
            "total_match_stats": len(recent),
            "completed_match_stats": len(completed),
        },
        "existing_player_season_stats": {
            "count": len(stored),
            "data": [
                {
                    "season_id": s.season_id,
                    "player_id": s.player_id,
                    "player_name": s.player.name if s.player else None,
                    "team_id": s.team_id,
                    "team_name": s.team.name if s.team else None,
                    "matches_played": s.matches_played,
                    "goals": s.goals,
                    "assists": s.assists,
                    "yellow_cards": s.yellow_cards,
                    "red_cards": s.red_cards,
                    "minutes_played": s.minutes_played,
                    "saves": s.saves,
                }
                for s in stored
            ],
        },
        "recent_match_stats": {
            "count": len(recent),
            "data": [
                {
                    "match_id": match.id,
                    "match_date": match.match_date,
                    "season_id": match.season_id,
                    "status": match.status.value,
                    "player_id": stat.player_id,
                    "player_name": stat.player.name if stat.player else None,
                    "team_name": stat.team.name if stat.team else None,
                    "goals": stat.goals,
                    "assists": stat.assists,
                    "minutes_played": stat.minutes_played,
                    "yellow_cards": stat.yellow_cards,
                    "red_cards": stat.red_cards,
                    "saves": stat.saves,
                }
                for stat, match in recent
            ],
        },
        "calculated_season_stats": {
            "count": len(calculated),
            "data": calculated,
        },
    }


class _DebugRow:
    """Per-match stat row carrying the season of its match."""

    __slots__ = ("_stat", "season_id")

    def __init__(self, stat: PlayerMatchStats, season_id: int | None):
        self._stat = stat
        self.season_id = season_id

    def __getattr__(self, name: str) -> Any:
        return getattr(self._stat, name)
