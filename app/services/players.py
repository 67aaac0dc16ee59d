"""
Player directory: career totals, current team and position.
"""
import logging
from typing import Any, Iterable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import (
    Match,
    Player,
    PlayerMatchStats,
    PlayerPosition,
    PlayerSeasonStats,
    PlayerTeamHistory,
    Season,
)
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)

PLAYER_ORDERS = {
    "apps": ("appearances", "goals", "assists"),
    "goals": ("goals", "assists", "appearances"),
    "assists": ("assists", "goals", "appearances"),
}

GOALKEEPER_POSITION = "GK"


def empty_totals() -> dict[str, int]:
    return {"appearances": 0, "goals": 0, "assists": 0, "goals_conceded": 0}


def compute_player_totals(rows: Iterable[Any]) -> dict[int, dict[str, int]]:
    """
    Career totals per player from per-match rows.

    An appearance needs minutes on the pitch. Goals conceded are summed for
    goalkeeper rows and for any other row that records some.
    """
    totals: dict[int, dict[str, int]] = {}
    for row in rows:
        if not row.player_id:
            continue
        player_totals = totals.setdefault(row.player_id, empty_totals())
        if (row.minutes_played or 0) > 0:
            player_totals["appearances"] += 1
        player_totals["goals"] += row.goals or 0
        player_totals["assists"] += row.assists or 0
        conceded = row.goals_conceded or 0
        if row.position == GOALKEEPER_POSITION or conceded > 0:
            player_totals["goals_conceded"] += conceded
    return totals


def sort_player_ids(
    player_ids: list[int],
    totals: dict[int, dict[str, int]],
    names: dict[int, str],
    order: str,
) -> list[int]:
    """Sort descending by the ordering metrics, then by name."""
    keys = PLAYER_ORDERS[order]

    def sort_key(player_id: int):
        stats = totals.get(player_id) or empty_totals()
        return tuple(-stats[k] for k in keys) + (names.get(player_id, ""),)

    return sorted(player_ids, key=sort_key)


def _latest_first(rows):
    """Open-ended rows first, then the most recent start."""
    return sorted(
        rows,
        key=lambda r: (
            r.end_date is not None,
            -(r.end_date.toordinal() if r.end_date else 0),
            -(r.start_date.toordinal() if r.start_date else 0),
            -r.id,
        ),
    )


def _team_brief(team) -> dict | None:
    if team is None:
        return None
    return {"id": team.id, "name": team.name, "logo": team.logo}


async def _load_totals(db: AsyncSession, player_ids: list[int]) -> dict[int, dict[str, int]]:
    if not player_ids:
        return {}
    result = await db.execute(
        select(
            PlayerMatchStats.player_id,
            PlayerMatchStats.minutes_played,
            PlayerMatchStats.goals,
            PlayerMatchStats.assists,
            PlayerMatchStats.goals_conceded,
            PlayerMatchStats.position,
        ).where(PlayerMatchStats.player_id.in_(player_ids))
    )
    return compute_player_totals(result.all())


async def _load_seasons(db: AsyncSession, player_ids: list[int]) -> dict[int, list[dict]]:
    """Seasons per player: stored season rows plus any season with a match row."""
    if not player_ids:
        return {}

    stored = select(PlayerSeasonStats.player_id, PlayerSeasonStats.season_id).where(
        PlayerSeasonStats.player_id.in_(player_ids)
    )
    played = (
        select(PlayerMatchStats.player_id, Match.season_id)
        .join(Match, PlayerMatchStats.match_id == Match.id)
        .where(PlayerMatchStats.player_id.in_(player_ids), Match.season_id.is_not(None))
    )
    pairs = stored.union(played).subquery()
    result = await db.execute(
        select(pairs.c.player_id, Season)
        .join(Season, Season.id == pairs.c.season_id)
        .order_by(pairs.c.player_id, Season.id)
    )

    seasons: dict[int, list[dict]] = {}
    for player_id, season in result.all():
        seasons.setdefault(player_id, []).append(
            {"id": season.id, "name": season.name, "year": season.year}
        )
    return seasons


def _serialize_player(player: Player, totals: dict, seasons: list[dict]) -> dict:
    history = _latest_first(player.team_history)
    positions = _latest_first(player.positions)
    return {
        "id": player.id,
        "name": player.name,
        "jersey_number": player.jersey_number,
        "profile_image_url": player.profile_image_url,
        "team": _team_brief(history[0].team) if history else None,
        "position": positions[0].position if positions else None,
        "seasons": seasons,
        "totals": totals or empty_totals(),
        "created_at": player.created_at,
        "updated_at": player.updated_at,
    }


def _player_load_options():
    return (
        selectinload(Player.team_history).selectinload(PlayerTeamHistory.team),
        selectinload(Player.positions),
    )


async def list_players(
    db: AsyncSession,
    *,
    name: str | None = None,
    team_id: int | None = None,
    position: str | None = None,
    order: str = "apps",
    page: int = 1,
    limit: int = 20,
) -> tuple[list[dict], int]:
    """
    Filter players and rank them by career totals.

    The team filter keeps players with at least one match row for the team,
    but totals always cover the whole career.

    Returns:
        Tuple of (page of serialized players, total matching players)
    """
    if order not in PLAYER_ORDERS:
        raise ValueError(f"Unknown order {order!r}")

    query = select(Player.id, Player.name)
    if name:
        query = query.where(Player.name.ilike(f"%{name}%"))
    if position:
        query = query.where(
            Player.id.in_(
                select(PlayerPosition.player_id).where(
                    func.lower(PlayerPosition.position) == position.lower()
                )
            )
        )
    if team_id is not None:
        query = query.where(
            Player.id.in_(
                select(PlayerMatchStats.player_id).where(PlayerMatchStats.team_id == team_id)
            )
        )

    candidates = (await db.execute(query)).all()
    names = {row.id: row.name for row in candidates}
    player_ids = list(names)
    total = len(player_ids)

    totals = await _load_totals(db, player_ids)
    page_ids = paginate(sort_player_ids(player_ids, totals, names, order), page, limit)
    if not page_ids:
        return [], total

    result = await db.execute(
        select(Player).where(Player.id.in_(page_ids)).options(*_player_load_options())
    )
    players = {p.id: p for p in result.scalars().all()}
    seasons = await _load_seasons(db, page_ids)

    items = [
        _serialize_player(players[pid], totals.get(pid), seasons.get(pid, []))
        for pid in page_ids
    ]
    return items, total


async def get_player_detail(db: AsyncSession, player_id: int) -> dict | None:
    result = await db.execute(
        select(Player)
        .where(Player.id == player_id)
        .options(
            *_player_load_options(),
            selectinload(Player.season_stats).selectinload(PlayerSeasonStats.season),
            selectinload(Player.season_stats).selectinload(PlayerSeasonStats.team),
        )
    )
    player = result.scalar_one_or_none()
    if player is None:
        return None

    totals = await _load_totals(db, [player.id])
    seasons = await _load_seasons(db, [player.id])

    data = _serialize_player(player, totals.get(player.id), seasons.get(player.id, []))
    data["season_stats"] = [
        {
            "season_id": s.season_id,
            "season_name": s.season.name if s.season else None,
            "team": _team_brief(s.team),
            "matches_played": s.matches_played,
            "goals": s.goals,
            "assists": s.assists,
            "yellow_cards": s.yellow_cards,
            "red_cards": s.red_cards,
            "minutes_played": s.minutes_played,
            "saves": s.saves,
        }
        for s in sorted(player.season_stats, key=lambda s: (-s.season_id, s.team_id))
    ]
    return data
