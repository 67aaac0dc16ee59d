"""
Coach directory with head-coach match records.
"""
from typing import Any, Iterable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Coach, CoachRole, Match, MatchCoach, TeamCoachHistory
from app.services.regeneration.base import Outcome, resolve_outcome
from app.utils.pagination import paginate

COACH_ORDERS = ("name", "total", "wins", "win_rate")


def empty_metrics() -> dict[str, float]:
    return {"total_matches": 0, "wins": 0, "away_matches": 0, "win_rate": 0.0}


def compute_coach_metrics(rows: Iterable[Any]) -> dict[int, dict[str, float]]:
    """
    Head-coach record per coach.

    Each row carries ``coach_id``, ``team_id`` and the match teams, scores
    and penalty scores. Matches without a result are ignored. A shootout
    win counts as a win. ``win_rate`` is the unrounded percentage and is
    rounded only when serialized.
    """
    metrics: dict[int, dict[str, float]] = {}
    for row in rows:
        if row.home_score is None or row.away_score is None:
            continue
        m = metrics.setdefault(row.coach_id, empty_metrics())
        m["total_matches"] += 1

        is_home = row.team_id is not None and row.team_id == row.home_team_id
        if row.team_id is not None and row.team_id == row.away_team_id:
            m["away_matches"] += 1

        outcome = resolve_outcome(
            row.home_score, row.away_score, row.penalty_home_score, row.penalty_away_score
        )
        if outcome == (Outcome.HOME if is_home else Outcome.AWAY):
            m["wins"] += 1

    for m in metrics.values():
        m["win_rate"] = m["wins"] * 100 / m["total_matches"] if m["total_matches"] else 0.0
    return metrics


async def _load_metrics(db: AsyncSession, coach_ids: list[int]) -> dict[int, dict[str, float]]:
    if not coach_ids:
        return {}
    result = await db.execute(
        select(
            MatchCoach.coach_id,
            MatchCoach.team_id,
            Match.home_team_id,
            Match.away_team_id,
            Match.home_score,
            Match.away_score,
            Match.penalty_home_score,
            Match.penalty_away_score,
        )
        .join(Match, MatchCoach.match_id == Match.id)
        .where(MatchCoach.role == CoachRole.head, MatchCoach.coach_id.in_(coach_ids))
    )
    return compute_coach_metrics(result.all())


def _team_brief(team) -> dict | None:
    if team is None:
        return None
    return {"id": team.id, "name": team.name, "logo": team.logo}


def _serialize_coach(coach: Coach, metrics: dict | None) -> dict:
    current = next((h for h in coach.team_history if h.is_current and h.team), None)
    record = dict(metrics or empty_metrics())
    record["win_rate"] = round(record["win_rate"])
    return {
        "id": coach.id,
        "name": coach.name,
        "birth_date": coach.birth_date,
        "nationality": coach.nationality,
        "profile_image_url": coach.profile_image_url,
        "current_team": _team_brief(current.team) if current else None,
        "has_current_team": current is not None,
        **record,
    }


def _coach_load_options():
    return (
        selectinload(Coach.team_history).selectinload(TeamCoachHistory.team),
        selectinload(Coach.team_history).selectinload(TeamCoachHistory.season),
    )


def sort_coaches(candidates: list[Any], metrics: dict[int, dict[str, float]], order: str) -> list[Any]:
    """Order ``(id, name)`` rows by name, or by a metric descending with name as tie-break."""
    if order == "name":
        return sorted(candidates, key=lambda c: (c.name, c.id))
    metric_key = {"total": "total_matches", "wins": "wins", "win_rate": "win_rate"}[order]
    return sorted(
        candidates,
        key=lambda c: (-(metrics.get(c.id) or empty_metrics())[metric_key], c.name, c.id),
    )


async def list_coaches(
    db: AsyncSession,
    *,
    search: str | None = None,
    order: str = "name",
    page: int = 1,
    limit: int = 20,
) -> tuple[list[dict], int]:
    """
    Search coaches and order them by name or by head-coach record.

    Returns:
        Tuple of (page of serialized coaches, total matching coaches)
    """
    if order not in COACH_ORDERS:
        raise ValueError(f"Unknown order {order!r}")

    query = select(Coach.id, Coach.name)
    if search:
        query = query.where(func.lower(Coach.name).contains(search.lower()))
    candidates = (await db.execute(query)).all()
    total = len(candidates)

    metrics = await _load_metrics(db, [c.id for c in candidates])
    ordered = sort_coaches(candidates, metrics, order)

    page_ids = [c.id for c in paginate(ordered, page, limit)]
    if not page_ids:
        return [], total

    result = await db.execute(
        select(Coach).where(Coach.id.in_(page_ids)).options(*_coach_load_options())
    )
    coaches = {c.id: c for c in result.scalars().all()}
    return [_serialize_coach(coaches[cid], metrics.get(cid)) for cid in page_ids], total


async def get_coach_detail(db: AsyncSession, coach_id: int) -> dict | None:
    result = await db.execute(
        select(Coach).where(Coach.id == coach_id).options(*_coach_load_options())
    )
    coach = result.scalar_one_or_none()
    if coach is None:
        return None

    metrics = await _load_metrics(db, [coach.id])
    data = _serialize_coach(coach, metrics.get(coach.id))
    history = sorted(
        coach.team_history,
        key=lambda h: (h.start_date is None, -(h.start_date.toordinal() if h.start_date else 0)),
    )
    data["team_history"] = [
        {
            "team": _team_brief(h.team),
            "season": (
                {"id": h.season.id, "name": h.season.name, "year": h.season.year}
                if h.season else None
            ),
            "role": h.role.value,
            "start_date": h.start_date,
            "end_date": h.end_date,
            "is_current": h.is_current,
        }
        for h in history
    ]
    return data
