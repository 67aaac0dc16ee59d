"""
Rebuild derived stats tables from match data.

Runs the same regeneration as POST /api/v1/admin/stats/regenerate, without
going through the API.

Usage:
    python3 scripts/regenerate_stats.py                          # everything
    python3 scripts/regenerate_stats.py --season-id 3            # one season
    python3 scripts/regenerate_stats.py --type h2h               # one table
"""
import argparse
import asyncio
import logging
import sys

from app.database import AsyncSessionLocal, engine
from app.services.regeneration import (
    StatsRegenerationOrchestrator,
    StatsType,
    UnknownStatsTypeError,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)


async def main(season_id: int | None, stats_type: str) -> int:
    try:
        async with AsyncSessionLocal() as session:
            report = await StatsRegenerationOrchestrator(session).regenerate(
                season_id, stats_type
            )
    except UnknownStatsTypeError as exc:
        logger.error(str(exc))
        return 2
    finally:
        await engine.dispose()

    for table, created in report.results.items():
        print(f"{table}: {created}")
    for notice in report.notices:
        print(f"NOTE: {notice}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Regenerate derived stats tables")
    parser.add_argument(
        "--season-id", type=int, default=None,
        help="Season ID to regenerate (default: all seasons)",
    )
    parser.add_argument(
        "--type", dest="stats_type", default=StatsType.ALL.value,
        choices=[t.value for t in StatsType],
        help="Which table to regenerate (default: all)",
    )
    args = parser.parse_args()
    sys.exit(asyncio.run(main(season_id=args.season_id, stats_type=args.stats_type)))
