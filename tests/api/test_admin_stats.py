import pytest
from httpx import AsyncClient
from sqlalchemy import select

from app.models import H2HPairStats, Standing
from app.services.regeneration import StandingsAggregator


@pytest.mark.asyncio
class TestAdminStatsAPI:
    """Tests for /api/v1/admin/stats endpoints."""

    async def test_regenerate_all(self, client: AsyncClient, test_session, player_match_stats):
        response = await client.post("/api/v1/admin/stats/regenerate")
        assert response.status_code == 200
        data = response.json()
        assert data["type"] == "all"
        assert data["season_id"] is None
        assert data["notices"] == []
        assert data["results"] == {
            "standings": 2,
            "player_season_stats": 3,
            "team_season_stats": 2,
            "team_seasons": 2,
            "h2h_pair_stats": 1,
        }

        result = await test_session.execute(select(Standing).order_by(Standing.position))
        assert [s.team_id for s in result.scalars().all()] == [1, 2]

    async def test_regenerate_single_type_for_season(self, client: AsyncClient, scenario_matches):
        response = await client.post(
            "/api/v1/admin/stats/regenerate", params={"season_id": 1, "type": "standings"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["season_id"] == 1
        assert data["type"] == "standings"
        assert data["results"]["standings"] == 2
        assert data["results"]["h2h_pair_stats"] == 0

    async def test_regenerate_h2h_with_season_carries_notice(
        self, client: AsyncClient, scenario_matches
    ):
        response = await client.post(
            "/api/v1/admin/stats/regenerate", params={"season_id": 1, "type": "h2h"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["results"]["h2h_pair_stats"] == 1
        assert len(data["notices"]) == 1
        assert "season filter was ignored" in data["notices"][0]

    async def test_regenerate_unknown_type(self, client: AsyncClient):
        response = await client.post(
            "/api/v1/admin/stats/regenerate", params={"type": "fantasy"}
        )
        assert response.status_code == 422
        assert "Unknown stats type" in response.json()["detail"]

    async def test_regenerate_failure(self, client: AsyncClient, scenario_matches, monkeypatch):
        async def broken(self, season_id):
            raise RuntimeError("database went away")

        monkeypatch.setattr(StandingsAggregator, "_rebuild", broken)

        response = await client.post("/api/v1/admin/stats/regenerate")
        assert response.status_code == 500
        detail = response.json()["detail"]
        assert detail["error"] == "Failed to regenerate stats"
        assert detail["details"] == "database went away"

    async def test_restore_h2h(self, client: AsyncClient, test_session, scenario_matches):
        response = await client.post("/api/v1/admin/stats/restore-h2h")
        assert response.status_code == 200
        data = response.json()
        assert data["total_matches_processed"] == 3
        assert data["skipped_matches"] == 0
        assert data["h2h_pairs_created"] == 1
        assert data["expected_pairs"] == 1

        pair = (await test_session.execute(select(H2HPairStats))).scalar_one()
        assert pair.total_matches == 3

    async def test_player_stats_debug(self, client: AsyncClient, regenerated_stats):
        response = await client.get(
            "/api/v1/admin/stats/player-stats-debug", params={"season_id": 1, "player_id": 1}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["debug_info"]["total_match_stats"] == 3
        assert data["existing_player_season_stats"]["count"] == 1
        stored = data["existing_player_season_stats"]["data"][0]
        assert stored["goals"] == 3
        assert stored["team_name"] == "Alpha FC"
        calculated = data["calculated_season_stats"]["data"]
        assert calculated[0]["goals"] == stored["goals"]
        assert calculated[0]["matches_played"] == stored["matches_played"]
