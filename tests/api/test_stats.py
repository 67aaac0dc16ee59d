import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
class TestRankingsAPI:
    """Tests for /api/v1/stats ranking endpoints."""

    async def test_team_rankings_by_win_rate(self, client: AsyncClient, scenario_matches):
        response = await client.get("/api/v1/stats/team-rankings")
        assert response.status_code == 200
        data = response.json()
        assert data["sort_by"] == "win_rate"
        assert data["total"] == 2

        alpha, bravo = data["items"]
        assert alpha["team"]["id"] == 1
        assert alpha["rank"] == 1
        # Regular-time view: the shootout match counts as a draw
        assert (alpha["wins"], alpha["draws"], alpha["losses"]) == (1, 2, 0)
        assert alpha["win_rate"] == 33.3
        assert alpha["points"] == 5
        assert (bravo["wins"], bravo["draws"], bravo["losses"]) == (0, 2, 1)
        assert alpha["seasons"] == ["2025 League"]

    async def test_team_rankings_goals_against_ascending(self, client: AsyncClient, scenario_matches):
        response = await client.get(
            "/api/v1/stats/team-rankings", params={"sort_by": "goals_against"}
        )
        items = response.json()["items"]
        assert [i["goals_against"] for i in items] == [2, 3]

    async def test_team_rankings_season_filter(self, client: AsyncClient, scenario_matches, second_season):
        response = await client.get("/api/v1/stats/team-rankings", params={"season_id": 2})
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 0

    async def test_team_rankings_invalid_sort(self, client: AsyncClient):
        response = await client.get("/api/v1/stats/team-rankings", params={"sort_by": "style"})
        assert response.status_code == 400

    async def test_scoring_rankings_min_matches(self, client: AsyncClient, player_match_stats):
        response = await client.get("/api/v1/stats/scoring-rankings")
        assert response.status_code == 200
        data = response.json()
        assert data["min_matches"] == 3
        assert [i["player_name"] for i in data["items"]] == ["Aaron Striker", "Ben Keeper"]

    async def test_scoring_rankings_attack_points(self, client: AsyncClient, player_match_stats):
        response = await client.get(
            "/api/v1/stats/scoring-rankings", params={"min_matches": 0, "season_id": 1}
        )
        items = response.json()["items"]
        assert [i["player_id"] for i in items] == [1, 3, 2]

        aaron = items[0]
        assert (aaron["goals"], aaron["assists"], aaron["attack_points"]) == (3, 1, 4)
        assert aaron["goals_per_match"] == 1.0
        assert aaron["teams"][0]["name"] == "Alpha FC"
        assert items[1]["rank"] == 2

    async def test_scoring_rankings_by_assists_paginated(self, client: AsyncClient, player_match_stats):
        response = await client.get(
            "/api/v1/stats/scoring-rankings",
            params={"min_matches": 0, "sort_by": "assists", "limit": 1},
        )
        data = response.json()
        assert data["total"] == 3
        assert data["next_page"] == 2
        assert data["items"][0]["assists"] == 1

    async def test_scoring_rankings_invalid_sort(self, client: AsyncClient):
        response = await client.get("/api/v1/stats/scoring-rankings", params={"sort_by": "dribbles"})
        assert response.status_code == 400


@pytest.mark.asyncio
class TestGoalkeeperRankingsAPI:
    """Tests for /api/v1/stats/goalkeeper-rankings."""

    async def test_goalkeeper_rankings(self, client: AsyncClient, player_match_stats):
        response = await client.get("/api/v1/stats/goalkeeper-rankings")
        assert response.status_code == 200
        data = response.json()
        assert data["sort_by"] == "goals_conceded_per_match"
        assert data["min_matches"] == 3
        assert data["total"] == 1

        ben = data["items"][0]
        assert ben["player_name"] == "Ben Keeper"
        assert (ben["matches_played"], ben["goals_conceded"], ben["saves"]) == (3, 3, 12)
        # Only the 0-0 match is a clean sheet
        assert ben["clean_sheets"] == 1
        assert ben["clean_sheet_percentage"] == 33.3
        assert ben["goals_conceded_per_match"] == 1.0
        assert ben["save_percentage"] == 80.0
        assert ben["teams"][0]["name"] == "Bravo United"

    async def test_min_matches_filter(self, client: AsyncClient, player_match_stats):
        response = await client.get(
            "/api/v1/stats/goalkeeper-rankings", params={"min_matches": 4}
        )
        assert response.json()["items"] == []

    async def test_invalid_sort(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/stats/goalkeeper-rankings", params={"sort_by": "penalties_saved"}
        )
        assert response.status_code == 400


@pytest.mark.asyncio
class TestPlayerVsTeamAPI:
    """Tests for /api/v1/stats/player-vs-team."""

    async def test_records_by_opponent(self, client: AsyncClient, player_match_stats):
        response = await client.get("/api/v1/stats/player-vs-team", params={"player_id": 1})
        assert response.status_code == 200
        data = response.json()
        assert data["player_name"] == "Aaron Striker"
        assert len(data["team_records"]) == 1

        record = data["team_records"][0]
        assert record["opponent"]["name"] == "Bravo United"
        assert (record["matches_played"], record["goals"], record["assists"]) == (3, 3, 1)
        assert record["attack_points_per_match"] == 1.33

    async def test_bench_appearance_not_counted(self, client: AsyncClient, player_match_stats):
        response = await client.get("/api/v1/stats/player-vs-team", params={"player_id": 3})
        record = response.json()["team_records"][0]
        assert (record["matches_played"], record["assists"]) == (1, 1)

    async def test_season_filter(self, client: AsyncClient, player_match_stats, second_season):
        response = await client.get(
            "/api/v1/stats/player-vs-team", params={"player_id": 1, "season_id": 2}
        )
        assert response.json()["team_records"] == []

    async def test_unknown_player(self, client: AsyncClient):
        response = await client.get("/api/v1/stats/player-vs-team", params={"player_id": 99})
        assert response.status_code == 404
