from types import SimpleNamespace

import pytest

from app.services.coaches import compute_coach_metrics, sort_coaches
from app.services.players import compute_player_totals, sort_player_ids
from app.services.rankings import (
    compute_goalkeeper_rankings,
    compute_player_vs_teams,
    compute_scoring_rankings,
    compute_team_rankings,
)


def _stat_row(player_id, minutes, goals=0, assists=0, conceded=0, position="FW"):
    return SimpleNamespace(
        player_id=player_id,
        minutes_played=minutes,
        goals=goals,
        assists=assists,
        goals_conceded=conceded,
        position=position,
    )


class TestPlayerTotals:
    def test_appearance_needs_minutes(self):
        totals = compute_player_totals([
            _stat_row(1, 90, goals=1),
            _stat_row(1, 0, goals=0),
            _stat_row(1, None, assists=1),
        ])
        assert totals[1] == {"appearances": 1, "goals": 1, "assists": 1, "goals_conceded": 0}

    def test_goals_conceded_for_keepers_and_recorded_rows(self):
        totals = compute_player_totals([
            _stat_row(2, 90, conceded=2, position="GK"),
            _stat_row(3, 90, conceded=1, position="DF"),
            _stat_row(4, 90, conceded=0, position="DF"),
        ])
        assert totals[2]["goals_conceded"] == 2
        assert totals[3]["goals_conceded"] == 1
        assert totals[4]["goals_conceded"] == 0

    def test_rows_without_player_are_ignored(self):
        assert compute_player_totals([_stat_row(None, 90, goals=3)]) == {}

    def test_sort_breaks_ties_by_name(self):
        totals = {
            1: {"appearances": 5, "goals": 2, "assists": 0, "goals_conceded": 0},
            2: {"appearances": 5, "goals": 2, "assists": 0, "goals_conceded": 0},
            3: {"appearances": 7, "goals": 0, "assists": 0, "goals_conceded": 0},
        }
        names = {1: "Zed", 2: "Abe", 3: "Moe"}
        assert sort_player_ids([1, 2, 3], totals, names, "apps") == [3, 2, 1]
        assert sort_player_ids([1, 2, 3], totals, names, "goals") == [2, 1, 3]


def _coach_row(coach_id, team_id, home, away, hs, as_, ph=None, pa=None):
    return SimpleNamespace(
        coach_id=coach_id,
        team_id=team_id,
        home_team_id=home,
        away_team_id=away,
        home_score=hs,
        away_score=as_,
        penalty_home_score=ph,
        penalty_away_score=pa,
    )


class TestCoachMetrics:
    def test_wins_from_own_side(self):
        metrics = compute_coach_metrics([
            _coach_row(1, 10, 10, 20, 2, 0),
            _coach_row(1, 10, 20, 10, 0, 1),
            _coach_row(1, 10, 20, 10, 1, 0),
        ])
        assert (metrics[1]["total_matches"], metrics[1]["wins"], metrics[1]["away_matches"]) == (3, 2, 2)
        assert metrics[1]["win_rate"] == pytest.approx(200 / 3)

    def test_shootout_counts_as_win(self):
        metrics = compute_coach_metrics([_coach_row(1, 20, 10, 20, 1, 1, ph=2, pa=4)])
        assert metrics[1]["wins"] == 1

    def test_matches_without_result_are_ignored(self):
        metrics = compute_coach_metrics([_coach_row(1, 10, 10, 20, None, None)])
        assert metrics == {}

    def test_win_rate_order_uses_unrounded_rate(self):
        # 5 of 8 (62.5%) and 8 of 13 (61.5%) both round to 62
        rows = [_coach_row(1, 10, 10, 20, 1, 0) for _ in range(5)]
        rows += [_coach_row(1, 10, 10, 20, 0, 1) for _ in range(3)]
        rows += [_coach_row(2, 10, 10, 20, 1, 0) for _ in range(8)]
        rows += [_coach_row(2, 10, 10, 20, 0, 1) for _ in range(5)]
        metrics = compute_coach_metrics(rows)

        assert round(metrics[1]["win_rate"]) == round(metrics[2]["win_rate"]) == 62
        candidates = [
            SimpleNamespace(id=1, name="Zoe Zed"),
            SimpleNamespace(id=2, name="Abe Able"),
        ]
        ordered = sort_coaches(candidates, metrics, "win_rate")
        assert [c.id for c in ordered] == [1, 2]


def _ranking_match(home, away, hs, as_, season="2025", ph=None, pa=None):
    def team(team_id):
        return SimpleNamespace(id=team_id, name=f"Team {team_id}", logo=None)

    return SimpleNamespace(
        home_team=team(home),
        away_team=team(away),
        home_score=hs,
        away_score=as_,
        penalty_home_score=ph,
        penalty_away_score=pa,
        season=SimpleNamespace(name=season),
    )


class TestTeamRankings:
    def test_regular_time_only(self):
        rows = compute_team_rankings([_ranking_match(1, 2, 1, 1, ph=5, pa=4)])
        assert all(r["draws"] == 1 and r["wins"] == 0 for r in rows)

    def test_per_match_ratios(self):
        rows = compute_team_rankings(
            [_ranking_match(1, 2, 3, 0), _ranking_match(2, 1, 2, 2, season="2026")],
            "goals_for",
        )
        top = rows[0]
        assert top["team"]["id"] == 1
        assert top["goals_for_per_match"] == 2.5
        assert top["win_rate"] == 50.0
        assert top["seasons"] == ["2025", "2026"]

    def test_unknown_sort(self):
        with pytest.raises(ValueError):
            compute_team_rankings([], "style")


class TestScoringRankings:
    def _stat(self, player_id, minutes, goals=0, assists=0):
        return SimpleNamespace(
            player_id=player_id,
            player=SimpleNamespace(name=f"Player {player_id}", profile_image_url=None),
            team=SimpleNamespace(id=1, name="Team 1", logo=None),
            match=SimpleNamespace(season=SimpleNamespace(name="2025")),
            minutes_played=minutes,
            goals=goals,
            assists=assists,
        )

    def test_min_matches_filter_and_per_match(self):
        rows = compute_scoring_rankings(
            [
                self._stat(1, 90, goals=1),
                self._stat(1, 45, assists=2),
                self._stat(2, 90, goals=5),
                self._stat(2, 0),
            ],
            min_matches=2,
        )
        assert [r["player_id"] for r in rows] == [1]
        assert rows[0]["attack_points"] == 3
        assert rows[0]["attack_points_per_match"] == 1.5
        assert len(rows[0]["teams"]) == 1


class TestGoalkeeperRankings:
    def _stat(self, match_id, player_id, team_id, position, minutes, conceded=0, saves=0):
        return SimpleNamespace(
            match_id=match_id,
            player_id=player_id,
            team_id=team_id,
            position=position,
            minutes_played=minutes,
            goals_conceded=conceded,
            saves=saves,
            player=SimpleNamespace(name=f"Player {player_id}", profile_image_url=None),
            team=SimpleNamespace(id=team_id, name=f"Team {team_id}", logo=None),
            match=SimpleNamespace(season=SimpleNamespace(name="2025")),
        )

    def test_clean_sheet_needs_whole_team_to_concede_nothing(self):
        rows = compute_goalkeeper_rankings([
            # Keeper 1 is replaced at half time; the substitute concedes
            self._stat(1, 1, 10, "GK", 45, conceded=0, saves=2),
            self._stat(1, 2, 10, "GK", 45, conceded=1, saves=1),
            self._stat(2, 1, 10, "GK", 90, conceded=0, saves=3),
        ], sort_by="clean_sheets")
        by_player = {r["player_id"]: r for r in rows}
        assert by_player[1]["clean_sheets"] == 1
        assert by_player[1]["clean_sheet_percentage"] == 50.0
        assert by_player[2]["clean_sheets"] == 0

    def test_outfield_row_with_goals_conceded_counts(self):
        rows = compute_goalkeeper_rankings([
            self._stat(1, 5, 10, "DF", 90, conceded=2),
            self._stat(2, 6, 10, "DF", 90, conceded=0),
            self._stat(3, 7, 10, "GK", 0),
        ])
        assert [r["player_id"] for r in rows] == [5]
        assert rows[0]["clean_sheets"] == 0
        assert rows[0]["save_percentage"] == 0.0

    def test_goals_conceded_per_match_ascending(self):
        rows = compute_goalkeeper_rankings([
            self._stat(1, 1, 10, "GK", 90, conceded=3),
            self._stat(1, 2, 20, "GK", 90, conceded=1),
        ])
        assert [r["player_id"] for r in rows] == [2, 1]
        assert [r["rank"] for r in rows] == [1, 2]


class TestPlayerVsTeams:
    def _stat(self, team_id, home, away, minutes, goals=0, assists=0):
        def team(team_id):
            return SimpleNamespace(id=team_id, name=f"Team {team_id}", logo=None)

        return SimpleNamespace(
            team_id=team_id,
            minutes_played=minutes,
            goals=goals,
            assists=assists,
            match=SimpleNamespace(
                home_team_id=home,
                away_team_id=away,
                home_team=team(home),
                away_team=team(away),
            ),
        )

    def test_grouped_by_opponent(self):
        rows = compute_player_vs_teams([
            self._stat(1, 1, 2, 90, goals=1),
            self._stat(1, 3, 1, 90, goals=2, assists=1),
            self._stat(1, 2, 1, 80, assists=1),
            self._stat(1, 3, 2, 90, goals=4),
            self._stat(1, 1, 3, 0, goals=1),
        ])
        assert [r["opponent"]["id"] for r in rows] == [3, 2]
        assert rows[0]["attack_points"] == 3
        assert rows[1]["matches_played"] == 2
        assert rows[1]["goals_per_match"] == 0.5
