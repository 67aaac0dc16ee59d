"""
Schemas for Head-to-Head (H2H) statistics between two teams.
"""

from pydantic import BaseModel

from app.schemas.common import TeamBrief


class H2HOverallStats(BaseModel):
    """All-time record from team1's point of view."""
    total_matches: int = 0
    team1_wins: int = 0
    draws: int = 0
    team2_wins: int = 0
    team1_goals: int = 0
    team2_goals: int = 0


class HeadToHeadResponse(BaseModel):
    team1: TeamBrief
    team2: TeamBrief
    overall: H2HOverallStats
