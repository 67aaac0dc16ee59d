from datetime import datetime

from sqlalchemy import Integer, DateTime, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils.timestamps import utcnow


class PlayerSeasonStats(Base):
    """
    Aggregated player statistics for a season and team.

    A player who moved mid-season gets one row per team.
    """

    __tablename__ = "player_season_stats"
    __table_args__ = (
        UniqueConstraint("season_id", "player_id", "team_id", name="uq_player_season_stats"),
        Index("ix_player_season_stats_goals", "goals"),
        Index("ix_player_season_stats_assists", "assists"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    season_id: Mapped[int] = mapped_column(Integer, ForeignKey("seasons.id"), index=True)
    player_id: Mapped[int] = mapped_column(Integer, ForeignKey("players.id"), index=True)
    team_id: Mapped[int] = mapped_column(Integer, ForeignKey("teams.id"), index=True)

    matches_played: Mapped[int] = mapped_column(Integer, default=0)  # minutes_played > 0 only
    goals: Mapped[int] = mapped_column(Integer, default=0)
    assists: Mapped[int] = mapped_column(Integer, default=0)
    yellow_cards: Mapped[int] = mapped_column(Integer, default=0)
    red_cards: Mapped[int] = mapped_column(Integer, default=0)
    minutes_played: Mapped[int] = mapped_column(Integer, default=0)
    saves: Mapped[int] = mapped_column(Integer, default=0)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )

    # Relationships
    player: Mapped["Player"] = relationship("Player", back_populates="season_stats")
    season: Mapped["Season"] = relationship("Season", back_populates="player_stats")
    team: Mapped["Team"] = relationship("Team", back_populates="player_season_stats")
