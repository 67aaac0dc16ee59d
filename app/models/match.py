import enum
from datetime import datetime, date
from sqlalchemy import Integer, Date, DateTime, ForeignKey, Index, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils.timestamps import utcnow


class MatchStatus(str, enum.Enum):
    """Match status."""
    scheduled = "scheduled"
    live = "live"
    completed = "completed"
    cancelled = "cancelled"


class Match(Base):
    __tablename__ = "matches"
    __table_args__ = (
        Index("ix_matches_season_status", "season_id", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    season_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("seasons.id"), index=True)
    home_team_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("teams.id"), index=True)
    away_team_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("teams.id"), index=True)
    match_date: Mapped[date | None] = mapped_column(Date)
    home_score: Mapped[int | None] = mapped_column(Integer)
    away_score: Mapped[int | None] = mapped_column(Integer)
    penalty_home_score: Mapped[int | None] = mapped_column(Integer)
    penalty_away_score: Mapped[int | None] = mapped_column(Integer)

    # Only completed matches feed the derived tables
    status: Mapped[MatchStatus] = mapped_column(
        Enum(MatchStatus), nullable=False, default=MatchStatus.scheduled
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )

    # Relationships
    season: Mapped["Season"] = relationship("Season", back_populates="matches")
    home_team: Mapped["Team"] = relationship(
        "Team", back_populates="home_matches", foreign_keys=[home_team_id]
    )
    away_team: Mapped["Team"] = relationship(
        "Team", back_populates="away_matches", foreign_keys=[away_team_id]
    )
    player_stats: Mapped[list["PlayerMatchStats"]] = relationship(
        "PlayerMatchStats", back_populates="match"
    )
    coaches: Mapped[list["MatchCoach"]] = relationship(
        "MatchCoach", back_populates="match", cascade="all, delete-orphan"
    )
