from datetime import datetime, date
import enum
from sqlalchemy import Boolean, Integer, String, Date, DateTime, Enum as SQLEnum, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils.timestamps import utcnow


class CoachRole(str, enum.Enum):
    """Coach role on the bench."""
    head = "head"
    assistant = "assistant"


class Coach(Base):
    """Team coach/staff member."""
    __tablename__ = "coaches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    birth_date: Mapped[date | None] = mapped_column(Date)
    nationality: Mapped[str | None] = mapped_column(String(100))
    profile_image_url: Mapped[str | None] = mapped_column(String(500))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )

    # Relationships
    team_history: Mapped[list["TeamCoachHistory"]] = relationship(
        "TeamCoachHistory", back_populates="coach"
    )
    match_assignments: Mapped[list["MatchCoach"]] = relationship(
        "MatchCoach", back_populates="coach"
    )


class TeamCoachHistory(Base):
    """Association between team and coach for a season."""
    __tablename__ = "team_coach_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    coach_id: Mapped[int] = mapped_column(Integer, ForeignKey("coaches.id"), nullable=False, index=True)
    team_id: Mapped[int] = mapped_column(Integer, ForeignKey("teams.id"), nullable=False)
    season_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("seasons.id"))
    role: Mapped[CoachRole] = mapped_column(SQLEnum(CoachRole), default=CoachRole.head)
    start_date: Mapped[date | None] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date)
    is_current: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Relationships
    coach: Mapped["Coach"] = relationship("Coach", back_populates="team_history")
    team: Mapped["Team"] = relationship("Team")
    season: Mapped["Season"] = relationship("Season")


class MatchCoach(Base):
    """Coach on the bench for one side of a match."""
    __tablename__ = "match_coaches"
    __table_args__ = (
        Index("ix_match_coaches_coach_role", "coach_id", "role"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    match_id: Mapped[int] = mapped_column(Integer, ForeignKey("matches.id"), nullable=False, index=True)
    coach_id: Mapped[int] = mapped_column(Integer, ForeignKey("coaches.id"), nullable=False)
    team_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("teams.id"))
    role: Mapped[CoachRole] = mapped_column(SQLEnum(CoachRole), default=CoachRole.head)

    # Relationships
    match: Mapped["Match"] = relationship("Match", back_populates="coaches")
    coach: Mapped["Coach"] = relationship("Coach", back_populates="match_assignments")
