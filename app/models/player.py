from datetime import datetime, date
from sqlalchemy import Integer, String, Date, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils.timestamps import utcnow


class Player(Base):
    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    jersey_number: Mapped[int | None] = mapped_column(Integer)
    profile_image_url: Mapped[str | None] = mapped_column(String(500))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )

    # Relationships
    team_history: Mapped[list["PlayerTeamHistory"]] = relationship(
        "PlayerTeamHistory", back_populates="player"
    )
    positions: Mapped[list["PlayerPosition"]] = relationship(
        "PlayerPosition", back_populates="player"
    )
    match_stats: Mapped[list["PlayerMatchStats"]] = relationship(
        "PlayerMatchStats", back_populates="player"
    )
    season_stats: Mapped[list["PlayerSeasonStats"]] = relationship(
        "PlayerSeasonStats", back_populates="player"
    )


class PlayerTeamHistory(Base):
    """Which team a player belonged to, and when."""
    __tablename__ = "player_team_history"
    __table_args__ = (
        Index("ix_player_team_history_player_team", "player_id", "team_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    player_id: Mapped[int] = mapped_column(Integer, ForeignKey("players.id"), nullable=False)
    team_id: Mapped[int] = mapped_column(Integer, ForeignKey("teams.id"), nullable=False)
    season_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("seasons.id"))
    start_date: Mapped[date | None] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date)  # NULL = still at the team
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    # Relationships
    player: Mapped["Player"] = relationship("Player", back_populates="team_history")
    team: Mapped["Team"] = relationship("Team")


class PlayerPosition(Base):
    """Registered playing position of a player for a season (GK, DF, MF, FW)."""
    __tablename__ = "player_positions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    player_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("players.id"), nullable=False, index=True
    )
    season_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("seasons.id"))
    position: Mapped[str] = mapped_column(String(20), nullable=False)
    start_date: Mapped[date | None] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date)

    # Relationships
    player: Mapped["Player"] = relationship("Player", back_populates="positions")
