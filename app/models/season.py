from datetime import datetime, date
from sqlalchemy import Integer, String, Date, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils.timestamps import utcnow


class Season(Base):
    __tablename__ = "seasons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    year: Mapped[int | None] = mapped_column(Integer)
    category: Mapped[str | None] = mapped_column(String(50))  # e.g. "league", "cup"
    start_date: Mapped[date | None] = mapped_column(Date)
    end_date: Mapped[date | None] = mapped_column(Date)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )

    # Relationships
    matches: Mapped[list["Match"]] = relationship("Match", back_populates="season")
    standings: Mapped[list["Standing"]] = relationship(
        "Standing", back_populates="season"
    )
    team_stats: Mapped[list["TeamSeasonStats"]] = relationship(
        "TeamSeasonStats", back_populates="season"
    )
    player_stats: Mapped[list["PlayerSeasonStats"]] = relationship(
        "PlayerSeasonStats", back_populates="season"
    )
    team_seasons: Mapped[list["TeamSeason"]] = relationship(
        "TeamSeason", back_populates="season"
    )
