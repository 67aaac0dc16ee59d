from sqlalchemy import Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class TeamSeason(Base):
    """Season membership of a team, derived from the fixtures it appears in."""
    __tablename__ = "team_seasons"
    __table_args__ = (
        UniqueConstraint("season_id", "team_id", name="uq_team_seasons"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    season_id: Mapped[int] = mapped_column(Integer, ForeignKey("seasons.id"), index=True)
    team_id: Mapped[int] = mapped_column(Integer, ForeignKey("teams.id"), index=True)

    # Relationships
    season: Mapped["Season"] = relationship("Season", back_populates="team_seasons")
    team: Mapped["Team"] = relationship("Team", back_populates="team_seasons")
