from sqlalchemy import Integer, String, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class PlayerMatchStats(Base):
    """
    Player statistics for a single match.

    Source rows for the player season rollup. Nullable counters are treated
    as zero by every consumer.
    """

    __tablename__ = "player_match_stats"
    __table_args__ = (
        Index("ix_player_match_stats_team_id", "team_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    match_id: Mapped[int] = mapped_column(Integer, ForeignKey("matches.id"), index=True)
    player_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("players.id"), index=True)
    team_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("teams.id"))

    position: Mapped[str | None] = mapped_column(String(20))  # "GK", "DF", ...
    minutes_played: Mapped[int | None] = mapped_column(Integer)
    goals: Mapped[int | None] = mapped_column(Integer, default=0)
    assists: Mapped[int | None] = mapped_column(Integer, default=0)
    yellow_cards: Mapped[int | None] = mapped_column(Integer, default=0)
    red_cards: Mapped[int | None] = mapped_column(Integer, default=0)

    # Goalkeeper
    saves: Mapped[int | None] = mapped_column(Integer, default=0)
    goals_conceded: Mapped[int | None] = mapped_column(Integer, default=0)

    # Relationships
    match: Mapped["Match"] = relationship("Match", back_populates="player_stats")
    player: Mapped["Player"] = relationship("Player", back_populates="match_stats")
    team: Mapped["Team"] = relationship("Team", back_populates="player_match_stats")
