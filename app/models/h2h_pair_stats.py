from datetime import datetime
from sqlalchemy import Integer, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils.timestamps import utcnow


class H2HPairStats(Base):
    """
    All-time head-to-head record for an unordered pair of teams.

    The pair is stored once, with the smaller team id in team_small_id.
    """

    __tablename__ = "h2h_pair_stats"
    __table_args__ = (
        UniqueConstraint("team_small_id", "team_large_id", name="uq_h2h_pair"),
        CheckConstraint("team_small_id < team_large_id", name="ck_h2h_pair_order"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    team_small_id: Mapped[int] = mapped_column(Integer, ForeignKey("teams.id"), nullable=False)
    team_large_id: Mapped[int] = mapped_column(Integer, ForeignKey("teams.id"), nullable=False)
    total_matches: Mapped[int] = mapped_column(Integer, default=0)
    small_wins: Mapped[int] = mapped_column(Integer, default=0)
    large_wins: Mapped[int] = mapped_column(Integer, default=0)
    draws: Mapped[int] = mapped_column(Integer, default=0)
    small_goals: Mapped[int] = mapped_column(Integer, default=0)
    large_goals: Mapped[int] = mapped_column(Integer, default=0)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, onupdate=utcnow
    )

    # Relationships
    team_small: Mapped["Team"] = relationship("Team", foreign_keys=[team_small_id])
    team_large: Mapped["Team"] = relationship("Team", foreign_keys=[team_large_id])
