"""Exercise model for the sport catalog."""

from datetime import datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Integer, String, DateTime, Boolean, ForeignKey, Enum, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitassess.models.base import Base

if TYPE_CHECKING:
    from fitassess.models.sport import Sport


class ExerciseDifficulty(str, PyEnum):
    """Exercise difficulty, in ascending order."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Exercise(Base):
    """A drill or exercise belonging to a sport."""

    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    sport_id: Mapped[int] = mapped_column(Integer, ForeignKey("sports.id", ondelete="CASCADE"), index=True)

    name: Mapped[str] = mapped_column(String(100))
    description: Mapped[str] = mapped_column(Text)
    icon: Mapped[str] = mapped_column(String(50))
    image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    video_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    duration: Mapped[int] = mapped_column(Integer)  # seconds
    difficulty: Mapped[ExerciseDifficulty] = mapped_column(Enum(ExerciseDifficulty), index=True)

    # JSON lists of strings, e.g. ["Legs", "Core"]
    muscle_groups: Mapped[List[str]] = mapped_column(JSON, default=list)
    equipment: Mapped[List[str]] = mapped_column(JSON, default=list)
    instructions: Mapped[List[str]] = mapped_column(JSON, default=list)
    benefits: Mapped[List[str]] = mapped_column(JSON, default=list)

    calories: Mapped[int] = mapped_column(Integer)  # estimated kcal burned
    sets: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    reps: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    sport: Mapped["Sport"] = relationship("Sport", back_populates="exercises")

    @property
    def formatted_duration(self) -> str:
        """Duration as "2m 30s", "5m" or "45s"."""
        minutes, seconds = divmod(self.duration, 60)
        if minutes > 0:
            return f"{minutes}m {seconds}s" if seconds > 0 else f"{minutes}m"
        return f"{seconds}s"

    def __repr__(self) -> str:
        return f"<Exercise(id={self.id}, name='{self.name}', sport_id={self.sport_id})>"
