"""Training plan model for adaptive training programs."""

from datetime import date, datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from sqlalchemy import Integer, String, Date, DateTime, Boolean, Float, ForeignKey, Enum, Index
from sqlalchemy.types import JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitassess.models.base import Base

if TYPE_CHECKING:
    from fitassess.models.athlete import Athlete
    from fitassess.models.plan_workout import PlanWorkout


class PlanDifficulty(str, PyEnum):
    """Training plan difficulty levels."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"


class Trend(str, PyEnum):
    """Direction of recent performance."""
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class TrainingPlan(Base):
    """Training plan for one athlete. At most one plan per athlete is active."""

    __tablename__ = "training_plans"
    __table_args__ = (
        Index("ix_training_plans_athlete_active", "athlete_id", "is_active"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    athlete_id: Mapped[int] = mapped_column(Integer, ForeignKey("athletes.id", ondelete="CASCADE"), index=True)

    # Plan details
    sport: Mapped[str] = mapped_column(String(100), index=True)
    difficulty: Mapped[PlanDifficulty] = mapped_column(Enum(PlanDifficulty))
    weekly_volume: Mapped[int] = mapped_column(Integer)  # Total minutes per week, 60-1200
    weekly_intensity: Mapped[float] = mapped_column(Float)  # 1-10 scale
    start_date: Mapped[date] = mapped_column(Date)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    # Status
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    last_adapted_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    # Snapshots appended on every adaptation
    # Example: [{"date": "2026-01-05T10:00:00", "test_type": "squats",
    #            "score": 56.0, "percentile": 65.0, "trend": "improving"}]
    performance_history: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, default=list)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    athlete: Mapped["Athlete"] = relationship("Athlete", back_populates="training_plans")
    workouts: Mapped[List["PlanWorkout"]] = relationship(
        "PlanWorkout",
        back_populates="plan",
        cascade="all, delete-orphan",
        order_by="[PlanWorkout.week_number, PlanWorkout.day_number]",
    )

    def __repr__(self) -> str:
        return f"<TrainingPlan(id={self.id}, athlete_id={self.athlete_id}, difficulty={self.difficulty})>"
