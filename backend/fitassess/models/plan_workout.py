"""Plan workout model for scheduled training sessions."""

from datetime import datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from sqlalchemy import Integer, String, DateTime, Boolean, ForeignKey, Enum, Text, Index
from sqlalchemy.types import JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitassess.models.base import Base

if TYPE_CHECKING:
    from fitassess.models.training_plan import TrainingPlan


class WorkoutType(str, PyEnum):
    """Workout type categories."""
    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    SKILL = "skill"
    RECOVERY = "recovery"


class PlanWorkout(Base):
    """One scheduled session of a training plan."""

    __tablename__ = "plan_workouts"
    __table_args__ = (
        Index("ix_plan_workouts_schedule", "plan_id", "week_number", "day_number"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    plan_id: Mapped[int] = mapped_column(Integer, ForeignKey("training_plans.id", ondelete="CASCADE"), index=True)

    # Schedule position
    week_number: Mapped[int] = mapped_column(Integer)  # >= 1
    day_number: Mapped[int] = mapped_column(Integer)  # 1 = Monday ... 7 = Sunday

    # Workout details
    workout_type: Mapped[WorkoutType] = mapped_column(Enum(WorkoutType))
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Exercises stored as JSON
    # Example: [{"name": "Squats", "sets": 3, "reps": 12, "intensity": "moderate"},
    #           {"name": "Plank Hold", "duration": 60, "intensity": "moderate"}]
    exercises: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, default=list)
    estimated_duration: Mapped[int] = mapped_column(Integer)  # minutes

    # Completion tracking
    completed: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    plan: Mapped["TrainingPlan"] = relationship("TrainingPlan", back_populates="workouts")

    def __repr__(self) -> str:
        return f"<PlanWorkout(id={self.id}, week={self.week_number}, day={self.day_number}, type={self.workout_type})>"
