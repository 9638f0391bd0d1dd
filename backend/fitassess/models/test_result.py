"""Test result model for recorded fitness assessments."""

from datetime import datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from sqlalchemy import Integer, String, DateTime, Boolean, Float, ForeignKey, Enum, Text, Index
from sqlalchemy.types import JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitassess.models.base import Base

if TYPE_CHECKING:
    from fitassess.models.athlete import Athlete
    from fitassess.models.user import User


class TestType(str, PyEnum):
    """Supported fitness tests."""

    __test__ = False

    SQUATS = "squats"
    PUSHUPS = "pushups"
    JUMP = "jump"
    SITUPS = "situps"
    PULLUPS = "pullups"
    RUNNING = "running"
    PLANK = "plank"
    WALL_SIT = "wall_sit"
    BURPEES = "burpees"
    LUNGES = "lunges"
    MOUNTAIN_CLIMBERS = "mountain_climbers"
    BROAD_JUMP = "broad_jump"
    SINGLE_LEG_BALANCE = "single_leg_balance"
    LATERAL_HOPS = "lateral_hops"
    HAND_RELEASE_PUSHUPS = "hand_release_pushups"
    SHUTTLE_RUN = "shuttle_run"


class Grade(str, PyEnum):
    """Letter grades derived from percentile."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class TestResult(Base):
    """A scored fitness test for one athlete.

    Results are immutable once written; deleting one only clears ``is_valid``.
    """

    __tablename__ = "test_results"
    __table_args__ = (
        Index("ix_test_results_athlete_type", "athlete_id", "test_type"),
        Index("ix_test_results_user_created", "user_id", "created_at"),
    )

    # Keep pytest from collecting the model as a test class
    __test__ = False

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    athlete_id: Mapped[int] = mapped_column(Integer, ForeignKey("athletes.id", ondelete="CASCADE"), index=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True)

    test_type: Mapped[TestType] = mapped_column(Enum(TestType), index=True)
    started_at: Mapped[datetime] = mapped_column(DateTime)
    completed_at: Mapped[datetime] = mapped_column(DateTime, index=True)
    duration: Mapped[int] = mapped_column(Integer)  # seconds

    # Per-repetition data stored as JSON
    # Example: [{"start_time": 0.0, "end_time": 1.8, "duration": 1.8,
    #            "form_score": 92, "issues": ["knees_caving"]}]
    repetitions: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, default=list)
    total_reps: Mapped[int] = mapped_column(Integer, default=0)

    # {"raw_score", "standardized_score", "percentile", "grade", "feedback"}
    score: Mapped[Dict[str, Any]] = mapped_column(JSON)
    # Copied out of ``score`` so rankings and averages can run in SQL
    standardized_score: Mapped[float] = mapped_column(Float, index=True)
    average_form_score: Mapped[float] = mapped_column(Float)

    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    video_url: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    is_valid: Mapped[bool] = mapped_column(Boolean, default=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    athlete: Mapped["Athlete"] = relationship("Athlete", back_populates="test_results")
    user: Mapped["User"] = relationship("User", back_populates="test_results")

    @property
    def percentile(self) -> Optional[float]:
        return (self.score or {}).get("percentile")

    def __repr__(self) -> str:
        return (
            f"<TestResult(id={self.id}, test_type={self.test_type}, "
            f"standardized_score={self.standardized_score})>"
        )
