"""Athlete profile model."""

from datetime import date, datetime
from enum import Enum as PyEnum
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Integer, String, Date, DateTime, Boolean, Float, ForeignKey, Enum, Text, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitassess.models.base import Base

if TYPE_CHECKING:
    from fitassess.models.user import User
    from fitassess.models.test_result import TestResult
    from fitassess.models.training_plan import TrainingPlan


class Gender(str, PyEnum):
    """Gender options used for normative lookups."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


def calculate_age(date_of_birth: date, on: Optional[date] = None) -> int:
    """Age in whole years on the given day (defaults to today)."""
    today = on or date.today()
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


class Athlete(Base):
    """Athlete profile owned by a user."""

    __tablename__ = "athletes"
    __table_args__ = (
        Index("ix_athletes_user_active", "user_id", "is_active"),
        Index("ix_athletes_name", "last_name", "first_name"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True)

    # Identity and demographics
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    date_of_birth: Mapped[date] = mapped_column(Date)
    gender: Mapped[Gender] = mapped_column(Enum(Gender))
    height: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # cm
    weight: Mapped[Optional[float]] = mapped_column(Float, nullable=True)  # kg

    # Segmentation used by leaderboards
    sport: Mapped[Optional[str]] = mapped_column(String(100), nullable=True, index=True)
    school: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    club: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    profile_image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Soft delete flag
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="athletes")
    test_results: Mapped[List["TestResult"]] = relationship(
        "TestResult", back_populates="athlete", cascade="all, delete-orphan"
    )
    training_plans: Mapped[List["TrainingPlan"]] = relationship(
        "TrainingPlan", back_populates="athlete", cascade="all, delete-orphan"
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def age(self) -> int:
        return calculate_age(self.date_of_birth)

    def __repr__(self) -> str:
        return f"<Athlete(id={self.id}, name='{self.full_name}', sport={self.sport})>"
