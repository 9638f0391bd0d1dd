"""Sport catalog model."""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Integer, String, DateTime, Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitassess.models.base import Base

if TYPE_CHECKING:
    from fitassess.models.exercise import Exercise


class Sport(Base):
    """A sport with its presentation colors and exercise library."""

    __tablename__ = "sports"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    icon: Mapped[str] = mapped_column(String(50))  # emoji or icon identifier
    color_primary: Mapped[str] = mapped_column(String(20))  # "#4CAF50"
    color_secondary: Mapped[str] = mapped_column(String(20))
    image: Mapped[str] = mapped_column(String(500))
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, index=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    exercises: Mapped[List["Exercise"]] = relationship(
        "Exercise", back_populates="sport", cascade="all, delete-orphan"
    )

    @property
    def color(self) -> List[str]:
        return [self.color_primary, self.color_secondary]

    def __repr__(self) -> str:
        return f"<Sport(id={self.id}, name='{self.name}')>"
