"""Pydantic schemas for the sport and exercise catalog."""

from typing import List, Optional

from pydantic import BaseModel, Field

from fitassess.models.exercise import ExerciseDifficulty

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


# ============ Sport Schemas ============

class SportCreate(BaseModel):
    """Schema for adding a sport to the catalog."""

    name: str = Field(..., min_length=1, max_length=100, description="Unique sport name")
    icon: str = Field(..., min_length=1, max_length=50, description="Emoji or icon identifier")
    color_primary: str = Field(..., pattern=HEX_COLOR, description="Primary gradient color")
    color_secondary: str = Field(..., pattern=HEX_COLOR, description="Secondary gradient color")
    image: str = Field(..., min_length=1, max_length=500, description="Image URL")
    description: Optional[str] = Field(None, max_length=1000)


class SportSummary(BaseModel):
    """Sport card with the number of active athletes practising it."""

    id: int
    name: str
    icon: str
    color: List[str] = Field(..., description="[primary, secondary] colors")
    image: str
    description: Optional[str] = None
    athletes: int = Field(0, description="Active athletes whose sport matches")


# ============ Exercise Schemas ============

class ExerciseCreate(BaseModel):
    """Schema for adding an exercise to a sport."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    icon: str = Field(..., min_length=1, max_length=50)
    image: Optional[str] = Field(None, max_length=500)
    video_url: Optional[str] = Field(None, max_length=500)
    duration: int = Field(..., ge=1, description="Duration in seconds")
    difficulty: ExerciseDifficulty
    muscle_groups: List[str] = Field(default_factory=list)
    equipment: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    calories: int = Field(..., ge=0, description="Estimated calories burned")
    sets: Optional[int] = Field(None, ge=1)
    reps: Optional[int] = Field(None, ge=1)


class ExerciseResponse(ExerciseCreate):
    """Schema for exercise API responses."""

    id: int
    sport_id: int
    formatted_duration: str = Field(..., description="e.g. '5m' or '2m 30s'")

    class Config:
        from_attributes = True


class SportDetail(SportSummary):
    """Sport with its active exercises."""

    exercises: List[ExerciseResponse] = Field(default_factory=list)


class SportExercises(BaseModel):
    """Exercises of one sport, easiest first."""

    sport: SportSummary
    exercises: List[ExerciseResponse]
    total: int


class CatalogSeedResult(BaseModel):
    """Counts of catalog rows created by seeding."""

    sports_created: int
    exercises_created: int
