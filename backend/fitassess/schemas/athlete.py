"""Pydantic schemas for athlete profile API operations."""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from fitassess.models.athlete import Gender
from fitassess.models.test_result import TestType


class AthleteBase(BaseModel):
    """Base schema for athlete profile data."""

    first_name: str = Field(..., min_length=1, max_length=100, description="First name")
    last_name: str = Field(..., min_length=1, max_length=100, description="Last name")
    date_of_birth: date = Field(..., description="Date of birth")
    gender: Gender = Field(..., description="Gender used for normative scoring")
    height: Optional[float] = Field(None, gt=0, le=300, description="Height in cm")
    weight: Optional[float] = Field(None, gt=0, le=500, description="Weight in kg")
    sport: Optional[str] = Field(None, max_length=100, description="Primary sport")
    school: Optional[str] = Field(None, max_length=200, description="School")
    club: Optional[str] = Field(None, max_length=200, description="Club")
    notes: Optional[str] = Field(None, description="Coach notes")

    @field_validator("date_of_birth")
    @classmethod
    def not_in_future(cls, value: date) -> date:
        if value > date.today():
            raise ValueError("date_of_birth cannot be in the future")
        return value


class AthleteCreate(AthleteBase):
    """Schema for creating an athlete profile."""
    pass


class AthleteUpdate(BaseModel):
    """Schema for updating an athlete profile."""

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    height: Optional[float] = Field(None, gt=0, le=300)
    weight: Optional[float] = Field(None, gt=0, le=500)
    sport: Optional[str] = Field(None, max_length=100)
    school: Optional[str] = Field(None, max_length=200)
    club: Optional[str] = Field(None, max_length=200)
    profile_image: Optional[str] = Field(None, max_length=500)
    notes: Optional[str] = None

    @field_validator("date_of_birth")
    @classmethod
    def not_in_future(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value > date.today():
            raise ValueError("date_of_birth cannot be in the future")
        return value


class AthleteResponse(AthleteBase):
    """Schema for athlete API responses."""

    id: int = Field(..., description="Athlete ID")
    user_id: int = Field(..., description="Owning user ID")
    age: int = Field(..., ge=0, description="Age in years")
    profile_image: Optional[str] = None
    is_active: bool = Field(..., description="False once deleted")
    created_at: datetime = Field(..., description="Created timestamp")
    updated_at: datetime = Field(..., description="Updated timestamp")

    class Config:
        from_attributes = True


class AthleteTestTypeStats(BaseModel):
    """Per test type aggregates for one athlete."""

    test_type: TestType
    total_tests: int
    average_form_score: float
    total_reps: int
    last_test: Optional[datetime] = None


class AthleteStats(BaseModel):
    """Statistics over an athlete's valid results."""

    athlete_id: int
    name: str
    age: int
    total_tests: int
    test_types: int
    by_test_type: List[AthleteTestTypeStats]
