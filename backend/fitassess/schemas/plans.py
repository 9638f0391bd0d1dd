"""Pydantic schemas for training plans and workouts API operations."""

from datetime import date, datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from fitassess.models.plan_workout import WorkoutType
from fitassess.models.test_result import TestType
from fitassess.models.training_plan import PlanDifficulty, Trend


# ============== Plan Generation Schemas ==============

class PlanGenerateRequest(BaseModel):
    """Schema for generating a new training plan.

    Volume and day ranges are validated by the plan generator.
    """

    athlete_id: int = Field(..., ge=1, description="Athlete the plan is for")
    sport: str = Field(..., min_length=1, max_length=100, description="Sport the plan targets")
    difficulty: PlanDifficulty = Field(..., description="Plan difficulty")
    weekly_volume: Optional[int] = Field(
        None, description="Total minutes per week, 60-1200 (default 180)"
    )
    available_days: Optional[List[int]] = Field(
        None, description="Training days, 1=Monday to 7=Sunday (default Mon/Wed/Fri)"
    )


# ============== Plan Workout Schemas ==============

class WorkoutExercise(BaseModel):
    """One exercise inside a workout."""

    name: str
    sets: Optional[int] = Field(None, ge=1)
    reps: Optional[int] = Field(None, ge=1)
    duration: Optional[int] = Field(None, ge=1, description="Seconds")
    intensity: Optional[str] = None
    notes: Optional[str] = None


class PlanWorkoutResponse(BaseModel):
    """Schema for plan workout API responses."""

    id: int = Field(..., description="Workout ID")
    plan_id: int = Field(..., description="Plan ID")
    week_number: int = Field(..., ge=1, description="Week of the plan")
    day_number: int = Field(..., ge=1, le=7, description="Day of the week")
    workout_type: WorkoutType = Field(..., description="Type of workout")
    title: str = Field(..., description="Workout title")
    description: Optional[str] = Field(None, description="Workout description")
    exercises: List[WorkoutExercise] = Field(default_factory=list)
    estimated_duration: int = Field(..., description="Minutes")
    completed: bool = Field(..., description="Whether the workout is done")
    completed_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# ============== Training Plan Schemas ==============

class PerformanceSnapshot(BaseModel):
    """One test type's score and trend at adaptation time."""

    date: datetime
    test_type: TestType
    score: float
    percentile: float
    trend: Trend


class TrainingPlanResponse(BaseModel):
    """Schema for training plan API responses."""

    id: int = Field(..., description="Plan ID")
    athlete_id: int = Field(..., description="Athlete ID")
    sport: str = Field(..., description="Sport")
    difficulty: PlanDifficulty = Field(..., description="Difficulty")
    weekly_volume: int = Field(..., ge=60, le=1200, description="Minutes per week")
    weekly_intensity: float = Field(..., ge=1, le=10, description="Intensity 1-10")
    start_date: date = Field(..., description="Plan start date")
    end_date: Optional[date] = None
    is_active: bool = Field(..., description="Whether the plan is in effect")
    last_adapted_at: Optional[datetime] = None
    performance_history: List[PerformanceSnapshot] = Field(default_factory=list)
    created_at: datetime = Field(..., description="Created timestamp")
    updated_at: datetime = Field(..., description="Updated timestamp")

    class Config:
        from_attributes = True


class TrainingPlanWithWorkouts(TrainingPlanResponse):
    """Training plan including its scheduled workouts."""

    workouts: List[PlanWorkoutResponse] = Field(default_factory=list)


# ============== Adaptation Schemas ==============

class AdaptationSummary(BaseModel):
    """Outcome of adapting a plan to recent results."""

    plan_id: int
    trend: Trend
    trends_by_test_type: Dict[TestType, Trend] = Field(default_factory=dict)
    previous_weekly_volume: int
    weekly_volume: int
    previous_weekly_intensity: float
    weekly_intensity: float
    volume_change: float = Field(..., description="Percent change in weekly volume")
    intensity_change: float = Field(..., description="Percent change in weekly intensity")
    snapshots_added: int


class PlanAdaptationResponse(BaseModel):
    plan: TrainingPlanResponse
    adaptation_summary: AdaptationSummary
