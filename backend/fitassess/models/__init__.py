"""Database models for the fitness assessment application."""

from fitassess.models.base import Base
from fitassess.models.user import User
from fitassess.models.athlete import Athlete, Gender, calculate_age
from fitassess.models.test_result import TestResult, TestType, Grade
from fitassess.models.training_plan import TrainingPlan, PlanDifficulty, Trend
from fitassess.models.plan_workout import PlanWorkout, WorkoutType
from fitassess.models.sport import Sport
from fitassess.models.exercise import Exercise, ExerciseDifficulty

__all__ = [
    "Base",
    "User",
    "Athlete",
    "Gender",
    "calculate_age",
    "TestResult",
    "TestType",
    "Grade",
    "TrainingPlan",
    "PlanDifficulty",
    "Trend",
    "PlanWorkout",
    "WorkoutType",
    "Sport",
    "Exercise",
    "ExerciseDifficulty",
]
