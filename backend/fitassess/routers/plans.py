"""Training plans API router for generating and adapting plans."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from fitassess.database import get_db
from fitassess.models.user import User
from fitassess.schemas.plans import (
    PlanAdaptationResponse,
    PlanGenerateRequest,
    PlanWorkoutResponse,
    TrainingPlanResponse,
    TrainingPlanWithWorkouts,
)
from fitassess.services.adaptation_service import adaptation_service
from fitassess.services.auth_service import get_current_user
from fitassess.services.plan_generator import plan_generator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate", response_model=TrainingPlanWithWorkouts, status_code=status.HTTP_201_CREATED)
async def generate_plan(
    request: PlanGenerateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TrainingPlanWithWorkouts:
    """
    Generate a new training plan for an athlete.

    Any active plan of the athlete is deactivated. The new plan covers four
    weeks with one workout per available day. Days are scheduled in ascending
    order whatever order they are sent in, so the strength, cardio and skill
    rotation starts on the earliest day of the week.
    """
    plan = plan_generator.generate_plan(db, current_user.id, request)
    return TrainingPlanWithWorkouts.model_validate(plan)


@router.get("/athlete/{athlete_id}/active", response_model=TrainingPlanWithWorkouts)
async def get_active_plan(
    athlete_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TrainingPlanWithWorkouts:
    """Get the athlete's active plan with workouts in schedule order."""
    plan = plan_generator.get_active_plan(db, current_user.id, athlete_id)
    return TrainingPlanWithWorkouts.model_validate(plan)


@router.post("/{plan_id}/adapt", response_model=PlanAdaptationResponse)
async def adapt_plan(
    plan_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PlanAdaptationResponse:
    """
    Adapt a plan to the athlete's results of the last 30 days.

    Requires at least two recent results; otherwise responds 400.
    """
    plan, summary = adaptation_service.adapt_plan(db, current_user.id, plan_id)
    return PlanAdaptationResponse(
        plan=TrainingPlanResponse.model_validate(plan),
        adaptation_summary=summary,
    )


@router.post("/workouts/{workout_id}/complete", response_model=PlanWorkoutResponse)
async def complete_workout(
    workout_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PlanWorkoutResponse:
    """Mark a scheduled workout as completed."""
    workout = plan_generator.complete_workout(db, current_user.id, workout_id)
    return PlanWorkoutResponse.model_validate(workout)
