"""Sports API router for the sport and exercise catalog."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from fitassess.database import get_db
from fitassess.models.exercise import ExerciseDifficulty
from fitassess.models.user import User
from fitassess.schemas.sport import (
    CatalogSeedResult,
    ExerciseCreate,
    ExerciseResponse,
    SportCreate,
    SportDetail,
    SportExercises,
    SportSummary,
)
from fitassess.services.auth_service import get_current_user
from fitassess.services.sport_service import sport_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[SportSummary])
async def list_sports(db: Session = Depends(get_db)) -> List[SportSummary]:
    """List active sports with athlete counts. No authentication required."""
    return sport_service.list_sports(db)


@router.post("/seed", response_model=CatalogSeedResult, status_code=status.HTTP_201_CREATED)
async def seed_catalog(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> CatalogSeedResult:
    """Load the starter catalog. Only allowed while no sport exists."""
    logger.info(f"User {current_user.id} is seeding the sport catalog")
    return sport_service.seed_catalog(db)


@router.get("/{sport_id}", response_model=SportDetail)
async def get_sport(sport_id: int, db: Session = Depends(get_db)) -> SportDetail:
    """Get a sport with its active exercises."""
    return sport_service.get_sport(db, sport_id)


@router.get("/{sport_id}/exercises", response_model=SportExercises)
async def list_sport_exercises(
    sport_id: int,
    difficulty: Optional[ExerciseDifficulty] = Query(None),
    db: Session = Depends(get_db),
) -> SportExercises:
    """List a sport's exercises, easiest first."""
    return sport_service.list_exercises(db, sport_id, difficulty=difficulty)


@router.post("", response_model=SportSummary, status_code=status.HTTP_201_CREATED)
async def create_sport(
    data: SportCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SportSummary:
    """Add a sport to the catalog."""
    sport = sport_service.create_sport(db, data)
    return SportSummary(
        id=sport.id,
        name=sport.name,
        icon=sport.icon,
        color=sport.color,
        image=sport.image,
        description=sport.description,
    )


@router.post(
    "/{sport_id}/exercises",
    response_model=ExerciseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_exercise(
    sport_id: int,
    data: ExerciseCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> ExerciseResponse:
    """Add an exercise to a sport."""
    exercise = sport_service.create_exercise(db, sport_id, data)
    return ExerciseResponse.model_validate(exercise)
