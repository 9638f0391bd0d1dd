"""Athletes API router for managing athlete profiles."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from fitassess.database import get_db
from fitassess.models.test_result import TestType
from fitassess.models.user import User
from fitassess.schemas.athlete import (
    AthleteCreate,
    AthleteResponse,
    AthleteStats,
    AthleteUpdate,
)
from fitassess.schemas.test_result import TestResultSummary
from fitassess.services.athlete_service import athlete_service
from fitassess.services.auth_service import get_current_user
from fitassess.services.test_result_service import test_result_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=AthleteResponse, status_code=status.HTTP_201_CREATED)
async def create_athlete(
    data: AthleteCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AthleteResponse:
    """Create an athlete profile owned by the current user."""
    athlete = athlete_service.create_athlete(db, current_user.id, data)
    return AthleteResponse.model_validate(athlete)


@router.get("", response_model=List[AthleteResponse])
async def list_athletes(
    search: Optional[str] = Query(None, description="Match first or last name"),
    sport: Optional[str] = Query(None, description="Filter by sport"),
    include_inactive: bool = Query(False, description="Include deleted athletes"),
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> List[AthleteResponse]:
    """List the current user's athletes, newest first."""
    athletes = athlete_service.list_athletes(
        db,
        current_user.id,
        search=search,
        sport=sport,
        include_inactive=include_inactive,
        skip=skip,
        limit=limit,
    )
    return [AthleteResponse.model_validate(a) for a in athletes]


@router.get("/{athlete_id}", response_model=AthleteResponse)
async def get_athlete(
    athlete_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AthleteResponse:
    athlete = athlete_service.get_athlete(db, current_user.id, athlete_id)
    return AthleteResponse.model_validate(athlete)


@router.patch("/{athlete_id}", response_model=AthleteResponse)
async def update_athlete(
    athlete_id: int,
    data: AthleteUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AthleteResponse:
    """Update only the fields present in the request body."""
    athlete = athlete_service.update_athlete(db, current_user.id, athlete_id, data)
    return AthleteResponse.model_validate(athlete)


@router.delete("/{athlete_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_athlete(
    athlete_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> None:
    """Deactivate an athlete. Results and plans are kept."""
    athlete_service.delete_athlete(db, current_user.id, athlete_id)


@router.post("/{athlete_id}/restore", response_model=AthleteResponse)
async def restore_athlete(
    athlete_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AthleteResponse:
    athlete = athlete_service.restore_athlete(db, current_user.id, athlete_id)
    return AthleteResponse.model_validate(athlete)


@router.get("/{athlete_id}/stats", response_model=AthleteStats)
async def get_athlete_stats(
    athlete_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AthleteStats:
    return athlete_service.get_athlete_stats(db, current_user.id, athlete_id)


@router.get("/{athlete_id}/history", response_model=List[TestResultSummary])
async def get_athlete_history(
    athlete_id: int,
    test_type: Optional[TestType] = Query(None, description="Filter by test type"),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> List[TestResultSummary]:
    """Latest valid results of an athlete, newest first."""
    results = test_result_service.get_history(
        db, current_user.id, athlete_id, test_type=test_type, limit=limit
    )
    return [TestResultSummary.model_validate(r) for r in results]
