"""Dashboard API router for headline stats and leaderboards."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fitassess.database import get_db
from fitassess.models.test_result import TestType
from fitassess.models.user import User
from fitassess.schemas.dashboard import (
    Achievement,
    AgeGroup,
    DashboardStats,
    LeaderboardFilters,
    LeaderboardResponse,
    RankingKey,
)
from fitassess.services.auth_service import get_current_user
from fitassess.services.leaderboard_service import leaderboard_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DashboardStats:
    """Athlete count, tests today vs yesterday and average score."""
    return leaderboard_service.dashboard_stats(db, current_user.id)


@router.get("/achievements", response_model=List[Achievement])
async def get_achievements(
    limit: int = Query(3, ge=1, le=20),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> List[Achievement]:
    """Best athletes of the most recent results, with a title per rank."""
    return leaderboard_service.achievements(db, current_user.id, limit=limit)


@router.get("/leaderboard", response_model=LeaderboardResponse)
async def get_leaderboard(
    sport: Optional[str] = Query(None),
    age_group: Optional[AgeGroup] = Query(None),
    school: Optional[str] = Query(None),
    club: Optional[str] = Query(None),
    test_type: Optional[TestType] = Query(None),
    limit: Optional[int] = Query(None, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> LeaderboardResponse:
    """
    Rank athletes by their best standardized score.

    Filters narrow the segment; without ``test_type`` every test counts.
    """
    filters = LeaderboardFilters(
        sport=sport,
        age_group=age_group,
        school=school,
        club=club,
        test_type=test_type,
    )
    return leaderboard_service.leaderboard(db, filters, limit=limit)


@router.get("/leaderboard/{test_type}", response_model=LeaderboardResponse)
async def get_test_type_leaderboard(
    test_type: TestType,
    limit: Optional[int] = Query(None, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> LeaderboardResponse:
    """Rank athletes by their best form score in one test type."""
    return leaderboard_service.leaderboard(
        db,
        LeaderboardFilters(test_type=test_type),
        limit=limit,
        ranking_key=RankingKey.AVERAGE_FORM_SCORE,
    )
