"""Test results API router for submitting and browsing fitness tests."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from fitassess.database import get_db
from fitassess.models.test_result import TestType
from fitassess.models.user import User
from fitassess.schemas.test_result import (
    SortField,
    SortOrder,
    TestResultCreate,
    TestResultList,
    TestResultResponse,
    TestStatsSummary,
)
from fitassess.services.auth_service import get_current_user
from fitassess.services.test_result_service import test_result_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=TestResultResponse, status_code=status.HTTP_201_CREATED)
async def submit_test_result(
    data: TestResultCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TestResultResponse:
    """
    Submit a completed test.

    The result is scored against normative data for the athlete's age and
    gender before it is stored.
    """
    result = test_result_service.submit_result(db, current_user.id, data)
    return TestResultResponse.model_validate(result)


@router.get("", response_model=TestResultList)
async def list_test_results(
    athlete_id: Optional[int] = Query(None, description="Filter by athlete"),
    test_type: Optional[TestType] = Query(None, description="Filter by test type"),
    start_date: Optional[datetime] = Query(None, description="Completed on or after"),
    end_date: Optional[datetime] = Query(None, description="Completed on or before"),
    sort_by: SortField = Query(SortField.CREATED_AT),
    order: SortOrder = Query(SortOrder.DESC),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TestResultList:
    return test_result_service.list_results(
        db,
        current_user.id,
        athlete_id=athlete_id,
        test_type=test_type,
        start_date=start_date,
        end_date=end_date,
        sort_by=sort_by,
        order=order,
        page=page,
        limit=limit,
    )


@router.get("/stats/summary", response_model=TestStatsSummary)
async def get_stats_summary(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TestStatsSummary:
    """Per test type totals across the current user's results."""
    return test_result_service.get_stats_summary(db, current_user.id)


@router.get("/{result_id}", response_model=TestResultResponse)
async def get_test_result(
    result_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> TestResultResponse:
    result = test_result_service.get_result(db, current_user.id, result_id)
    return TestResultResponse.model_validate(result)


@router.delete("/{result_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_test_result(
    result_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> None:
    """Invalidate a result. It no longer counts towards stats or rankings."""
    test_result_service.delete_result(db, current_user.id, result_id)
