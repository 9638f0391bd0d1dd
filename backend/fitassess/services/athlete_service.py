"""Athlete profile management scoped to the owning user."""

import logging
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from fitassess.errors import NotFoundError
from fitassess.models.athlete import Athlete
from fitassess.models.test_result import TestResult
from fitassess.schemas.athlete import (
    AthleteCreate,
    AthleteStats,
    AthleteTestTypeStats,
    AthleteUpdate,
)

logger = logging.getLogger(__name__)


def get_owned_athlete(
    db: Session,
    user_id: int,
    athlete_id: int,
    active_only: bool = True,
    for_update: bool = False,
) -> Athlete:
    """Load an athlete belonging to the user or raise NotFoundError."""
    query = db.query(Athlete).filter(
        Athlete.id == athlete_id,
        Athlete.user_id == user_id,
    )
    if active_only:
        query = query.filter(Athlete.is_active == True)  # noqa: E712
    if for_update:
        query = query.with_for_update()

    athlete = query.first()
    if athlete is None:
        raise NotFoundError("athlete_not_found")
    return athlete


class AthleteService:
    """CRUD, soft delete and statistics for athlete profiles."""

    def create_athlete(self, db: Session, user_id: int, data: AthleteCreate) -> Athlete:
        athlete = Athlete(user_id=user_id, **data.model_dump())
        db.add(athlete)
        db.commit()
        db.refresh(athlete)

        logger.info(f"Created athlete {athlete.id} for user {user_id}")
        return athlete

    def list_athletes(
        self,
        db: Session,
        user_id: int,
        search: Optional[str] = None,
        sport: Optional[str] = None,
        include_inactive: bool = False,
        skip: int = 0,
        limit: int = 20,
    ) -> List[Athlete]:
        """List the user's athletes, newest first."""
        query = db.query(Athlete).filter(Athlete.user_id == user_id)

        if not include_inactive:
            query = query.filter(Athlete.is_active == True)  # noqa: E712
        if sport:
            query = query.filter(Athlete.sport == sport)
        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(Athlete.first_name.ilike(pattern), Athlete.last_name.ilike(pattern))
            )

        return (
            query.order_by(Athlete.created_at.desc(), Athlete.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def get_athlete(self, db: Session, user_id: int, athlete_id: int) -> Athlete:
        return get_owned_athlete(db, user_id, athlete_id, active_only=False)

    def update_athlete(
        self,
        db: Session,
        user_id: int,
        athlete_id: int,
        data: AthleteUpdate,
    ) -> Athlete:
        athlete = get_owned_athlete(db, user_id, athlete_id)

        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(athlete, field, value)

        db.commit()
        db.refresh(athlete)

        logger.info(f"Updated athlete {athlete_id} for user {user_id}")
        return athlete

    def delete_athlete(self, db: Session, user_id: int, athlete_id: int) -> None:
        """Soft delete: the profile and its history stay in place."""
        athlete = get_owned_athlete(db, user_id, athlete_id)
        athlete.is_active = False
        db.commit()

        logger.info(f"Deactivated athlete {athlete_id} for user {user_id}")

    def restore_athlete(self, db: Session, user_id: int, athlete_id: int) -> Athlete:
        athlete = db.query(Athlete).filter(
            Athlete.id == athlete_id,
            Athlete.user_id == user_id,
            Athlete.is_active == False,  # noqa: E712
        ).first()

        if athlete is None:
            raise NotFoundError("athlete_not_found_or_active")

        athlete.is_active = True
        db.commit()
        db.refresh(athlete)

        logger.info(f"Restored athlete {athlete_id} for user {user_id}")
        return athlete

    def get_athlete_stats(self, db: Session, user_id: int, athlete_id: int) -> AthleteStats:
        """Per test type aggregates over the athlete's valid results."""
        athlete = get_owned_athlete(db, user_id, athlete_id, active_only=False)

        rows = db.query(
            TestResult.test_type,
            func.count(TestResult.id).label("total_tests"),
            func.avg(TestResult.average_form_score).label("avg_form"),
            func.coalesce(func.sum(TestResult.total_reps), 0).label("total_reps"),
            func.max(TestResult.completed_at).label("last_test"),
        ).filter(
            TestResult.athlete_id == athlete.id,
            TestResult.is_valid == True,  # noqa: E712
        ).group_by(TestResult.test_type).all()

        by_test_type = [
            AthleteTestTypeStats(
                test_type=row.test_type,
                total_tests=int(row.total_tests),
                average_form_score=round(float(row.avg_form or 0), 2),
                total_reps=int(row.total_reps),
                last_test=row.last_test,
            )
            for row in rows
        ]

        return AthleteStats(
            athlete_id=athlete.id,
            name=athlete.full_name,
            age=athlete.age,
            total_tests=sum(s.total_tests for s in by_test_type),
            test_types=len(by_test_type),
            by_test_type=by_test_type,
        )


# Create a singleton instance for convenience
athlete_service = AthleteService()
