"""Sport and exercise catalog."""

import logging
from typing import List, Optional, Sequence

from sqlalchemy import case, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fitassess.errors import InternalError, NotFoundError, ValidationError
from fitassess.models.athlete import Athlete
from fitassess.models.exercise import Exercise, ExerciseDifficulty
from fitassess.models.sport import Sport
from fitassess.schemas.sport import (
    CatalogSeedResult,
    ExerciseCreate,
    ExerciseResponse,
    SportCreate,
    SportDetail,
    SportExercises,
    SportSummary,
)
from fitassess.services.catalog_seed import EXERCISES, SPORTS

logger = logging.getLogger(__name__)

# Easiest first
DIFFICULTY_ORDER = case(
    {d: i for i, d in enumerate(ExerciseDifficulty)},
    value=Exercise.difficulty,
)


class SportService:
    """Browse and extend the sport catalog."""

    def list_sports(self, db: Session) -> List[SportSummary]:
        """Active sports by name, each with its active athlete count."""
        sports = db.query(Sport).filter(
            Sport.is_active == True  # noqa: E712
        ).order_by(Sport.name).all()
        return [self._summary(db, sport) for sport in sports]

    def get_sport(self, db: Session, sport_id: int) -> SportDetail:
        """
        One sport with its active exercises.

        Raises:
            NotFoundError: No such sport
        """
        sport = self._get_sport(db, sport_id)
        summary = self._summary(db, sport)
        exercises = self._active_exercises(db, sport.id)
        return SportDetail(
            **summary.model_dump(),
            exercises=[ExerciseResponse.model_validate(e) for e in exercises],
        )

    def list_exercises(
        self,
        db: Session,
        sport_id: int,
        difficulty: Optional[ExerciseDifficulty] = None,
    ) -> SportExercises:
        """Active exercises of a sport, easiest first, then by name."""
        sport = self._get_sport(db, sport_id)
        exercises = self._active_exercises(db, sport.id, difficulty)
        return SportExercises(
            sport=self._summary(db, sport),
            exercises=[ExerciseResponse.model_validate(e) for e in exercises],
            total=len(exercises),
        )

    def create_sport(self, db: Session, data: SportCreate) -> Sport:
        """
        Add a sport.

        Raises:
            ValidationError: A sport with the same name exists
        """
        existing = db.query(Sport).filter(
            func.lower(Sport.name) == data.name.lower()
        ).first()
        if existing is not None:
            raise ValidationError("sport_name_taken")

        sport = Sport(**data.model_dump())
        db.add(sport)
        db.commit()
        db.refresh(sport)

        logger.info(f"Created sport {sport.id} ({sport.name})")
        return sport

    def create_exercise(self, db: Session, sport_id: int, data: ExerciseCreate) -> Exercise:
        """
        Add an exercise to a sport.

        Raises:
            NotFoundError: No such sport
        """
        sport = self._get_sport(db, sport_id)
        exercise = Exercise(sport_id=sport.id, **data.model_dump())
        db.add(exercise)
        db.commit()
        db.refresh(exercise)

        logger.info(f"Created exercise {exercise.id} for sport {sport.id}")
        return exercise

    def seed_catalog(
        self,
        db: Session,
        sports: Sequence[dict] = SPORTS,
        exercises: Optional[dict] = None,
    ) -> CatalogSeedResult:
        """
        Load the starter catalog into an empty sports table.

        Raises:
            ValidationError: The catalog already has sports
            InternalError: The catalog could not be stored
        """
        exercises = EXERCISES if exercises is None else exercises

        if db.query(func.count(Sport.id)).scalar():
            raise ValidationError("catalog_already_seeded")

        exercise_count = 0
        try:
            for sport_data in sports:
                sport = Sport(**sport_data)
                for exercise_data in exercises.get(sport_data["name"], []):
                    sport.exercises.append(Exercise(**exercise_data))
                    exercise_count += 1
                db.add(sport)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Failed to seed the sport catalog")
            raise InternalError("catalog_seed_failed")

        logger.info(f"Seeded {len(sports)} sports and {exercise_count} exercises")
        return CatalogSeedResult(sports_created=len(sports), exercises_created=exercise_count)

    # Private helper methods

    def _get_sport(self, db: Session, sport_id: int) -> Sport:
        sport = db.query(Sport).filter(Sport.id == sport_id).first()
        if sport is None:
            raise NotFoundError("sport_not_found")
        return sport

    def _active_exercises(
        self,
        db: Session,
        sport_id: int,
        difficulty: Optional[ExerciseDifficulty] = None,
    ) -> List[Exercise]:
        query = db.query(Exercise).filter(
            Exercise.sport_id == sport_id,
            Exercise.is_active == True,  # noqa: E712
        )
        if difficulty is not None:
            query = query.filter(Exercise.difficulty == difficulty)
        return query.order_by(DIFFICULTY_ORDER, Exercise.name).all()

    def _athlete_count(self, db: Session, sport: Sport) -> int:
        # Athlete sport is free text, so "Football (U16)" counts for Football
        return db.query(func.count(Athlete.id)).filter(
            Athlete.sport.ilike(f"%{sport.name}%"),
            Athlete.is_active == True,  # noqa: E712
        ).scalar() or 0

    def _summary(self, db: Session, sport: Sport) -> SportSummary:
        return SportSummary(
            id=sport.id,
            name=sport.name,
            icon=sport.icon,
            color=sport.color,
            image=sport.image,
            description=sport.description,
            athletes=self._athlete_count(db, sport),
        )


# Create a singleton instance for convenience
sport_service = SportService()
