"""Rule-based training plan generation."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from fitassess.config import settings
from fitassess.errors import InternalError, NotFoundError, ValidationError
from fitassess.models.athlete import Athlete
from fitassess.models.plan_workout import PlanWorkout, WorkoutType
from fitassess.models.training_plan import PlanDifficulty, TrainingPlan
from fitassess.schemas.plans import PlanGenerateRequest
from fitassess.services.athlete_service import get_owned_athlete

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkoutTemplate:
    """Blueprint for one session in the weekly rotation."""

    workout_type: WorkoutType
    title: str
    description: str
    exercises: Tuple[Dict[str, Any], ...]

    def render_description(self, sport: str) -> str:
        return self.description.format(sport=sport)


DEFAULT_TEMPLATES: Tuple[WorkoutTemplate, ...] = (
    WorkoutTemplate(
        workout_type=WorkoutType.STRENGTH,
        title="Strength Training",
        description="Build overall strength and power",
        exercises=(
            {"name": "Squats", "sets": 3, "reps": 12, "intensity": "moderate"},
            {"name": "Push-ups", "sets": 3, "reps": 15, "intensity": "moderate"},
            {"name": "Pull-ups", "sets": 3, "reps": 8, "intensity": "high"},
            {"name": "Plank Hold", "duration": 60, "intensity": "moderate"},
            {"name": "Lunges", "sets": 3, "reps": 10, "intensity": "moderate"},
        ),
    ),
    WorkoutTemplate(
        workout_type=WorkoutType.CARDIO,
        title="Cardio & Endurance",
        description="Improve cardiovascular fitness",
        exercises=(
            {"name": "Running", "duration": 1200, "intensity": "moderate", "notes": "20 min steady pace"},
            {"name": "Jump Rope", "duration": 300, "intensity": "high", "notes": "5 min intervals"},
            {"name": "Burpees", "sets": 3, "reps": 15, "intensity": "high"},
            {"name": "Mountain Climbers", "sets": 3, "duration": 45, "intensity": "high"},
        ),
    ),
    WorkoutTemplate(
        workout_type=WorkoutType.SKILL,
        title="Sport-Specific Skills",
        description="{sport} technique and skill development",
        exercises=(
            {"name": "Agility Drills", "duration": 600, "intensity": "moderate"},
            {"name": "Coordination Exercises", "duration": 600, "intensity": "moderate"},
            {"name": "Sport-Specific Movements", "duration": 600, "intensity": "moderate"},
        ),
    ),
)


@dataclass(frozen=True)
class PlanGeneratorConfig:
    """Policy data for plan generation."""

    intensity_by_difficulty: Dict[PlanDifficulty, float] = field(
        default_factory=lambda: {
            PlanDifficulty.BEGINNER: 4,
            PlanDifficulty.INTERMEDIATE: 6,
            PlanDifficulty.ADVANCED: 8,
            PlanDifficulty.ELITE: 9,
        }
    )
    templates: Tuple[WorkoutTemplate, ...] = DEFAULT_TEMPLATES
    weeks: int = 4
    default_weekly_volume: int = 180
    default_days: Tuple[int, ...] = (1, 3, 5)
    min_weekly_volume: int = 60
    max_weekly_volume: int = 1200


class PlanGenerator:
    """Generate a multi-week schedule for an athlete and keep one plan active."""

    def __init__(self, config: Optional[PlanGeneratorConfig] = None):
        self.config = config or PlanGeneratorConfig()

    def generate_plan(
        self,
        db: Session,
        user_id: int,
        request: PlanGenerateRequest,
        today: Optional[date] = None,
    ) -> TrainingPlan:
        """
        Create a training plan and its workouts.

        Every previously active plan of the athlete is deactivated in the
        same transaction, with the athlete row locked so two concurrent
        requests cannot both leave an active plan behind.

        Args:
            db: Database session
            user_id: Owner of the athlete
            request: Plan parameters
            today: Plan start date (defaults to today)

        Returns:
            The new active TrainingPlan with workouts loaded

        Raises:
            NotFoundError: Athlete missing, inactive or owned by someone else
            ValidationError: Volume or days out of range
            InternalError: The plan could not be persisted
        """
        weekly_volume, days = self._validate(request)

        try:
            athlete = get_owned_athlete(db, user_id, request.athlete_id, for_update=True)

            deactivated = db.query(TrainingPlan).filter(
                TrainingPlan.athlete_id == athlete.id,
                TrainingPlan.is_active == True,  # noqa: E712
            ).update({TrainingPlan.is_active: False}, synchronize_session="fetch")

            plan = TrainingPlan(
                athlete_id=athlete.id,
                sport=request.sport,
                difficulty=request.difficulty,
                weekly_volume=weekly_volume,
                weekly_intensity=float(self.config.intensity_by_difficulty[request.difficulty]),
                start_date=today or date.today(),
                is_active=True,
                performance_history=[],
            )
            db.add(plan)
            db.flush()

            for workout in self.build_workouts(plan, days):
                db.add(workout)

            db.commit()
        except NotFoundError:
            db.rollback()
            raise
        except SQLAlchemyError:
            db.rollback()
            logger.exception(f"Failed to generate plan for athlete {request.athlete_id}")
            raise InternalError("plan_generation_failed")

        db.refresh(plan)
        logger.info(
            f"Generated plan {plan.id} for athlete {athlete.id}: "
            f"{len(days)} days/week, {weekly_volume} min, deactivated {deactivated} plan(s)"
        )
        return plan

    def build_workouts(self, plan: TrainingPlan, days: List[int]) -> List[PlanWorkout]:
        """Lay out weeks x days sessions rotating through the templates."""
        templates = self.config.templates
        duration = plan.weekly_volume // len(days)

        workouts = []
        for week in range(1, self.config.weeks + 1):
            for day_index, day in enumerate(days):
                template = templates[day_index % len(templates)]
                workouts.append(
                    PlanWorkout(
                        plan_id=plan.id,
                        week_number=week,
                        day_number=day,
                        workout_type=template.workout_type,
                        title=f"Week {week} - {template.title}",
                        description=template.render_description(plan.sport),
                        exercises=[dict(exercise) for exercise in template.exercises],
                        estimated_duration=duration,
                        completed=False,
                    )
                )
        return workouts

    def get_active_plan(self, db: Session, user_id: int, athlete_id: int) -> TrainingPlan:
        """Active plan of an athlete with its workouts in schedule order."""
        athlete = get_owned_athlete(db, user_id, athlete_id, active_only=False)

        plan = db.query(TrainingPlan).options(
            selectinload(TrainingPlan.workouts)
        ).filter(
            TrainingPlan.athlete_id == athlete.id,
            TrainingPlan.is_active == True,  # noqa: E712
        ).order_by(TrainingPlan.created_at.desc()).first()

        if plan is None:
            raise NotFoundError("no_active_plan")
        return plan

    def complete_workout(
        self,
        db: Session,
        user_id: int,
        workout_id: int,
        now: Optional[datetime] = None,
    ) -> PlanWorkout:
        """Mark a workout as done."""
        workout = db.query(PlanWorkout).join(
            TrainingPlan, PlanWorkout.plan_id == TrainingPlan.id
        ).join(
            Athlete, TrainingPlan.athlete_id == Athlete.id
        ).filter(
            PlanWorkout.id == workout_id,
            Athlete.user_id == user_id,
        ).first()

        if workout is None:
            raise NotFoundError("workout_not_found")

        workout.completed = True
        workout.completed_at = now or datetime.utcnow()
        db.commit()
        db.refresh(workout)

        logger.info(f"Workout {workout_id} completed for user {user_id}")
        return workout

    # Private helper methods

    def _validate(self, request: PlanGenerateRequest) -> Tuple[int, List[int]]:
        weekly_volume = request.weekly_volume
        if weekly_volume is None:
            weekly_volume = self.config.default_weekly_volume
        if not self.config.min_weekly_volume <= weekly_volume <= self.config.max_weekly_volume:
            raise ValidationError("weekly_volume_out_of_range")

        if request.available_days is None:
            days = list(self.config.default_days)
        else:
            days = list(request.available_days)
        if not days:
            raise ValidationError("available_days_empty")
        if any(day < 1 or day > 7 for day in days):
            raise ValidationError("available_days_out_of_range")
        if len(set(days)) != len(days):
            raise ValidationError("available_days_duplicate")

        return weekly_volume, sorted(days)


# Create a singleton instance for convenience
plan_generator = PlanGenerator(
    PlanGeneratorConfig(
        weeks=settings.PLAN_WEEKS,
        default_weekly_volume=settings.DEFAULT_WEEKLY_VOLUME,
    )
)
