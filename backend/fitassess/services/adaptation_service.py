"""Adapt training plans to recent test performance."""

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fitassess.config import settings
from fitassess.errors import InternalError, NotFoundError, ValidationError
from fitassess.models.athlete import Athlete
from fitassess.models.test_result import TestResult, TestType
from fitassess.models.training_plan import TrainingPlan, Trend
from fitassess.schemas.plans import AdaptationSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdaptationConfig:
    """Thresholds and step sizes for plan adaptation."""

    window_days: int = 30
    min_results: int = 2
    max_results: int = 10
    improving_threshold: float = 5.0  # percent
    declining_threshold: float = -5.0  # percent
    increase_factor: float = 1.1
    decrease_factor: float = 0.9
    max_intensity: float = 10.0
    min_intensity: float = 1.0
    max_volume: int = 1200
    min_volume: int = 60
    default_percentile: float = 50.0
    performance_history_limit: Optional[int] = 200


class AdaptationService:
    """Adjust volume and intensity of a plan from the athlete's score trend"""

    def __init__(self, config: Optional[AdaptationConfig] = None):
        self.config = config or AdaptationConfig()

    def adapt_plan(
        self,
        db: Session,
        user_id: int,
        plan_id: int,
        now: Optional[datetime] = None,
    ) -> Tuple[TrainingPlan, AdaptationSummary]:
        """
        Revise a plan from the athlete's recent results.

        Rules:
        - Per test type, compare the two most recent standardized scores
        - More than +5% is improving, less than -5% is declining
        - Majority of improving types: volume and intensity x1.1
        - Majority of declining types: volume and intensity x0.9
        - Otherwise the plan is left unchanged

        Raises:
            NotFoundError: Plan missing or not owned by the user
            ValidationError: Fewer than two recent results ("not enough data")
            InternalError: The revision could not be stored
        """
        now = now or datetime.utcnow()

        plan = db.query(TrainingPlan).join(
            Athlete, TrainingPlan.athlete_id == Athlete.id
        ).filter(
            TrainingPlan.id == plan_id,
            Athlete.user_id == user_id,
        ).first()

        if plan is None:
            raise NotFoundError("plan_not_found")

        results = self._get_recent_results(db, plan.athlete_id, now)
        if len(results) < self.config.min_results:
            logger.info(f"Plan {plan_id} not adapted: {len(results)} recent result(s)")
            raise ValidationError("not enough data")

        by_type = self._group_by_test_type(results)
        trends: Dict[TestType, Trend] = {}
        snapshots = []
        for test_type, samples in by_type.items():
            if len(samples) < 2:
                continue
            latest, previous = samples[0], samples[1]
            trend = self.classify_trend(
                self.percent_change(previous.standardized_score, latest.standardized_score),
                latest.standardized_score,
            )
            trends[test_type] = trend

            percentile = latest.percentile
            snapshots.append({
                "date": latest.completed_at.isoformat(),
                "test_type": test_type.value,
                "score": latest.standardized_score,
                "percentile": percentile if percentile is not None else self.config.default_percentile,
                "trend": trend.value,
            })

        overall = self.overall_trend(list(trends.values()))

        previous_volume = plan.weekly_volume
        previous_intensity = plan.weekly_intensity
        new_volume, new_intensity = self.adjust(previous_volume, previous_intensity, overall)

        plan.weekly_volume = new_volume
        plan.weekly_intensity = new_intensity
        # Assign a new list so the JSON column is flagged as changed
        plan.performance_history = self._cap_history(
            list(plan.performance_history or []) + snapshots
        )
        plan.last_adapted_at = now

        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception(f"Failed to adapt plan {plan_id}")
            raise InternalError("plan_adaptation_failed")
        db.refresh(plan)

        summary = AdaptationSummary(
            plan_id=plan.id,
            trend=overall,
            trends_by_test_type=trends,
            previous_weekly_volume=previous_volume,
            weekly_volume=new_volume,
            previous_weekly_intensity=previous_intensity,
            weekly_intensity=new_intensity,
            volume_change=self._change(previous_volume, new_volume),
            intensity_change=self._change(previous_intensity, new_intensity),
            snapshots_added=len(snapshots),
        )

        logger.info(
            f"Adapted plan {plan.id}: trend={overall.value}, "
            f"volume {previous_volume}->{new_volume}, intensity {previous_intensity}->{new_intensity}"
        )
        return plan, summary

    @staticmethod
    def percent_change(previous: float, latest: float) -> Optional[float]:
        """Percent change from previous to latest; None when previous is zero."""
        if previous == 0:
            return None
        return (latest - previous) / previous * 100

    def classify_trend(self, change: Optional[float], latest: Optional[float] = None) -> Trend:
        if change is None:
            # Previous score was zero: only a positive score counts as progress
            return Trend.IMPROVING if latest and latest > 0 else Trend.STABLE
        if change > self.config.improving_threshold:
            return Trend.IMPROVING
        if change < self.config.declining_threshold:
            return Trend.DECLINING
        return Trend.STABLE

    @staticmethod
    def overall_trend(trends: List[Trend]) -> Trend:
        improving = sum(1 for t in trends if t == Trend.IMPROVING)
        declining = sum(1 for t in trends if t == Trend.DECLINING)
        if improving > declining:
            return Trend.IMPROVING
        if declining > improving:
            return Trend.DECLINING
        return Trend.STABLE

    def adjust(self, volume: int, intensity: float, trend: Trend) -> Tuple[int, float]:
        """New (volume, intensity) for an overall trend."""
        cfg = self.config
        if trend == Trend.IMPROVING:
            volume = min(cfg.max_volume, volume * cfg.increase_factor)
            intensity = min(cfg.max_intensity, intensity * cfg.increase_factor)
        elif trend == Trend.DECLINING:
            volume = max(cfg.min_volume, volume * cfg.decrease_factor)
            intensity = max(cfg.min_intensity, intensity * cfg.decrease_factor)
        # Halves round up
        return int(math.floor(volume + 0.5)), math.floor(intensity * 10 + 0.5) / 10

    # Private helper methods

    def _get_recent_results(self, db: Session, athlete_id: int, now: datetime) -> List[TestResult]:
        """Valid results in the trailing window, newest first."""
        since = now - timedelta(days=self.config.window_days)
        return db.query(TestResult).filter(
            TestResult.athlete_id == athlete_id,
            TestResult.is_valid == True,  # noqa: E712
            TestResult.completed_at >= since,
            TestResult.completed_at <= now,
        ).order_by(
            TestResult.completed_at.desc(), TestResult.id.desc()
        ).limit(self.config.max_results).all()

    def _group_by_test_type(self, results: List[TestResult]) -> Dict[TestType, List[TestResult]]:
        grouped: Dict[TestType, List[TestResult]] = {}
        for result in results:
            grouped.setdefault(result.test_type, []).append(result)
        return grouped

    def _cap_history(self, history: List[dict]) -> List[dict]:
        limit = self.config.performance_history_limit
        if limit is None or len(history) <= limit:
            return history
        return history[-limit:]

    def _change(self, previous: float, new: float) -> float:
        if not previous:
            return 0.0
        return round((new - previous) / previous * 100, 1)


# Create a singleton instance for convenience
adaptation_service = AdaptationService(
    AdaptationConfig(
        window_days=settings.ADAPTATION_WINDOW_DAYS,
        min_results=settings.ADAPTATION_MIN_RESULTS,
        max_results=settings.ADAPTATION_MAX_RESULTS,
        performance_history_limit=settings.PERFORMANCE_HISTORY_LIMIT,
    )
)
