"""Fitness test scoring service.

Converts a raw test result into:
- Percentile against normative bands for the athlete's age and gender
- Letter grade (A-F) from the percentile
- Standardized 0-100 score blending performance and form quality
- Feedback messages on performance, form, technique and pacing
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from fitassess.config import settings
from fitassess.models.athlete import Gender
from fitassess.models.test_result import Grade, TestType
from fitassess.schemas.test_result import RepetitionData
from fitassess.services.norms import DEFAULT_NORM_TABLE, NormTable, PercentileBand

logger = logging.getLogger(__name__)


# One technique tip per test type
TEST_TIPS: Dict[TestType, str] = {
    TestType.SQUATS: "Remember: keep your chest up and knees tracking over toes.",
    TestType.PUSHUPS: "Tip: maintain a straight line from head to heels.",
    TestType.JUMP: "Tip: use arm swing and explosive hip extension for maximum height.",
    TestType.SITUPS: "Tip: keep your back flat and avoid pulling on your neck.",
    TestType.PULLUPS: "Tip: engage your back muscles and avoid swinging.",
    TestType.RUNNING: "Tip: maintain a consistent cadence with quick, light foot contacts.",
    TestType.PLANK: "Keep glutes and core tight; avoid sagging hips.",
    TestType.WALL_SIT: "Press your lower back into the wall and keep knees at 90°.",
    TestType.BURPEES: "Stay smooth through the transition to keep reps consistent.",
    TestType.LUNGES: "Keep front knee tracking over the middle of the foot.",
    TestType.MOUNTAIN_CLIMBERS: "Maintain a solid plank; minimize hip bounce.",
    TestType.BROAD_JUMP: "Load hips back and swing arms aggressively for distance.",
    TestType.SINGLE_LEG_BALANCE: "Focus on a fixed point to improve stability.",
    TestType.LATERAL_HOPS: "Stay on the balls of your feet and keep hops quick and light.",
    TestType.HAND_RELEASE_PUSHUPS: "Lock in a tight plank and avoid low back sag.",
    TestType.SHUTTLE_RUN: "Turn low and drive off the outside foot to accelerate faster.",
}

# Extra hint when the raw score falls below a floor: (floor, message)
LOW_SCORE_HINTS: Dict[TestType, Tuple[float, str]] = {
    TestType.SQUATS: (20, "Try to maintain a steady pace and focus on depth."),
    TestType.PUSHUPS: (15, "Start with modified push-ups to build strength."),
    TestType.SITUPS: (25, "Focus on core engagement and controlled movements."),
    TestType.PULLUPS: (3, "Consider assisted pull-ups or negatives to build strength."),
}

GRADE_DESCRIPTIONS: Dict[Grade, str] = {
    Grade.A: "Excellent - Top 20%",
    Grade.B: "Good - Above Average",
    Grade.C: "Average - Middle Range",
    Grade.D: "Below Average - Needs Improvement",
    Grade.F: "Poor - Significant Improvement Needed",
}


@dataclass(frozen=True)
class ScoringConfig:
    """Policy data for scoring. Replace to test alternative norms."""

    norms: NormTable = DEFAULT_NORM_TABLE
    precision: int = 3
    performance_weight: float = 0.8
    form_weight: float = 0.2
    default_percentile: float = 50.0
    # Lower bound of each grade, highest first; anything below is F
    grade_thresholds: Tuple[Tuple[float, Grade], ...] = (
        (80, Grade.A),
        (60, Grade.B),
        (40, Grade.C),
        (20, Grade.D),
    )
    consistency_min_reps: int = 3
    consistent_cv: float = 0.15
    inconsistent_cv: float = 0.30


@dataclass
class ScoreBreakdown:
    """Result of scoring one test."""

    raw_score: float
    percentile: float
    standardized_score: float
    grade: Grade
    average_form_score: float
    feedback: List[str] = field(default_factory=list)
    norms_version: Optional[str] = None

    def to_score_dict(self) -> dict:
        """Shape stored in ``TestResult.score``."""
        return {
            "raw_score": self.raw_score,
            "standardized_score": self.standardized_score,
            "percentile": self.percentile,
            "grade": self.grade.value,
            "feedback": list(self.feedback),
        }


class ScoringService:
    """Score fitness tests against normative data."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or ScoringConfig()

    def calculate_score(
        self,
        test_type: TestType,
        raw_score: float,
        repetitions: Sequence[RepetitionData],
        gender: Gender,
        age: int,
    ) -> ScoreBreakdown:
        """
        Calculate the complete score for a finished test.

        Args:
            test_type: Which fitness test was performed
            raw_score: Rep count, hold seconds or distance, depending on the test
            repetitions: Per-repetition timing and form data, in order
            gender: Athlete gender for the normative lookup
            age: Athlete age in years on the day of the test

        Returns:
            ScoreBreakdown with percentile, grade, standardized score and feedback
        """
        band = self.config.norms.lookup(test_type, gender, age)
        if band is not None:
            percentile = self.calculate_percentile(raw_score, band)
        else:
            percentile = self.config.default_percentile
            logger.debug(f"No norms for {test_type.value}/{gender.value}/{age}, using default percentile")

        average_form_score = self.calculate_average_form_score(repetitions)
        standardized_score = self.calculate_standardized_score(percentile, average_form_score)
        grade = self.get_grade(percentile)

        feedback = self.generate_feedback(
            test_type, raw_score, percentile, average_form_score, repetitions
        )

        return ScoreBreakdown(
            raw_score=raw_score,
            percentile=percentile,
            standardized_score=standardized_score,
            grade=grade,
            average_form_score=average_form_score,
            feedback=feedback,
            norms_version=self.config.norms.version,
        )

    def calculate_percentile(self, raw_score: float, band: PercentileBand) -> float:
        """
        Interpolate a percentile from the band thresholds.

        Between two anchors the percentile is linear. Below p10 it runs
        linearly from zero; above p90 it extrapolates and caps at 99.
        """
        thresholds = band.thresholds
        first_pct, first_value = thresholds[0]
        last_pct, last_value = thresholds[-1]

        if raw_score <= first_value:
            if first_value > 0:
                percentile = (raw_score / first_value) * first_pct
            else:
                percentile = float(first_pct)
        elif raw_score > last_value:
            if last_value > 0:
                percentile = min(99.0, last_pct + ((raw_score - last_value) / last_value) * 10)
            else:
                percentile = 99.0
        else:
            percentile = float(last_pct)
            for (lower_pct, lower_value), (upper_pct, upper_value) in zip(thresholds, thresholds[1:]):
                if raw_score <= upper_value:
                    percentile = lower_pct + (
                        (raw_score - lower_value) / (upper_value - lower_value)
                    ) * (upper_pct - lower_pct)
                    break

        return round(self._clamp(percentile), self.config.precision)

    def calculate_average_form_score(self, repetitions: Sequence[RepetitionData]) -> float:
        """Mean form score across repetitions; a test with no reps counts as perfect form."""
        if not repetitions:
            return 100.0
        average = sum(rep.form_score for rep in repetitions) / len(repetitions)
        return round(self._clamp(average), self.config.precision)

    def calculate_standardized_score(self, percentile: float, average_form_score: float) -> float:
        """
        Blend percentile with form quality.

        standardized = percentile * 0.8 + (form / 100) * percentile * 0.2
        """
        score = (
            percentile * self.config.performance_weight
            + (average_form_score / 100) * percentile * self.config.form_weight
        )
        return round(self._clamp(score), self.config.precision)

    def get_grade(self, percentile: float) -> Grade:
        """Convert percentile to letter grade."""
        for lower_bound, grade in self.config.grade_thresholds:
            if percentile >= lower_bound:
                return grade
        return Grade.F

    @staticmethod
    def grade_description(grade: Grade) -> str:
        return GRADE_DESCRIPTIONS[grade]

    def generate_feedback(
        self,
        test_type: TestType,
        raw_score: float,
        percentile: float,
        average_form_score: float,
        repetitions: Sequence[RepetitionData],
    ) -> List[str]:
        """Build feedback from four independent axes: performance, form, technique, pacing."""
        feedback = [
            self._performance_feedback(percentile),
            self._form_feedback(average_form_score),
        ]

        hint = LOW_SCORE_HINTS.get(test_type)
        if hint is not None and raw_score < hint[0]:
            feedback.append(hint[1])
        feedback.append(TEST_TIPS[test_type])

        consistency = self._consistency_feedback(repetitions)
        if consistency:
            feedback.append(consistency)

        return feedback

    def repetition_cv(self, repetitions: Sequence[RepetitionData]) -> Optional[float]:
        """Coefficient of variation of repetition durations, None when undefined."""
        if len(repetitions) < self.config.consistency_min_reps:
            return None
        durations = [rep.duration for rep in repetitions]
        mean = sum(durations) / len(durations)
        if mean <= 0:
            return None
        variance = sum((d - mean) ** 2 for d in durations) / len(durations)
        return math.sqrt(variance) / mean

    # Private helper methods

    def _clamp(self, value: float) -> float:
        return max(0.0, min(100.0, value))

    def _performance_feedback(self, percentile: float) -> str:
        if percentile >= 80:
            return "Excellent performance! You are in the top 20%."
        if percentile >= 60:
            return "Good job! Above average performance."
        if percentile >= 40:
            return "Average performance. Keep practicing to improve."
        if percentile >= 20:
            return "Below average. Consider more focused training."
        return "Keep working at it! Consistent practice will help."

    def _form_feedback(self, average_form_score: float) -> str:
        if average_form_score >= 90:
            return "Outstanding form throughout the test!"
        if average_form_score >= 75:
            return "Good form overall, with minor areas for improvement."
        if average_form_score >= 60:
            return "Focus on maintaining proper form to maximize results."
        return "Form needs significant improvement for safety and effectiveness."

    def _consistency_feedback(self, repetitions: Sequence[RepetitionData]) -> Optional[str]:
        cv = self.repetition_cv(repetitions)
        if cv is None:
            return None
        if cv < self.config.consistent_cv:
            return "Great consistency in your repetition timing!"
        if cv > self.config.inconsistent_cv:
            return "Work on maintaining a more consistent pace."
        return None


# Create a singleton instance for convenience
scoring_service = ScoringService(ScoringConfig(precision=settings.SCORE_PRECISION))
