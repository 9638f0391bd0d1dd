"""Normative percentile bands for fitness tests.

Each band gives the raw score reached at the 10th, 25th, 50th, 75th and
90th population percentile for one test type, gender and age range.

Sources:
- Squats: ACSM guidelines for lower body muscular endurance
- Push-ups: CSEP fitness norms and ACSM health-related fitness protocols
- Vertical jump: NSCA normative data for athletic populations
- Remaining tests: general population field-test norms

Values describe general population fitness; athletes may score much higher.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from fitassess.models.athlete import Gender
from fitassess.models.test_result import TestType

# Percentile anchors, in ascending order
BAND_PERCENTILES: Tuple[int, ...] = (10, 25, 50, 75, 90)


@dataclass(frozen=True)
class PercentileBand:
    """Raw-score thresholds for one demographic bucket."""

    test_type: TestType
    gender: Gender
    age_min: int
    age_max: int
    p10: float
    p25: float
    p50: float
    p75: float
    p90: float

    @property
    def thresholds(self) -> Tuple[Tuple[int, float], ...]:
        """(percentile, raw value) pairs in ascending order."""
        return tuple(zip(BAND_PERCENTILES, (self.p10, self.p25, self.p50, self.p75, self.p90)))

    def covers(self, test_type: TestType, gender: Gender, age: int) -> bool:
        return (
            self.test_type == test_type
            and self.gender == gender
            and self.age_min <= age <= self.age_max
        )


@dataclass(frozen=True)
class NormTable:
    """Versioned collection of percentile bands."""

    version: str
    bands: Tuple[PercentileBand, ...] = field(default_factory=tuple)
    min_age: int = 18
    max_age: int = 55

    def lookup(self, test_type: TestType, gender: Gender, age: int) -> Optional[PercentileBand]:
        """Find the band for a demographic bucket.

        Age is clamped to the supported range and ``other`` falls back to
        the male bands.
        """
        gender_to_use = Gender.MALE if gender == Gender.OTHER else gender
        clamped_age = max(self.min_age, min(self.max_age, age))

        for band in self.bands:
            if band.covers(test_type, gender_to_use, clamped_age):
                return band
        return None


_AGE_BRACKETS = ((18, 25), (26, 35), (36, 45), (46, 55))

# Age-segmented tests: one row of (p10, p25, p50, p75, p90) per age bracket
_SEGMENTED: Dict[TestType, Dict[Gender, Tuple[Tuple[float, ...], ...]]] = {
    # 60-second test, reps
    TestType.SQUATS: {
        Gender.MALE: ((20, 25, 35, 45, 55), (18, 22, 32, 42, 50), (15, 20, 28, 38, 45), (12, 17, 24, 32, 40)),
        Gender.FEMALE: ((18, 22, 30, 40, 48), (15, 20, 28, 36, 44), (12, 17, 24, 32, 40), (10, 14, 20, 28, 35)),
    },
    # 60-second test, reps
    TestType.PUSHUPS: {
        Gender.MALE: ((15, 22, 35, 45, 55), (12, 18, 30, 40, 48), (10, 15, 25, 35, 42), (8, 12, 20, 28, 35)),
        Gender.FEMALE: ((10, 15, 22, 30, 38), (8, 12, 18, 26, 32), (6, 10, 15, 22, 28), (4, 8, 12, 18, 24)),
    },
    # Vertical jump, cm
    TestType.JUMP: {
        Gender.MALE: ((35, 42, 52, 62, 72), (32, 38, 48, 58, 68), (28, 34, 42, 52, 60), (24, 30, 38, 46, 54)),
        Gender.FEMALE: ((25, 32, 40, 48, 55), (22, 28, 36, 44, 50), (18, 24, 32, 40, 46), (15, 20, 28, 35, 42)),
    },
    # 60-second test, reps
    TestType.SITUPS: {
        Gender.MALE: ((25, 32, 42, 50, 60), (22, 28, 38, 46, 55), (18, 24, 32, 40, 48), (15, 20, 28, 35, 42)),
        Gender.FEMALE: ((20, 28, 38, 46, 55), (18, 24, 34, 42, 50), (15, 20, 28, 36, 44), (12, 17, 24, 32, 40)),
    },
    # Continuous test, total reps
    TestType.PULLUPS: {
        Gender.MALE: ((3, 6, 10, 15, 20), (2, 5, 8, 12, 17), (1, 3, 6, 10, 14), (1, 2, 4, 7, 11)),
        Gender.FEMALE: ((1, 2, 4, 7, 11), (0, 1, 3, 5, 8), (0, 1, 2, 4, 6), (0, 0, 1, 3, 5)),
    },
    # 30-second test, metres
    TestType.RUNNING: {
        Gender.MALE: ((60, 75, 90, 105, 120), (55, 70, 85, 100, 115), (50, 65, 80, 95, 110), (45, 60, 75, 90, 105)),
        Gender.FEMALE: ((50, 65, 80, 95, 110), (45, 60, 75, 90, 105), (40, 55, 70, 85, 100), (35, 50, 65, 80, 95)),
    },
}

# Tests normed over the whole 18-55 range
_UNSEGMENTED: Dict[TestType, Dict[Gender, Tuple[float, ...]]] = {
    TestType.PLANK: {Gender.MALE: (30, 45, 60, 90, 120), Gender.FEMALE: (25, 40, 55, 80, 100)},
    TestType.WALL_SIT: {Gender.MALE: (30, 45, 60, 90, 120), Gender.FEMALE: (25, 40, 55, 80, 100)},
    TestType.BURPEES: {Gender.MALE: (10, 14, 18, 24, 30), Gender.FEMALE: (8, 12, 16, 22, 28)},
    TestType.LUNGES: {Gender.MALE: (16, 20, 26, 32, 38), Gender.FEMALE: (14, 18, 24, 30, 36)},
    TestType.MOUNTAIN_CLIMBERS: {Gender.MALE: (30, 40, 50, 60, 70), Gender.FEMALE: (28, 36, 46, 56, 66)},
    TestType.BROAD_JUMP: {Gender.MALE: (160, 190, 220, 250, 280), Gender.FEMALE: (140, 170, 200, 230, 260)},
    TestType.SINGLE_LEG_BALANCE: {Gender.MALE: (20, 30, 40, 55, 70), Gender.FEMALE: (18, 28, 38, 50, 65)},
    TestType.LATERAL_HOPS: {Gender.MALE: (20, 28, 36, 44, 52), Gender.FEMALE: (18, 26, 34, 42, 50)},
    TestType.HAND_RELEASE_PUSHUPS: {Gender.MALE: (12, 18, 25, 32, 40), Gender.FEMALE: (8, 12, 18, 24, 30)},
    TestType.SHUTTLE_RUN: {Gender.MALE: (10, 14, 18, 22, 26), Gender.FEMALE: (8, 12, 16, 20, 24)},
}


def _build_default_bands() -> Tuple[PercentileBand, ...]:
    bands = []
    for test_type, by_gender in _SEGMENTED.items():
        for gender, rows in by_gender.items():
            for (age_min, age_max), values in zip(_AGE_BRACKETS, rows):
                bands.append(PercentileBand(test_type, gender, age_min, age_max, *values))
    for test_type, by_gender in _UNSEGMENTED.items():
        for gender, values in by_gender.items():
            bands.append(PercentileBand(test_type, gender, 18, 55, *values))
    return tuple(bands)


DEFAULT_NORM_TABLE = NormTable(version="1.0", bands=_build_default_bands())
