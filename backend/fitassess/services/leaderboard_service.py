"""Leaderboards and dashboard counters."""

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Dict, FrozenSet, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from fitassess.config import settings
from fitassess.errors import ValidationError
from fitassess.models.athlete import Athlete, calculate_age
from fitassess.models.test_result import TestResult, TestType
from fitassess.schemas.dashboard import (
    AgeGroup,
    Achievement,
    DashboardStats,
    LeaderboardAthlete,
    LeaderboardEntry,
    LeaderboardFilters,
    LeaderboardResponse,
    RankingKey,
)

logger = logging.getLogger(__name__)

# Half-open [min_age, max_age) per group; None means unbounded
AGE_GROUP_RANGES: Dict[AgeGroup, Tuple[Optional[int], Optional[int]]] = {
    AgeGroup.U12: (None, 12),
    AgeGroup.U14: (12, 14),
    AgeGroup.U16: (14, 16),
    AgeGroup.U18: (16, 18),
    AgeGroup.U20: (18, 20),
    AgeGroup.ADULT: (20, None),
}


def years_ago(today: date, years: int) -> date:
    """Same calendar day ``years`` earlier; Feb 29 becomes Feb 28."""
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        return today.replace(year=today.year - years, day=28)


def birth_date_bounds(age_group: AgeGroup, today: date) -> Tuple[Optional[date], Optional[date]]:
    """
    Date-of-birth window for an age group.

    Returns (born_after, born_on_or_before): an athlete is in the group when
    ``born_after < date_of_birth <= born_on_or_before``.
    """
    min_age, max_age = AGE_GROUP_RANGES[age_group]
    born_on_or_before = years_ago(today, min_age) if min_age is not None else None
    born_after = years_ago(today, max_age) if max_age is not None else None
    return born_after, born_on_or_before


@dataclass(frozen=True)
class LeaderboardConfig:
    """Ranking policy."""

    default_limit: int = 10
    max_limit: int = 100
    # Most recent results considered for achievements
    achievement_window: int = 100
    achievement_titles: Tuple[str, ...] = ("Top Performer", "Most Improved", "Rising Star")
    # Test types a ranking key may be computed over; missing key means all types
    allowed_test_types: Dict[RankingKey, FrozenSet[TestType]] = field(
        default_factory=lambda: {
            RankingKey.AVERAGE_FORM_SCORE: frozenset(
                {TestType.SQUATS, TestType.PUSHUPS, TestType.JUMP}
            ),
        }
    )


@dataclass
class _Best:
    athlete_id: int
    score: float
    completed_at: datetime
    test_type: TestType
    form_score: float
    total_tests: int = 0


class LeaderboardService:
    """Rank athletes by their best valid result."""

    RANKING_COLUMNS = {
        RankingKey.STANDARDIZED_SCORE: TestResult.standardized_score,
        RankingKey.AVERAGE_FORM_SCORE: TestResult.average_form_score,
    }

    def __init__(self, config: Optional[LeaderboardConfig] = None):
        self.config = config or LeaderboardConfig()

    def leaderboard(
        self,
        db: Session,
        filters: Optional[LeaderboardFilters] = None,
        limit: Optional[int] = None,
        ranking_key: RankingKey = RankingKey.STANDARDIZED_SCORE,
        today: Optional[date] = None,
    ) -> LeaderboardResponse:
        """
        Build a leaderboard for a segment.

        Each active athlete matching the filters is represented by the best
        value of ``ranking_key`` among their valid results. Equal scores are
        ordered by the earliest completion of the best result, then by
        athlete id.

        Raises:
            ValidationError: Test type not allowed for this ranking key, or bad limit
        """
        filters = filters or LeaderboardFilters()
        today = today or date.today()
        limit = self.config.default_limit if limit is None else limit
        if limit < 1 or limit > self.config.max_limit:
            raise ValidationError("limit_out_of_range")

        allowed = self.config.allowed_test_types.get(ranking_key)
        if filters.test_type is not None and allowed is not None and filters.test_type not in allowed:
            raise ValidationError("test_type_not_ranked")

        column = self.RANKING_COLUMNS[ranking_key]
        query = db.query(
            TestResult.athlete_id,
            column.label("value"),
            TestResult.completed_at,
            TestResult.test_type,
            TestResult.average_form_score,
        ).join(
            Athlete, TestResult.athlete_id == Athlete.id
        ).filter(
            TestResult.is_valid == True,  # noqa: E712
            Athlete.is_active == True,  # noqa: E712
        )
        query = self._apply_athlete_filters(query, filters, today)

        if filters.test_type is not None:
            query = query.filter(TestResult.test_type == filters.test_type)
        elif allowed is not None:
            query = query.filter(TestResult.test_type.in_(allowed))

        best_by_athlete: Dict[int, _Best] = {}
        for row in query.all():
            best = best_by_athlete.get(row.athlete_id)
            if best is None:
                best = _Best(row.athlete_id, row.value, row.completed_at, row.test_type, row.average_form_score)
                best_by_athlete[row.athlete_id] = best
            elif row.value > best.score or (
                row.value == best.score and row.completed_at < best.completed_at
            ):
                best.score = row.value
                best.completed_at = row.completed_at
                best.test_type = row.test_type
                best.form_score = row.average_form_score
            best.total_tests += 1

        ranked = sorted(
            best_by_athlete.values(),
            key=lambda b: (-b.score, b.completed_at, b.athlete_id),
        )[:limit]

        athletes = {
            a.id: a
            for a in db.query(Athlete).filter(Athlete.id.in_([b.athlete_id for b in ranked])).all()
        }

        entries = []
        for rank, best in enumerate(ranked, start=1):
            athlete = athletes[best.athlete_id]
            entries.append(
                LeaderboardEntry(
                    rank=rank,
                    athlete=LeaderboardAthlete(
                        id=athlete.id,
                        name=athlete.full_name,
                        sport=athlete.sport or "",
                        school=athlete.school,
                        club=athlete.club,
                        age=calculate_age(athlete.date_of_birth, on=today),
                    ),
                    score=best.score,
                    test_type=best.test_type,
                    form_score=best.form_score,
                    total_tests=best.total_tests,
                    last_updated=best.completed_at,
                )
            )

        logger.debug(
            f"Leaderboard by {ranking_key.value}: {len(entries)} of {len(best_by_athlete)} athletes"
        )
        return LeaderboardResponse(
            ranking_key=ranking_key,
            filters=filters,
            entries=entries,
            total_entries=len(entries),
        )

    def dashboard_stats(
        self,
        db: Session,
        user_id: int,
        now: Optional[datetime] = None,
    ) -> DashboardStats:
        """Headline counters over the user's athletes and results."""
        now = now or datetime.utcnow()
        today_start = datetime.combine(now.date(), datetime.min.time())
        yesterday_start = today_start - timedelta(days=1)
        tomorrow_start = today_start + timedelta(days=1)

        total_athletes = db.query(func.count(Athlete.id)).filter(
            Athlete.user_id == user_id,
            Athlete.is_active == True,  # noqa: E712
        ).scalar()

        valid_results = db.query(func.count(TestResult.id)).filter(
            TestResult.user_id == user_id,
            TestResult.is_valid == True,  # noqa: E712
        )
        tests_today = valid_results.filter(
            TestResult.created_at >= today_start,
            TestResult.created_at < tomorrow_start,
        ).scalar()
        tests_yesterday = valid_results.filter(
            TestResult.created_at >= yesterday_start,
            TestResult.created_at < today_start,
        ).scalar()

        average_score = db.query(func.avg(TestResult.standardized_score)).filter(
            TestResult.user_id == user_id,
            TestResult.is_valid == True,  # noqa: E712
        ).scalar()

        return DashboardStats(
            total_athletes=total_athletes or 0,
            tests_today=tests_today or 0,
            tests_yesterday=tests_yesterday or 0,
            tests_trend=self.trend_label(tests_today or 0, tests_yesterday or 0),
            average_score=round(float(average_score or 0), 1),
        )

    def achievements(self, db: Session, user_id: int, limit: int = 3) -> List[Achievement]:
        """
        Highlight the user's best athletes from their most recent results.

        Athletes are ranked by their best standardized score among the last
        ``achievement_window`` valid results. Titles follow rank order and the
        last title repeats past the end of the list.
        """
        recent = db.query(
            TestResult.athlete_id, TestResult.standardized_score
        ).filter(
            TestResult.user_id == user_id,
            TestResult.is_valid == True,  # noqa: E712
        ).order_by(
            TestResult.created_at.desc(), TestResult.id.desc()
        ).limit(self.config.achievement_window).subquery()

        rows = db.query(
            Athlete, func.max(recent.c.standardized_score).label("best")
        ).join(
            recent, recent.c.athlete_id == Athlete.id
        ).filter(
            Athlete.is_active == True,  # noqa: E712
        ).group_by(Athlete.id).order_by(
            func.max(recent.c.standardized_score).desc(), Athlete.id
        ).limit(limit).all()

        titles = self.config.achievement_titles
        return [
            Achievement(
                athlete_id=athlete.id,
                title=titles[min(index, len(titles) - 1)],
                athlete=f"{athlete.first_name} {athlete.last_name}",
                sport=athlete.sport or "General",
                score=int(math.floor(best + 0.5)),
            )
            for index, (athlete, best) in enumerate(rows)
        ]

    @staticmethod
    def trend_label(current: int, previous: int) -> str:
        """Day-over-day change as a signed percentage; +0% without a baseline."""
        if previous <= 0:
            return "+0%"
        change = round((current - previous) / previous * 100)
        return f"{change:+d}%"

    # Private helper methods

    def _apply_athlete_filters(self, query, filters: LeaderboardFilters, today: date):
        if filters.sport:
            query = query.filter(Athlete.sport == filters.sport)
        if filters.school:
            query = query.filter(Athlete.school == filters.school)
        if filters.club:
            query = query.filter(Athlete.club == filters.club)
        if filters.age_group is not None:
            born_after, born_on_or_before = birth_date_bounds(filters.age_group, today)
            if born_after is not None:
                query = query.filter(Athlete.date_of_birth > born_after)
            if born_on_or_before is not None:
                query = query.filter(Athlete.date_of_birth <= born_on_or_before)
        return query


# Create a singleton instance for convenience
leaderboard_service = LeaderboardService(
    LeaderboardConfig(default_limit=settings.LEADERBOARD_DEFAULT_LIMIT)
)
