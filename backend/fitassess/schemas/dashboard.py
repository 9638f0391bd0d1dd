"""Pydantic schemas for dashboard statistics and leaderboards."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from fitassess.models.test_result import TestType


class AgeGroup(str, Enum):
    """Competition age groups."""
    U12 = "U12"
    U14 = "U14"
    U16 = "U16"
    U18 = "U18"
    U20 = "U20"
    ADULT = "adult"


class RankingKey(str, Enum):
    """Result column a leaderboard ranks by."""
    STANDARDIZED_SCORE = "standardized_score"
    AVERAGE_FORM_SCORE = "average_form_score"


class LeaderboardFilters(BaseModel):
    """Segment selection for a leaderboard."""

    sport: Optional[str] = None
    age_group: Optional[AgeGroup] = None
    school: Optional[str] = None
    club: Optional[str] = None
    test_type: Optional[TestType] = None


class LeaderboardAthlete(BaseModel):
    id: int
    name: str
    sport: str
    school: Optional[str] = None
    club: Optional[str] = None
    age: int


class LeaderboardEntry(BaseModel):
    """One ranked athlete."""

    rank: int = Field(..., ge=1)
    athlete: LeaderboardAthlete
    score: float = Field(..., description="Best value of the ranking key")
    test_type: TestType = Field(..., description="Test type of the best result")
    form_score: float = Field(..., description="Form score of the best result")
    total_tests: int
    last_updated: datetime = Field(..., description="Completion time of the best result")


class LeaderboardResponse(BaseModel):
    ranking_key: RankingKey
    filters: LeaderboardFilters
    entries: List[LeaderboardEntry]
    total_entries: int


class DashboardStats(BaseModel):
    """Headline counters for the dashboard."""

    total_athletes: int
    tests_today: int
    tests_yesterday: int
    tests_trend: str = Field(..., description="Day-over-day change, e.g. '+50%'")
    average_score: float = Field(..., description="Mean standardized score of valid results")


class Achievement(BaseModel):
    """Highlighted athlete from recent results."""

    athlete_id: int
    title: str = Field(..., description="Top Performer, Most Improved or Rising Star")
    athlete: str = Field(..., description="Full name")
    sport: str
    score: int = Field(..., description="Best recent standardized score, rounded")
