"""Pydantic schemas package for API request/response models."""

from fitassess.schemas.athlete import (
    AthleteBase,
    AthleteCreate,
    AthleteUpdate,
    AthleteResponse,
    AthleteStats,
    AthleteTestTypeStats,
)
from fitassess.schemas.test_result import (
    RepetitionData,
    TestScore,
    TestResultCreate,
    TestResultResponse,
    TestResultSummary,
    TestResultList,
    TestTypeStats,
    TestStatsSummary,
    Pagination,
    SortField,
    SortOrder,
)
from fitassess.schemas.plans import (
    PlanGenerateRequest,
    WorkoutExercise,
    PlanWorkoutResponse,
    PerformanceSnapshot,
    TrainingPlanResponse,
    TrainingPlanWithWorkouts,
    AdaptationSummary,
    PlanAdaptationResponse,
)
from fitassess.schemas.sport import (
    SportCreate,
    SportSummary,
    SportDetail,
    ExerciseCreate,
    ExerciseResponse,
    SportExercises,
    CatalogSeedResult,
)
from fitassess.schemas.dashboard import (
    AgeGroup,
    RankingKey,
    LeaderboardFilters,
    LeaderboardAthlete,
    LeaderboardEntry,
    LeaderboardResponse,
    DashboardStats,
    Achievement,
)

__all__ = [
    # Athlete schemas
    "AthleteBase",
    "AthleteCreate",
    "AthleteUpdate",
    "AthleteResponse",
    "AthleteStats",
    "AthleteTestTypeStats",
    # Test result schemas
    "RepetitionData",
    "TestScore",
    "TestResultCreate",
    "TestResultResponse",
    "TestResultSummary",
    "TestResultList",
    "TestTypeStats",
    "TestStatsSummary",
    "Pagination",
    "SortField",
    "SortOrder",
    # Training plan schemas
    "PlanGenerateRequest",
    "WorkoutExercise",
    "PlanWorkoutResponse",
    "PerformanceSnapshot",
    "TrainingPlanResponse",
    "TrainingPlanWithWorkouts",
    "AdaptationSummary",
    "PlanAdaptationResponse",
    # Dashboard schemas
    "AgeGroup",
    "RankingKey",
    "LeaderboardFilters",
    "LeaderboardAthlete",
    "LeaderboardEntry",
    "LeaderboardResponse",
    "DashboardStats",
    "Achievement",
    # Catalog schemas
    "SportCreate",
    "SportSummary",
    "SportDetail",
    "ExerciseCreate",
    "ExerciseResponse",
    "SportExercises",
    "CatalogSeedResult",
]
