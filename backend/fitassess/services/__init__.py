"""Services package for business logic."""

from fitassess.services.scoring_service import ScoringConfig, ScoringService, scoring_service
from fitassess.services.athlete_service import AthleteService, athlete_service
from fitassess.services.test_result_service import TestResultService, test_result_service
from fitassess.services.plan_generator import PlanGenerator, PlanGeneratorConfig, plan_generator
from fitassess.services.adaptation_service import AdaptationConfig, AdaptationService, adaptation_service
from fitassess.services.leaderboard_service import LeaderboardConfig, LeaderboardService, leaderboard_service
from fitassess.services.sport_service import SportService, sport_service

__all__ = [
    "ScoringConfig",
    "ScoringService",
    "scoring_service",
    "AthleteService",
    "athlete_service",
    "TestResultService",
    "test_result_service",
    "PlanGenerator",
    "PlanGeneratorConfig",
    "plan_generator",
    "AdaptationConfig",
    "AdaptationService",
    "adaptation_service",
    "LeaderboardConfig",
    "LeaderboardService",
    "leaderboard_service",
    "SportService",
    "sport_service",
]
