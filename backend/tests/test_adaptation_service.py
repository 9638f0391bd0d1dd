from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import OperationalError

from fitassess.errors import InternalError, NotFoundError, ValidationError
from fitassess.models import PlanDifficulty, TestType, Trend
from fitassess.schemas.plans import PlanGenerateRequest
from fitassess.services.adaptation_service import AdaptationConfig, AdaptationService
from fitassess.services.plan_generator import PlanGenerator

NOW = datetime(2026, 3, 20, 12, 0)


@pytest.fixture()
def plan(db_session, user, make_athlete):
    athlete = make_athlete(user)
    request = PlanGenerateRequest(
        athlete_id=athlete.id, sport="football", difficulty=PlanDifficulty.INTERMEDIATE
    )
    return PlanGenerator().generate_plan(db_session, user.id, request)


def days_ago(n):
    return NOW - timedelta(days=n)


def test_improving_squats_raise_volume_and_intensity(db_session, user, plan, make_result):
    athlete = plan.athlete
    make_result(athlete, 50, days_ago(10), percentile=55)
    make_result(athlete, 56, days_ago(2), percentile=65)

    adapted, summary = AdaptationService().adapt_plan(db_session, user.id, plan.id, now=NOW)

    assert summary.trend == Trend.IMPROVING
    assert summary.trends_by_test_type == {TestType.SQUATS: Trend.IMPROVING}
    assert adapted.weekly_intensity == 6.6
    assert adapted.weekly_volume == 198
    assert summary.volume_change == 10.0
    assert adapted.last_adapted_at == NOW
    assert adapted.performance_history == [
        {
            "date": days_ago(2).isoformat(),
            "test_type": "squats",
            "score": 56,
            "percentile": 65,
            "trend": "improving",
        }
    ]


def test_declining_trend_lowers_plan(db_session, user, plan, make_result):
    athlete = plan.athlete
    make_result(athlete, 70, days_ago(5), test_type=TestType.PUSHUPS)
    make_result(athlete, 60, days_ago(1), test_type=TestType.PUSHUPS)

    adapted, summary = AdaptationService().adapt_plan(db_session, user.id, plan.id, now=NOW)

    assert summary.trend == Trend.DECLINING
    assert adapted.weekly_intensity == 5.4
    assert adapted.weekly_volume == 162
    # Missing percentile falls back to 50
    assert adapted.performance_history[-1]["percentile"] == 50


def test_small_change_is_stable(db_session, user, plan, make_result):
    athlete = plan.athlete
    make_result(athlete, 50, days_ago(5))
    make_result(athlete, 52, days_ago(1))

    adapted, summary = AdaptationService().adapt_plan(db_session, user.id, plan.id, now=NOW)

    assert summary.trend == Trend.STABLE
    assert adapted.weekly_volume == 180
    assert adapted.weekly_intensity == 6


def test_tied_vote_is_stable(db_session, user, plan, make_result):
    athlete = plan.athlete
    make_result(athlete, 50, days_ago(6), test_type=TestType.SQUATS)
    make_result(athlete, 60, days_ago(3), test_type=TestType.SQUATS)
    make_result(athlete, 60, days_ago(5), test_type=TestType.JUMP)
    make_result(athlete, 40, days_ago(2), test_type=TestType.JUMP)

    adapted, summary = AdaptationService().adapt_plan(db_session, user.id, plan.id, now=NOW)

    assert summary.trend == Trend.STABLE
    assert summary.snapshots_added == 2
    assert adapted.weekly_volume == 180


def test_fewer_than_two_results_leaves_plan_untouched(db_session, user, plan, make_result):
    athlete = plan.athlete
    make_result(athlete, 50, days_ago(1))
    # Outside the window and invalidated results do not count
    make_result(athlete, 40, days_ago(45))
    make_result(athlete, 30, days_ago(2), is_valid=False)

    with pytest.raises(ValidationError) as exc:
        AdaptationService().adapt_plan(db_session, user.id, plan.id, now=NOW)

    assert exc.value.reason == "not enough data"
    db_session.refresh(plan)
    assert plan.weekly_volume == 180
    assert plan.weekly_intensity == 6
    assert plan.performance_history == []
    assert plan.last_adapted_at is None


def test_zero_previous_score(db_session, user, plan, make_result):
    athlete = plan.athlete
    make_result(athlete, 0, days_ago(4))
    make_result(athlete, 12, days_ago(1))

    _, summary = AdaptationService().adapt_plan(db_session, user.id, plan.id, now=NOW)

    assert summary.trend == Trend.IMPROVING


def test_caps_and_floors():
    service = AdaptationService()

    assert service.adjust(1150, 9.5, Trend.IMPROVING) == (1200, 10.0)
    assert service.adjust(62, 1.05, Trend.DECLINING) == (60, 1.0)
    assert service.adjust(300, 7.0, Trend.STABLE) == (300, 7.0)


def test_halves_round_up():
    service = AdaptationService()

    assert service.adjust(85, 5.0, Trend.DECLINING) == (77, 4.5)
    assert service.adjust(205, 2.5, Trend.IMPROVING) == (226, 2.8)


def test_history_is_capped(db_session, user, plan, make_result):
    athlete = plan.athlete
    make_result(athlete, 50, days_ago(4))
    make_result(athlete, 56, days_ago(1))
    service = AdaptationService(AdaptationConfig(performance_history_limit=2))

    for i in range(3):
        adapted, _ = service.adapt_plan(db_session, user.id, plan.id, now=NOW + timedelta(minutes=i))

    assert len(adapted.performance_history) == 2
    assert adapted.last_adapted_at == NOW + timedelta(minutes=2)
    # Snapshots are dated by the result they describe
    assert {s["date"] for s in adapted.performance_history} == {days_ago(1).isoformat()}


def test_plan_of_other_user_not_found(db_session, make_user, plan):
    stranger = make_user()

    with pytest.raises(NotFoundError):
        AdaptationService().adapt_plan(db_session, stranger.id, plan.id, now=NOW)


def test_failed_commit_rolls_back(db_session, user, plan, make_result, monkeypatch):
    athlete = plan.athlete
    make_result(athlete, 50, days_ago(4))
    make_result(athlete, 56, days_ago(1))

    def broken_commit():
        raise OperationalError("UPDATE training_plans", {}, Exception("disk full"))

    monkeypatch.setattr(db_session, "commit", broken_commit)

    with pytest.raises(InternalError) as exc:
        AdaptationService().adapt_plan(db_session, user.id, plan.id, now=NOW)

    assert exc.value.reason == "plan_adaptation_failed"
    monkeypatch.undo()
    db_session.refresh(plan)
    assert plan.weekly_volume == 180
    assert plan.performance_history == []
    assert plan.last_adapted_at is None
