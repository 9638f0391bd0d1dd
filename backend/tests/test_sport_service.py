import pytest

from fitassess.errors import InternalError, NotFoundError, ValidationError
from fitassess.models import Exercise, ExerciseDifficulty, Sport
from fitassess.schemas.sport import ExerciseCreate, SportCreate
from fitassess.services.sport_service import SportService

FOOTBALL = dict(
    name="Football",
    icon="⚽",
    color_primary="#00BCD4",
    color_secondary="#00838F",
    image="https://example.com/football.png",
)


def test_seed_catalog(db_session):
    result = SportService().seed_catalog(db_session)

    assert result.sports_created == 8
    assert result.exercises_created == 18
    assert db_session.query(Exercise).count() == 18

    with pytest.raises(ValidationError) as exc:
        SportService().seed_catalog(db_session)
    assert exc.value.reason == "catalog_already_seeded"


def test_failed_seed_leaves_catalog_empty(db_session):
    duplicated = [FOOTBALL, dict(FOOTBALL)]

    with pytest.raises(InternalError):
        SportService().seed_catalog(db_session, sports=duplicated, exercises={})

    assert db_session.query(Sport).count() == 0


def test_list_sports_counts_matching_active_athletes(db_session, user, make_athlete):
    service = SportService()
    service.seed_catalog(db_session)
    make_athlete(user, sport="football")
    make_athlete(user, sport="Football (U16)")
    make_athlete(user, sport="football", is_active=False)
    make_athlete(user, sport="tennis")

    sports = service.list_sports(db_session)

    names = [s.name for s in sports]
    assert names == sorted(names)
    counts = {s.name: s.athletes for s in sports}
    assert counts["Football"] == 2
    assert counts["Tennis"] == 1
    assert counts["Cricket"] == 0
    football = next(s for s in sports if s.name == "Football")
    assert football.color == ["#00BCD4", "#00838F"]


def test_exercises_easiest_first(db_session):
    service = SportService()
    service.seed_catalog(db_session)
    cricket = db_session.query(Sport).filter(Sport.name == "Cricket").one()

    listing = service.list_exercises(db_session, cricket.id)

    assert [e.name for e in listing.exercises] == [
        "Catching Practice",
        "Shadow Batting",
        "Bowling Run-up Drill",
    ]
    assert listing.total == 3
    assert listing.exercises[1].formatted_duration == "5m"

    beginner = service.list_exercises(db_session, cricket.id, ExerciseDifficulty.BEGINNER)
    assert beginner.total == 2


def test_get_sport_hides_inactive_exercises(db_session):
    service = SportService()
    service.seed_catalog(db_session)
    swimming = db_session.query(Sport).filter(Sport.name == "Swimming").one()
    swimming.exercises[0].is_active = False
    db_session.commit()

    detail = service.get_sport(db_session, swimming.id)

    assert detail.name == "Swimming"
    assert len(detail.exercises) == 1


def test_create_sport_rejects_duplicate_name(db_session):
    service = SportService()
    service.create_sport(db_session, SportCreate(**FOOTBALL))

    with pytest.raises(ValidationError) as exc:
        service.create_sport(db_session, SportCreate(**dict(FOOTBALL, name="FOOTBALL")))
    assert exc.value.reason == "sport_name_taken"


def test_create_exercise(db_session):
    service = SportService()
    sport = service.create_sport(db_session, SportCreate(**FOOTBALL))
    data = ExerciseCreate(
        name="Juggling",
        description="Keep the ball in the air.",
        icon="⚽",
        duration=150,
        difficulty=ExerciseDifficulty.BEGINNER,
        calories=40,
    )

    exercise = service.create_exercise(db_session, sport.id, data)

    assert exercise.sport_id == sport.id
    assert exercise.muscle_groups == []
    assert exercise.formatted_duration == "2m 30s"

    with pytest.raises(NotFoundError) as exc:
        service.create_exercise(db_session, 999, data)
    assert exc.value.reason == "sport_not_found"
