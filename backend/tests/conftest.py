"""Shared fixtures: in-memory database, API client and data factories."""

import os
from datetime import date, datetime, timedelta

# Configure the app before anything from fitassess is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["JWT_ALGORITHM"] = "HS256"

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from fitassess.database import build_engine, create_tables, get_db
from fitassess.main import app
from fitassess.models import Athlete, Gender, TestResult, TestType, User

TEST_SECRET = "test-secret"


@pytest.fixture()
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db_session(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.pop(get_db, None)


@pytest.fixture()
def make_user(db_session):
    counter = {"n": 0}

    def _make_user(**overrides) -> User:
        counter["n"] += 1
        data = {
            "email": f"coach{counter['n']}@example.com",
            "first_name": "Coach",
            "last_name": str(counter["n"]),
        }
        data.update(overrides)
        user = User(**data)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def user(make_user) -> User:
    return make_user()


def token_for(user_id: int, token_type: str = "access", secret: str = TEST_SECRET) -> str:
    payload = {
        "sub": str(user_id),
        "type": token_type,
        "exp": datetime.utcnow() + timedelta(minutes=30),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture()
def auth_headers(user):
    return {"Authorization": f"Bearer {token_for(user.id)}"}


@pytest.fixture()
def make_athlete(db_session):
    def _make_athlete(user: User, **overrides) -> Athlete:
        data = {
            "first_name": "Alex",
            "last_name": "Runner",
            "date_of_birth": date(2000, 1, 1),
            "gender": Gender.MALE,
            "sport": "football",
        }
        data.update(overrides)
        athlete = Athlete(user_id=user.id, **data)
        db_session.add(athlete)
        db_session.commit()
        db_session.refresh(athlete)
        return athlete

    return _make_athlete


@pytest.fixture()
def make_result(db_session):
    """Insert an already scored result, bypassing the scoring engine."""

    def _make_result(
        athlete: Athlete,
        standardized_score: float,
        completed_at: datetime,
        test_type: TestType = TestType.SQUATS,
        average_form_score: float = 80.0,
        percentile=None,
        is_valid: bool = True,
    ) -> TestResult:
        result = TestResult(
            athlete_id=athlete.id,
            user_id=athlete.user_id,
            test_type=test_type,
            started_at=completed_at - timedelta(seconds=60),
            completed_at=completed_at,
            duration=60,
            repetitions=[],
            total_reps=20,
            score={
                "raw_score": 20,
                "standardized_score": standardized_score,
                "percentile": percentile,
                "grade": "C",
                "feedback": [],
            },
            standardized_score=standardized_score,
            average_form_score=average_form_score,
            is_valid=is_valid,
        )
        db_session.add(result)
        db_session.commit()
        db_session.refresh(result)
        return result

    return _make_result


@pytest.fixture()
def make_token():
    return token_for
