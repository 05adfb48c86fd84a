"""Shared fixtures: app with in-memory SQLite, test client and data factories."""
from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from befit import create_app
from befit.db import db, init_db
from befit.models import ExerciseType, TrainingEntry, TrainingSession

USER_ID = "user-1"
OTHER_USER_ID = "user-2"


@pytest.fixture
def app():
    """App with a fresh in-memory database; the app context stays pushed."""
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test",
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
    })
    with app.app_context():
        init_db()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    """Client logged in as USER_ID."""
    with client.session_transaction() as sess:
        sess["user_id"] = USER_ID
    return client


@pytest.fixture
def make_exercise_type(app):
    def _make(name: str = "Bench Press") -> ExerciseType:
        exercise_type = ExerciseType(name=name)
        db.session.add(exercise_type)
        db.session.commit()
        return exercise_type
    return _make


@pytest.fixture
def make_session(app):
    def _make(user_id: str = USER_ID, days_ago: float = 0, hours: float = 1) -> TrainingSession:
        start = datetime.now() - timedelta(days=days_ago)
        session = TrainingSession(user_id=user_id, start_time=start, end_time=start + timedelta(hours=hours))
        db.session.add(session)
        db.session.commit()
        return session
    return _make


@pytest.fixture
def make_entry(app):
    def _make(session: TrainingSession, exercise_type: ExerciseType,
              weight: float = 100, sets: int = 3, repetitions: int = 10) -> TrainingEntry:
        entry = TrainingEntry(
            user_id=session.user_id,
            training_session_id=session.id,
            exercise_type_id=exercise_type.id,
            weight=weight,
            sets=sets,
            repetitions=repetitions,
        )
        db.session.add(entry)
        db.session.commit()
        return entry
    return _make


def count_entries(user_id: str | None = None) -> int:
    stmt = db.select(db.func.count(TrainingEntry.id))
    if user_id is not None:
        stmt = stmt.where(TrainingEntry.user_id == user_id)
    return db.session.execute(stmt).scalar_one()


def count_sessions() -> int:
    return db.session.execute(db.select(db.func.count(TrainingSession.id))).scalar_one()
