"""Tests du repository SQLAlchemy sur une base SQLite temporaire."""

import uuid

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from config import Config
from domain.entities.user import User
from domain.exceptions import DuplicateUsernameError, StorageError
from infrastructure.database import (
    SQLAlchemyUserRepository,
    create_db_engine,
    create_session_factory,
    init_db,
)


@pytest.fixture
def session(tmp_path):
    engine = create_db_engine(Config(database_url=f"sqlite:///{tmp_path / 'repo.db'}"))
    init_db(engine)
    db = create_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


def _user(username: str) -> User:
    return User(id=str(uuid.uuid4()), username=username, hashed_password="hash")


def test_save_and_find(session):
    repo = SQLAlchemyUserRepository(session)
    user = repo.save(_user("alice"))

    assert repo.find_by_id(user.id).username == "alice"
    assert repo.find_by_username("alice").id == user.id
    assert repo.find_by_username("nobody") is None


def test_list_updates_are_persisted(session):
    repo = SQLAlchemyUserRepository(session)
    user = repo.save(_user("alice"))

    user.add_favourite("item42")
    user.add_history("film1")
    repo.save(user)

    session.expire_all()
    stored = repo.find_by_id(user.id)
    assert stored.favourites == ["item42"]
    assert stored.history == ["film1"]

    stored.remove_favourite("item42")
    repo.save(stored)

    session.expire_all()
    assert repo.find_by_id(user.id).favourites == []


def test_duplicate_username_rejected_on_write(session):
    repo = SQLAlchemyUserRepository(session)
    repo.save(_user("alice"))

    with pytest.raises(DuplicateUsernameError):
        repo.save(_user("alice"))

    # La session reste utilisable après le rollback
    assert repo.find_by_username("alice") is not None


def test_save_rolls_back_on_storage_failure(session, monkeypatch):
    repo = SQLAlchemyUserRepository(session)
    rollbacks = []
    original_rollback = session.rollback

    def failing_commit():
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    def tracking_rollback():
        rollbacks.append(True)
        original_rollback()

    monkeypatch.setattr(session, "commit", failing_commit)
    monkeypatch.setattr(session, "rollback", tracking_rollback)

    with pytest.raises(StorageError) as exc_info:
        repo.save(_user("alice"))

    assert str(exc_info.value) == "storage error"
    assert rollbacks == [True]
    # L'ajout en attente a été annulé
    assert repo.find_by_username("alice") is None


def test_read_failure_is_storage_error(session):
    repo = SQLAlchemyUserRepository(session)
    session.execute(text("DROP TABLE users"))

    with pytest.raises(StorageError):
        repo.find_by_username("alice")
