"""Fixtures partagées : configuration de test et client HTTP."""

import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Config

TEST_SECRET = "test-secret-key"


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        jwt_secret_key=TEST_SECRET,
        bcrypt_rounds=4,
        log_level="WARNING",
    )


@pytest.fixture
def client(config):
    # Le contexte déclenche le lifespan (création des tables)
    with TestClient(create_app(config)) as test_client:
        yield test_client
