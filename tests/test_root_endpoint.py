"""Tests basiques de l’API FastAPI (endpoints simples)."""

import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Config


def test_root_endpoint_returns_service_info(client):
    response = client.get("/")
    assert response.status_code == 200

    data = response.json()
    assert data.get("service") == "user-lists-api"
    assert data.get("status") == "operational"


def test_health_check_endpoint_ok(client):
    response = client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data.get("status") == "healthy"
    assert data.get("service") == "user-lists-api"


def test_startup_fails_without_jwt_secret(tmp_path):
    config = Config(
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        jwt_secret_key="",
        log_level="WARNING",
    )
    app = create_app(config)

    # Le processus ne doit pas servir sans clé de signature
    with pytest.raises(RuntimeError):
        with TestClient(app):
            pass


def test_startup_fails_when_database_unreachable(tmp_path):
    # Répertoire inexistant : SQLite ne peut pas ouvrir le fichier
    config = Config(
        database_url=f"sqlite:///{tmp_path / 'missing' / 'test.db'}",
        jwt_secret_key="secret",
        log_level="WARNING",
    )
    app = create_app(config)

    with pytest.raises(Exception):
        with TestClient(app):
            pass
