"""Tests unitaires pour PasswordHasher et JWTService."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from domain.entities.user import UserIdentity
from infrastructure.security import InvalidTokenError, JWTService, PasswordHasher

SECRET = "unit-test-secret"
ALICE = UserIdentity(id="u-1", username="alice")


@pytest.fixture
def jwt_service():
    return JWTService(secret_key=SECRET, algorithm="HS256", expire_minutes=120, scheme="JWT")


# ============================================================================
# PasswordHasher
# ============================================================================

def test_hash_is_salted():
    hasher = PasswordHasher(rounds=4)

    first = hasher.hash("p1")
    second = hasher.hash("p1")

    assert first != second
    assert "p1" not in first
    assert hasher.verify("p1", first)
    assert hasher.verify("p1", second)


def test_verify_wrong_password_returns_false():
    hasher = PasswordHasher(rounds=4)
    assert hasher.verify("wrong", hasher.hash("p1")) is False


def test_verify_unreadable_hash_returns_false():
    hasher = PasswordHasher(rounds=4)
    assert hasher.verify("p1", "not-a-bcrypt-hash") is False


# ============================================================================
# JWTService
# ============================================================================

def test_token_round_trip(jwt_service):
    token = jwt_service.create_access_token(ALICE)

    claims = jwt_service.decode_token(token)

    assert claims.id == "u-1"
    assert claims.username == "alice"
    assert claims.identity() == ALICE


def test_token_lifetime_is_configured(jwt_service):
    before = datetime.now(timezone.utc)
    claims = jwt_service.decode_token(jwt_service.create_access_token(ALICE))

    lifetime = claims.exp - int(before.timestamp())
    assert 120 * 60 - 2 <= lifetime <= 120 * 60 + 2


def test_token_accepted_before_expiry(jwt_service):
    token = jwt_service.create_access_token(ALICE, expires_delta=timedelta(seconds=30))
    assert jwt_service.decode_token(token).username == "alice"


def test_expired_token_rejected(jwt_service):
    token = jwt_service.create_access_token(ALICE, expires_delta=timedelta(seconds=-1))
    with pytest.raises(InvalidTokenError):
        jwt_service.decode_token(token)


def test_token_signed_with_other_secret_rejected(jwt_service):
    other = JWTService(secret_key="another-secret")
    token = other.create_access_token(ALICE)
    with pytest.raises(InvalidTokenError):
        jwt_service.decode_token(token)


def test_malformed_token_rejected(jwt_service):
    with pytest.raises(InvalidTokenError):
        jwt_service.decode_token("not.a.jwt")


@pytest.mark.parametrize(
    "payload",
    [
        {"username": "alice"},
        {"id": "u-1"},
        {"id": "", "username": "alice"},
        {"id": "u-1", "username": ""},
    ],
)
def test_incomplete_claims_rejected(jwt_service, payload):
    # Signature valide mais identité incomplète : aucun accès partiel
    payload = dict(payload, exp=datetime.now(timezone.utc) + timedelta(minutes=5))
    token = jwt.encode(payload, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        jwt_service.decode_token(token)


def test_token_without_expiry_rejected(jwt_service):
    token = jwt.encode({"id": "u-1", "username": "alice"}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        jwt_service.decode_token(token)


def test_verify_authorization_header(jwt_service):
    token = jwt_service.create_access_token(ALICE)

    assert jwt_service.verify(f"JWT {token}") == ALICE
    # Le schéma est comparé sans tenir compte de la casse
    assert jwt_service.verify(f"jwt {token}") == ALICE


@pytest.mark.parametrize(
    "header",
    [None, "", "JWT", "Bearer abc", "JWT a b"],
)
def test_verify_rejects_bad_headers(jwt_service, header):
    with pytest.raises(InvalidTokenError):
        jwt_service.verify(header)
