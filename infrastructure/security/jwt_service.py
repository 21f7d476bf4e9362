"""
JWTService - Service pour la gestion des tokens JWT
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from pydantic import BaseModel, Field, ValidationError

from domain.entities.user import UserIdentity

logger = logging.getLogger(__name__)


class InvalidTokenError(ValueError):
    """Token absent, mal formé, mal signé, expiré ou incomplet"""


class TokenClaims(BaseModel):
    """Claims attendus dans un token : tous obligatoires"""
    id: str = Field(..., min_length=1)
    username: str = Field(..., min_length=1)
    exp: int

    def identity(self) -> UserIdentity:
        return UserIdentity(id=self.id, username=self.username)


class JWTService:
    """Service pour la gestion des tokens JWT"""

    def __init__(self, secret_key: str, algorithm: str = "HS256",
                 expire_minutes: int = 120, scheme: str = "JWT"):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes
        self.scheme = scheme

    def create_access_token(self, identity: UserIdentity,
                            expires_delta: Optional[timedelta] = None) -> str:
        """Crée un token JWT signé contenant {id, username, exp}"""
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.expire_minutes)
        expire = datetime.now(timezone.utc) + expires_delta

        to_encode = {
            "id": identity.id,
            "username": identity.username,
            "exp": expire,
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> TokenClaims:
        """Décode un token JWT et valide ses claims"""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT decode error: {e}")
            raise InvalidTokenError("Invalid token") from e

        try:
            return TokenClaims.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"JWT claims incomplete: {e.error_count()} error(s)")
            raise InvalidTokenError("Invalid token") from e

    def extract_token(self, authorization: Optional[str]) -> str:
        """Extrait le token d'un header 'Authorization: <scheme> <token>'"""
        if not authorization:
            raise InvalidTokenError("Missing authorization header")

        parts = authorization.split()
        if len(parts) != 2 or parts[0].lower() != self.scheme.lower():
            raise InvalidTokenError("Invalid authorization scheme")
        return parts[1]

    def verify(self, authorization: Optional[str]) -> UserIdentity:
        """Vérifie le header d'autorisation et retourne l'identité embarquée"""
        return self.decode_token(self.extract_token(authorization)).identity()
