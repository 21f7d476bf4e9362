"""
Services de sécurité
"""

from infrastructure.security.password_hasher import PasswordHasher
from infrastructure.security.jwt_service import (
    JWTService,
    TokenClaims,
    InvalidTokenError
)

__all__ = [
    "PasswordHasher",
    "JWTService",
    "TokenClaims",
    "InvalidTokenError"
]
