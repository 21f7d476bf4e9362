"""
user-lists-api/api/auth.py
Garde d'authentification JWT pour les routes protégées
"""

import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from domain.entities.user import UserIdentity
from infrastructure.dependencies import get_jwt_service
from infrastructure.security.jwt_service import InvalidTokenError, JWTService

logger = logging.getLogger(__name__)


def get_current_user(
    authorization: Optional[str] = Header(None),
    jwt_service: JWTService = Depends(get_jwt_service)
) -> UserIdentity:
    """
    Dépendance FastAPI : vérifie le token du header Authorization et
    retourne l'identité qu'il porte. Aucune identité partielle n'est acceptée.
    """
    try:
        return jwt_service.verify(authorization)
    except InvalidTokenError as e:
        logger.warning(f"Request rejected: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="unauthorized",
            headers={"WWW-Authenticate": jwt_service.scheme},
        )
