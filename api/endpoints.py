"""
user-lists-api/api/endpoints.py
Endpoints de l'API : inscription, connexion, favoris et historique
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api import schemas
from api.auth import get_current_user
from application.services.user_service import UserService
from domain.entities.user import UserIdentity
from domain.exceptions import UserServiceError
from infrastructure.dependencies import get_jwt_service, get_user_service
from infrastructure.security.jwt_service import JWTService

logger = logging.getLogger(__name__)
user_router = APIRouter(prefix="/user")


def _client_error(exc: UserServiceError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail=str(exc)
    )

# ============================================================================
# AUTHENTIFICATION
# ============================================================================

@user_router.post("/register", response_model=schemas.MessageResponse, tags=["Authentication"])
def register(
    user_in: schemas.RegisterRequest,
    user_service: UserService = Depends(get_user_service)
):
    """Inscrit un nouvel utilisateur"""
    try:
        message = user_service.register_user(
            user_in.username, user_in.password, user_in.password2
        )
    except UserServiceError as e:
        raise _client_error(e)
    return {"message": message}


@user_router.post("/login", response_model=schemas.LoginResponse, tags=["Authentication"])
def login(
    credentials: schemas.LoginRequest,
    user_service: UserService = Depends(get_user_service),
    jwt_service: JWTService = Depends(get_jwt_service)
):
    """Fournit un token JWT en échange de username/password"""
    try:
        identity = user_service.check_user(credentials.username, credentials.password)
    except UserServiceError as e:
        raise _client_error(e)

    token = jwt_service.create_access_token(identity)
    return {"message": "login successful", "token": token}

# ============================================================================
# FAVORIS  [JWT Protégé]
# ============================================================================

@user_router.get("/favourites", response_model=List[str], tags=["Favourites"])
def get_favourites(
    current_user: UserIdentity = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Retourne les favoris de l'utilisateur connecté"""
    try:
        return user_service.get_favourites(current_user.id)
    except UserServiceError as e:
        raise _client_error(e)


@user_router.put("/favourites/{item_id}", response_model=List[str], tags=["Favourites"])
def add_favourite(
    item_id: str,
    current_user: UserIdentity = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Ajoute un élément aux favoris de l'utilisateur connecté"""
    try:
        return user_service.add_favourite(current_user.id, item_id)
    except UserServiceError as e:
        raise _client_error(e)


@user_router.delete("/favourites/{item_id}", response_model=List[str], tags=["Favourites"])
def remove_favourite(
    item_id: str,
    current_user: UserIdentity = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Retire un élément des favoris de l'utilisateur connecté"""
    try:
        return user_service.remove_favourite(current_user.id, item_id)
    except UserServiceError as e:
        raise _client_error(e)

# ============================================================================
# HISTORIQUE  [JWT Protégé]
# ============================================================================

@user_router.get("/history", response_model=List[str], tags=["History"])
def get_history(
    current_user: UserIdentity = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Retourne l'historique de l'utilisateur connecté"""
    try:
        return user_service.get_history(current_user.id)
    except UserServiceError as e:
        raise _client_error(e)


@user_router.put("/history/{item_id}", response_model=List[str], tags=["History"])
def add_history(
    item_id: str,
    current_user: UserIdentity = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Ajoute un élément à l'historique de l'utilisateur connecté"""
    try:
        return user_service.add_history(current_user.id, item_id)
    except UserServiceError as e:
        raise _client_error(e)


@user_router.delete("/history/{item_id}", response_model=List[str], tags=["History"])
def remove_history(
    item_id: str,
    current_user: UserIdentity = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service)
):
    """Retire un élément de l'historique de l'utilisateur connecté"""
    try:
        return user_service.remove_history(current_user.id, item_id)
    except UserServiceError as e:
        raise _client_error(e)
