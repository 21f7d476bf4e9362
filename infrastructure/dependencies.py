"""
Dépendances FastAPI pour l'injection de services

Les objets partagés (config, session factory, JWTService) sont construits
une seule fois par create_app et rangés dans app.state.
"""

from typing import Generator
from sqlalchemy.orm import Session
from fastapi import Depends, Request

from infrastructure.database.repositories import SQLAlchemyUserRepository
from infrastructure.security.password_hasher import PasswordHasher
from infrastructure.security.jwt_service import JWTService
from application.services.user_service import UserService


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dépendance pour obtenir une session de base de données"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_user_repository(db: Session = Depends(get_db)) -> SQLAlchemyUserRepository:
    """Dépendance pour obtenir le UserRepository"""
    return SQLAlchemyUserRepository(db)


def get_password_hasher(request: Request) -> PasswordHasher:
    """Dépendance pour obtenir le PasswordHasher"""
    return request.app.state.password_hasher


def get_jwt_service(request: Request) -> JWTService:
    """Dépendance pour obtenir le JWTService"""
    return request.app.state.jwt_service


def get_user_service(
    user_repository: SQLAlchemyUserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher)
) -> UserService:
    """Dépendance pour obtenir le UserService"""
    return UserService(user_repository, password_hasher)
