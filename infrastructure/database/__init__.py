"""
Infrastructure Database - Configuration et repository SQLAlchemy
"""

from infrastructure.database.session import create_db_engine, create_session_factory
from infrastructure.database.models import Base, UserModel
from infrastructure.database.repositories import SQLAlchemyUserRepository
from infrastructure.database.init_db import init_db

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "UserModel",
    "SQLAlchemyUserRepository"
]
