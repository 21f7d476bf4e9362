"""
Implémentation SQLAlchemy du UserRepository
"""

import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from domain.entities import User
from domain.exceptions import DuplicateUsernameError, StorageError
from domain.repositories import UserRepository
from infrastructure.database.models import UserModel
from infrastructure.database.mappers import UserMapper

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(UserRepository):
    """Implémentation SQLAlchemy du UserRepository"""

    def __init__(self, session: Session):
        self.session = session

    def _first(self, *criteria) -> Optional[User]:
        try:
            model = self.session.query(UserModel).filter(*criteria).first()
        except SQLAlchemyError as e:
            logger.error(f"Error reading user: {e}")
            raise StorageError("storage error") from e
        return UserMapper.to_domain(model) if model else None

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Trouve un utilisateur par son ID"""
        return self._first(UserModel.id == user_id)

    def find_by_username(self, username: str) -> Optional[User]:
        """Trouve un utilisateur par son nom d'utilisateur"""
        return self._first(UserModel.username == username)

    def save(self, user: User) -> User:
        """Sauvegarde un utilisateur"""
        try:
            model = self.session.get(UserModel, user.id)
            if model:
                model = UserMapper.to_model(user, model)
            else:
                model = UserMapper.to_model(user)
                self.session.add(model)

            self.session.commit()
            self.session.refresh(model)
            return UserMapper.to_domain(model)
        except IntegrityError as e:
            self.session.rollback()
            logger.warning(f"Duplicate username on write: '{user.username}'")
            raise DuplicateUsernameError(f"username '{user.username}' already taken") from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Error saving user: {e}")
            raise StorageError("storage error") from e
