"""
UserService - Service applicatif pour l'inscription, la connexion et les listes
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from domain.entities.user import User, UserIdentity
from domain.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidInputError,
    RegistrationError,
    UserNotFoundError,
)
from domain.repositories.user_repository import UserRepository
from infrastructure.security.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)

REGISTERED_MESSAGE = "user registered"
# Même message pour utilisateur inconnu et mauvais mot de passe
INVALID_CREDENTIALS_MESSAGE = "incorrect username or password"


class UserService:
    """Service pour la gestion des utilisateurs et de leurs listes"""

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    def register_user(self, username: Optional[str], password: Optional[str],
                      password2: Optional[str]) -> str:
        """Inscrit un nouvel utilisateur et retourne un message de confirmation"""
        if not username or not username.strip():
            raise InvalidInputError("username is required")
        if not password or not password2:
            raise InvalidInputError("password and password2 are required")
        if password != password2:
            raise InvalidInputError("passwords do not match")
        username = username.strip()

        # Vérifier si l'utilisateur existe déjà
        if self.user_repository.find_by_username(username):
            logger.warning(f"Registration refused: username '{username}' already taken")
            raise DuplicateUsernameError(f"username '{username}' already taken")

        try:
            hashed_password = self.password_hasher.hash(password)
        except (ValueError, TypeError, RuntimeError) as e:
            # RuntimeError : backend bcrypt absent ou défaillant (passlib)
            logger.error(f"Password hashing failed for '{username}': {e}")
            raise RegistrationError(f"unable to register user '{username}'") from e

        user = User(
            id=str(uuid.uuid4()),
            username=username,
            hashed_password=hashed_password,
            created_at=datetime.now(timezone.utc)
        )
        self.user_repository.save(user)

        logger.info(f"User '{username}' registered")
        return REGISTERED_MESSAGE

    def check_user(self, username: Optional[str], password: Optional[str]) -> UserIdentity:
        """Authentifie un utilisateur et retourne son identité minimale"""
        if not username or not password:
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)
        username = username.strip()

        user = self.user_repository.find_by_username(username)
        if not user:
            logger.warning(f"Authentication failed: User '{username}' not found")
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        if not self.password_hasher.verify(password, user.hashed_password):
            logger.warning(f"Authentication failed: Invalid password for user '{username}'")
            raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)

        logger.info(f"Authentication success: User '{username}' authenticated")
        return user.identity()

    def _get_user(self, user_id: str) -> User:
        user = self.user_repository.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(f"user '{user_id}' not found")
        return user

    # --- Favoris ---

    def get_favourites(self, user_id: str) -> List[str]:
        """Retourne les favoris de l'utilisateur"""
        return list(self._get_user(user_id).favourites)

    def add_favourite(self, user_id: str, item_id: str) -> List[str]:
        """Ajoute un favori (idempotent) et retourne la liste à jour"""
        user = self._get_user(user_id)
        user.add_favourite(item_id)
        return list(self.user_repository.save(user).favourites)

    def remove_favourite(self, user_id: str, item_id: str) -> List[str]:
        """Retire un favori (sans effet s'il est absent) et retourne la liste à jour"""
        user = self._get_user(user_id)
        user.remove_favourite(item_id)
        return list(self.user_repository.save(user).favourites)

    # --- Historique ---

    def get_history(self, user_id: str) -> List[str]:
        return list(self._get_user(user_id).history)

    def add_history(self, user_id: str, item_id: str) -> List[str]:
        user = self._get_user(user_id)
        user.add_history(item_id)
        return list(self.user_repository.save(user).history)

    def remove_history(self, user_id: str, item_id: str) -> List[str]:
        user = self._get_user(user_id)
        user.remove_history(item_id)
        return list(self.user_repository.save(user).history)
