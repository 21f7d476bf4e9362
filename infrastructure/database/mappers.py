"""
Mappers - Conversion entre modèles SQLAlchemy et entités de domaine
"""

from typing import Optional
from infrastructure.database.models import UserModel
from domain.entities import User


class UserMapper:
    """Mapper entre UserModel et User"""

    @staticmethod
    def to_domain(model: UserModel) -> User:
        """Convertit un UserModel en entité User"""
        return User(
            id=model.id,
            username=model.username,
            hashed_password=model.hashed_password,
            favourites=list(model.favourites or []),
            history=list(model.history or []),
            created_at=model.created_at
        )

    @staticmethod
    def to_model(user: User, model: Optional[UserModel] = None) -> UserModel:
        """Convertit une entité User en UserModel"""
        if model is None:
            model = UserModel()

        model.id = user.id
        model.username = user.username
        model.hashed_password = user.hashed_password
        # Nouvelles listes : la colonne JSON n'est pas suivie en mutation
        model.favourites = list(user.favourites)
        model.history = list(user.history)
        model.created_at = user.created_at

        return model
