"""
Entité User - Modèle métier pour les utilisateurs et leurs listes
"""

from datetime import datetime
from typing import List, Optional
from dataclasses import dataclass, field


@dataclass
class User:
    """Entité User du domaine"""
    id: str
    username: str
    hashed_password: str
    favourites: List[str] = field(default_factory=list)
    history: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """Validation de l'entité"""
        if not self.username:
            raise ValueError("Username cannot be empty")
        if not self.hashed_password:
            raise ValueError("Hashed password cannot be empty")

    def add_favourite(self, item_id: str) -> None:
        """Ajoute un favori s'il n'est pas déjà présent"""
        if item_id not in self.favourites:
            self.favourites.append(item_id)

    def remove_favourite(self, item_id: str) -> None:
        """Retire un favori (sans effet s'il est absent)"""
        self.favourites = [i for i in self.favourites if i != item_id]

    def add_history(self, item_id: str) -> None:
        if item_id not in self.history:
            self.history.append(item_id)

    def remove_history(self, item_id: str) -> None:
        self.history = [i for i in self.history if i != item_id]

    def identity(self) -> "UserIdentity":
        """Identité minimale (jamais le hachage)"""
        return UserIdentity(id=self.id, username=self.username)


@dataclass(frozen=True)
class UserIdentity:
    """Identité authentifiée portée par le token"""
    id: str
    username: str
