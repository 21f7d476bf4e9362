"""
Entités du domaine
"""

from domain.entities.user import User, UserIdentity

__all__ = [
    "User",
    "UserIdentity"
]
