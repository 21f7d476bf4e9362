"""
Services applicatifs
"""

from application.services.user_service import UserService

__all__ = [
    "UserService"
]
