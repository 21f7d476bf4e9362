"""
user-lists-api/api/schemas.py
Schémas Pydantic pour la validation et la sérialisation
"""

from typing import Optional
from pydantic import BaseModel

# ============================================================================
# UTILISATEURS
# ============================================================================

# Champs optionnels : la validation métier est faite par UserService
class RegisterRequest(BaseModel):
    """Schéma pour l'inscription"""
    username: Optional[str] = None
    password: Optional[str] = None
    password2: Optional[str] = None

class LoginRequest(BaseModel):
    """Schéma pour la connexion"""
    username: Optional[str] = None
    password: Optional[str] = None

# ============================================================================
# RÉPONSES
# ============================================================================

class MessageResponse(BaseModel):
    """Enveloppe commune des réponses simples et des erreurs"""
    message: str

class LoginResponse(MessageResponse):
    token: str
