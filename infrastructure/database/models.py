"""
Modèles SQLAlchemy - Documents utilisateurs
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class UserModel(Base):
    """Modèle SQLAlchemy pour les utilisateurs (listes stockées en JSON)"""
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    favourites = Column(JSON, nullable=False, default=list)
    history = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
