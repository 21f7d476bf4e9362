"""
Initialisation de la base de données
"""

import logging
from sqlalchemy import text
from sqlalchemy.engine import Engine

from infrastructure.database.models import Base

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Vérifie la connexion et crée les tables.

    Toute erreur est propagée : le processus ne doit pas servir
    de requêtes sans stockage.
    """
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    logger.info("✅ Connexion à la base de données établie")

    Base.metadata.create_all(bind=engine)
    logger.info("✅ Tables de base de données créées")
