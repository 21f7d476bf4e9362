"""
Configuration de la session de base de données SQLAlchemy
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from config import Config


def create_db_engine(config: Config) -> Engine:
    """Crée le moteur de base de données à partir de la configuration"""
    if config.database_url.startswith("sqlite"):
        # Les routes tournent dans le threadpool de FastAPI
        return create_engine(
            config.database_url,
            connect_args={"check_same_thread": False}
        )

    return create_engine(
        config.database_url,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Crée la session factory liée au moteur"""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
