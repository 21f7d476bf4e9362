"""
user-lists-api/config.py
Configuration de l'API (variables d'environnement / fichier .env)
"""

from typing import List

from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Configuration du processus, construite une seule fois au démarrage"""

    # ── Base de données ──────────────────────────────────────────────────
    database_url: str = "sqlite:///./user_lists.db"

    # ── JWT ──────────────────────────────────────────────────────────────
    jwt_secret_key: str = ""            # obligatoire au démarrage (JWT_SECRET_KEY)
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 120
    jwt_auth_scheme: str = "JWT"        # Authorization: JWT <token>

    # ── Hachage ──────────────────────────────────────────────────────────
    bcrypt_rounds: int = 12

    # ── Serveur ──────────────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = ["*"]

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = "INFO"
    log_colored: bool = False
    log_file_enabled: bool = False
    log_file_path: str = "logs/user-lists-api.log"

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }
