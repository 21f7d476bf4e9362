"""
user-lists-api/app.py
Point d'entrée principal de l'API
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import Config
from api.endpoints import user_router
from infrastructure.database import create_db_engine, create_session_factory, init_db
from infrastructure.security import JWTService, PasswordHasher
from logging_config import setup_logging, setup_colored_logging

logger = logging.getLogger(__name__)


def configure_logging(config: Config) -> logging.Logger:
    """Configure le logging selon la configuration"""
    log_file = config.log_file_path if config.log_file_enabled else None
    if config.log_colored:
        return setup_colored_logging(log_level=config.log_level, log_file=log_file)
    return setup_logging(log_level=config.log_level, log_file=log_file)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gestion du cycle de vie de l'application"""
    config: Config = app.state.config

    # --- Startup ---
    logger.info("🚀 Démarrage de user-lists-api")
    logger.info(f"📊 Database: {config.database_url.split('@')[-1]}")

    if not config.jwt_secret_key:
        logger.critical("❌ JWT_SECRET_KEY non configuré, arrêt")
        raise RuntimeError("JWT_SECRET_KEY is not configured")

    # Sans stockage, le processus ne démarre pas
    try:
        init_db(app.state.engine)
    except Exception as e:
        logger.critical(f"❌ Échec de connexion à la base de données: {e}")
        raise

    yield

    # --- Shutdown ---
    logger.info("🛑 Arrêt de user-lists-api")
    app.state.engine.dispose()


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Enveloppe d'erreur unique : {"message": ...}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"Invalid request body on {request.url.path}: {len(exc.errors())} error(s)")
    return JSONResponse(status_code=422, content={"message": "invalid request body"})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Erreur inattendue : journalisée, jamais exposée au client"""
    logger.error(f"Unhandled error on {request.url.path}: {exc!r}", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "internal error"})


def create_app(config: Optional[Config] = None) -> FastAPI:
    """
    Construit l'application.

    La configuration, le moteur de base de données, le hacheur et le
    JWTService sont créés une seule fois ici et partagés via app.state.
    """
    if config is None:
        config = Config()
    configure_logging(config)

    app = FastAPI(
        title="User Lists API",
        description="Inscription, connexion JWT et listes par utilisateur (favoris, historique)",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    engine = create_db_engine(config)
    app.state.config = config
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.password_hasher = PasswordHasher(rounds=config.bcrypt_rounds)
    app.state.jwt_service = JWTService(
        secret_key=config.jwt_secret_key,
        algorithm=config.jwt_algorithm,
        expire_minutes=config.jwt_expire_minutes,
        scheme=config.jwt_auth_scheme
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(user_router, prefix="/api")

    @app.get("/", tags=["Root"])
    def root():
        """Page d'accueil de l'API"""
        return {
            "service": "user-lists-api",
            "version": "1.0.0",
            "status": "operational",
            "documentation": "/docs"
        }

    @app.get("/health", tags=["System"])
    def health_check():
        """Endpoint de santé pour les orchestrateurs (Kubernetes, Docker, etc.)"""
        return {
            "status": "healthy",
            "service": "user-lists-api"
        }

    return app


if __name__ == "__main__":
    import uvicorn
    from logging_config import get_uvicorn_log_config

    config = Config()

    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_config=get_uvicorn_log_config(log_level=config.log_level)
    )
