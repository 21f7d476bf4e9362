"""
user-lists-api/logging_config.py
Configuration du logging
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers qui partagent les handlers de l'application
SHARED_LOGGERS = ["uvicorn", "uvicorn.access", "uvicorn.error", "user_lists"]


class ColoredFormatter(logging.Formatter):
    """Formatter avec couleurs pour le terminal"""

    COLORS = {
        'DEBUG': '\033[0;36m',    # Cyan
        'INFO': '\033[0;32m',     # Vert
        'WARNING': '\033[0;33m',  # Jaune
        'ERROR': '\033[0;31m',    # Rouge
        'CRITICAL': '\033[1;31m', # Rouge gras
    }
    RESET = '\033[0m'

    def format(self, record):
        # Copie pour ne pas colorer le niveau dans les autres handlers (fichier)
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
        return super().format(record)


def _build_handlers(numeric_level: int, console_formatter: logging.Formatter,
                    log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(console_formatter)
    handlers.append(console_handler)

    # Handler fichier (optionnel, jamais coloré)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        handlers.append(file_handler)

    return handlers


def _install(numeric_level: int, handlers: List[logging.Handler]) -> logging.Logger:
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True
    )

    for logger_name in SHARED_LOGGERS:
        log = logging.getLogger(logger_name)
        log.setLevel(numeric_level)
        log.handlers.clear()
        for handler in handlers:
            log.addHandler(handler)
        log.propagate = False

    # Réduire la verbosité des bibliothèques bavardes
    for noisy in ("watchfiles", "passlib", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logging.getLogger("user_lists")


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """Configure le logging standard"""
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    handlers = _build_handlers(
        numeric_level, logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT), log_file
    )
    logger = _install(numeric_level, handlers)
    logger.info("✅ Logging configured")
    return logger


def setup_colored_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """Configure le logging avec couleurs"""
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    handlers = _build_handlers(
        numeric_level, ColoredFormatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT), log_file
    )
    logger = _install(numeric_level, handlers)
    logger.info("✅ Colored logging configured")
    return logger


def get_uvicorn_log_config(log_level: str = "INFO") -> dict:
    """Configuration de logging pour Uvicorn"""
    level = log_level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
                "datefmt": LOG_DATE_FORMAT,
            },
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            name: {"handlers": ["default"], "level": level, "propagate": False}
            for name in ("uvicorn", "uvicorn.error", "uvicorn.access")
        },
    }
