"""
Logging configuration for the application.
"""
import logging
import sys

from techprep.app.core.config import settings

# pdfplumber's parser logs every PDF operator at DEBUG
_NOISY_LOGGERS = ("pdfminer", "multipart")


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure stdout logging for techprep.* loggers. Returns the package logger."""
    level_val = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_val, logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return logging.getLogger("techprep")


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"techprep.{name}")
