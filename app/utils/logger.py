# app/utils/logger.py

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.config.settings import LOG_LEVEL

# Path of the logs/ folder
BASE_DIR = Path(__file__).resolve().parent.parent
LOG_DIR = BASE_DIR / "logs"
LOG_DIR.mkdir(parents=True, exist_ok=True)

logger = logging.getLogger("app_logger")
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

# Avoids duplicated handlers on repeated imports
if not logger.handlers:
    formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] %(name)s: %(message)s")

    file_handler = RotatingFileHandler(
        filename=LOG_DIR / "app.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)


class PrometheusLogHandler(logging.Handler):
    """Counts emitted log records in the Prometheus metrics."""

    def emit(self, record):
        from app.utils.prometheus_metrics import record_log
        record_log(record.levelname)


if not any(isinstance(h, PrometheusLogHandler) for h in logger.handlers):
    logger.addHandler(PrometheusLogHandler())
