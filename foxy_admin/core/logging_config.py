# File: foxy_admin/core/logging_config.py
from __future__ import annotations
import logging, os, sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d [%(process)d] - %(message)s"

MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", str(1_000_000)))  # ~1 MB default
BACKUPS   = int(os.getenv("LOG_BACKUPS", "5"))

def setup_logging(app_name: str = "foxy-fabrications-admin", log_level: str = "INFO", log_dir: str = ""):
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        log_path = Path(log_dir) / f"{app_name}.log"
        handlers.append(RotatingFileHandler(log_path, maxBytes=MAX_BYTES, backupCount=BACKUPS, encoding="utf-8"))
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO),
                        format=LOG_FORMAT, handlers=handlers, force=True)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logger = logging.getLogger("foxy_admin")
    logger.info("Logging initialized (app=%s, dir=%s, level=%s)", app_name, log_dir or "-", log_level)
    return logger
