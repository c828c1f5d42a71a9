"""
Logging configuration for the FieldOps backend

Modules log through logging.getLogger(__name__); this only configures the root.
"""
import logging
import sys
from typing import Optional

from fieldops.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are too chatty at the app level
QUIET_LOGGERS = {
    "uvicorn.access": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
}


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger on stdout; level defaults to settings.LOG_LEVEL."""
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    for name, quiet_level in QUIET_LOGGERS.items():
        # DEBUG keeps SQL and access logs visible
        logging.getLogger(name).setLevel(min(quiet_level, log_level))

    logging.getLogger(__name__).info(
        "Logging configured: level=%s, env=%s, tz=%s", level_name, settings.APP_ENV, settings.TZ
    )
