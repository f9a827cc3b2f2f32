# shipping_campaigns/core/logging_config.py
import logging
import sys
from typing import Optional

import structlog

from .settings import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure structlog + standaard logging.
    Logs gaan als JSON naar stderr, zodat stdout vrij blijft voor de checkout output.
    """
    level_name = (level or get_settings().LOG_LEVEL or "INFO").upper()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level_name, logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
