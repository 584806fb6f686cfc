from __future__ import annotations
import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor

from .config import Settings

# Console output for local runs and tests, JSON lines for log_format=json or production

SERVICE_NAME = 'lexiplay'


def add_service_context(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault('service.name', SERVICE_NAME)
    return event_dict


def configure_logging(settings: Settings) -> None:
    """Configure stdlib logging and structlog from the server settings."""
    use_json = settings.log_format == 'json' or settings.environment == 'production'

    processors: list[Processor] = [
        merge_contextvars,
        add_service_context,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.add_log_level,
    ]
    if use_json:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors += [structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer(colors=False)]

    logging.basicConfig(
        format='%(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        force=True,
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
