from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


_CONFIGURED = False


def _pre_chain() -> list:
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def configure_logging(*, level: str | int = "INFO", json: bool = True, stream: TextIO | None = None) -> None:
    """
    Configure stdlib logging + structlog to write one record per line to `stream` (stdout by default).

    JSON output by default; `json=False` switches to structlog's console renderer.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_pre_chain(),
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


def is_configured() -> bool:
    return _CONFIGURED


def get_logger(name: str | None = None):
    return structlog.get_logger(name)
