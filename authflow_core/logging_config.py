"""
Logging Setup
=============
Structured logging for applications embedding the OTP flow.

Usage:
    from authflow_core.logging_config import setup_logging

    setup_logging(level="DEBUG", json_output=False)
"""

import logging
import sys
from typing import Optional

import structlog

from .config import AuthFlowConfig


def setup_logging(
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
    config: Optional[AuthFlowConfig] = None,
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render JSON lines instead of console output
        config: Source of defaults for level/json_output
    """
    config = config or AuthFlowConfig()
    level_name = (level or config.log_level).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    if json_output is None:
        json_output = config.log_json

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    structlog.get_logger(__name__).info(
        "Logging configured", level=level_name, json_output=json_output
    )
