from __future__ import annotations

import logging
from pythonjsonlogger.json import JsonFormatter


def configure_logging(level: str = "WARNING") -> None:
    """Configure structured JSON logging on stderr for the process.

    stdout is left alone: it carries the book JSON or the filtered markdown.
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    handler = logging.StreamHandler()
    formatter = JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)

    # Replace existing handlers (avoid duplicate logs)
    logger.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
