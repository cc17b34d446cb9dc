# --------------------------------------------------------------
# File: logger.py
# Description: Creación de loggers con formato común para el paquete.
# --------------------------------------------------------------

import logging

from swartz.config import LOG_LEVEL


def prepare_logger(logger_name: str) -> logging.Logger:
    """Devuelve un logger con handler de consola, sin duplicar handlers."""

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    return logger
