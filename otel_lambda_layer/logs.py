"""Logging setup for the layer."""

import logging

LOGGER_NAME = "otel_lambda_layer"
LOG_FORMAT = '%(asctime)s (%(name)s) [%(levelname)s] %(message)s'


def configure_logging(level: str = "info") -> logging.Logger:
    """Configure the layer logger; unknown level names fall back to INFO."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric)
    logging.basicConfig(
        level=numeric,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler()]
    )
    return logger
