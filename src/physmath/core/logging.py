"""Logging configuration for the physmath command-line harness.

Library modules only create module-level loggers and never configure
handlers; setup_logging is called by entry points.
"""
import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PLAIN_FORMAT = "%(message)s"


def setup_logging(
    level: str = "INFO",
    include_timestamp: bool = False,
) -> logging.Logger:
    """Configure the package logger with a single stdout handler.

    Records are not propagated to the root logger, so output is not
    duplicated when the root logger has handlers of its own.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        include_timestamp: Whether to prefix records with time, logger and level

    Returns:
        Configured ``physmath`` logger

    Raises:
        ValueError: If level is not a known logging level name
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    package_logger = logging.getLogger("physmath")
    package_logger.setLevel(numeric_level)

    # Remove and close existing handlers
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(
        logging.Formatter(DEFAULT_FORMAT if include_timestamp else PLAIN_FORMAT)
    )
    package_logger.addHandler(console_handler)
    package_logger.propagate = False

    return package_logger


def get_logger(
    name: str, context: dict | None = None
) -> logging.Logger | logging.LoggerAdapter:
    """Get a logger, optionally wrapped to attach context to every record.

    Args:
        name: Logger name (typically __name__ of module)
        context: Optional extra fields included in all records

    Returns:
        Logger or LoggerAdapter if context provided
    """
    logger = logging.getLogger(name)

    if context:
        return logging.LoggerAdapter(logger, context)

    return logger
