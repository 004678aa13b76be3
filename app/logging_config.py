"""
Logging configuration for the service.
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a consistent format.

    Unknown level names fall back to ``INFO``.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
