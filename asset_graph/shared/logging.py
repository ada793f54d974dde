"""
Logging setup with per-request correlation IDs.

Provides a consistent logging format for the gateway and the core
modules so that one HTTP request can be followed through the log.
"""

import logging
import uuid


def setup_logging(name: str, level: str = "INFO") -> logging.Logger:
    """
    Configure logging for a component.

    Args:
        name: Logger name (used as the log line prefix).
        level: Log level string (e.g. 'INFO', 'DEBUG').

    Returns:
        Configured logger instance.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )
    return logging.getLogger(name)


def generate_correlation_id() -> str:
    """Generate a short unique ID used to tag the log lines of one request."""
    return uuid.uuid4().hex[:12]
