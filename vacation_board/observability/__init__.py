"""
Observability module.

Provides logging configuration, correlation ID tracking and request
logging middleware.
"""

from vacation_board.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
