"""
Structured logging for Backend Solkit.

JSON logs with timestamp, event_type and request fields.
Use get_logger() in every module for aggregation-friendly output.
"""

from backend_solkit.solkit_logging.logger import configure_structlog, get_logger, short_key

__all__ = ["configure_structlog", "get_logger", "short_key"]
