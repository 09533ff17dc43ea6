"""
Structured logging for Backend PassOP.

JSON logs with timestamp, level, event_type and request context.
Use get_logger() in all modules for aggregation-friendly output.
"""

from backend_passop.passop_logging.logger import configure_structlog, get_logger

__all__ = ["configure_structlog", "get_logger"]
