"""Logging and metrics."""

from switchboard.observability.logging import bind_conversation, get_logger, setup_logging
from switchboard.observability.metrics import setup_metrics

__all__ = ["bind_conversation", "get_logger", "setup_logging", "setup_metrics"]
