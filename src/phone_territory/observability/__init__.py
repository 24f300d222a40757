"""Observability – structured logging helpers."""
from phone_territory.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
