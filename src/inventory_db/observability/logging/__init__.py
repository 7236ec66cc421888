"""Observability – structured logging helpers."""
from inventory_db.observability.logging.factory import JsonLoggerFactory
from inventory_db.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
