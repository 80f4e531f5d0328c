"""Observability – structured logging helpers."""
from mp_mailer.observability.logging.filters import SensitiveFieldsFilter
from mp_mailer.observability.logging.factory import JsonLoggerFactory
from mp_mailer.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
