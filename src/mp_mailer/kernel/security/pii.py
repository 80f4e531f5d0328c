"""Kernel security – default sensitive fields."""
from __future__ import annotations

# Keys whose values are replaced with ``[REDACTED]`` before reaching a log sink.
DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "api_key", "apikey",
    "authorization", "credentials", "smtp_password",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
