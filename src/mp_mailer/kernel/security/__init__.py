"""Kernel security – sensitive field names used for log redaction."""
from mp_mailer.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
