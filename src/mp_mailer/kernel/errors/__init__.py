"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError          (application.py)
        ├── DebuggableError
        │   └── MailerError      (mp_mailer.application.email.errors)
        └── ConfigError          (mp_mailer.config.validation)

Transport failures (``aiosmtplib.SMTPException``, ``OSError``,
``ssl.SSLError``) are not part of it; they reach callers unwrapped.
"""

from mp_mailer.kernel.errors.application import ApplicationError, DebuggableError
from mp_mailer.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DebuggableError",
]
