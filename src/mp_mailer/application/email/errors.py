"""Application email – errors originated by mailers themselves.

Transport failures raised by ``aiosmtplib`` (connection refused, TLS
handshake, ``AUTH`` rejected, recipients refused, ...) are never wrapped
and do not appear here.
"""
from __future__ import annotations

from typing import ClassVar

from mp_mailer.kernel.errors import DebuggableError

__all__ = ["MailerError", "UnimplementedMailerError"]


class MailerError(DebuggableError):
    """Base class for errors raised by a :class:`~mp_mailer.application.email.Mailer`."""

    default_code = "mailer_error"
    identifier: ClassVar[str] = "mailer_error"
    reason: ClassVar[str] = "mailer failed"


class UnimplementedMailerError(MailerError):
    """Raised by :class:`UnimplementedMailer` on every send."""

    default_code = "unimplemented"
    identifier: ClassVar[str] = "unimplemented"
    reason: ClassVar[str] = "mailer hasn't been set up yet"
    possible_causes: ClassVar[tuple[str, ...]] = (
        "a mailer hasn't been set up yet for this application",
        "SMTP_PROVIDER and SMTP_HOST are both unset, so mailer_from_settings fell back to the placeholder",
    )
    suggested_fixes: ClassVar[tuple[str, ...]] = (
        "configure a real mailer, for example `mailer = make_gmail(SmtpCredentials(user, password))`",
        "set SMTP_PROVIDER (sendgrid, gmail, mailgun) or SMTP_HOST with SMTP_USERNAME and SMTP_PASSWORD",
    )
