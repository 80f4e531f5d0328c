"""Application email – SmtpMailer presets for well-known providers.

Each preset pins host, port and security and only asks for credentials.
All of them use implicit TLS on port 465.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from mp_mailer.application.email.security import SecurityLayer, SmtpCredentials
from mp_mailer.application.email.smtp import SmtpMailer

__all__ = [
    "GMAIL_HOST",
    "MAILGUN_HOST",
    "PRESETS",
    "PRESET_PORT",
    "SENDGRID_HOST",
    "make_gmail",
    "make_mailgun",
    "make_sendgrid",
]

SENDGRID_HOST = "smtp.sendgrid.net"
GMAIL_HOST = "smtp.gmail.com"
MAILGUN_HOST = "smtp.mailgun.org"
PRESET_PORT = 465


def make_sendgrid(credentials: SmtpCredentials) -> SmtpMailer:
    """SendGrid (https://sendgrid.com/).

    Credentials are created at https://app.sendgrid.com/settings/credentials;
    the username is usually the literal ``apikey`` and the password an API key.
    """
    return SmtpMailer(
        host=SENDGRID_HOST,
        port=PRESET_PORT,
        security_layer=SecurityLayer.tls(),
        credentials=credentials,
    )


def make_gmail(credentials: SmtpCredentials) -> SmtpMailer:
    """Gmail / Google Workspace.

    Username is the full address (``someone@gmail.com`` or
    ``someone@yourdomain.com``); password is the account or app password.
    """
    return SmtpMailer(
        host=GMAIL_HOST,
        port=PRESET_PORT,
        security_layer=SecurityLayer.tls(),
        credentials=credentials,
    )


def make_mailgun(credentials: SmtpCredentials) -> SmtpMailer:
    """Mailgun (https://mailgun.com/).

    SMTP credentials are listed per domain at https://mailgun.com/app/domains.
    """
    return SmtpMailer(
        host=MAILGUN_HOST,
        port=PRESET_PORT,
        security_layer=SecurityLayer.tls(),
        credentials=credentials,
    )


PRESETS: Mapping[str, Callable[[SmtpCredentials], SmtpMailer]] = MappingProxyType({
    "sendgrid": make_sendgrid,
    "gmail": make_gmail,
    "mailgun": make_mailgun,
})
