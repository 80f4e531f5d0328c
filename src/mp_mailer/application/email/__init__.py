"""Application email – Mailer port, SMTP adapter, presets and placeholders."""
from mp_mailer.application.email.client import AioSmtpClient, SmtpClient, SmtpClientFactory
from mp_mailer.application.email.errors import MailerError, UnimplementedMailerError
from mp_mailer.application.email.factory import mailer_from_env, mailer_from_settings
from mp_mailer.application.email.in_memory import InMemoryMailer
from mp_mailer.application.email.message import Attachment, EmailMessage, Mail
from mp_mailer.application.email.presets import PRESETS, make_gmail, make_mailgun, make_sendgrid
from mp_mailer.application.email.security import SecurityKind, SecurityLayer, SmtpCredentials
from mp_mailer.application.email.sender import Mailer
from mp_mailer.application.email.settings import SmtpSettings
from mp_mailer.application.email.smtp import SmtpMailer
from mp_mailer.application.email.unimplemented import UnimplementedMailer

__all__ = [
    "AioSmtpClient",
    "Attachment",
    "EmailMessage",
    "InMemoryMailer",
    "Mail",
    "Mailer",
    "MailerError",
    "PRESETS",
    "SecurityKind",
    "SecurityLayer",
    "SmtpClient",
    "SmtpClientFactory",
    "SmtpCredentials",
    "SmtpMailer",
    "SmtpSettings",
    "UnimplementedMailer",
    "UnimplementedMailerError",
    "mailer_from_env",
    "mailer_from_settings",
    "make_gmail",
    "make_mailgun",
    "make_sendgrid",
]
