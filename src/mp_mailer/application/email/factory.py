"""Application email – build a Mailer from SmtpSettings."""
from __future__ import annotations

import dataclasses
import functools

from mp_mailer.application.email.client import AioSmtpClient
from mp_mailer.application.email.presets import PRESETS
from mp_mailer.application.email.security import SecurityLayer, SmtpCredentials
from mp_mailer.application.email.sender import Mailer
from mp_mailer.application.email.settings import SmtpSettings
from mp_mailer.application.email.smtp import SmtpMailer
from mp_mailer.application.email.unimplemented import UnimplementedMailer
from mp_mailer.config.settings import EnvSettingsLoader
from mp_mailer.observability.logging import get_logger

__all__ = ["mailer_from_env", "mailer_from_settings"]

logger = get_logger(__name__)


def mailer_from_settings(settings: SmtpSettings) -> Mailer:
    """Return the mailer described by *settings*.

    Resolution order:

    1. ``provider`` set: the matching preset.
    2. ``host`` set: an explicit :class:`SmtpMailer`.
    3. Otherwise :class:`UnimplementedMailer`, which fails on first use.

    An unknown ``provider`` never reaches this point: :class:`SmtpSettings`
    rejects it with :class:`InvalidSettingValueError` on construction.
    """
    credentials = SmtpCredentials(settings.username, settings.password)
    client_factory = functools.partial(AioSmtpClient, timeout=settings.timeout)

    if settings.provider:
        name = settings.provider.strip().lower()
        mailer = dataclasses.replace(PRESETS[name](credentials), client_factory=client_factory)
        logger.info("mail.configured", provider=name, host=mailer.host, port=mailer.port)
        return mailer

    if settings.host:
        mailer = SmtpMailer(
            host=settings.host,
            port=settings.port,
            security_layer=SecurityLayer.parse(settings.security),
            credentials=credentials,
            client_factory=client_factory,
        )
        logger.info("mail.configured", host=mailer.host, port=mailer.port)
        return mailer

    logger.warning("mail.not_configured")
    return UnimplementedMailer()


def mailer_from_env(loader: EnvSettingsLoader | None = None) -> Mailer:
    """Load :class:`SmtpSettings` from ``SMTP_*`` variables and build the mailer."""
    settings = (loader or EnvSettingsLoader()).load(SmtpSettings)
    return mailer_from_settings(settings)
