"""Application email – SmtpSettings (12-factor, ``SMTP_*`` environment variables)."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_mailer.application.email.presets import PRESETS
from mp_mailer.application.email.security import SecurityKind
from mp_mailer.config.settings import Settings
from mp_mailer.config.validation import InvalidSettingValueError

__all__ = ["SmtpSettings"]


@dataclasses.dataclass(frozen=True)
class SmtpSettings(Settings):
    """Environment-driven mailer configuration.

    ``provider`` selects a preset (``sendgrid``, ``gmail``, ``mailgun``) and
    then ``host``/``port``/``security`` are ignored. With neither
    ``provider`` nor ``host`` set, no mailer is configured.
    """

    _prefix: ClassVar[str] = "SMTP"

    provider: str = ""
    host: str = ""
    port: int = 465
    security: str = SecurityKind.TLS.value
    username: str = ""
    password: str = dataclasses.field(default="", repr=False)
    timeout: float = 30.0

    def _validate(self) -> None:
        if not 1 <= self.port <= 65535:
            raise InvalidSettingValueError("port", self.port, "must be between 1 and 65535")
        if self.security.strip().lower() not in {k.value for k in SecurityKind}:
            raise InvalidSettingValueError(
                "security", self.security, "must be one of none, tls, starttls"
            )
        if self.provider and self.provider.strip().lower() not in PRESETS:
            raise InvalidSettingValueError(
                "provider", self.provider, f"must be one of {', '.join(sorted(PRESETS))}"
            )
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")

    @property
    def configured(self) -> bool:
        return bool(self.provider or self.host)
