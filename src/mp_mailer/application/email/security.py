"""Application email – SMTP connection security and credentials."""
from __future__ import annotations

import enum
import ssl
from dataclasses import dataclass, field

__all__ = ["SecurityKind", "SecurityLayer", "SmtpCredentials"]


class SecurityKind(str, enum.Enum):
    """Encryption posture of an SMTP connection."""

    NONE = "none"
    TLS = "tls"  # implicit TLS from the first byte, usually port 465
    STARTTLS = "starttls"  # plaintext greeting upgraded with STARTTLS, usually 587


@dataclass(frozen=True)
class SecurityLayer:
    """Security mode of an SMTP connection plus optional TLS parameters.

    Two layers compare equal when their kinds match and they share the
    same ``tls_context`` object (or both use the default context).
    """

    kind: SecurityKind
    tls_context: ssl.SSLContext | None = None

    @classmethod
    def none(cls) -> "SecurityLayer":
        return cls(SecurityKind.NONE)

    @classmethod
    def tls(cls, context: ssl.SSLContext | None = None) -> "SecurityLayer":
        return cls(SecurityKind.TLS, context)

    @classmethod
    def starttls(cls, context: ssl.SSLContext | None = None) -> "SecurityLayer":
        return cls(SecurityKind.STARTTLS, context)

    @classmethod
    def parse(cls, value: str) -> "SecurityLayer":
        """Build a layer with the default TLS context from ``none``/``tls``/``starttls``."""
        return cls(SecurityKind(value.strip().lower()))

    @property
    def encrypted(self) -> bool:
        return self.kind is not SecurityKind.NONE


@dataclass(frozen=True)
class SmtpCredentials:
    """Username/password pair used for SMTP ``AUTH``.

    The password never appears in ``repr`` output.
    """

    username: str
    password: str = field(repr=False)
