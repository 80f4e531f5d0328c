"""Application email – SMTP transport client backed by ``aiosmtplib``.

A client owns exactly one SMTP connection. It is used as an async
context manager: entering connects (and negotiates TLS), leaving always
closes the connection, whatever happened in between::

    async with AioSmtpClient("smtp.example.com", 465, SecurityLayer.tls()) as client:
        await client.send(message, credentials)
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from contextlib import AbstractAsyncContextManager
from typing import Any, Protocol, TypeAlias

import aiosmtplib

from mp_mailer.application.email.message import Mail
from mp_mailer.application.email.mime import envelope_recipients, to_mime
from mp_mailer.application.email.security import SecurityKind, SecurityLayer, SmtpCredentials
from mp_mailer.observability.logging import get_logger

__all__ = ["AioSmtpClient", "DEFAULT_TIMEOUT", "SmtpClient", "SmtpClientFactory"]

DEFAULT_TIMEOUT = 30.0

logger = get_logger(__name__)


class SmtpClient(Protocol):
    """An open SMTP session able to deliver mail with given credentials."""

    async def send(self, message: Mail, credentials: SmtpCredentials) -> None: ...

    async def send_batch(self, messages: Sequence[Mail], credentials: SmtpCredentials) -> None: ...


# ``(host, port, security_layer) -> async context manager yielding a connected client``.
# Use ``functools.partial(AioSmtpClient, timeout=...)`` to tune the default client.
SmtpClientFactory: TypeAlias = Callable[[str, int, SecurityLayer], AbstractAsyncContextManager[SmtpClient]]


class AioSmtpClient:
    """:class:`SmtpClient` over a single ``aiosmtplib.SMTP`` connection.

    Construction performs no I/O. Connection, TLS and protocol errors are
    raised exactly as ``aiosmtplib`` reports them.
    """

    def __init__(
        self,
        host: str,
        port: int,
        security_layer: SecurityLayer,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._host = host
        self._port = port
        self._security_layer = security_layer
        self._timeout = timeout
        self._smtp: aiosmtplib.SMTP | None = None
        self._logged_in = False

    async def __aenter__(self) -> "AioSmtpClient":
        kind = self._security_layer.kind
        smtp = aiosmtplib.SMTP(
            hostname=self._host,
            port=self._port,
            use_tls=kind is SecurityKind.TLS,
            start_tls=kind is SecurityKind.STARTTLS,
            tls_context=self._security_layer.tls_context,
            timeout=self._timeout,
        )
        await smtp.connect()
        self._smtp = smtp
        self._logged_in = False
        logger.debug(
            "mail.smtp.connected",
            host=self._host,
            port=self._port,
            security=kind.value,
            encrypted=self._security_layer.encrypted,
        )
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        smtp, self._smtp = self._smtp, None
        self._logged_in = False
        if smtp is None:
            return
        try:
            await smtp.quit()
        except (aiosmtplib.SMTPException, OSError) as exc:
            logger.debug("mail.smtp.quit_failed", host=self._host, error=type(exc).__name__)
        finally:
            # QUIT may have failed or been cancelled; the transport is dropped either way.
            if smtp.is_connected:
                smtp.close()

    @property
    def connected(self) -> bool:
        return self._smtp is not None

    def _session(self) -> aiosmtplib.SMTP:
        if self._smtp is None:
            raise RuntimeError("AioSmtpClient must be entered with 'async with' before sending")
        return self._smtp

    async def _login(self, smtp: aiosmtplib.SMTP, credentials: SmtpCredentials) -> None:
        # Relays that accept unauthenticated submission get empty credentials.
        # AUTH is only valid once per session.
        if credentials.username and not self._logged_in:
            await smtp.login(credentials.username, credentials.password)
            self._logged_in = True

    async def _deliver(self, smtp: aiosmtplib.SMTP, message: Mail, credentials: SmtpCredentials) -> None:
        await smtp.send_message(
            to_mime(message, default_sender=credentials.username or None),
            recipients=envelope_recipients(message),
        )

    async def send(self, message: Mail, credentials: SmtpCredentials) -> None:
        smtp = self._session()
        await self._login(smtp, credentials)
        await self._deliver(smtp, message, credentials)

    async def send_batch(self, messages: Sequence[Mail], credentials: SmtpCredentials) -> None:
        """Authenticate once and send *messages* in order over this session.

        Stops at the first message the server rejects; earlier messages
        stay delivered.
        """
        smtp = self._session()
        await self._login(smtp, credentials)
        for message in messages:
            await self._deliver(smtp, message, credentials)
