"""Application email – SmtpMailer."""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from mp_mailer.application.email.client import AioSmtpClient, SmtpClientFactory
from mp_mailer.application.email.message import Mail
from mp_mailer.application.email.security import SecurityLayer, SmtpCredentials
from mp_mailer.application.email.sender import Mailer
from mp_mailer.observability.logging import get_logger

__all__ = ["SmtpMailer"]

logger = get_logger(__name__)


@dataclass(frozen=True)
class SmtpMailer(Mailer):
    """:class:`Mailer` that delivers over SMTP.

    Holds connection settings only. Every call to :meth:`send` or
    :meth:`send_batch` opens a fresh connection through *client_factory*
    and closes it before returning, so one instance can be shared by
    concurrent tasks. Nothing is validated or contacted at construction.

    Every error raised while connecting, authenticating or sending is
    re-raised unchanged; there is no retry.
    """

    host: str
    port: int
    security_layer: SecurityLayer
    credentials: SmtpCredentials
    client_factory: SmtpClientFactory = field(default=AioSmtpClient, repr=False, compare=False)

    def _log(self, count: int) -> Any:
        return logger.bind(
            host=self.host,
            port=self.port,
            security=self.security_layer.kind.value,
            count=count,
        )

    async def send(self, message: Mail) -> None:
        log = self._log(1)
        log.debug("mail.smtp.send")
        try:
            async with self.client_factory(self.host, self.port, self.security_layer) as client:
                await client.send(message, self.credentials)
        except Exception as exc:
            log.warning("mail.smtp.failed", error=type(exc).__name__)
            raise
        log.info("mail.smtp.sent")

    async def send_batch(self, messages: Sequence[Mail]) -> None:
        """Deliver *messages* over a single SMTP session.

        The whole batch is one delegated call: the client authenticates
        once and sends in order. If it fails part-way the error is
        re-raised and the batch must be treated as not delivered, even
        though the server may already have accepted a prefix of it.
        """
        log = self._log(len(messages))
        log.debug("mail.smtp.send")
        try:
            async with self.client_factory(self.host, self.port, self.security_layer) as client:
                await client.send_batch(messages, self.credentials)
        except Exception as exc:
            log.warning("mail.smtp.failed", error=type(exc).__name__)
            raise
        log.info("mail.smtp.sent")
