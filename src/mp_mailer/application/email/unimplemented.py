"""Application email – UnimplementedMailer placeholder."""
from __future__ import annotations

from mp_mailer.application.email.errors import UnimplementedMailerError
from mp_mailer.application.email.message import Mail
from mp_mailer.application.email.sender import Mailer
from mp_mailer.observability.logging import get_logger

__all__ = ["UnimplementedMailer"]

logger = get_logger(__name__)


class UnimplementedMailer(Mailer):
    """Stand-in used until a real mailer is configured.

    Lets applications hold a :class:`Mailer` unconditionally instead of an
    optional one. Every send fails with :class:`UnimplementedMailerError`,
    which explains how to configure a real mailer. Batches inherit the
    default policy and therefore fail on their first message.
    """

    async def send(self, message: Mail) -> None:  # noqa: ARG002
        logger.warning("mail.unimplemented")
        raise UnimplementedMailerError()

    def __repr__(self) -> str:
        return "UnimplementedMailer()"
