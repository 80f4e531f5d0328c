"""Application email – Mailer port."""
from __future__ import annotations

import abc
from collections.abc import Sequence

from mp_mailer.application.email.message import Mail

__all__ = ["Mailer"]


class Mailer(abc.ABC):
    """Port: anything that can deliver email.

    Subclasses must implement :meth:`send`. :meth:`send_batch` has a
    default built on top of it and should be overridden by transports
    that can deliver several messages natively (for instance over a
    single SMTP session).
    """

    @abc.abstractmethod
    async def send(self, message: Mail) -> None:
        """Deliver one message.

        Returns once the transport has accepted the message; raises the
        transport's own exception otherwise.
        """

    async def send_batch(self, messages: Sequence[Mail]) -> None:
        """Deliver *messages* one at a time, in order.

        Stops at the first failing message and re-raises its error.
        Messages before it have been sent, the rest have not, and the
        caller is not told where the batch stopped. This is not
        transactional: callers needing per-message status should call
        :meth:`send` themselves.
        """
        for message in messages:
            await self.send(message)
