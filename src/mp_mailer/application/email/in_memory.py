"""Application email – InMemoryMailer for unit tests."""
from __future__ import annotations

from mp_mailer.application.email.message import Mail
from mp_mailer.application.email.sender import Mailer

__all__ = ["InMemoryMailer"]


class InMemoryMailer(Mailer):
    """Fake Mailer that captures sent messages in memory.

    Relies on the default :meth:`Mailer.send_batch`.
    """

    def __init__(self) -> None:
        self.sent: list[Mail] = []

    async def send(self, message: Mail) -> None:
        self.sent.append(message)

    def reset(self) -> None:
        """Clear the outbox."""
        self.sent.clear()

    # convenience helpers
    @property
    def count(self) -> int:
        return len(self.sent)

    def last(self) -> Mail | None:
        return self.sent[-1] if self.sent else None
