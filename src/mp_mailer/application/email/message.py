"""Application email – EmailMessage and Attachment value objects."""
from __future__ import annotations

import email.message
from dataclasses import dataclass, field
from typing import TypeAlias

__all__ = ["Attachment", "EmailMessage", "Mail"]


@dataclass(frozen=True)
class Attachment:
    """A file attachment for an email."""

    filename: str
    content_type: str
    data: bytes

    def __repr__(self) -> str:  # pragma: no cover
        return f"Attachment(filename={self.filename!r}, content_type={self.content_type!r}, size={len(self.data)})"


@dataclass
class EmailMessage:
    """One email, fully resolved and ready to be handed to a :class:`Mailer`.

    Mailers treat it as opaque; only the SMTP client reads its fields when
    building the MIME payload.
    """

    to: list[str]
    subject: str
    html_body: str
    cc: list[str] = field(default_factory=list)
    bcc: list[str] = field(default_factory=list)
    text_body: str | None = None
    attachments: list[Attachment] = field(default_factory=list)
    reply_to: str | None = None
    sender: str | None = None

    def all_recipients(self) -> list[str]:
        """Return combined to + cc + bcc recipient list."""
        return self.to + self.cc + self.bcc


# What a Mailer accepts: a message built here, or a ready-made stdlib
# ``email.message.Message`` that is sent exactly as given.
Mail: TypeAlias = EmailMessage | email.message.Message
