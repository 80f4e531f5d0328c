"""Application email – EmailMessage to MIME conversion."""
from __future__ import annotations

import email.encoders
import email.message
import email.mime.base
import email.mime.multipart
import email.mime.text

from mp_mailer.application.email.message import Attachment, EmailMessage, Mail

__all__ = ["envelope_recipients", "to_mime"]

DEFAULT_SENDER = "noreply@localhost"


def _attachment_part(attachment: Attachment) -> email.mime.base.MIMEBase:
    maintype, _, subtype = attachment.content_type.partition("/")
    part = email.mime.base.MIMEBase(maintype or "application", subtype or "octet-stream")
    part.set_payload(attachment.data)
    email.encoders.encode_base64(part)
    part.add_header("Content-Disposition", "attachment", filename=attachment.filename)
    return part


def to_mime(message: Mail, *, default_sender: str | None = None) -> email.message.Message:
    """Build the wire representation of *message*.

    Stdlib messages are returned unchanged. ``Bcc`` recipients never
    appear in the headers; see :func:`envelope_recipients`.
    """
    if isinstance(message, email.message.Message):
        return message

    body = email.mime.multipart.MIMEMultipart("alternative")
    if message.text_body:
        body.attach(email.mime.text.MIMEText(message.text_body, "plain", "utf-8"))
    body.attach(email.mime.text.MIMEText(message.html_body, "html", "utf-8"))

    if message.attachments:
        msg = email.mime.multipart.MIMEMultipart("mixed")
        msg.attach(body)
        for attachment in message.attachments:
            msg.attach(_attachment_part(attachment))
    else:
        msg = body

    msg["Subject"] = message.subject
    msg["From"] = message.sender or default_sender or DEFAULT_SENDER
    msg["To"] = ", ".join(message.to)
    if message.cc:
        msg["Cc"] = ", ".join(message.cc)
    if message.reply_to:
        msg["Reply-To"] = message.reply_to
    return msg


def envelope_recipients(message: Mail) -> list[str] | None:
    """``RCPT TO`` addresses for *message*.

    ``None`` lets the SMTP client read them from the headers of a
    ready-made stdlib message.
    """
    if isinstance(message, EmailMessage):
        return message.all_recipients()
    return None
