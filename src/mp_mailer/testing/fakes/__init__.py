"""Testing fakes – in-memory doubles for mail transports."""
from mp_mailer.application.email.in_memory import InMemoryMailer
from mp_mailer.testing.fakes.smtp import FakeSmtpCall, FakeSmtpClient, FakeSmtpClientFactory

__all__ = [
    "FakeSmtpCall",
    "FakeSmtpClient",
    "FakeSmtpClientFactory",
    "InMemoryMailer",
]
