"""Testing support – fakes for code that sends mail.

Swap the real transport out in your tests::

    from mp_mailer.testing import FakeSmtpClientFactory
"""

from mp_mailer.testing.fakes import (
    FakeSmtpCall,
    FakeSmtpClient,
    FakeSmtpClientFactory,
    InMemoryMailer,
)

__all__ = [
    "FakeSmtpCall",
    "FakeSmtpClient",
    "FakeSmtpClientFactory",
    "InMemoryMailer",
]
