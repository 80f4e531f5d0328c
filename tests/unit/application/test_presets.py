"""Unit tests for SMTP provider presets."""
from __future__ import annotations

import asyncio
import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mp_mailer.application.email import (
    PRESETS,
    EmailMessage,
    SecurityKind,
    SecurityLayer,
    SmtpCredentials,
    SmtpMailer,
    make_gmail,
    make_mailgun,
    make_sendgrid,
)
from mp_mailer.testing.fakes import FakeSmtpClientFactory

credentials_strategy = st.builds(SmtpCredentials, st.text(), st.text())

EXPECTED = [
    (make_sendgrid, "smtp.sendgrid.net"),
    (make_gmail, "smtp.gmail.com"),
    (make_mailgun, "smtp.mailgun.org"),
]


class TestPresets:
    @pytest.mark.parametrize(("factory", "host"), EXPECTED)
    @given(creds=credentials_strategy)
    def test_fixed_endpoint_and_given_credentials(self, factory, host, creds):
        mailer = factory(creds)
        assert isinstance(mailer, SmtpMailer)
        assert mailer.host == host
        assert mailer.port == 465
        assert mailer.security_layer == SecurityLayer.tls()
        assert mailer.security_layer.kind is SecurityKind.TLS
        assert mailer.credentials is creds

    @pytest.mark.parametrize(("factory", "host"), EXPECTED)
    def test_deterministic(self, factory, host):
        creds = SmtpCredentials("apikey", "SG.xxx")
        assert factory(creds) == factory(creds)

    def test_presets_are_independent_instances(self):
        a = make_gmail(SmtpCredentials("a@gmail.com", "1"))
        b = make_gmail(SmtpCredentials("b@gmail.com", "2"))
        assert a is not b
        assert a.credentials.username == "a@gmail.com"
        assert b.credentials.username == "b@gmail.com"

    def test_registry_names(self):
        assert dict(PRESETS) == {
            "sendgrid": make_sendgrid,
            "gmail": make_gmail,
            "mailgun": make_mailgun,
        }

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            PRESETS["other"] = make_gmail  # type: ignore[index]

    def test_preset_sends_through_injected_client(self):
        factory = FakeSmtpClientFactory()
        mailer = dataclasses.replace(make_mailgun(SmtpCredentials("postmaster@mg.example.com", "k")), client_factory=factory)
        asyncio.run(mailer.send(EmailMessage(to=["x@y.com"], subject="s", html_body="h")))
        (client,) = factory.clients
        assert (client.host, client.port) == ("smtp.mailgun.org", 465)
