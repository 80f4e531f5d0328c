"""
mp_mailer – Provider-agnostic mail transports.

Import path convention::

    from mp_mailer.application.email import Mailer, SmtpMailer, make_gmail
    from mp_mailer.kernel.errors import DebuggableError
    from mp_mailer.application.email import SmtpSettings, mailer_from_env
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
