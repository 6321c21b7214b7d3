"""
Passcode delivery by email.

Without a configured SMTP host, codes are written to the log so the flows
can be exercised locally without a mail relay.
"""
import logging
from email.message import EmailMessage
from typing import Protocol

import aiosmtplib

from achilles_auth.config import Settings
from achilles_auth.core.exceptions import DeliveryFailure

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Sends a passcode to an address; raises DeliveryFailure on error."""

    async def send(self, email: str, code: str) -> None:
        ...


class SmtpNotifier:
    """Delivers codes through an SMTP relay."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def build_message(self, email: str, code: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.settings.mail_sender
        message["To"] = email
        message["Subject"] = self.settings.email_subject
        message.set_content(f"Your OTP is: {code}")
        return message

    async def send(self, email: str, code: str) -> None:
        settings = self.settings
        use_tls = settings.email_port == 465
        
        try:
            await aiosmtplib.send(
                self.build_message(email, code),
                hostname=settings.email_host,
                port=settings.email_port,
                username=settings.email_user,
                password=settings.email_pass,
                use_tls=use_tls,
                start_tls=False if use_tls else None,
                timeout=settings.email_timeout_seconds,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error(f"Error sending OTP email to {email}: {e}")
            raise DeliveryFailure() from e
        
        logger.info(f"OTP email sent to {email}")


class ConsoleNotifier:
    """Development notifier that logs the code instead of mailing it."""

    async def send(self, email: str, code: str) -> None:
        logger.warning(f"SMTP not configured; OTP for {email} is {code}")


def create_notifier(settings: Settings) -> Notifier:
    """Pick the notifier matching the mail configuration."""
    if settings.email_host:
        return SmtpNotifier(settings)
    return ConsoleNotifier()
