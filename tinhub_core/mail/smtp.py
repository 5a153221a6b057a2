"""
SMTP Email Sender
=================
Async SMTP transport using aiosmtplib.
"""

from typing import Optional

import aiosmtplib
import structlog

from tinhub_core.config import SmtpConfig
from tinhub_core.errors import EmailSendError

from .base import EmailSender, build_mime_message
from .models import EmailData, SendResult

logger = structlog.get_logger(__name__)


class SmtpEmailSender(EmailSender):
    """
    Sends email through an SMTP relay.

    ``secure=True`` connects with implicit TLS; otherwise STARTTLS is used
    when the server offers it.
    """

    name = "smtp"

    def __init__(self, config: SmtpConfig):
        self.config = config

    @property
    def _start_tls(self) -> Optional[bool]:
        # None lets aiosmtplib upgrade if the server advertises STARTTLS
        return False if self.config.secure else None

    async def send(self, email: EmailData) -> SendResult:
        """Send an email via SMTP."""
        message = build_mime_message(email)

        try:
            errors, response = await aiosmtplib.send(
                message,
                hostname=self.config.host,
                port=self.config.port,
                username=self.config.user,
                password=self.config.password,
                use_tls=self.config.secure,
                start_tls=self._start_tls,
                timeout=self.config.timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error(
                "SMTP send failed",
                host=self.config.host,
                recipients=len(email.recipients),
                error=str(e),
            )
            raise EmailSendError(str(e), backend=self.name) from e

        logger.info(
            "Email sent",
            backend=self.name,
            recipients=len(email.recipients),
            refused=len(errors),
        )

        return SendResult(
            success=True,
            message_id=message["Message-ID"],
            raw_response={"response": response, "refused": {k: str(v) for k, v in errors.items()}},
        )

    async def verify(self) -> bool:
        """Connect (and log in, if configured) to check the SMTP relay."""
        client = aiosmtplib.SMTP(
            hostname=self.config.host,
            port=self.config.port,
            use_tls=self.config.secure,
            start_tls=self._start_tls,
            timeout=self.config.timeout,
        )
        try:
            await client.connect()
            if self.config.user and self.config.password:
                await client.login(self.config.user, self.config.password)
            await client.quit()
            return True
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("SMTP connection verification failed", host=self.config.host, error=str(e))
            return False
        finally:
            if client.is_connected:
                client.close()
