"""
AWS SES Email Sender
====================
Email transport over Amazon SES using boto3.
"""

import asyncio
from functools import partial
from typing import Any, Dict, Optional

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from tinhub_core.config import AwsConfig
from tinhub_core.errors import EmailSendError

from .base import EmailSender, build_mime_message
from .models import EmailData, SendResult

logger = structlog.get_logger(__name__)


class SesEmailSender(EmailSender):
    """
    Sends email through Amazon SES.

    Plain messages go through ``SendEmail``; messages with attachments are
    sent as raw MIME through ``SendRawEmail``. boto3 is blocking, so calls
    run in the default executor.
    """

    name = "aws"

    def __init__(self, config: AwsConfig, client: Optional[Any] = None):
        """
        Args:
            config: Region and optional explicit credentials
            client: Pre-built SES client (mainly for tests)
        """
        self.config = config
        self._client = client or boto3.client(
            "ses",
            region_name=config.region,
            aws_access_key_id=config.access_key_id,
            aws_secret_access_key=config.secret_access_key,
        )

    async def _call(self, method: str, **kwargs: Any) -> Dict[str, Any]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, partial(getattr(self._client, method), **kwargs)
        )

    async def send(self, email: EmailData) -> SendResult:
        """Send an email via SES."""
        try:
            if email.attachments:
                response = await self._send_raw(email)
            else:
                response = await self._send_simple(email)
        except (ClientError, BotoCoreError) as e:
            logger.error("SES send failed", recipients=len(email.recipients), error=str(e))
            raise EmailSendError(str(e), backend=self.name) from e

        logger.info("Email sent", backend=self.name, recipients=len(email.recipients))

        return SendResult(
            success=True,
            message_id=response.get("MessageId"),
            raw_response=response,
        )

    async def _send_simple(self, email: EmailData) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if email.text:
            body["Text"] = {"Data": email.text}
        if email.html:
            body["Html"] = {"Data": email.html}

        return await self._call(
            "send_email",
            Source=email.sender,
            Destination={"ToAddresses": email.recipients},
            Message={
                "Subject": {"Data": email.subject},
                "Body": body,
            },
        )

    async def _send_raw(self, email: EmailData) -> Dict[str, Any]:
        message = build_mime_message(email)
        return await self._call(
            "send_raw_email",
            Source=email.sender,
            Destinations=email.recipients,
            RawMessage={"Data": message.as_bytes()},
        )

    async def verify(self) -> bool:
        """Check the SES credentials by reading the account's send quota."""
        try:
            await self._call("get_send_quota")
            return True
        except (ClientError, BotoCoreError) as e:
            logger.error("AWS SES credentials are invalid", error=str(e))
            return False
