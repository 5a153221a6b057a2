"""
Email Sender Base
=================
Abstract sender and MIME message construction.
"""

from abc import ABC, abstractmethod
from email.message import EmailMessage
from email.utils import make_msgid

from .models import EmailData, SendResult


def build_mime_message(email: EmailData) -> EmailMessage:
    """
    Build a MIME message with text/html alternatives and attachments.

    Args:
        email: The outgoing email

    Returns:
        A stdlib EmailMessage ready for SMTP or raw SES delivery
    """
    message = EmailMessage()
    message["Subject"] = email.subject
    message["From"] = email.sender
    message["To"] = ", ".join(email.recipients)
    message["Message-ID"] = make_msgid()

    if email.text is not None:
        message.set_content(email.text)
    if email.html is not None:
        if email.text is not None:
            message.add_alternative(email.html, subtype="html")
        else:
            message.set_content(email.html, subtype="html")

    for attachment in email.attachments:
        maintype, _, subtype = attachment.content_type.partition("/")
        message.add_attachment(
            attachment.content,
            maintype=maintype,
            subtype=subtype or "octet-stream",
            filename=attachment.filename,
        )

    return message


class EmailSender(ABC):
    """
    Abstract base class for email transports.

    All backends (SMTP, SES) should inherit from this.
    """

    name: str = "base"

    @abstractmethod
    async def send(self, email: EmailData) -> SendResult:
        """
        Send an email.

        Raises:
            EmailSendError: if the backend rejects or fails to deliver the message
        """
        pass

    @abstractmethod
    async def verify(self) -> bool:
        """Check that the backend is reachable and the credentials work."""
        pass
