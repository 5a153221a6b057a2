"""
Email Dispatch
==============
One sending interface over SMTP and Amazon SES.
"""

from .models import Attachment, EmailData, SendResult
from .base import EmailSender, build_mime_message
from .smtp import SmtpEmailSender
from .ses import SesEmailSender
from .factory import EmailSenderFactory

__all__ = [
    "Attachment",
    "EmailData",
    "SendResult",
    "EmailSender",
    "build_mime_message",
    "SmtpEmailSender",
    "SesEmailSender",
    "EmailSenderFactory",
]
