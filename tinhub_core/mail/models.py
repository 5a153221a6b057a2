"""
Email Models
============
Message and result types shared by all email senders.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class Attachment:
    """A file attached to an email."""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass
class EmailData:
    """An outgoing email."""
    to: Union[str, List[str]]
    sender: str
    subject: str
    text: Optional[str] = None
    html: Optional[str] = None
    attachments: List[Attachment] = field(default_factory=list)

    @property
    def recipients(self) -> List[str]:
        if isinstance(self.to, str):
            return [self.to]
        return list(self.to)


@dataclass
class SendResult:
    """Result of an email send operation."""
    success: bool
    message_id: Optional[str] = None
    raw_response: Optional[Dict[str, Any]] = None
