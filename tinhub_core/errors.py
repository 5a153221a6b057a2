"""
Error Types
===========
Exception classes shared by the OTP, mail and storage modules.
"""

from typing import Optional


class TinhubError(Exception):
    """Base exception for all tinhub-core errors."""
    pass


class ConfigurationError(TinhubError, ValueError):
    """Raised when a component is given options it cannot work with."""
    pass


class OTPConfigurationError(ConfigurationError):
    """Raised when OTP generation options are invalid (e.g. non-positive length)."""
    pass


class UnsupportedEmailSenderError(ConfigurationError):
    """Raised when the email factory gets a sender type it does not know."""

    def __init__(self, sender_type: Optional[str]):
        self.sender_type = sender_type
        super().__init__(f"unsupported email sender type: {sender_type}")


class EmailSendError(TinhubError):
    """Raised when a backend fails to deliver an email."""

    def __init__(self, message: str, backend: str = "unknown"):
        self.message = message
        self.backend = backend
        super().__init__(f"failed to send email with {backend}: {message}")
