"""
Email Sender Factory
====================
Selects an email backend from its configuration.
"""

from typing import Any, Mapping, Union

from tinhub_core.config import AwsConfig, SmtpConfig
from tinhub_core.errors import ConfigurationError, UnsupportedEmailSenderError

from .base import EmailSender
from .ses import SesEmailSender
from .smtp import SmtpEmailSender

EmailConfig = Union[SmtpConfig, AwsConfig, Mapping[str, Any]]


class EmailSenderFactory:
    """Builds the sender matching a config's ``type`` ("smtp" or "aws")."""

    @staticmethod
    def create_sender(config: EmailConfig) -> EmailSender:
        """
        Create an email sender.

        Args:
            config: SmtpConfig / AwsConfig, or a mapping with a "type" key and
                the matching config fields, e.g.
                {"type": "smtp", "host": "smtp.example.com", "port": 465, "secure": True}

        SMTP credentials may also be given as ``"auth": {"user": ..., "pass": ...}``.

        Raises:
            UnsupportedEmailSenderError: for any other type
            ConfigurationError: when the mapping has fields the config does not take
        """
        if isinstance(config, Mapping):
            config = EmailSenderFactory._from_mapping(config)

        if isinstance(config, SmtpConfig):
            return SmtpEmailSender(config)
        if isinstance(config, AwsConfig):
            return SesEmailSender(config)
        raise UnsupportedEmailSenderError(getattr(config, "type", None))

    @staticmethod
    def _from_mapping(config: Mapping[str, Any]) -> Union[SmtpConfig, AwsConfig]:
        fields = dict(config)
        sender_type = fields.pop("type", None)
        if sender_type == SmtpConfig.type:
            config_cls = SmtpConfig
            # {"auth": {"user": ..., "pass": ...}} form
            auth = fields.pop("auth", None) or {}
            fields.setdefault("user", auth.get("user"))
            fields.setdefault("password", auth.get("pass"))
        elif sender_type == AwsConfig.type:
            config_cls = AwsConfig
        else:
            raise UnsupportedEmailSenderError(sender_type)

        try:
            return config_cls(**fields)
        except TypeError as e:
            raise ConfigurationError(f"invalid {sender_type} email config: {e}") from e
