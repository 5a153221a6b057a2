"""
Service Configuration
=====================
Connection settings for the mail, storage and directory wrappers, read from the environment.
"""

import os
from dataclasses import dataclass
from typing import ClassVar, Optional

PRODUCTION_ENVIRONMENTS = {"production", "prod"}


def is_production() -> bool:
    """True when ENVIRONMENT (or APP_ENV) names a production deployment."""
    env = os.getenv("ENVIRONMENT") or os.getenv("APP_ENV") or ""
    return env.strip().lower() in PRODUCTION_ENVIRONMENTS


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class SmtpConfig:
    """SMTP transport settings."""
    type: ClassVar[str] = "smtp"

    host: str
    port: int = 587
    secure: bool = False  # implicit TLS (usually port 465)
    user: Optional[str] = None
    password: Optional[str] = None
    timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "SmtpConfig":
        return cls(
            host=os.getenv("SMTP_HOST", "localhost"),
            port=int(os.getenv("SMTP_PORT", "587")),
            secure=_env_flag("SMTP_SECURE"),
            user=os.getenv("SMTP_USER") or None,
            password=os.getenv("SMTP_PASSWORD") or None,
        )


@dataclass
class AwsConfig:
    """
    AWS credentials for SES.

    Leave the keys empty to fall back to boto3's default credential chain.
    """
    type: ClassVar[str] = "aws"

    region: str
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> "AwsConfig":
        return cls(
            region=os.getenv("AWS_REGION", "us-east-1"),
            access_key_id=os.getenv("AWS_ACCESS_KEY_ID") or None,
            secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY") or None,
        )


@dataclass
class S3Config:
    """S3 bucket and credentials."""
    bucket_name: str
    region: str
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> "S3Config":
        return cls(
            bucket_name=os.getenv("S3_BUCKET_NAME", ""),
            region=os.getenv("AWS_REGION", "us-east-1"),
            access_key_id=os.getenv("AWS_ACCESS_KEY_ID") or None,
            secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY") or None,
        )


@dataclass
class CognitoConfig:
    """
    User pool settings for the directory client.

    ``enable_cognito_email`` lets the pool send its own invitation emails;
    when False new users are created with messages suppressed.
    """
    region: str
    user_pool_id: str
    client_id: str
    enable_cognito_email: bool = False
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> "CognitoConfig":
        return cls(
            region=os.getenv("COGNITO_REGION") or os.getenv("AWS_REGION", "us-east-1"),
            user_pool_id=os.getenv("COGNITO_USER_POOL_ID", ""),
            client_id=os.getenv("COGNITO_CLIENT_ID", ""),
            enable_cognito_email=_env_flag("COGNITO_ENABLE_EMAIL"),
            access_key_id=os.getenv("AWS_ACCESS_KEY_ID") or None,
            secret_access_key=os.getenv("AWS_SECRET_ACCESS_KEY") or None,
        )
