"""
tinhub-core Library
===================
Shared utilities for backend services: OTP, email, storage, user directory and logging.
"""

__version__ = "1.0.2"

# OTP
from tinhub_core.otp import (
    OTPService,
    OTPGenerator,
    OTPHashService,
    OTPOptions,
    HashOptions,
    HashAlgorithm,
    OTPGenerationResult,
    OTPValidationResult,
)

# Logging
from tinhub_core.logging import (
    setup_logging,
    get_logger,
    LoggerService,
    LogLevel,
)

# Errors
from tinhub_core.errors import (
    TinhubError,
    ConfigurationError,
    OTPConfigurationError,
    EmailSendError,
    UnsupportedEmailSenderError,
)

# Configuration
from tinhub_core.config import SmtpConfig, AwsConfig, S3Config, CognitoConfig

# Email, storage and the user directory: import from tinhub_core.mail,
# tinhub_core.storage and tinhub_core.directory

__all__ = [
    "__version__",
    # OTP
    "OTPService",
    "OTPGenerator",
    "OTPHashService",
    "OTPOptions",
    "HashOptions",
    "HashAlgorithm",
    "OTPGenerationResult",
    "OTPValidationResult",
    # Logging
    "setup_logging",
    "get_logger",
    "LoggerService",
    "LogLevel",
    # Errors
    "TinhubError",
    "ConfigurationError",
    "OTPConfigurationError",
    "EmailSendError",
    "UnsupportedEmailSenderError",
    # Configuration
    "SmtpConfig",
    "AwsConfig",
    "S3Config",
    "CognitoConfig",
]
