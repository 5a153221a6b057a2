"""
OTP Issuance and Validation
===========================
Secure code generation, keyed-hash commitments and expiry enforcement.
"""

from .models import (
    HashAlgorithm,
    OTPOptions,
    HashOptions,
    OTPGenerationResult,
    OTPValidationResult,
    DEFAULT_OTP_OPTIONS,
    DEFAULT_HASH_OPTIONS,
    DEFAULT_EXPIRY_MS,
    NO_EXPIRY,
    NUMBERS,
    ALPHA_NUMERIC,
)
from .generator import OTPGenerator
from .hashing import OTPHashService
from .service import OTPService

__all__ = [
    # Models
    "HashAlgorithm",
    "OTPOptions",
    "HashOptions",
    "OTPGenerationResult",
    "OTPValidationResult",
    "DEFAULT_OTP_OPTIONS",
    "DEFAULT_HASH_OPTIONS",
    "DEFAULT_EXPIRY_MS",
    "NO_EXPIRY",
    "NUMBERS",
    "ALPHA_NUMERIC",
    # Components
    "OTPGenerator",
    "OTPHashService",
    "OTPService",
]
