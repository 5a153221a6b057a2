"""
OTP Models
==========
Options, defaults and result types for OTP issuance and validation.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Union

from tinhub_core.errors import OTPConfigurationError

NUMBERS = "0123456789"
ALPHA_NUMERIC = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

# 10 minutes; pass expiry_ms=None (NO_EXPIRY) for codes that never expire
DEFAULT_EXPIRY_MS = 10 * 60 * 1000
NO_EXPIRY = None


class HashAlgorithm(str, Enum):
    """Digest algorithms used for OTP commitments."""
    SHA256 = "sha256"
    SHA512 = "sha512"


@dataclass(frozen=True)
class OTPOptions:
    """Code generation options."""
    length: int = 6
    numbers_only: bool = True

    def __post_init__(self):
        # bool is an int subclass, but True is not a length
        if isinstance(self.length, bool) or not isinstance(self.length, int):
            raise OTPConfigurationError(
                f"OTP length must be an integer, got {self.length!r}"
            )
        if self.length <= 0:
            raise OTPConfigurationError(
                f"OTP length must be positive, got {self.length}"
            )

    @property
    def alphabet(self) -> str:
        return NUMBERS if self.numbers_only else ALPHA_NUMERIC


@dataclass(frozen=True)
class HashOptions:
    """Commitment options: HMAC digest algorithm and key (salt)."""
    algorithm: Union[HashAlgorithm, str, None] = HashAlgorithm.SHA256
    salt: Optional[str] = ""

    def __post_init__(self):
        if not self.algorithm:
            object.__setattr__(self, "algorithm", HashAlgorithm.SHA256)
        if self.salt is None:
            object.__setattr__(self, "salt", "")

    @property
    def digest_name(self) -> str:
        if isinstance(self.algorithm, HashAlgorithm):
            return self.algorithm.value
        return str(self.algorithm)


DEFAULT_OTP_OPTIONS = OTPOptions()
DEFAULT_HASH_OPTIONS = HashOptions()


@dataclass
class OTPGenerationResult:
    """A freshly issued code with its commitment."""
    otp: str
    otp_hash: str
    expires_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "otp": self.otp,
            "hash": self.otp_hash,
            "expires_at": self.expires_at,
        }


@dataclass
class OTPValidationResult:
    """
    Outcome of validating a supplied code.

    ``expired`` is only set (to True) when the code was rejected because its
    expiry window had passed.
    """
    valid: bool
    expired: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"valid": self.valid}
        if self.expired is not None:
            data["expired"] = self.expired
        return data
