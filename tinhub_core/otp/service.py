"""
OTP Service
===========
Issues codes with their commitments and validates supplied codes against
stored commitments and an expiry window.
"""

from datetime import datetime, timezone, timedelta
from typing import Callable, Optional

import structlog

from tinhub_core.errors import OTPConfigurationError

from .generator import OTPGenerator
from .hashing import OTPHashService
from .models import (
    OTPOptions,
    HashOptions,
    OTPGenerationResult,
    OTPValidationResult,
    DEFAULT_EXPIRY_MS,
)

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OTPService:
    """
    Main entry point for OTP issuance and validation.

    The caller delivers ``otp`` to the user and persists only ``otp_hash``
    together with the issue time.

    Usage:
        service = OTPService(expiry_ms=5 * 60 * 1000)
        result = service.issue()
        send_to_user(result.otp)
        store(result.otp_hash, issued_at=now)

        outcome = service.validate(user_input, stored_hash, issued_at)
        if outcome.valid:
            ...
    """

    def __init__(
        self,
        options: Optional[OTPOptions] = None,
        hash_options: Optional[HashOptions] = None,
        expiry_ms: Optional[int] = DEFAULT_EXPIRY_MS,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            options: Code generation options (default: 6 numeric characters)
            hash_options: Commitment options (default: sha256, empty salt)
            expiry_ms: Expiry window in milliseconds, or None (or 0) for no expiry
            clock: Returns the current aware UTC datetime

        Raises:
            OTPConfigurationError: if expiry_ms is negative or not an integer
        """
        if expiry_ms is not None and (
            isinstance(expiry_ms, bool) or not isinstance(expiry_ms, int) or expiry_ms < 0
        ):
            raise OTPConfigurationError(
                f"OTP expiry must be a non-negative integer of milliseconds, got {expiry_ms!r}"
            )

        self.generator = OTPGenerator(options)
        self.hash_service = OTPHashService(hash_options)
        self.expiry_ms = expiry_ms
        self._clock = clock or _utcnow

    @property
    def expiry(self) -> Optional[timedelta]:
        if not self.expiry_ms:
            return None
        return timedelta(milliseconds=self.expiry_ms)

    def issue(self) -> OTPGenerationResult:
        """
        Generate a new code and its commitment.

        Returns:
            OTPGenerationResult with expires_at set when an expiry is configured
        """
        otp = self.generator.generate()
        otp_hash = self.hash_service.commit(otp)

        expires_at = None
        if self.expiry is not None:
            expires_at = self._clock() + self.expiry

        logger.debug(
            "OTP issued",
            length=len(otp),
            expires_at=expires_at.isoformat() if expires_at else None,
        )

        return OTPGenerationResult(otp=otp, otp_hash=otp_hash, expires_at=expires_at)

    def validate(
        self,
        otp: str,
        otp_hash: str,
        issued_at: Optional[datetime] = None,
    ) -> OTPValidationResult:
        """
        Validate a supplied code against a stored commitment.

        An expired code is rejected before any hashing, even if it is correct.
        Without ``issued_at`` (or without a configured expiry) only the
        commitment is checked.

        Args:
            otp: User-provided code
            otp_hash: Stored commitment
            issued_at: When the code was issued; naive values are taken as UTC

        Returns:
            OTPValidationResult
        """
        if self._is_expired(issued_at):
            logger.info("OTP rejected: expired")
            return OTPValidationResult(valid=False, expired=True)

        valid = self.hash_service.verify(otp, otp_hash)
        if not valid:
            logger.info("OTP rejected: mismatch")
        return OTPValidationResult(valid=valid)

    def _is_expired(self, issued_at: Optional[datetime]) -> bool:
        if self.expiry is None or issued_at is None:
            return False
        if issued_at.tzinfo is None:
            issued_at = issued_at.replace(tzinfo=timezone.utc)
        return self._clock() > issued_at + self.expiry
