"""
OTP Hashing
===========
Keyed-hash commitments to OTP codes and constant-time verification.
"""

import base64
import hmac
from dataclasses import replace
from typing import Optional, Union

from .models import HashAlgorithm, HashOptions, DEFAULT_HASH_OPTIONS


class OTPHashService:
    """
    Commits to a code with HMAC(algorithm, key=salt, msg=code), base64 encoded.

    The commitment can be stored in place of the code. The same code, algorithm
    and salt always give the same commitment.
    """

    def __init__(self, options: Optional[HashOptions] = None):
        self.options = options or DEFAULT_HASH_OPTIONS

    def commit(self, otp: str) -> str:
        """
        Compute the commitment for a code.

        Args:
            otp: Plain code

        Returns:
            Base64 encoded HMAC digest

        Raises:
            ValueError: if the configured algorithm is not supported by hashlib
        """
        digest = hmac.new(
            self.options.salt.encode(),
            otp.encode(),
            self.options.digest_name,
        ).digest()
        return base64.b64encode(digest).decode("ascii")

    def verify(self, otp: str, otp_hash: str) -> bool:
        """
        Check a code against a stored commitment.

        Uses constant-time comparison to prevent timing attacks. A stored value
        of a different length is compared through the same primitive and
        reported as a mismatch.

        Args:
            otp: User-provided code
            otp_hash: Stored commitment

        Returns:
            True if the code matches
        """
        candidate = self.commit(otp).encode("ascii")
        stored = otp_hash.encode("utf-8")

        same_length = len(candidate) == len(stored)
        reference = stored if same_length else bytes(len(candidate))
        matches = hmac.compare_digest(candidate, reference)
        return matches and same_length

    def set_options(
        self,
        algorithm: Union[HashAlgorithm, str, None] = None,
        salt: Optional[str] = None,
    ) -> None:
        """Overlay the given options on the current ones; None keeps the current value."""
        changes = {}
        if algorithm is not None:
            changes["algorithm"] = algorithm
        if salt is not None:
            changes["salt"] = salt
        self.options = replace(self.options, **changes)
