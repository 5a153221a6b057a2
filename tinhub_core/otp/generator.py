"""
OTP Code Generator
==================
Random code generation from a cryptographically secure source.
"""

import secrets
from dataclasses import replace
from typing import Optional

from .models import OTPOptions, DEFAULT_OTP_OPTIONS


class OTPGenerator:
    """
    Generates one-time codes over a numeric or uppercase alphanumeric alphabet.

    Each position consumes one random byte reduced modulo the alphabet size.
    For 36 symbols this slightly favours the first symbols (256 % 36 != 0),
    which is acceptable for short-lived codes.
    """

    def __init__(self, options: Optional[OTPOptions] = None):
        self.options = options or DEFAULT_OTP_OPTIONS

    def generate(self) -> str:
        """
        Generate a new code.

        Returns:
            A string of exactly ``options.length`` characters
        """
        chars = self.options.alphabet
        random_bytes = secrets.token_bytes(self.options.length)
        return "".join(chars[b % len(chars)] for b in random_bytes)

    def set_options(
        self,
        length: Optional[int] = None,
        numbers_only: Optional[bool] = None,
    ) -> None:
        """
        Overlay the given options on the current ones.

        Arguments left as None keep their current value.

        Raises:
            OTPConfigurationError: if the resulting length is not a positive integer
        """
        changes = {}
        if length is not None:
            changes["length"] = length
        if numbers_only is not None:
            changes["numbers_only"] = numbers_only
        self.options = replace(self.options, **changes)
