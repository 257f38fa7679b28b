"""Recipient phone number validation."""
import re
from typing import Pattern

from smsservice.domain.errors import InvalidRecipientFormat


class RecipientValidator:
    """Utility class for validating GSM extensions on the format +CC7XXXXXXXX."""

    # Two digit country code followed by a mobile number starting with 7
    PATTERN: Pattern = re.compile(r"^\+\d{2}7\d{8}$")

    @classmethod
    def validate(cls, phone: str) -> str:
        """
        Validate a recipient phone number.

        No normalization is done: spaces, dashes and missing "+" are rejected.

        Args:
            phone: Phone number to validate

        Returns:
            The phone number unchanged

        Raises:
            InvalidRecipientFormat: If the number does not match PATTERN
        """
        if not cls.is_valid(phone):
            raise InvalidRecipientFormat(phone, cls.PATTERN.pattern)
        return phone

    @classmethod
    def is_valid(cls, phone: str) -> bool:
        """Check a phone number without raising."""
        if not isinstance(phone, str):
            return False
        # fullmatch so a trailing newline is not accepted by "$"
        return cls.PATTERN.fullmatch(phone) is not None
