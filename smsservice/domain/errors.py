"""Exceptions raised by the SMS gateway client."""
from typing import Optional


class SmsServiceError(Exception):
    """Base class for all smsservice errors."""


class InvalidRecipientFormat(SmsServiceError, ValueError):
    """Raised when a phone number is not on the format +CC7XXXXXXXX."""

    def __init__(self, phone: object, pattern: str):
        self.phone = phone
        self.pattern = pattern
        super().__init__(f"The phone number {phone!r} does not match the format {pattern}")


class TransportError(SmsServiceError):
    """
    Network, TLS or IO failure while talking to the gateway.

    Never raised by the client itself; it is carried on a failed SendResult.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None, phase: str = "request"):
        self.cause = cause
        self.phase = phase
        super().__init__(message)


class TrustSetupError(SmsServiceError):
    """Raised when the bundled CA certificate cannot be turned into a trust store."""

    def __init__(self, message: str, ca_path: Optional[str] = None, cause: Optional[BaseException] = None):
        self.ca_path = ca_path
        self.cause = cause
        super().__init__(message)
