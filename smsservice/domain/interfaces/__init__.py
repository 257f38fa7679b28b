"""Domain interfaces following Dependency Inversion Principle."""

from smsservice.domain.interfaces.sms_transport import ISmsTransport

__all__ = [
    "ISmsTransport",
]
