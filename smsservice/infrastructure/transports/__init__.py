"""Infrastructure transports - concrete implementations."""

from smsservice.infrastructure.transports.http_transport import HttpSmsTransport, TrustAnchorAdapter

__all__ = [
    "HttpSmsTransport",
    "TrustAnchorAdapter",
]
