"""Python client for the helix.stormhub.org SMS gateway."""
from smsservice.client import SMS, SendCallback
from smsservice.domain.entities.send_result import SendResult
from smsservice.domain.entities.sms_request import SmsRequest
from smsservice.domain.errors import (
    InvalidRecipientFormat,
    SmsServiceError,
    TransportError,
    TrustSetupError,
)
from smsservice.infrastructure.security.trust_store import TrustConfig, TrustStoreFactory

__version__ = "1.0.0"

__all__ = [
    "SMS",
    "SendCallback",
    "SendResult",
    "SmsRequest",
    "InvalidRecipientFormat",
    "SmsServiceError",
    "TransportError",
    "TrustSetupError",
    "TrustConfig",
    "TrustStoreFactory",
]
