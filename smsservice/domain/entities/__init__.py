"""Domain entities."""

from smsservice.domain.entities.send_result import SendResult
from smsservice.domain.entities.sms_request import SmsRequest, FORM_CONTENT_TYPE

__all__ = [
    "SendResult",
    "SmsRequest",
    "FORM_CONTENT_TYPE",
]
