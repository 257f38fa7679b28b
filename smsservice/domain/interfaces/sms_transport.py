"""Interface for SMS transports (Strategy Pattern).

The HTTP gateway transport is the only production implementation; tests
swap in fakes without touching the client.
"""
from abc import ABC, abstractmethod

from smsservice.domain.entities.send_result import SendResult
from smsservice.domain.entities.sms_request import SmsRequest


class ISmsTransport(ABC):
    """Interface for delivering an SmsRequest to the gateway."""

    @abstractmethod
    def deliver(self, request: SmsRequest) -> SendResult:
        """
        Deliver a request to the gateway.

        Args:
            request: Serialized-ready SMS snapshot

        Returns:
            SendResult holding the gateway response text, or a TransportError.
            Implementations must not raise for transport failures.
        """
        pass
