"""Outcome of a single send."""
from dataclasses import dataclass
from typing import Optional

from smsservice.domain.errors import TransportError


@dataclass(frozen=True)
class SendResult:
    """
    Result of posting one SMS to the gateway.

    A gateway that answers with failure text still produces an ``ok`` result;
    the text is the gateway's verdict. Only transport failures set ``error``.
    """

    response: Optional[str] = None
    error: Optional[TransportError] = None
    status_code: Optional[int] = None

    @classmethod
    def success(cls, response: str, status_code: Optional[int] = None) -> "SendResult":
        return cls(response=response, status_code=status_code)

    @classmethod
    def failure(cls, error: TransportError) -> "SendResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def failed(self) -> bool:
        return self.error is not None
