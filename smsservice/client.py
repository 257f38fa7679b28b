"""Client for the helix.stormhub.org SMS gateway.

Usage::

    sms = SMS.create(API_KEY_NAME, API_KEY_VALUE)
    result = sms.set_message("Hi! What's up?").set_recipient("+46700634607").send()
    if result.ok:
        print(result.response)  # e.g. "Message was sent."

Postponing an SMS for two hours::

    sms.postpone(datetime.now(timezone.utc) + timedelta(hours=2))
"""
import logging
import threading
from concurrent.futures import Future
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from smsservice.config.settings import get_config
from smsservice.domain.entities.send_result import SendResult
from smsservice.domain.entities.sms_request import SmsRequest
from smsservice.domain.interfaces.sms_transport import ISmsTransport
from smsservice.infrastructure.security.trust_store import TrustConfig, TrustStoreFactory
from smsservice.infrastructure.transports.http_transport import HttpSmsTransport
from smsservice.utils.phone_validator import RecipientValidator


logger = logging.getLogger(__name__)

SendCallback = Callable[[SendResult], None]


class SMS:
    """
    Fluent builder for one SMS.

    Before sending you should set the content with set_message() and add one
    or more recipients with set_recipient(). The same instance may be sent
    again; every send posts the state the builder holds at that moment.
    """

    def __init__(self, key_name: str, key_value: str, transport: ISmsTransport):
        self._key_name = key_name
        self._key_value = key_value
        self._transport = transport
        self._message = ""
        self._recipients: List[str] = []
        self._flash = False
        self._postpone_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        key_name: str,
        key_value: str,
        trust: Optional[TrustConfig] = None,
        transport: Optional[ISmsTransport] = None,
    ) -> "SMS":
        """
        Create a new empty SMS without recipients.

        Args:
            key_name: Name of the API key used to authenticate with the gateway
            key_value: The API key corresponding to key_name
            trust: TLS trust configuration (defaults to the shared process-wide one)
            transport: Transport override; when given no trust setup is done

        Returns:
            An SMS to be configured and sent

        Raises:
            TrustSetupError: If the bundled CA certificate cannot be loaded
            ValueError: If the active configuration is invalid (e.g. a non-https gateway URL)
        """
        if transport is None:
            config = get_config()
            config.validate()
            transport = HttpSmsTransport(
                trust or TrustStoreFactory.get_config(),
                gateway_url=config.GATEWAY_URL,
                timeout=config.REQUEST_TIMEOUT,
            )
        return cls(key_name, key_value, transport)

    @property
    def message(self) -> str:
        return self._message

    @property
    def recipients(self) -> List[str]:
        return list(self._recipients)

    @property
    def flash(self) -> bool:
        return self._flash

    @property
    def postpone_at(self) -> Optional[datetime]:
        return self._postpone_at

    def set_message(self, message: str) -> "SMS":
        """
        Set the content of the SMS, e.g. "Hi! What's up?".

        Content should not exceed 500 characters; longer text is passed on
        to the gateway unchanged.
        """
        limit = get_config().MAX_MESSAGE_LENGTH
        if len(message) > limit:
            logger.warning(
                f"Message is {len(message)} characters, gateway limit is {limit}"
            )
        self._message = message
        return self

    def set_recipient(self, recipient: str) -> "SMS":
        """
        Add one recipient on the format +CC7XXXXXXXX.

        Args:
            recipient: Two digit country code followed by a number starting with 7

        Raises:
            InvalidRecipientFormat: If the number does not match the format
        """
        self._recipients.append(RecipientValidator.validate(recipient))
        return self

    def set_recipients(self, recipients: Iterable[str]) -> "SMS":
        """
        Add several recipients in order.

        Stops at the first invalid number; numbers before it stay added.

        Raises:
            InvalidRecipientFormat: If one of the numbers does not match the format
        """
        for recipient in recipients:
            self.set_recipient(recipient)
        return self

    def postpone(self, timestamp: datetime) -> "SMS":
        """Defer delivery until the given time. The time is not checked to be in the future."""
        self._postpone_at = timestamp
        return self

    def to_request(self) -> SmsRequest:
        """Snapshot the current builder state."""
        return SmsRequest(
            message=self._message,
            recipients=tuple(self._recipients),
            key_name=self._key_name,
            key_value=self._key_value,
            flash=self._flash,
            postpone_at=self._postpone_at,
        )

    def send(self) -> SendResult:
        """
        Send the SMS.

        Returns:
            SendResult with the gateway's response text, or with a
            TransportError if communication failed. Never raises for
            network failures.
        """
        return self._transport.deliver(self.to_request())

    def send_as_flash(self) -> SendResult:
        """Send this SMS as a flash message. The flash flag stays set."""
        self._flash = True
        return self.send()

    def send_async(self, callback: Optional[SendCallback] = None) -> "Future[SendResult]":
        """
        Send the SMS on a new thread.

        The builder state is captured before this method returns.

        Args:
            callback: Called once with the SendResult when the send completes

        Returns:
            Future resolving to the SendResult after the callback has run. If the
            callback raises, the future holds that exception.
        """
        request = self.to_request()
        future: "Future[SendResult]" = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = self._transport.deliver(request)
                if callback is not None:
                    callback(result)
            except Exception as e:
                logger.error(f"Asynchronous SMS send failed: {e}", exc_info=True)
                future.set_exception(e)
                return
            future.set_result(result)

        threading.Thread(target=run, name="sms-send").start()
        return future

    def send_as_flash_async(self, callback: Optional[SendCallback] = None) -> "Future[SendResult]":
        """Send this SMS as a flash message on a new thread."""
        self._flash = True
        return self.send_async(callback)
