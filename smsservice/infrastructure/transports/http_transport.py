"""HTTP gateway transport implementation (Strategy Pattern)."""
import logging
import time
from typing import Callable, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from smsservice.config.settings import get_config
from smsservice.domain.entities.send_result import SendResult
from smsservice.domain.entities.sms_request import FORM_CONTENT_TYPE, SmsRequest
from smsservice.domain.errors import TransportError
from smsservice.domain.interfaces.sms_transport import ISmsTransport
from smsservice.infrastructure.security.trust_store import TrustConfig
from smsservice.monitoring import track_send


class TrustAnchorAdapter(HTTPAdapter):
    """HTTPS adapter that verifies peers against a private trust store only."""

    def __init__(self, trust: TrustConfig, **kwargs):
        # HTTPAdapter.__init__ builds the pool manager, which needs the context
        self._trust = trust
        kwargs.setdefault("max_retries", Retry(total=0, read=False))
        super().__init__(**kwargs)

    def init_poolmanager(self, connections, maxsize, block=False, **pool_kwargs):
        pool_kwargs["ssl_context"] = self._trust.ssl_context
        return super().init_poolmanager(connections, maxsize, block=block, **pool_kwargs)


class HttpSmsTransport(ISmsTransport):
    """
    Posts SMS requests to the gateway as a form-encoded body.

    Every delivery opens its own session so concurrent sends share nothing
    but the read-only trust configuration. No retries are attempted.
    """

    def __init__(
        self,
        trust: TrustConfig,
        gateway_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session_factory: Optional[Callable[[], requests.Session]] = None,
    ):
        """
        Initialize the transport.

        Args:
            trust: TLS trust configuration for the gateway
            gateway_url: Endpoint to post to (defaults to the active config)
            timeout: Request timeout in seconds (defaults to the active config)
            session_factory: Override for session creation
        """
        self._logger = logging.getLogger(__name__)
        self._trust = trust
        config = get_config()
        self._gateway_url = gateway_url or config.GATEWAY_URL
        self._timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self._session_factory = session_factory or self._create_session

    @property
    def gateway_url(self) -> str:
        return self._gateway_url

    def _create_session(self) -> requests.Session:
        """Create a requests session bound to the gateway trust anchor."""
        session = requests.Session()
        # Environment CA bundles must never reach the shared SSL context
        session.trust_env = False
        session.mount("https://", TrustAnchorAdapter(self._trust))
        return session

    def deliver(self, request: SmsRequest) -> SendResult:
        """
        Post one SMS to the gateway.

        Args:
            request: SMS snapshot to send

        Returns:
            SendResult with the response text, or with a TransportError if the
            gateway could not be reached
        """
        headers = {"Content-Type": FORM_CONTENT_TYPE}
        recipient_count = len(request.recipients)
        self._logger.info(
            f"Sending SMS to {recipient_count} recipient(s)"
            f"{' as flash' if request.flash else ''}"
            f"{' (postponed)' if request.postpone_at is not None else ''}"
        )

        start_time = time.time()
        try:
            with self._session_factory() as session:
                response = session.post(
                    self._gateway_url,
                    data=request.to_form_fields(),
                    headers=headers,
                    timeout=self._timeout,
                )
                text = self._read_body(response)
        except requests.exceptions.SSLError as e:
            return self._fail("TLS handshake with gateway failed", e, "tls", start_time)
        except requests.Timeout as e:
            return self._fail("Request timeout", e, "timeout", start_time)
        except requests.ConnectionError as e:
            return self._fail("Could not connect to gateway", e, "connect", start_time)
        except requests.RequestException as e:
            return self._fail("Request failed", e, "request", start_time)

        duration = time.time() - start_time
        if response.status_code >= 400:
            self._log_error(response, text)
            track_send("http_error", duration)
        else:
            self._logger.info(f"Gateway responded: {text}")
            track_send("success", duration)
        return SendResult.success(text, status_code=response.status_code)

    @staticmethod
    def _read_body(response: requests.Response) -> str:
        """Read the body as UTF-8 text with line breaks removed."""
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        return "".join(response.text.splitlines())

    def _fail(self, message: str, error: requests.RequestException, phase: str, start_time: float) -> SendResult:
        self._logger.error(f"{message}: {error}")
        track_send("transport_error", time.time() - start_time)
        return SendResult.failure(TransportError(f"{message}: {error}", cause=error, phase=phase))

    def _log_error(self, response: requests.Response, text: str) -> None:
        """Log error response details."""
        self._logger.warning(f"HTTP {response.status_code} error from gateway: {text[:500]}")
