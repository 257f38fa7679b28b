import threading

import pytest

from smsservice.config.settings import Config
from smsservice.domain.entities.send_result import SendResult
from smsservice.domain.interfaces.sms_transport import ISmsTransport
from smsservice.infrastructure.security.trust_store import TrustStoreFactory

TEST_PHONE = "+46700634607"
SPARE_PHONE = "+46700634608"


class FakeTransport(ISmsTransport):
    """Records every request and answers with a canned result."""

    def __init__(self, result=None, gate=None):
        self.requests = []
        self.result = result or SendResult.success("Message was sent.", status_code=200)
        self.gate = gate
        self.threads = []

    def deliver(self, request):
        self.threads.append(threading.current_thread())
        if self.gate is not None:
            self.gate.wait(timeout=5)
        self.requests.append(request)
        return self.result


@pytest.fixture(autouse=True)
def reset_trust_store(monkeypatch):
    monkeypatch.delenv("SMSSERVICE_ENV", raising=False)
    monkeypatch.setattr(Config, "ENABLE_METRICS", False)
    TrustStoreFactory.reset()
    yield
    TrustStoreFactory.reset()


@pytest.fixture
def transport():
    return FakeTransport()
