import ssl
import threading
import time

import pytest

from smsservice.config.settings import Config
from smsservice.domain.errors import TrustSetupError
from smsservice.infrastructure.security.trust_store import TrustConfig, TrustStoreFactory


def test_bundled_certificate_is_sole_anchor():
    trust = TrustStoreFactory.load()
    assert trust.ca_path.endswith("ca-bundle.crt")
    assert trust.ssl_context.verify_mode == ssl.CERT_REQUIRED
    assert trust.ssl_context.check_hostname
    assert trust.ssl_context.cert_store_stats()["x509_ca"] == 1


def test_config_override_path_is_used(monkeypatch, tmp_path):
    copy = tmp_path / "gateway-ca.crt"
    copy.write_text(open(TrustStoreFactory.default_ca_path()).read())
    monkeypatch.setattr(Config, "CA_BUNDLE", str(copy))
    assert TrustStoreFactory.load().ca_path == str(copy)


def test_missing_certificate_raises(tmp_path):
    path = str(tmp_path / "nope.crt")
    with pytest.raises(TrustSetupError) as excinfo:
        TrustStoreFactory.load(path)
    assert excinfo.value.ca_path == path
    assert isinstance(excinfo.value.cause, OSError)


@pytest.mark.parametrize(
    "content",
    [
        "",
        "not a certificate",
        "-----BEGIN CERTIFICATE-----\nnot base64 !!\n-----END CERTIFICATE-----\n",
    ],
)
def test_corrupt_certificate_raises(tmp_path, content):
    path = tmp_path / "corrupt.crt"
    path.write_text(content)
    with pytest.raises(TrustSetupError):
        TrustStoreFactory.load(str(path))


def test_get_config_is_cached():
    assert TrustStoreFactory.get_config() is TrustStoreFactory.get_config()


def test_concurrent_first_use_builds_once(monkeypatch):
    calls = []
    trust = TrustConfig(ca_path="fake", ssl_context=ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT))

    def slow_load(*args, **kwargs):
        calls.append(1)
        time.sleep(0.05)
        return trust

    monkeypatch.setattr(TrustStoreFactory, "load", slow_load)
    results = []
    threads = [threading.Thread(target=lambda: results.append(TrustStoreFactory.get_config())) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(calls) == 1
    assert all(result is trust for result in results)


def test_failure_is_not_cached(monkeypatch, tmp_path):
    monkeypatch.setattr(Config, "CA_BUNDLE", str(tmp_path / "missing.crt"))
    with pytest.raises(TrustSetupError):
        TrustStoreFactory.get_config()

    monkeypatch.setattr(Config, "CA_BUNDLE", None)
    assert TrustStoreFactory.get_config().ca_path.endswith("ca-bundle.crt")
