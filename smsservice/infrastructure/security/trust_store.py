"""Private TLS trust anchor for the SMS gateway.

The gateway's chain is signed by an authority missing from common default
trust stores, so connections trust exactly one bundled CA certificate.
"""
import logging
import ssl
import threading
from dataclasses import dataclass
from importlib.resources import files
from typing import Optional

from smsservice.config.settings import get_config
from smsservice.domain.errors import TrustSetupError


logger = logging.getLogger(__name__)

BUNDLED_CA_RESOURCE = "ca-bundle.crt"


@dataclass(frozen=True)
class TrustConfig:
    """Immutable TLS client configuration shared by every SMS."""

    ca_path: str
    ssl_context: ssl.SSLContext


class TrustStoreFactory:
    """Builds the gateway trust configuration once per process."""

    _config: Optional[TrustConfig] = None
    _lock = threading.Lock()

    @staticmethod
    def default_ca_path() -> str:
        """Path of the certificate shipped inside the package."""
        return str(files("smsservice") / "resources" / BUNDLED_CA_RESOURCE)

    @classmethod
    def load(cls, ca_path: Optional[str] = None) -> TrustConfig:
        """
        Build a fresh trust configuration.

        Args:
            ca_path: PEM file with the CA certificate (defaults to the configured CA_BUNDLE,
                then the packaged certificate)

        Returns:
            TrustConfig whose SSL context trusts only that certificate

        Raises:
            TrustSetupError: If the certificate is missing, unreadable or corrupt
        """
        path = ca_path or get_config().CA_BUNDLE or cls.default_ca_path()

        try:
            with open(path, "r", encoding="ascii") as handle:
                pem = handle.read()
        except (OSError, ValueError) as e:
            raise TrustSetupError(f"Cannot read CA certificate {path}: {e}", ca_path=path, cause=e) from e

        # Empty store: no system defaults are loaded
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        try:
            context.load_verify_locations(cadata=pem)
        except (ssl.SSLError, ValueError) as e:
            raise TrustSetupError(f"Invalid CA certificate {path}: {e}", ca_path=path, cause=e) from e

        if context.cert_store_stats().get("x509_ca", 0) == 0:
            raise TrustSetupError(f"No CA certificate found in {path}", ca_path=path)

        logger.info(f"Loaded gateway trust anchor from {path}")
        return TrustConfig(ca_path=path, ssl_context=context)

    @classmethod
    def get_config(cls) -> TrustConfig:
        """
        Get the process-wide trust configuration (singleton pattern).

        Construction happens at most once even under concurrent first use.
        A failed attempt is not cached; the error propagates and the next
        call tries again.

        Raises:
            TrustSetupError: If the trust store cannot be built
        """
        if cls._config is None:
            with cls._lock:
                if cls._config is None:
                    try:
                        cls._config = cls.load()
                    except TrustSetupError as e:
                        logger.error(f"Gateway trust setup failed: {e}")
                        raise
        return cls._config

    @classmethod
    def reset(cls) -> None:
        """Drop the cached trust configuration."""
        with cls._lock:
            cls._config = None
