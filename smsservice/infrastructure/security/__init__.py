"""TLS trust configuration."""

from smsservice.infrastructure.security.trust_store import TrustConfig, TrustStoreFactory

__all__ = [
    "TrustConfig",
    "TrustStoreFactory",
]
