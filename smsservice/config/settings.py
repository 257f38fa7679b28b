"""Library configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv


DEFAULT_GATEWAY_URL = "https://helix.stormhub.org/smsservice/sendsms.php"


class Config:
    """Base configuration class for the SMS gateway client."""

    # Load environment variables
    load_dotenv()

    # Gateway
    GATEWAY_URL: str = os.getenv("SMSSERVICE_GATEWAY_URL", DEFAULT_GATEWAY_URL)
    REQUEST_TIMEOUT: float = float(os.getenv("SMSSERVICE_TIMEOUT", "30"))

    # TLS trust anchor (None means the certificate packaged with the library)
    CA_BUNDLE: Optional[str] = os.getenv("SMSSERVICE_CA_BUNDLE") or None

    # Message formatting
    POSTPONE_UTC_OFFSET_HOURS: int = 2  # gateway clock
    MAX_MESSAGE_LENGTH: int = 500  # advisory, not enforced

    # Monitoring
    ENABLE_METRICS: bool = os.getenv("SMSSERVICE_ENABLE_METRICS", "true").lower() == "true"

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration values."""
        if not cls.GATEWAY_URL:
            raise ValueError("Missing required environment variable: SMSSERVICE_GATEWAY_URL")
        if not cls.GATEWAY_URL.startswith("https://"):
            raise ValueError(f"Gateway URL must use https: {cls.GATEWAY_URL}")
        if cls.REQUEST_TIMEOUT <= 0:
            raise ValueError(f"SMSSERVICE_TIMEOUT must be positive, got {cls.REQUEST_TIMEOUT}")


class DevelopmentConfig(Config):
    """Development configuration."""
    ENABLE_METRICS = False
    REQUEST_TIMEOUT = 60.0


class ProductionConfig(Config):
    """Production configuration."""


class TestingConfig(Config):
    """Testing configuration."""
    ENABLE_METRICS = False
    REQUEST_TIMEOUT = 5.0


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("SMSSERVICE_ENV", "production").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, ProductionConfig)
