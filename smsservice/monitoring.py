"""Send metrics using Prometheus."""
import logging

from prometheus_client import Counter, Histogram

from smsservice.config.settings import get_config

logger = logging.getLogger(__name__)

# Prometheus metrics
sms_send_requests_total = Counter(
    'sms_send_requests_total',
    'Total number of SMS gateway requests',
    ['status']
)

sms_send_duration = Histogram(
    'sms_send_duration_seconds',
    'Time spent waiting for the SMS gateway',
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0]
)


def track_send(status: str, duration: float) -> None:
    """
    Track one gateway request.

    Args:
        status: "success", "http_error" or "transport_error"
        duration: Round trip time in seconds
    """
    try:
        if get_config().ENABLE_METRICS:
            sms_send_requests_total.labels(status=status).inc()
            sms_send_duration.observe(duration)
    except ValueError as e:
        # Don't fail a send if metrics tracking fails
        logger.debug(f"Failed to track SMS send metrics: {e}")
