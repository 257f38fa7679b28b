"""Formatting of postponed delivery times for the gateway."""
from datetime import datetime, timedelta, timezone

from smsservice.config.settings import get_config


POSTPONE_FORMAT = "%H:%M %m%d%y"


def gateway_timezone() -> timezone:
    """Fixed offset zone the gateway schedules messages in."""
    return timezone(timedelta(hours=get_config().POSTPONE_UTC_OFFSET_HOURS))


def format_postpone(timestamp: datetime) -> str:
    """
    Format a delivery time as ``HH:mm MMddyy`` on the gateway clock.

    Args:
        timestamp: Point in time; naive values are interpreted as local time

    Returns:
        Formatted time, e.g. "14:05 061524"
    """
    return timestamp.astimezone(gateway_timezone()).strftime(POSTPONE_FORMAT)
