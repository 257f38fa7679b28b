"""Immutable snapshot of an SMS ready to be posted."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from smsservice.utils.postpone_formatter import format_postpone


FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=UTF-8"


@dataclass(frozen=True)
class SmsRequest:
    """Domain entity representing one gateway request."""

    message: str
    recipients: Tuple[str, ...]
    key_name: str
    key_value: str = field(repr=False)
    flash: bool = False
    postpone_at: Optional[datetime] = None

    @property
    def extension(self) -> str:
        """Recipients joined by commas; empty string when there are none."""
        return ",".join(self.recipients)

    def to_form_fields(self) -> List[Tuple[str, str]]:
        """
        Serialize the request into ordered form fields.

        Returns:
            List of (name, value) pairs in the order the gateway expects:
            message, extension, key_name, key_value, then the optional
            flash and postpone fields.
        """
        fields = [
            ("message", self.message),
            ("extension", self.extension),
            ("key_name", self.key_name),
            ("key_value", self.key_value),
        ]
        if self.flash:
            fields.append(("flash", ""))
        if self.postpone_at is not None:
            fields.append(("postpone", format_postpone(self.postpone_at)))
        return fields
