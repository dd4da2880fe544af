"""Pure domain types for fixed offset timezones."""

from .fixed_offset import FixedOffset, InvalidOffset, UTC
from .timezone_provider import TimezoneProvider

__all__ = ["FixedOffset", "InvalidOffset", "TimezoneProvider", "UTC"]
