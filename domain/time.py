"""
Domain time utilities (pure).

Centralized timestamp checks used wherever a timestamp's offset is read.

Behavior and error messages must remain consistent across the domain model.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import cast


def require_timezone_aware(name: str, value: datetime) -> None:
    """
    Enforces that a timestamp carries a usable timezone.

    Invariants:
    - Timestamps must have a tzinfo.
    - The tzinfo must report a UTC offset for this timestamp.
    """

    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware")


def utc_offset_seconds(name: str, value: datetime) -> int:
    """
    Return the UTC offset of an aware timestamp as whole seconds.

    Sub-second offsets cannot be represented by a fixed offset timezone and are
    rejected.
    """

    require_timezone_aware(name, value)
    offset = cast(timedelta, value.utcoffset())

    if offset.microseconds:
        raise ValueError(f"{name} has a sub-second UTC offset ({offset})")
    return int(offset // timedelta(seconds=1))
