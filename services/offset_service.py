"""
Offset service: shared FixedOffset instances.

Parsers tend to produce the same handful of offsets over and over, so this
module hands out one canonical instance per offset value. Interning is purely
an allocation optimization: equal offsets already compare equal, and it can be
switched off with FIXED_OFFSET_INTERN=false.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Dict

from domain.fixed_offset import FixedOffset
from domain.time import utc_offset_seconds
from services.settings import get_settings

logger = logging.getLogger(__name__)

_cache: Dict[int, FixedOffset] = {}
_cache_lock = threading.Lock()


def get_fixed_offset(offset: int) -> FixedOffset:
    """
    Return the FixedOffset for `offset` seconds east of UTC.

    Construction always goes through the validating constructor, so invalid
    offsets raise InvalidOffset and are never cached.
    """

    if not get_settings().intern_offsets or type(offset) is not int:
        # The constructor rejects non-integers (bool included).
        return FixedOffset(offset)

    tz = _cache.get(offset)
    if tz is not None:
        return tz

    with _cache_lock:
        tz = _cache.get(offset)
        if tz is None:
            tz = FixedOffset(offset)
            _cache[offset] = tz
            logger.debug("Interned fixed offset %s (%d seconds)", tz, offset)
    return tz


def fixed_offset_for(value: datetime) -> FixedOffset:
    """
    Freeze the UTC offset an aware timestamp has at its own instant.

    The result no longer follows any DST rules of the timestamp's own tzinfo.
    """

    return get_fixed_offset(utc_offset_seconds("value", value))


def cache_size() -> int:
    with _cache_lock:
        return len(_cache)


def clear_cache() -> None:
    """Drop all interned instances."""

    with _cache_lock:
        _cache.clear()


__all__ = ["cache_size", "clear_cache", "fixed_offset_for", "get_fixed_offset"]
