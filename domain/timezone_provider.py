"""
Domain: Timezone capability protocol.

Calendar and timestamp code that only needs to query a timezone should depend
on this protocol rather than on a concrete class. `FixedOffset` satisfies it,
as does any `datetime.tzinfo` that supports persistence via `__getinitargs__`.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class TimezoneProvider(Protocol):
    """
    The operations a timestamp needs from the timezone attached to it.

    - utcoffset: offset from UTC at the given instant.
    - dst: daylight-saving adjustment at the given instant (None if unknown/none).
    - tzname: display name at the given instant.
    - __getinitargs__: reduced form used to rebuild an equivalent instance.
    """

    def utcoffset(self, dt: Optional[datetime]) -> Optional[timedelta]: ...

    def dst(self, dt: Optional[datetime]) -> Optional[timedelta]: ...

    def tzname(self, dt: Optional[datetime]) -> Optional[str]: ...

    def __getinitargs__(self) -> Tuple[int]: ...
