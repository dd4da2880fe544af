"""
Domain: Fixed offset timezone.

A `FixedOffset` is a `datetime.tzinfo` whose distance from UTC is a constant
number of whole seconds. It is attached to timestamps produced by a parser and
never consults a timezone database.

Contract:
- offset is seconds east of UTC (negative = west).
- offset must lie in the open range (-86400, 86400).
- Instances are immutable; equal offsets are interchangeable.
- dst() is always None. There is no daylight-saving awareness.
- tzname() is "UTC" for a zero offset, otherwise "UTC+HH:MM" / "UTC-HH:MM".
- The persisted form is exactly the constructor argument: (offset,).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Optional, Tuple, Type, TypeVar

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR

_T = TypeVar("_T", bound="FixedOffset")


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful offset
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, not {type(value).__name__}")


class InvalidOffset(ValueError):
    """Raised when an offset (or one of its components) is out of range."""


@dataclass(frozen=True, slots=True, repr=False)
class FixedOffset(tzinfo):
    """
    TZInfo with fixed offset.

    Validation happens here and only here. Once an instance exists the range
    invariant holds for its whole lifetime, so consumers never re-check it.
    """

    offset: int

    def __post_init__(self) -> None:
        _require_int("offset", self.offset)
        if abs(self.offset) >= SECONDS_PER_DAY:
            raise InvalidOffset(
                "offset must be an integer in the range (-86400, 86400), exclusive"
            )

    @classmethod
    def from_components(
        cls: Type[_T],
        sign: str,
        hours: int,
        minutes: int = 0,
        seconds: int = 0,
    ) -> _T:
        """
        Build an instance from the parts of an offset designator such as "+05:30".

        Each component must be an integer and is range checked, so the combined
        total always satisfies the offset invariant and the unchecked constructor
        is safe to use.
        """

        if sign not in ("+", "-"):
            raise InvalidOffset(f"sign must be '+' or '-', got {sign!r}")
        for name, value in (("hours", hours), ("minutes", minutes), ("seconds", seconds)):
            _require_int(name, value)
        if not 0 <= hours <= 23:
            raise InvalidOffset("hours must be in the range [0, 23]")
        if not 0 <= minutes <= 59:
            raise InvalidOffset("minutes must be in the range [0, 59]")
        if not 0 <= seconds <= 59:
            raise InvalidOffset("seconds must be in the range [0, 59]")

        total = hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
        return _new_unchecked(-total if sign == "-" else total, cls)

    @property
    def offset_seconds(self) -> int:
        return self.offset

    def utcoffset(self, dt: Optional[datetime]) -> timedelta:
        return timedelta(seconds=self.offset)

    def dst(self, dt: Optional[datetime]) -> None:
        return None

    def tzname(self, dt: Optional[datetime]) -> str:
        offset = self.offset
        if offset == 0:
            return "UTC"

        sign = "+"
        if offset < 0:
            sign = "-"
            offset = -offset
        return "UTC%s%02d:%02d" % (
            sign,
            offset // SECONDS_PER_HOUR,
            offset // SECONDS_PER_MINUTE % 60,
        )

    def fromutc(self, dt: datetime) -> datetime:
        # tzinfo.fromutc() rejects a None dst(); the shift is constant anyway.
        if not isinstance(dt, datetime):
            raise TypeError("fromutc() argument must be a datetime instance")
        if dt.tzinfo is not self:
            raise ValueError("fromutc: dt.tzinfo is not self")
        return dt + timedelta(seconds=self.offset)

    def __getinitargs__(self) -> Tuple[int]:
        return (self.offset,)

    def __reduce__(self) -> Tuple[type, Tuple[int]]:
        return (type(self), self.__getinitargs__())

    def __repr__(self) -> str:
        return self.tzname(None)

    __str__ = __repr__


def _new_unchecked(offset: int, cls: Type[_T] = FixedOffset) -> _T:  # type: ignore[assignment]
    """
    Create an instance WITHOUT validating `offset`.

    Callers must guarantee -86400 < offset < 86400. Never pass untrusted input.
    """

    self = cls.__new__(cls)
    object.__setattr__(self, "offset", offset)
    return self


UTC = _new_unchecked(0)

__all__ = [
    "FixedOffset",
    "InvalidOffset",
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "UTC",
]
