"""
Offsets API Endpoints.

Endpoints for describing fixed offset timezones.
"""

import logging

from fastapi import APIRouter, HTTPException, Query

from api.models import FixedOffsetResponse
from domain.fixed_offset import FixedOffset, InvalidOffset
from services.offset_service import get_fixed_offset

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(tz: FixedOffset) -> FixedOffsetResponse:
    return FixedOffsetResponse(
        offset_seconds=tz.offset,
        name=tz.tzname(None),
        utcoffset=tz.utcoffset(None),
        dst=tz.dst(None),
    )


@router.get(
    "/offsets",
    response_model=FixedOffsetResponse,
    summary="Describe Offset From Components",
    description="Build a fixed offset from a sign and hour/minute/second components."
)
def describe_offset_from_components(
    sign: str = Query(..., description="'+' (east of UTC) or '-' (west of UTC)"),
    hours: int = Query(..., description="Hours, 0-23"),
    minutes: int = Query(0, description="Minutes, 0-59"),
    seconds: int = Query(0, description="Seconds, 0-59"),
):
    """
    Describe the offset designated by its components.

    **Example:** `GET /api/v1/offsets?sign=%2B&hours=5&minutes=30` describes `UTC+05:30`.
    """
    try:
        tz = FixedOffset.from_components(sign, hours, minutes, seconds)
    except InvalidOffset as e:
        logger.warning(
            "Rejected offset components sign=%r hours=%d minutes=%d seconds=%d: %s",
            sign, hours, minutes, seconds, e,
        )
        raise HTTPException(status_code=400, detail=str(e))

    return _to_response(tz)


@router.get(
    "/offsets/{offset_seconds}",
    response_model=FixedOffsetResponse,
    summary="Describe Offset",
    description="Describe the fixed offset timezone for a number of seconds east of UTC."
)
def describe_offset(offset_seconds: int):
    """
    Describe a fixed offset given in seconds.

    Offsets must lie strictly between -86400 and 86400.
    """
    try:
        tz = get_fixed_offset(offset_seconds)
    except InvalidOffset as e:
        logger.warning("Rejected offset %d: %s", offset_seconds, e)
        raise HTTPException(status_code=400, detail=str(e))

    return _to_response(tz)
