"""
API Response Models.

Pydantic models for serializing fixed offset descriptions.
"""

from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, Field


class FixedOffsetResponse(BaseModel):
    """Description of a single fixed offset timezone."""
    offset_seconds: int = Field(..., description="Seconds east of UTC (negative = west)")
    name: str = Field(..., description="Canonical display name, e.g. UTC+05:30")
    utcoffset: timedelta
    dst: Optional[timedelta] = None  # Fixed offsets never carry DST

    class Config:
        json_schema_extra = {
            "example": {
                "offset_seconds": 19800,
                "name": "UTC+05:30",
                "utcoffset": "PT5H30M",
                "dst": None
            }
        }
