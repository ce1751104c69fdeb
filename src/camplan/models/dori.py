"""
DORI Models
===========

Data models for the DORI standard (IEC/EN 62676-4).

DORI classifies how useful a camera image is by the pixel density on a
human target:

    Level            PPM (pixels per meter)
    Identification   250
    Recognition      125
    Observation       63
    Detection         25

The tighter the level, the more pixels it needs, so the maximum distance
at which it is achieved is shorter.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from pydantic import BaseModel, Field


class DORILevel(str, Enum):
    """
    DORI levels, ordered from most to least specific.

    Iteration order matters: band lookups walk the levels in this order.
    """

    IDENTIFICATION = "identification"
    RECOGNITION = "recognition"
    OBSERVATION = "observation"
    DETECTION = "detection"


@dataclass(frozen=True, slots=True)
class DORIStandard:
    """
    Fixed requirement and display attributes of one DORI level.

    Attributes:
        ppm: Required pixels per meter of target height
        label: Display label
        color: Display color (hex)
    """

    ppm: float
    label: str
    color: str


@dataclass(frozen=True, slots=True)
class SensorDimensions:
    """Active sensor area in millimeters."""

    width_mm: float
    height_mm: float


class DORIResult(BaseModel):
    """
    Maximum distance (meters) at which each DORI level is met.

    Distances grow from identification to detection for any valid optics.
    """

    identification: float = Field(..., ge=0.0, description="Identification distance (m)")
    recognition: float = Field(..., ge=0.0, description="Recognition distance (m)")
    observation: float = Field(..., ge=0.0, description="Observation distance (m)")
    detection: float = Field(..., ge=0.0, description="Detection distance (m)")

    def distance_for(self, level: DORILevel) -> float:
        """Return the threshold distance of ``level``."""
        return getattr(self, level.value)

    def to_dict(self) -> Dict[str, float]:
        """Export as {level: distance} for logging/serialization."""
        return {level.value: self.distance_for(level) for level in DORILevel}


class DORIZone(BaseModel):
    """One DORI band for visualization: level, reach and required density."""

    level: DORILevel = Field(..., description="DORI level")
    distance: float = Field(..., ge=0.0, description="Maximum distance (m)")
    ppm: float = Field(..., gt=0.0, description="Required pixels per meter")
