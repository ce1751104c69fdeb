"""
Coverage Models
===============

Result models for coverage analysis over a floor-plan canvas.

Statistics are derived fresh on every call by sampling a regular grid of
points; they carry no identity and are never persisted.

Output Contract (CoverageStats):
    {
        "total_coverage_percent": 62.4,
        "redundant_coverage_percent": 11.0,
        "blind_spot_count": 1805,
        "average_overlap": 1.2,
        "sample_count": 4800
    }

Note:
    ``redundant_coverage_percent`` is measured against ALL sample points,
    not against the covered ones.
"""

from typing import Tuple

from pydantic import BaseModel, Field


class CoverageStats(BaseModel):
    """
    Aggregate coverage of a set of cameras over a bounded canvas.

    Attributes:
        total_coverage_percent: Samples seen by at least one camera (%)
        redundant_coverage_percent: Samples seen by two or more cameras (%)
        blind_spot_count: Samples seen by no camera
        average_overlap: Mean camera count over covered samples
        sample_count: Number of grid samples evaluated
    """

    total_coverage_percent: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Percentage of samples covered by >= 1 camera",
    )

    redundant_coverage_percent: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="Percentage of samples covered by >= 2 cameras",
    )

    blind_spot_count: int = Field(
        ...,
        ge=0,
        description="Number of samples covered by no camera",
    )

    average_overlap: float = Field(
        ...,
        ge=0.0,
        description="Mean number of cameras over covered samples",
    )

    sample_count: int = Field(
        ...,
        ge=0,
        description="Total number of grid samples",
    )


class CoverageZone(BaseModel):
    """
    Range band of a camera wedge, ready for vector rendering.

    Attributes:
        color: Fill color (rgba)
        path: SVG path data of the annular sector
        range: (start, end) of the band in meters
    """

    color: str = Field(..., description="Fill color")
    path: str = Field(..., description="SVG path data")
    range: Tuple[float, float] = Field(..., description="Band start/end in meters")


class BlindSpot(BaseModel):
    """Uncovered grid cell: center position and cell area (pixels²)."""

    x: float = Field(..., description="Cell center X (pixels)")
    y: float = Field(..., description="Cell center Y (pixels)")
    area: float = Field(..., gt=0.0, description="Cell area in square pixels")
