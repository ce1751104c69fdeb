"""
Geometry Models
===============

This module defines the 2D geometry of a site layout: points, polygons,
walls and pillars.

Design Philosophy:
    Walls and pillars are EXPLICITLY DECLARED obstacles drawn on the floor
    plan. They are loaded with the layout and never inferred from imagery.

Supported Geometries:
    - Point: 2D coordinate (x, y in canvas pixels)
    - Polygon: Closed region defined by vertices
    - Wall: Line segment ("wall") or axis-aligned rectangle ("pillar")

Example Wall Definitions:
    {"id": "w1", "type": "wall", "points": [100, 50, 400, 50]}
    {"id": "p1", "type": "pillar", "points": [200, 200, 30, 30]}

Note:
    All coordinates are in CANVAS SPACE (pixels, origin top-left, Y down).
    Physical lengths are derived with a pixels-per-meter scale factor.
"""

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator


class Point(BaseModel):
    """
    2D point in canvas coordinates.

    Coordinates are in pixels, with origin at top-left of the canvas.
    X increases rightward, Y increases downward.

    Attributes:
        x: Horizontal coordinate (pixels)
        y: Vertical coordinate (pixels)
    """

    x: float = Field(
        ...,
        description="Horizontal coordinate (pixels from left)",
    )

    y: float = Field(
        ...,
        description="Vertical coordinate (pixels from top)",
    )


class Polygon(BaseModel):
    """
    Closed polygon defined by a list of vertices.

    Vertices should be in order (clockwise or counter-clockwise).
    The polygon is implicitly closed (last vertex connects to first).

    Attributes:
        vertices: Ordered list of points defining the polygon boundary
    """

    vertices: List[Point] = Field(
        ...,
        min_length=3,
        description="Ordered vertices of the polygon (minimum 3)",
    )

    @field_validator("vertices")
    @classmethod
    def validate_polygon(cls, v: List[Point]) -> List[Point]:
        """Ensure polygon has at least 3 vertices."""
        if len(v) < 3:
            raise ValueError("Polygon must have at least 3 vertices")
        return v


class WallType(str, Enum):
    """
    Kinds of obstacle that can be drawn on a floor plan.

    Attributes:
        WALL: Line segment, points = [x1, y1, x2, y2]
        PILLAR: Rectangle, points = [x, y, width, height]
    """

    WALL = "wall"
    PILLAR = "pillar"


class Wall(BaseModel):
    """
    Obstacle blocking camera line of sight.

    Attributes:
        id: Identifier of the obstacle
        type: Wall segment or pillar rectangle
        points: Four numbers, interpreted according to ``type``
    """

    id: str = Field(default="", description="Obstacle identifier")

    type: WallType = Field(
        default=WallType.WALL,
        description="Obstacle kind: 'wall' or 'pillar'",
    )

    points: Tuple[float, float, float, float] = Field(
        ...,
        description="[x1, y1, x2, y2] for walls, [x, y, width, height] for pillars",
    )

    def edges(self) -> List[Tuple[float, float, float, float]]:
        """
        Return the blocking line segments of this obstacle.

        A wall is a single segment; a pillar contributes its four edges.
        """
        if self.type == WallType.WALL:
            return [self.points]

        px, py, width, height = self.points
        return [
            (px, py, px + width, py),
            (px + width, py, px + width, py + height),
            (px + width, py + height, px, py + height),
            (px, py + height, px, py),
        ]
