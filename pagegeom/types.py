"""Shared type definitions for the floorplan page renderer."""
import math
from typing import NamedTuple

Point = tuple[float, float]

class PlanBounds(NamedTuple):
    """Total plan size in points (unscaled)."""
    width: float; height: float

class Zone(NamedTuple):
    """Named rectangle; (x, y) is the bottom-left corner."""
    name: str
    x: float; y: float
    width: float; height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

class DoorOpening(NamedTuple):
    """Wall gap marker drawn from start to end."""
    name: str
    zone: str
    start: Point; end: Point

    @property
    def length(self) -> float:
        return math.hypot(self.end[0]-self.start[0], self.end[1]-self.start[1])

# ============================================================
# Drawing primitives (absolute page points)
# ============================================================
class Rect(NamedTuple):
    x: float; y: float
    width: float; height: float

class Line(NamedTuple):
    x1: float; y1: float
    x2: float; y2: float
    color: str; width: float

class AssetTransform(NamedTuple):
    scale_x: float; scale_y: float
    translate_x: float; translate_y: float

class AssetOverlay(NamedTuple):
    data: bytes
    transform: AssetTransform

Primitive = Rect | Line | AssetOverlay
