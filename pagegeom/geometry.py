"""Unit conversion, plan bounds and fit-to-page scaling."""
import math
from typing import NamedTuple

from reportlab.lib.units import inch

from .types import PlanBounds

# ============================================================
# Error Types
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

class InvalidDimension(GeometryError):
    """Non-positive, negative or non-finite length input."""

class InvalidScaleInput(GeometryError):
    """Degenerate page or plan size passed to the scale calculator."""

# ============================================================
# Unit Conversion
# ============================================================
INCHES_PER_METER = 39.3701
POINTS_PER_INCH = inch  # 72

# Everything except points goes through metres, so the metres->points
# factor below is the only conversion constant.
_METERS_PER_UNIT = {"m": 1.0, "ft": 0.3048, "in": 0.0254}

def to_points(meters: float) -> float:
    """Convert a length in metres to PDF points."""
    if not math.isfinite(meters) or meters < 0:
        raise InvalidDimension(f"to_points: length must be finite and >= 0, got {meters!r} m")
    return meters * INCHES_PER_METER * POINTS_PER_INCH

class Length(NamedTuple):
    """Real-world length tagged with a unit ("m", "ft", "in" or "pt")."""
    value: float
    unit: str = "m"

    def to_points(self) -> float:
        if self.unit == "pt":
            if not math.isfinite(self.value) or self.value < 0:
                raise InvalidDimension(f"to_points: length must be finite and >= 0, got {self.value!r} pt")
            return float(self.value)
        return to_points(self.to_meters())

    def to_meters(self) -> float:
        """Signed value in metres; range checks are left to the caller."""
        if self.unit == "pt":
            return self.value / (INCHES_PER_METER * POINTS_PER_INCH)
        try:
            factor = _METERS_PER_UNIT[self.unit]
        except KeyError:
            raise InvalidDimension(f"Length: unknown unit {self.unit!r}") from None
        return self.value * factor

def plan_bounds(width_m: float, height_m: float) -> PlanBounds:
    """Plan size in points; both sides must be strictly positive."""
    for label, v in (("width", width_m), ("height", height_m)):
        if not math.isfinite(v) or v <= 0:
            raise InvalidDimension(f"plan_bounds: plan {label} must be > 0, got {v!r} m")
    return PlanBounds(to_points(width_m), to_points(height_m))

# ============================================================
# Fit-to-Page Scale
# ============================================================
def compute_scale(plan_w: float, plan_h: float, page_w: float, page_h: float) -> float:
    """Uniform factor fitting plan_w x plan_h inside page_w x page_h.

    The binding axis fills the page; the other keeps a residual margin that
    the caller is expected to centre.
    """
    if not (page_w > 0 and page_h > 0):
        raise InvalidScaleInput(f"compute_scale: page must be positive, got {page_w!r} x {page_h!r}")
    w_ratio = plan_w / page_w
    h_ratio = plan_h / page_h
    if not (math.isfinite(w_ratio) and math.isfinite(h_ratio)):
        raise InvalidScaleInput(f"compute_scale: non-finite ratio for plan {plan_w!r} x {plan_h!r}")
    if w_ratio <= 0 or h_ratio <= 0:
        raise InvalidScaleInput(f"compute_scale: plan must be positive, got {plan_w!r} x {plan_h!r}")
    return 1.0 / max(w_ratio, h_ratio)
