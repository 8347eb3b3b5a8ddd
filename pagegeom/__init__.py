"""Shared types, unit conversion, page frame and SVG metadata utilities."""

from .types import (
    Point, PlanBounds, Zone, DoorOpening,
    Rect, Line, AssetTransform, AssetOverlay, Primitive,
)
from .geometry import (
    GeometryError, InvalidDimension, InvalidScaleInput,
    INCHES_PER_METER, POINTS_PER_INCH,
    Length, to_points, plan_bounds, compute_scale,
)
from .page import (
    PageFormat, CenteringPolicy, PageFrame,
    make_page_frame, make_page_transform, make_cartesian_transform,
)
from .svg import MalformedAssetDescriptor, IconAsset, extract_metadata, render_scale
