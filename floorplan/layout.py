"""Zone layout: proportional partition of the plan rectangle.

All coordinates are plan-space points: origin at the plan's bottom-left
corner, unscaled. The page transform is applied at render time.
"""
import logging
from typing import NamedTuple, Optional

from pagegeom.types import PlanBounds, Zone, DoorOpening
from pagegeom.geometry import GeometryError, to_points, plan_bounds
from floorplan.config import PlanConfig, validate_config
from floorplan.openings import compute_doors

logger = logging.getLogger(__name__)


class ZoneRule(NamedTuple):
    """One zone of a partition template.

    anchor=None places the zone at the plan origin; otherwise the zone sits
    immediately right of the named (earlier) zone, sharing its bottom edge.
    """
    name: str
    width_frac: float
    height_frac: float
    anchor: Optional[str] = None


THREE_ZONE_TEMPLATE = (
    ZoneRule("hall", 1 / 3, 1.0),
    ZoneRule("kitchen", 1 / 3, 1.0, "hall"),
    ZoneRule("bedroom", 1 / 3, 0.5, "kitchen"),
)


class FloorplanLayout(NamedTuple):
    """Plan bounds, zones (in drawing order) and door openings."""
    plan: PlanBounds
    zones: dict[str, Zone]
    doors: list[DoorOpening]


def partition(width: float, height: float, rules) -> dict[str, Zone]:
    """Zones of width x height laid out by *rules*, in rule order."""
    zones: dict[str, Zone] = {}
    for r in rules:
        if r.anchor is None:
            x, y = 0.0, 0.0
        elif r.anchor in zones:
            a = zones[r.anchor]
            x, y = a.right, a.y
        else:
            raise GeometryError(f"partition: zone {r.name!r} anchored to unknown or later zone {r.anchor!r}")
        zones[r.name] = Zone(r.name, x, y, width * r.width_frac, height * r.height_frac)
    return zones


def bathroom_zones(kitchen: Zone, hall_height: float, cfg: PlanConfig) -> tuple[Zone, Zone]:
    """Wash-basin alcove and bathroom inside the kitchen footprint.

    The bathroom rectangle is drawn with its height as the width parameter
    and its width as the height parameter when cfg.bathroom_swap_axes is set.
    """
    alc_w = to_points(cfg.wash_basin_width)
    alc_h = to_points(cfg.wash_basin_height)
    bath_w = to_points(cfg.bathroom_width)
    bath_h = to_points(cfg.bathroom_height)

    alcove = Zone("alcove", kitchen.x, kitchen.y + hall_height - alc_h, alc_w, alc_h)

    bx = kitchen.x + alc_w
    by = kitchen.y + hall_height - bath_h - alc_h
    if cfg.bathroom_swap_axes:
        bathroom = Zone("bathroom", bx, by, bath_h, bath_w)
    else:
        bathroom = Zone("bathroom", bx, by, bath_w, bath_h)

    if bathroom.right > kitchen.right or bathroom.top > kitchen.top or bathroom.y < kitchen.y:
        logger.warning("bathroom %.1fx%.1f at (%.1f, %.1f) extends outside the kitchen",
                       bathroom.width, bathroom.height, bathroom.x, bathroom.y)
    return alcove, bathroom


def compute_layout(cfg: PlanConfig) -> FloorplanLayout:
    """Compute all zones and doors for the fixed three-zone template."""
    validate_config(cfg)
    plan = plan_bounds(cfg.plan_width, cfg.plan_height)
    zones = partition(plan.width, plan.height, THREE_ZONE_TEMPLATE)
    alcove, bathroom = bathroom_zones(zones["kitchen"], zones["hall"].height, cfg)
    zones["alcove"] = alcove
    zones["bathroom"] = bathroom
    for z in zones.values():
        logger.debug("zone %-8s x=%.2f y=%.2f w=%.2f h=%.2f", z.name, z.x, z.y, z.width, z.height)
    return FloorplanLayout(plan, zones, compute_doors(zones, cfg))
