"""Plan configuration: defaults from constants, JSON overrides, validation."""
import json
import math
from typing import NamedTuple

from pagegeom.geometry import InvalidDimension, Length
from pagegeom.page import PageFormat, CenteringPolicy
from floorplan.constants import (
    PLAN_WIDTH, PLAN_HEIGHT,
    DOOR_SIZE, BATHROOM_DOOR_SIZE, BEDROOM_DOOR,
    BATHROOM_WIDTH, BATHROOM_HEIGHT,
    WASH_BASIN_WIDTH, WASH_BASIN_HEIGHT,
    ICON_WIDTH, ICON_HEIGHT, ICON_OFFSET_X, ICON_OFFSET_Y, ICON_NATIVE_SIZE,
)


class PlanConfig(NamedTuple):
    """Every input of a render pass. Lengths in metres."""
    plan_width: float = PLAN_WIDTH
    plan_height: float = PLAN_HEIGHT
    door_size: float = DOOR_SIZE
    bathroom_width: float = BATHROOM_WIDTH
    bathroom_height: float = BATHROOM_HEIGHT
    bathroom_door_size: float = BATHROOM_DOOR_SIZE
    wash_basin_width: float = WASH_BASIN_WIDTH
    wash_basin_height: float = WASH_BASIN_HEIGHT
    icon_width: float = ICON_WIDTH
    icon_height: float = ICON_HEIGHT
    icon_offset_x: float = ICON_OFFSET_X
    icon_offset_y: float = ICON_OFFSET_Y
    icon_native_size: float = ICON_NATIVE_SIZE  # px, not metres
    page: PageFormat = PageFormat.A4
    centering: CenteringPolicy = CenteringPolicy.FULL_CENTER
    bathroom_swap_axes: bool = True
    bedroom_door: bool = BEDROOM_DOOR


DEFAULT_CONFIG = PlanConfig()

# Fields that must be strictly positive; offsets may be any finite value.
_POSITIVE = (
    "plan_width", "plan_height", "door_size",
    "bathroom_width", "bathroom_height", "bathroom_door_size",
    "wash_basin_width", "wash_basin_height",
    "icon_width", "icon_height", "icon_native_size",
)
_FINITE = ("icon_offset_x", "icon_offset_y")
_FLAGS = ("bathroom_swap_axes", "bedroom_door")
# Metre fields; JSON may give these as {"value": ..., "unit": ...}
_LENGTHS = tuple(n for n in _POSITIVE + _FINITE if n != "icon_native_size")


def _is_number(v) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def validate_config(cfg: PlanConfig) -> PlanConfig:
    """Raise InvalidDimension (lengths) or ValueError (other fields) naming the first bad field."""
    for name in _POSITIVE:
        v = getattr(cfg, name)
        if not _is_number(v) or not math.isfinite(v) or v <= 0:
            raise InvalidDimension(f"config: {name} must be a positive number, got {v!r}")
    for name in _FINITE:
        v = getattr(cfg, name)
        if not _is_number(v) or not math.isfinite(v):
            raise InvalidDimension(f"config: {name} must be a finite number, got {v!r}")
    if not isinstance(cfg.page, PageFormat):
        raise ValueError(f"config: page must be a PageFormat, got {cfg.page!r}")
    if not isinstance(cfg.centering, CenteringPolicy):
        raise ValueError(f"config: centering must be a CenteringPolicy, got {cfg.centering!r}")
    for name in _FLAGS:
        v = getattr(cfg, name)
        if not isinstance(v, bool):
            raise ValueError(f"config: {name} must be true or false, got {v!r}")
    return cfg


def _length_from_json(name: str, v):
    """Bare numbers are metres; {"value": 20, "unit": "ft"} is converted."""
    if not isinstance(v, dict):
        return v
    if set(v) - {"value", "unit"} or not _is_number(v.get("value")) \
            or not isinstance(v.get("unit", "m"), str):
        raise ValueError(f"config: {name} must be a number or a {{value, unit}} object, got {v!r}")
    return Length(v["value"], v.get("unit", "m")).to_meters()


def config_from_dict(d: dict, base: PlanConfig = DEFAULT_CONFIG) -> PlanConfig:
    """Override *base* with the keys of *d* and validate the result.

    page/centering are given by name, lengths in metres or unit-tagged.
    """
    unknown = set(d) - set(PlanConfig._fields)
    if unknown:
        raise ValueError(f"config: unknown key(s) {', '.join(sorted(unknown))}")
    kw = dict(d)
    if isinstance(kw.get("page"), str):
        kw["page"] = PageFormat.from_name(kw["page"])
    if isinstance(kw.get("centering"), str):
        kw["centering"] = CenteringPolicy(kw["centering"])
    for name in _LENGTHS:
        if name in kw:
            kw[name] = _length_from_json(name, kw[name])
    return validate_config(base._replace(**kw))


def load_config(path: str, base: PlanConfig = DEFAULT_CONFIG) -> PlanConfig:
    """Read a JSON object of overrides from *path*."""
    with open(path) as f:
        d = json.load(f)
    if not isinstance(d, dict):
        raise ValueError(f"config: {path} must contain a JSON object")
    return config_from_dict(d, base)
