"""Door opening positions.

Each door is a fixed-length segment anchored to a zone corner or wall.
Its length is the configured door size; it never depends on the zone size.
"""
from pagegeom.types import Zone, DoorOpening
from pagegeom.geometry import to_points
from floorplan.config import PlanConfig
from floorplan.constants import DOOR_HEIGHT_FRACTION


def _horizontal(name: str, zone: Zone, x: float, y: float, length: float) -> DoorOpening:
    return DoorOpening(name, zone.name, (x, y), (x + length, y))


def _vertical(name: str, zone: Zone, x: float, y: float, length: float) -> DoorOpening:
    return DoorOpening(name, zone.name, (x, y), (x, y + length))


def compute_doors(zones: dict[str, Zone], cfg: PlanConfig) -> list[DoorOpening]:
    """Doors for the three-zone template, in drawing order.

    main:     hall top-left corner, running +X along the top wall
    hall:     hall/kitchen shared wall, 1/3 up the hall, running +Y
    bedroom:  kitchen/bedroom shared wall, 1/3 up the bedroom, running +Y
              (only with cfg.bedroom_door)
    bathroom: bathroom bottom-left corner, running +X
    """
    door = to_points(cfg.door_size)
    bath_door = to_points(cfg.bathroom_door_size)
    hall, bedroom, bathroom = zones["hall"], zones["bedroom"], zones["bathroom"]
    doors = [
        _horizontal("main", hall, hall.x, hall.top, door),
        _vertical("hall", hall, hall.right, hall.y + hall.height * DOOR_HEIGHT_FRACTION, door),
    ]
    if cfg.bedroom_door:
        doors.append(_vertical("bedroom", bedroom, bedroom.x,
                               bedroom.y + bedroom.height * DOOR_HEIGHT_FRACTION, door))
    doors.append(_horizontal("bathroom", bathroom, bathroom.x, bathroom.y, bath_door))
    return doors
