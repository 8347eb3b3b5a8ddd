"""Page sizes and the Cartesian page frame.

The page's native origin is its bottom-left corner. Drawing code works in
a frame whose origin is chosen by a centering policy; with FULL_CENTER the
origin is the page centre, +X right and +Y up, matching the UI that
supplies item positions.
"""
from enum import Enum
from typing import Callable, NamedTuple

from reportlab.lib import pagesizes

from .types import Point


class PageFormat(Enum):
    """Standard portrait page sizes in points."""
    A3 = pagesizes.A3
    A4 = pagesizes.A4
    A5 = pagesizes.A5
    LETTER = pagesizes.LETTER
    LEGAL = pagesizes.LEGAL

    @property
    def width(self) -> float:
        return self.value[0]

    @property
    def height(self) -> float:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> "PageFormat":
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"unknown page size {name!r}; expected one of "
                             f"{', '.join(m.name for m in cls)}") from None


class CenteringPolicy(Enum):
    FULL_CENTER = "full-center"
    BOX_CENTER = "box-center"


class PageFrame(NamedTuple):
    """Frame origin (absolute) plus the plan's bottom-left offset within it."""
    origin_x: float; origin_y: float
    offset_x: float; offset_y: float
    scale: float


def make_page_frame(page: PageFormat, scale: float, plan_w: float, plan_h: float,
                    policy: CenteringPolicy = CenteringPolicy.FULL_CENTER) -> PageFrame:
    """Frame for a plan of plan_w x plan_h points drawn at *scale*."""
    scaled_w = plan_w * scale
    scaled_h = plan_h * scale
    if policy is CenteringPolicy.FULL_CENTER:
        return PageFrame(page.width / 2, page.height / 2,
                         -(page.width / 2), -((page.height - scaled_h) / 2), scale)
    return PageFrame(0.0, 0.0,
                     (page.width - scaled_w) / 2, (page.height - scaled_h) / 2, scale)


def make_page_transform(frame: PageFrame) -> Callable[[float, float], Point]:
    """Create to_page closure: unscaled plan points -> absolute page points."""
    px = frame.origin_x + frame.offset_x
    py = frame.origin_y + frame.offset_y
    s = frame.scale
    def to_page(x: float, y: float) -> Point:
        return (px + x * s, py + y * s)
    return to_page


def make_cartesian_transform(frame: PageFrame) -> Callable[[float, float], Point]:
    """Create from_cartesian closure: frame coordinates -> absolute page points."""
    def from_cartesian(x: float, y: float) -> Point:
        return (frame.origin_x + x, frame.origin_y + y)
    return from_cartesian
