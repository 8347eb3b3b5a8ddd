"""SVG icon metadata: viewBox, approximate content bounds, render scale.

Content bounds are an approximation. Command letters are stripped from
each path's ``d`` attribute and the remaining tokens are read as (x, y)
pairs, so curve extrema and relative commands are not honoured, and
compact syntax without separators ("10-5", ".5.5") does not tokenise.
Pairs that do not parse are skipped.
"""
import logging
import math
import re
import xml.etree.ElementTree as ET
from typing import NamedTuple, Optional

import numpy as np

from .geometry import InvalidDimension

logger = logging.getLogger(__name__)


class MalformedAssetDescriptor(ValueError):
    """Missing or malformed viewBox, or bytes that are not SVG/XML."""


class IconAsset(NamedTuple):
    min_x: float; min_y: float
    view_box_width: float; view_box_height: float
    content_width: float; content_height: float
    preserve_aspect_ratio: Optional[str]
    data: bytes


_CMD_RE = re.compile(r"[A-Za-z]")
_SEP_RE = re.compile(r"[\s,]+")


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def parse_view_box(attr: Optional[str]) -> tuple[float, float, float, float]:
    """Parse "minX minY width height" (whitespace separated)."""
    if not attr or not attr.strip():
        raise MalformedAssetDescriptor("SVG has no viewBox attribute")
    tokens = attr.split()
    if len(tokens) != 4:
        raise MalformedAssetDescriptor(f"Invalid viewBox: {attr!r} (expected 4 numbers, got {len(tokens)})")
    try:
        vals = tuple(float(t) for t in tokens)
    except ValueError:
        raise MalformedAssetDescriptor(f"Invalid viewBox: {attr!r}") from None
    if not all(math.isfinite(v) for v in vals):
        raise MalformedAssetDescriptor(f"Invalid viewBox: {attr!r}")
    return vals


def path_points(d: str) -> list[tuple[float, float]]:
    """Coordinate pairs from one path's data, skipping unparsable pairs."""
    body = _CMD_RE.sub(" ", d).strip()
    if not body:
        return []
    tokens = _SEP_RE.split(body)
    pts = []
    for i in range(0, len(tokens) - 1, 2):
        try:
            pts.append((float(tokens[i]), float(tokens[i + 1])))
        except ValueError:
            continue
    return pts


def extract_metadata(data: bytes) -> IconAsset:
    """Read viewBox, preserveAspectRatio and approximate content size."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise MalformedAssetDescriptor(f"Failed to parse SVG: {exc}") from exc
    min_x, min_y, vb_w, vb_h = parse_view_box(root.get("viewBox"))
    aspect = root.get("preserveAspectRatio")

    paths = [el for el in root.iter() if _local(el.tag) == "path"]
    pairs = []
    for el in paths:
        pairs.extend(path_points(el.get("d") or ""))

    if pairs:
        arr = np.array(pairs)
        lo = arr.min(axis=0); hi = arr.max(axis=0)
        cw, ch = float(hi[0] - lo[0]), float(hi[1] - lo[1])
    else:
        if paths:
            logger.warning("no coordinate pairs in %d path(s); content bounds fall back to viewBox", len(paths))
        cw, ch = vb_w, vb_h

    return IconAsset(min_x, min_y, vb_w, vb_h, cw, ch, aspect, bytes(data))


def render_scale(allotted: float, native_size: float) -> float:
    """Scale that draws an asset of native_size units into *allotted* points."""
    if not (math.isfinite(native_size) and native_size > 0):
        raise InvalidDimension(f"render_scale: native size must be > 0, got {native_size!r}")
    return allotted / native_size
