"""Generate a single-page floorplan PDF: boundary, zones, doors and an icon.

Geometry is computed in plan-space points and mapped onto the page through
the Cartesian page frame. All primitives are built before any of them is
handed to the document, so a failed render draws nothing.
"""
import argparse
import logging
import math
import sys

from pagegeom.types import Rect, Line, AssetOverlay, AssetTransform
from pagegeom.geometry import to_points, compute_scale
from pagegeom.page import (
    PageFormat, CenteringPolicy,
    make_page_frame, make_page_transform, make_cartesian_transform,
)
from pagegeom.svg import IconAsset, extract_metadata, render_scale
from floorplan.config import PlanConfig, DEFAULT_CONFIG, load_config, validate_config
from floorplan.layout import compute_layout
from floorplan.constants import DOOR_COLOR, DOOR_LINE_WIDTH
from floorplan.document import DocumentWriteFailure, PdfDocument, RecordingDocument
from floorplan.fetch import AssetFetchFailure, fetch_asset

logger = logging.getLogger(__name__)

# ============================================================
# Geometry computation
# ============================================================

def _signed_points(meters: float) -> float:
    return math.copysign(to_points(abs(meters)), meters)


def icon_transform(icon: IconAsset, cfg: PlanConfig, scale: float, from_cartesian) -> AssetTransform:
    """Scale and translation placing *icon* centred on the configured offset."""
    foot_w = to_points(cfg.icon_width) * scale
    foot_h = to_points(cfg.icon_height) * scale
    s = render_scale(foot_w, cfg.icon_native_size)
    off_x = _signed_points(cfg.icon_offset_x) * scale
    off_y = _signed_points(cfg.icon_offset_y) * scale
    cx, cy = from_cartesian(off_x, off_y)
    return AssetTransform(s, s, cx - foot_w / 2, cy - foot_h / 2)


def build_floorplan_data(cfg: PlanConfig = DEFAULT_CONFIG, icon: IconAsset = None) -> dict:
    """Compute all geometry needed for the floorplan page."""
    layout = compute_layout(cfg)
    page = cfg.page
    scale = compute_scale(layout.plan.width, layout.plan.height, page.width, page.height)
    frame = make_page_frame(page, scale, layout.plan.width, layout.plan.height, cfg.centering)
    to_page = make_page_transform(frame)
    from_cartesian = make_cartesian_transform(frame)
    logger.debug("scale=%.6f frame=%s", scale, frame)

    icon_xf = icon_transform(icon, cfg, scale, from_cartesian) if icon is not None else None

    return {
        "config": cfg, "page": page,
        "plan": layout.plan, "zones": layout.zones, "doors": layout.doors,
        "scale": scale, "frame": frame,
        "to_page": to_page, "from_cartesian": from_cartesian,
        "icon": icon, "icon_transform": icon_xf,
    }

# ============================================================
# Primitives
# ============================================================

def page_rect(x, y, w, h, to_page, scale) -> Rect:
    """Plan-space rectangle -> absolute page Rect."""
    px, py = to_page(x, y)
    return Rect(px, py, w * scale, h * scale)


def floorplan_primitives(data) -> list:
    """Primitives in stacking order: boundary, zones, doors, icon."""
    to_page = data["to_page"]
    scale = data["scale"]
    plan = data["plan"]

    out = [page_rect(0.0, 0.0, plan.width, plan.height, to_page, scale)]
    for z in data["zones"].values():
        out.append(page_rect(z.x, z.y, z.width, z.height, to_page, scale))
    for d in data["doors"]:
        x1, y1 = to_page(*d.start); x2, y2 = to_page(*d.end)
        out.append(Line(x1, y1, x2, y2, DOOR_COLOR, DOOR_LINE_WIDTH))
    if data["icon"] is not None:
        out.append(AssetOverlay(data["icon"].data, data["icon_transform"]))
    return out


def emit(primitives, doc):
    """Hand primitives to the document collaborator in order."""
    for p in primitives:
        if isinstance(p, Rect):
            doc.draw_rectangle(p.x, p.y, p.width, p.height)
        elif isinstance(p, Line):
            doc.draw_line(p.x1, p.y1, p.x2, p.y2, p.color, p.width)
        else:
            doc.draw_vector_asset(p.data, p.transform)


def render_floorplan(cfg: PlanConfig, doc, icon_bytes: bytes = None) -> list:
    """Build every primitive, then draw them on *doc*. Returns the primitives."""
    icon = extract_metadata(icon_bytes) if icon_bytes is not None else None
    prims = floorplan_primitives(build_floorplan_data(cfg, icon))
    emit(prims, doc)
    return prims

# ============================================================
# Main entry point
# ============================================================

def _parse_args(argv):
    p = argparse.ArgumentParser(description="Render the floorplan template to a one-page PDF.")
    p.add_argument("-o", "--output", default="floorplan.pdf", help="output PDF path")
    p.add_argument("--config", help="JSON file of PlanConfig overrides")
    p.add_argument("--width", type=float, help="plan width in metres")
    p.add_argument("--height", type=float, help="plan height in metres")
    p.add_argument("--page", help="page size: " + ", ".join(m.name for m in PageFormat))
    p.add_argument("--centering", choices=[c.value for c in CenteringPolicy])
    p.add_argument("--bedroom-door", action="store_true", help="add the kitchen/bedroom door")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--icon-url", help="fetch the icon SVG from this URL")
    src.add_argument("--icon-file", help="read the icon SVG from this file")
    p.add_argument("--timeout", type=float, default=None, help="icon fetch timeout (s)")
    p.add_argument("--dry-run", action="store_true", help="compute primitives without writing a PDF")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def _config_from_args(args) -> PlanConfig:
    cfg = load_config(args.config) if args.config else DEFAULT_CONFIG
    if args.width is not None:
        cfg = cfg._replace(plan_width=args.width)
    if args.height is not None:
        cfg = cfg._replace(plan_height=args.height)
    if args.page:
        cfg = cfg._replace(page=PageFormat.from_name(args.page))
    if args.centering:
        cfg = cfg._replace(centering=CenteringPolicy(args.centering))
    if args.bedroom_door:
        cfg = cfg._replace(bedroom_door=True)
    return validate_config(cfg)


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        cfg = _config_from_args(args)
        icon_bytes = None
        if args.icon_url:
            kw = {"timeout": args.timeout} if args.timeout is not None else {}
            icon_bytes = fetch_asset(args.icon_url, **kw)
        elif args.icon_file:
            with open(args.icon_file, "rb") as f:
                icon_bytes = f.read()

        if args.dry_run:
            doc = RecordingDocument(cfg.page)
        else:
            doc = PdfDocument(args.output, cfg.page)
        prims = render_floorplan(cfg, doc, icon_bytes)
        out = doc.finalize()
    # geometry, asset-descriptor and config errors are ValueErrors
    except (ValueError, OSError, AssetFetchFailure, DocumentWriteFailure) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    bnd = prims[0]
    print(f"Plan on page: {bnd.width:.1f} x {bnd.height:.1f} pt ({cfg.page.name}, {cfg.centering.value})")
    print(f"Primitives:   {len(prims)}")
    if out is not None:
        print(f"PDF created: {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
