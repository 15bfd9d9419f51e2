"""Generate a floor plan SVG from a room scan (Room.json) and camera poses (exif.json).

Geometry comes from floorplan.scene; this module only draws it.
"""
import argparse
import datetime
import logging
import math
import os
from html import escape
from typing import NamedTuple

from roomgeom.types import Polygon, Segment, PoseMarker
from roomgeom.geometry import plan_bounds, poly_centroid
from roomgeom.svg import make_plan_transform, W, H
from floorplan.config import SceneConfig, DEFAULT_CONFIG
from floorplan.constants import (
    SVG_PAINT, STYLE_WALL, STYLE_POSE, MARKER_RADIUS, FT_PER_M,
)
from floorplan.scene import Scene, build_scene
from floorplan.scan_io import read_rooms, read_poses

logger = logging.getLogger(__name__)

# Bounds used when the scene has no primitives (meters)
_EMPTY_BOUNDS = (-5.0, -5.0, 5.0, 5.0)

# ============================================================
# SVG Helpers
# ============================================================

def poly_svg(out, points, style, to_svg):
    """Closed polygon in the paint of its style."""
    svg = " ".join(f"{x:.1f},{y:.1f}" for x, y in (to_svg(*p) for p in points))
    out.append(f'<polygon points="{svg}" {SVG_PAINT[style]}/>')

def line_svg(out, start, end, style, to_svg):
    x1, y1 = to_svg(*start); x2, y2 = to_svg(*end)
    out.append(f'<line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}" {SVG_PAINT[style]}/>')

def pose_svg(out, marker, to_svg):
    """Camera marker: filled circle plus facing line."""
    x, y = to_svg(*marker.position)
    out.append(f'<circle cx="{x:.1f}" cy="{y:.1f}" r="{MARKER_RADIUS}" {SVG_PAINT[STYLE_POSE]}>'
               f'<title>{escape(marker.photo_id)}</title></circle>')
    line_svg(out, marker.position, marker.facing_end, STYLE_POSE, to_svg)

def wall_length(points) -> float:
    """Longer edge of a footprint rectangle (the wall width)."""
    e1 = math.dist(points[0], points[1]); e2 = math.dist(points[1], points[2])
    return max(e1, e2)

def width_label(out, poly, to_svg):
    """Wall width in feet at the polygon center."""
    x, y = to_svg(*poly_centroid(poly.points))
    out.append(f'<text x="{x:.1f}" y="{y-4:.1f}" text-anchor="middle" font-family="Arial"'
               f' font-size="8" fill="#333">{wall_length(poly.points) * FT_PER_M:.1f}ft</text>')

# ============================================================
# Geometry computation
# ============================================================

class FloorplanData(NamedTuple):
    scene: Scene
    to_svg: object
    scale: float          # SVG points per meter
    bounds: tuple[float, float, float, float]


def primitive_points(prim):
    if isinstance(prim, Polygon):
        return list(prim.points)
    if isinstance(prim, Segment):
        return [prim.start, prim.end]
    return [prim.position, prim.facing_end]


def build_floorplan_data(rooms, poses=None, config: SceneConfig = DEFAULT_CONFIG) -> FloorplanData:
    """Build the scene and fit it onto a letter landscape page."""
    scene = build_scene(rooms, poses, config)
    pts = [p for prim in scene.primitives for p in primitive_points(prim)]
    bounds = plan_bounds(pts) if pts else _EMPTY_BOUNDS
    to_svg, scale = make_plan_transform(bounds)
    logger.debug(f"Page fit: {scale:.1f} pt/m, bounds {bounds}")
    return FloorplanData(scene, to_svg, scale, bounds)

# ============================================================
# SVG rendering
# ============================================================

def render_floorplan_svg(data: FloorplanData, labels: bool = True) -> str:
    """Render the complete floor plan SVG. Returns SVG string."""
    scene = data.scene
    to_svg = data.to_svg
    out = []
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{W}" height="{H}" viewBox="0 0 {W} {H}">')
    out.append(f'<rect x="0" y="0" width="{W}" height="{H}" fill="white"/>')

    polys = [p for p in scene.primitives if isinstance(p, Polygon)]
    # Walls first so openings draw on top
    for poly in sorted(polys, key=lambda p: p.style != STYLE_WALL):
        poly_svg(out, poly.points, poly.style, to_svg)
    for seg in scene.primitives:
        if isinstance(seg, Segment):
            line_svg(out, seg.start, seg.end, seg.style, to_svg)
    for marker in scene.primitives:
        if isinstance(marker, PoseMarker):
            pose_svg(out, marker, to_svg)
    if labels:
        for poly in polys:
            if poly.style == STYLE_WALL:
                width_label(out, poly, to_svg)

    # Title block
    n_walls = sum(1 for p in polys if p.style == STYLE_WALL)
    n_poses = sum(1 for p in scene.primitives if isinstance(p, PoseMarker))
    _now = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    _lines = [
        f"{n_walls} walls, {len(polys) - n_walls} openings, {n_poses} cameras",
        f"Rotation {scene.angle:.1f}°",
        f"Generated {_now}",
    ]
    if scene.dropped or scene.skipped_poses:
        _lines.insert(2, f"{len(scene.dropped)} elements dropped, "
                         f"{len(scene.skipped_poses)} poses skipped")
    for i, text in enumerate(_lines):
        out.append(f'<text x="12" y="{H - 12 - 11*(len(_lines)-1-i)}" font-family="Arial"'
                   f' font-size="8" fill="#666">{text}</text>')

    out.append('</svg>')
    return "\n".join(out)

# ============================================================
# Main entry point
# ============================================================

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Render a room-scan floor plan to SVG.")
    ap.add_argument("rooms", help="Room.json with walls/doors/windows")
    ap.add_argument("poses", nargs="?", help="exif.json mapping photo id to pose text")
    ap.add_argument("-o", "--output", help="SVG path (default: floorplan.svg beside Room.json)")
    ap.add_argument("--no-align", action="store_true", help="do not rotate to the longest wall")
    ap.add_argument("--rotation", type=float, help="fixed rotation in degrees")
    ap.add_argument("--mirror", action="store_true", help="mirror the plan horizontally")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    config = DEFAULT_CONFIG._replace(
        auto_align=not args.no_align, rotation=args.rotation, mirror=args.mirror,
    )
    rooms = read_rooms(args.rooms)
    poses = read_poses(args.poses) if args.poses else {}
    data = build_floorplan_data(rooms, poses, config)
    svg_content = render_floorplan_svg(data)

    svg_path = args.output or os.path.join(
        os.path.dirname(os.path.abspath(args.rooms)), "floorplan.svg")
    with open(svg_path, "w", encoding="utf-8") as f:
        f.write(svg_content)

    scene = data.scene
    print(f"Floorplan written to {svg_path}")
    print(f"Rotation:   {scene.angle:.2f} deg")
    print(f"Primitives: {len(scene.primitives)}")
    for ident, reason in scene.dropped:
        print(f"  dropped {ident}: {reason}")
    for photo_id, reason in scene.skipped_poses:
        print(f"  skipped {photo_id}: {reason}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
