"""Scene assembly: rooms and pose records -> ordered plan-frame primitives.

Order: per room, wall polygons, then door polygons (+ segments), then window
polygons (+ segments); after all rooms, pose markers in record order.
A bad element or pose record is dropped and reported; the rest still builds.
"""
import logging
from typing import Iterable, Mapping, NamedTuple

from roomgeom.types import Room, StructuralElement, ElementKind, Polygon, Segment, Primitive
from roomgeom.geometry import ElementError
from floorplan.config import SceneConfig, DEFAULT_CONFIG
from floorplan.alignment import alignment_angle
from floorplan.shapes import footprint, centerline
from floorplan.poses import parse_pose, pose_marker, UnparsedPose
from floorplan.constants import STYLE_OPENING

logger = logging.getLogger(__name__)


class Scene(NamedTuple):
    primitives: list[Primitive]
    angle: float                        # alignment angle applied (degrees)
    dropped: list[tuple[str, str]]      # (element identifier, reason)
    skipped_poses: list[tuple[str, str]]  # (photo id, reason)


def scene_angle(rooms: Iterable[Room], config: SceneConfig = DEFAULT_CONFIG) -> float:
    """Alignment angle for this build: fixed rotation, auto estimate, or 0."""
    if config.rotation is not None:
        return float(config.rotation)
    if not config.auto_align:
        return 0.0
    return alignment_angle(rooms, config.mirror)


def element_primitives(
    element: StructuralElement, angle: float, config: SceneConfig = DEFAULT_CONFIG,
) -> list[Primitive]:
    """Footprint polygon, plus the center-line segment for doors and windows."""
    out: list[Primitive] = [Polygon(tuple(footprint(element, angle, config)),
                                    element.kind.value, element.identifier)]
    if config.opening_segments and element.kind != ElementKind.WALL:
        start, end = centerline(element, angle, config)
        out.append(Segment(start, end, STYLE_OPENING, element.identifier))
    return out


def build_scene(
    rooms: Iterable[Room],
    poses: Mapping[str, str] | None = None,
    config: SceneConfig = DEFAULT_CONFIG,
) -> Scene:
    """Build every renderable primitive of the scan in one plan frame."""
    rooms = list(rooms)
    angle = scene_angle(rooms, config)
    primitives: list[Primitive] = []
    dropped: list[tuple[str, str]] = []
    skipped: list[tuple[str, str]] = []

    for room in rooms:
        for element in (*room.walls, *room.doors, *room.windows):
            try:
                primitives.extend(element_primitives(element, angle, config))
            except ElementError as e:
                logger.warning(f"Dropping {element.kind.value} {element.identifier!r}: {e}")
                dropped.append((element.identifier, str(e)))

    for photo_id, text in (poses or {}).items():
        pose = parse_pose(text)
        if isinstance(pose, UnparsedPose):
            logger.warning(f"Skipping pose {photo_id!r}: {pose.reason}")
            skipped.append((photo_id, pose.reason))
            continue
        primitives.append(pose_marker(photo_id, pose, angle, config))

    logger.debug(f"Scene built: {len(primitives)} primitives, angle {angle:.2f} deg, "
                 f"{len(dropped)} dropped, {len(skipped)} poses skipped")
    return Scene(primitives, angle, dropped, skipped)
