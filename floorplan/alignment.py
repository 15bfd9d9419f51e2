"""Auto-alignment: rotate the plan so the longest wall reads horizontally."""
import math
from typing import Iterable, Optional

from roomgeom.types import Room, StructuralElement
from roomgeom.geometry import ElementError, transform_matrix
from floorplan.shapes import element_width


def _usable(wall: StructuralElement) -> bool:
    """True if the wall carries a numeric width and a 16-value transform."""
    try:
        element_width(wall)
        transform_matrix(wall.transform)
    except ElementError:
        return False
    return True


def longest_wall(rooms: Iterable[Room]) -> Optional[StructuralElement]:
    """Wall with the largest dimensions[0] across all rooms.

    Ties go to the first wall encountered (rooms in order, walls in order).
    Walls without usable dimensions or transform are ignored.
    """
    best = None; best_w = -math.inf
    for room in rooms:
        for wall in room.walls:
            if not _usable(wall):
                continue
            w = element_width(wall)
            if w > best_w:
                best, best_w = wall, w
    return best


def wall_angle(wall: StructuralElement) -> float:
    """Direction of the wall's local x-axis in world space, degrees: atan2(T[2], T[0])."""
    t = wall.transform
    return math.degrees(math.atan2(float(t[2]), float(t[0])))


def alignment_angle(rooms: Iterable[Room], mirror: bool = False) -> float:
    """Rotation (degrees) that brings the longest wall onto the plan u-axis.

    The wall's x-axis projects to plan angle -wall_angle, or 180 + wall_angle
    when mirrored, so the raw angle (or its negation) undoes it.
    Returns 0.0 when there is no wall.
    """
    wall = longest_wall(rooms)
    if wall is None:
        return 0.0
    a = wall_angle(wall)
    return -a if mirror else a
