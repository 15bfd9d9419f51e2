"""Shared type definitions for the room-scan floor plan."""
from enum import Enum
from typing import NamedTuple, Optional, Sequence

class Point3(NamedTuple):
    x: float; y: float; z: float

class PlanPoint(NamedTuple):
    u: float; v: float

# 16 values, column-major 4x4 affine
Transform = tuple[float, ...]

class ElementKind(str, Enum):
    WALL = "wall"
    DOOR = "door"
    WINDOW = "window"

class StructuralElement(NamedTuple):
    """Wall, door or window: a local rectangle placed by a transform.

    dimensions[0] is the width along the local x-axis. dimensions and
    transform are None when the source record lacks them.
    """
    identifier: str
    dimensions: Optional[Sequence[float]]
    transform: Optional[Sequence[float]]
    kind: ElementKind = ElementKind.WALL

class Room(NamedTuple):
    walls: tuple[StructuralElement, ...] = ()
    doors: tuple[StructuralElement, ...] = ()
    windows: tuple[StructuralElement, ...] = ()

# ============================================================
# Renderable primitives (plan frame)
# ============================================================
class Polygon(NamedTuple):
    points: tuple[PlanPoint, ...]
    style: str
    identifier: str = ""

class Segment(NamedTuple):
    start: PlanPoint; end: PlanPoint
    style: str
    identifier: str = ""

class PoseMarker(NamedTuple):
    position: PlanPoint
    facing_end: PlanPoint
    photo_id: str

Primitive = Polygon | Segment | PoseMarker
