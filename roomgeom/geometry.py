"""Pure geometry: transform evaluation, plan projection, rotation, polygon utilities."""
import math
from typing import Iterable, Sequence

import numpy as np

from .types import Point3, PlanPoint

# ============================================================
# Error Types
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

class ElementError(GeometryError):
    """Raised when a structural element lacks a usable transform or dimensions."""

# ============================================================
# Matrix Transform Evaluator
# ============================================================
def transform_matrix(transform: Sequence[float]) -> np.ndarray:
    """4x4 matrix from 16 column-major values. Raises ElementError otherwise."""
    if transform is None:
        raise ElementError("Missing transform")
    try:
        m = np.asarray(transform, dtype=float)
    except (TypeError, ValueError) as e:
        raise ElementError(f"Non-numeric transform: {e}") from e
    if m.shape != (16,):
        raise ElementError(f"Transform needs 16 values, got shape {m.shape}")
    if not np.isfinite(m).all():
        raise ElementError("Non-finite transform value")
    return m.reshape((4, 4), order="F")

def apply_transform(transform: Sequence[float], p: Sequence[float]) -> Point3:
    """World-space point M . [x, y, z, 1] for a column-major transform."""
    m = transform_matrix(transform)
    w = m @ np.array([p[0], p[1], p[2], 1.0])
    return Point3(float(w[0]), float(w[1]), float(w[2]))

def apply_transform_many(transform: Sequence[float], pts: Iterable[Sequence[float]]) -> list[Point3]:
    """apply_transform over several local points with a single matrix build."""
    m = transform_matrix(transform)
    local = np.array([[p[0], p[1], p[2], 1.0] for p in pts], dtype=float).reshape(-1, 4)
    world = local @ m.T
    return [Point3(float(x), float(y), float(z)) for x, y, z, _ in world]

# ============================================================
# Planar Projector
# ============================================================
def project(p: Sequence[float], mirror: bool = False) -> PlanPoint:
    """Drop the vertical (y) axis: (u, v) = (x, -z), or (-x, -z) when mirrored.

    Increasing world z maps to decreasing plan v (north up).
    """
    u = -p[0] if mirror else p[0]
    return PlanPoint(float(u), float(-p[2]))

def project_direction(d: Sequence[float], mirror: bool = False) -> PlanPoint:
    """Project a world direction vector; same axis convention as project()."""
    return project(d, mirror)

# ============================================================
# Plan Rotation
# ============================================================
def rotate_plan(p: PlanPoint, angle_deg: float) -> PlanPoint:
    """Rigid rotation of a plan point about the origin (CCW for positive angle)."""
    if angle_deg == 0:
        return PlanPoint(p[0], p[1])
    a = math.radians(angle_deg); c = math.cos(a); s = math.sin(a)
    return PlanPoint(p[0]*c - p[1]*s, p[0]*s + p[1]*c)

def rotate_points(pts: Iterable[PlanPoint], angle_deg: float) -> list[PlanPoint]:
    return [rotate_plan(p, angle_deg) for p in pts]

def plan_point(p: Sequence[float], angle_deg: float = 0.0, mirror: bool = False) -> PlanPoint:
    """World point -> plan frame: project, then rotate by the alignment angle."""
    return rotate_plan(project(p, mirror), angle_deg)

# ============================================================
# Polygon Utilities
# ============================================================
def signed_area(verts: Sequence[PlanPoint]) -> float:
    """Shoelace area; positive for counter-clockwise winding."""
    n = len(verts); a = 0.0
    for i in range(n):
        j = (i+1)%n; a += verts[i][0]*verts[j][1]-verts[j][0]*verts[i][1]
    return a/2

def poly_centroid(verts: Sequence[PlanPoint]) -> PlanPoint:
    """Vertex average (equals the area centroid for parallelograms)."""
    n = len(verts)
    return PlanPoint(sum(p[0] for p in verts)/n, sum(p[1] for p in verts)/n)

def plan_bounds(pts: Iterable[PlanPoint]) -> tuple[float, float, float, float]:
    """(umin, vmin, umax, vmax) of the given points. Raises GeometryError when empty."""
    us = []; vs = []
    for p in pts:
        us.append(p[0]); vs.append(p[1])
    if not us:
        raise GeometryError("No points to bound")
    return min(us), min(vs), max(us), max(vs)
