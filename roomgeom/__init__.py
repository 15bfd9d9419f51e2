"""Shared types, plan geometry, and SVG utilities for room-scan floor plans."""

from .types import (
    Point3, PlanPoint, Transform, ElementKind, StructuralElement, Room,
    Polygon, Segment, PoseMarker, Primitive,
)
from .geometry import (
    GeometryError, ElementError,
    transform_matrix, apply_transform, apply_transform_many,
    project, project_direction, rotate_plan, rotate_points, plan_point,
    signed_area, poly_centroid, plan_bounds,
)
from .svg import make_plan_transform, W, H
