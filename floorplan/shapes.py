"""Shape builder: plan-frame footprints and center lines of walls, doors, windows."""
import math

from roomgeom.types import PlanPoint, StructuralElement
from roomgeom.geometry import ElementError, apply_transform_many, plan_point, signed_area
from floorplan.config import SceneConfig, DEFAULT_CONFIG


def element_width(element: StructuralElement) -> float:
    """dimensions[0] as float. Raises ElementError unless it is a finite number in a list."""
    dims = element.dimensions
    if dims is None:
        raise ElementError(f"{element.identifier}: missing dimensions")
    if not isinstance(dims, (list, tuple)):
        raise ElementError(f"{element.identifier}: dimensions not a list: {type(dims).__name__}")
    if not dims:
        raise ElementError(f"{element.identifier}: empty dimensions")
    try:
        w = float(dims[0])
    except (TypeError, ValueError) as e:
        raise ElementError(f"{element.identifier}: non-numeric width {dims[0]!r}") from e
    if not math.isfinite(w):
        raise ElementError(f"{element.identifier}: non-finite width {w}")
    return w


def _to_plan(element: StructuralElement, local, angle: float, mirror: bool) -> list[PlanPoint]:
    if element.transform is None:
        raise ElementError(f"{element.identifier}: missing transform")
    try:
        world = apply_transform_many(element.transform, local)
    except ElementError as e:
        raise ElementError(f"{element.identifier}: {e}") from e
    return [plan_point(p, angle, mirror) for p in world]


def footprint(
    element: StructuralElement, angle: float = 0.0, config: SceneConfig = DEFAULT_CONFIG,
) -> list[PlanPoint]:
    """4 plan corners of the element's thin rectangle, counter-clockwise.

    The band spans the local x-axis (width w) and the local z-axis (thickness t,
    per kind); local y is the element's height and vanishes in the plan.
    A transform with a reflection (or the mirror setting) flips the winding,
    in which case the order is reversed. Width <= 0 yields a degenerate rectangle.
    """
    hw = element_width(element) / 2
    ht = config.thickness(element.kind) / 2
    local = [(-hw, 0.0, ht), (hw, 0.0, ht), (hw, 0.0, -ht), (-hw, 0.0, -ht)]
    corners = _to_plan(element, local, angle, config.mirror)
    if signed_area(corners) < 0:
        corners = [corners[0], corners[3], corners[2], corners[1]]
    return corners


def centerline(
    element: StructuralElement, angle: float = 0.0, config: SceneConfig = DEFAULT_CONFIG,
) -> tuple[PlanPoint, PlanPoint]:
    """Plan endpoints of the element's local x-axis span, (-w/2, 0, 0) -> (w/2, 0, 0)."""
    hw = element_width(element) / 2
    start, end = _to_plan(element, [(-hw, 0.0, 0.0), (hw, 0.0, 0.0)], angle, config.mirror)
    return start, end


def element_center(
    element: StructuralElement, angle: float = 0.0, config: SceneConfig = DEFAULT_CONFIG,
) -> PlanPoint:
    """Plan position of the element origin (its transform translation)."""
    (c,) = _to_plan(element, [(0.0, 0.0, 0.0)], angle, config.mirror)
    return c
