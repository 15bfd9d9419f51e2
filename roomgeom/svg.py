"""SVG transform factory and page constants."""
from typing import Callable

# US Letter landscape at 72 dpi (11" x 8.5")
W, H = 792, 612

# Page margin in SVG points
MARGIN = 36


def make_plan_transform(
    bounds: tuple[float, float, float, float],
    width: float = W, height: float = H, margin: float = MARGIN,
) -> tuple[Callable[[float, float], tuple[float, float]], float]:
    """Create to_svg closure fitting plan bounds (umin, vmin, umax, vmax) onto the page.

    Plan v grows up, SVG y grows down. Returns (to_svg, points per meter).
    """
    umin, vmin, umax, vmax = bounds
    span_u = max(umax - umin, 1e-9); span_v = max(vmax - vmin, 1e-9)
    s = min((width - 2*margin) / span_u, (height - 2*margin) / span_v)
    cu = (umin + umax) / 2; cv = (vmin + vmax) / 2
    def to_svg(u: float, v: float) -> tuple[float, float]:
        return (width/2 + (u - cu) * s, height/2 - (v - cv) * s)
    return to_svg, s
