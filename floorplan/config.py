"""Scene build settings, defaulting to the values in floorplan.constants."""
from typing import NamedTuple, Optional

from roomgeom.types import ElementKind
from floorplan.constants import (
    WALL_THICKNESS, DOOR_THICKNESS, WINDOW_THICKNESS, ARROW_LENGTH,
)


class SceneConfig(NamedTuple):
    """Immutable scene settings. Override per call with config._replace(...)."""
    wall_thickness: float = WALL_THICKNESS
    door_thickness: float = DOOR_THICKNESS
    window_thickness: float = WINDOW_THICKNESS
    arrow_length: float = ARROW_LENGTH
    mirror: bool = False               # plan u = -x for every element and pose
    auto_align: bool = True            # rotate so the longest wall is horizontal
    rotation: Optional[float] = None   # fixed angle (degrees), overrides auto_align
    opening_segments: bool = True      # add center-line segments for doors/windows

    def thickness(self, kind: ElementKind) -> float:
        if kind == ElementKind.DOOR:
            return self.door_thickness
        if kind == ElementKind.WINDOW:
            return self.window_thickness
        return self.wall_thickness


DEFAULT_CONFIG = SceneConfig()
