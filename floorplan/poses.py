"""Camera pose records: text grammar, tagged parse result, and plan markers.

A pose record is free text from photo metadata, e.g.

    "... translation=(1.2 0.0 -0.4) rotation=(0.0° 90.0° 0.0°)"
    "... rotation=(0° 90° 0°) [1.0, 0.0, 2.0]"

The position comes from a `translation=(x y z)` field if present, otherwise
from a bracketed `[x, y, z]` triple; the orientation from `rotation=(x° y° z°)`.
Records that do not match parse to UnparsedPose and are skipped by callers.
"""
import math
import re
from typing import NamedTuple, Optional

from roomgeom.types import Point3, PlanPoint, PoseMarker
from roomgeom.geometry import project, project_direction, rotate_plan
from floorplan.config import SceneConfig, DEFAULT_CONFIG

_NUM = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"


# ============================================================
# Grammar
# ============================================================
class Triple(NamedTuple):
    """One grammar rule: a labelled pattern capturing three numbers."""
    name: str
    pattern: re.Pattern
    last: bool = False     # take the last occurrence instead of the first

    def match(self, text: str) -> Optional[tuple[float, float, float]]:
        if self.last:
            m = None
            for m in self.pattern.finditer(text):
                pass
        else:
            m = self.pattern.search(text)
        if m is None:
            return None
        vals = (float(m.group(1)), float(m.group(2)), float(m.group(3)))
        if not all(math.isfinite(v) for v in vals):
            return None     # 1e999 overflows to inf
        return vals


TRANSLATION = Triple("translation", re.compile(
    rf"translation=\(\s*({_NUM})\s+({_NUM})\s+({_NUM})\s*\)"))
BRACKETED = Triple("bracketed", re.compile(
    rf"\[\s*({_NUM})\s*,\s*({_NUM})\s*,\s*({_NUM})\s*\]"), last=True)
ROTATION = Triple("rotation", re.compile(
    rf"rotation=\(\s*({_NUM})°\s*({_NUM})°\s*({_NUM})°\s*\)"))


class ParsedPose(NamedTuple):
    position: Point3
    rotation: tuple[float, float, float]   # (pitch, yaw, roll) degrees

    @property
    def yaw(self) -> float:
        return self.rotation[1]


class UnparsedPose(NamedTuple):
    reason: str


PoseParse = ParsedPose | UnparsedPose


class PoseGrammar(NamedTuple):
    """Position alternatives (tried in order) plus the rotation rule."""
    position: tuple[Triple, ...] = (TRANSLATION, BRACKETED)
    rotation: Triple = ROTATION

    def parse(self, text) -> PoseParse:
        if not isinstance(text, str):
            return UnparsedPose(f"not text: {type(text).__name__}")
        pos = None
        for rule in self.position:
            pos = rule.match(text)
            if pos is not None:
                break
        if pos is None:
            return UnparsedPose("no position triple")
        rot = self.rotation.match(text)
        if rot is None:
            return UnparsedPose("no rotation=(x° y° z°)")
        return ParsedPose(Point3(*pos), rot)


POSE_GRAMMAR = PoseGrammar()


def parse_pose(text, grammar: PoseGrammar = POSE_GRAMMAR) -> PoseParse:
    """Parse a pose record; never raises for malformed text."""
    return grammar.parse(text)


# ============================================================
# Pose Resolver
# ============================================================
def facing_vector(yaw_deg: float, mirror: bool = False) -> PlanPoint:
    """Unit plan direction a camera yawed by yaw_deg looks along.

    The camera looks down its local -z, so yaw h about the vertical axis gives
    world forward (-sin h, 0, -cos h). Projected: (-sin h, cos h), i.e. yaw 0
    faces plan-up and yaw 90 faces plan-left.
    """
    h = math.radians(yaw_deg)
    return project_direction((-math.sin(h), 0.0, -math.cos(h)), mirror)


def pose_marker(
    photo_id: str, pose: ParsedPose, angle: float = 0.0, config: SceneConfig = DEFAULT_CONFIG,
) -> PoseMarker:
    """Marker at the projected camera position with its facing-line endpoint."""
    p = project(pose.position, config.mirror)
    d = facing_vector(pose.yaw, config.mirror)
    end = PlanPoint(p[0] + d[0]*config.arrow_length, p[1] + d[1]*config.arrow_length)
    return PoseMarker(rotate_plan(p, angle), rotate_plan(end, angle), photo_id)


def resolve_pose(
    photo_id: str, text, angle: float = 0.0, config: SceneConfig = DEFAULT_CONFIG,
) -> Optional[PoseMarker]:
    """PoseMarker for a raw record, or None if the text does not parse."""
    pose = parse_pose(text)
    if isinstance(pose, UnparsedPose):
        return None
    return pose_marker(photo_id, pose, angle, config)
