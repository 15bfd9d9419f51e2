"""Shared test fixtures for room-scan floor plan tests."""
import math
import pytest
from roomgeom.types import ElementKind, StructuralElement
from floorplan.scan_io import load_rooms, load_poses


IDENTITY = (1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0)

# Room rotation about the vertical axis for the sample scan (degrees)
SCAN_YAW = 30.0


def _yaw_transform(deg, tx=0.0, ty=0.0, tz=0.0):
    """Column-major transform: rotation about +y by deg, then translation."""
    a = math.radians(deg); c = math.cos(a); s = math.sin(a)
    return (c, 0.0, -s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            s, 0.0, c, 0.0,
            tx, ty, tz, 1.0)


def _rot_y(p, deg):
    a = math.radians(deg); c = math.cos(a); s = math.sin(a)
    return (c*p[0] + s*p[2], p[1], -s*p[0] + c*p[2])


def _placed(ident, width, yaw, pos):
    """Element record with its frame rotated by SCAN_YAW about the room origin."""
    x, y, z = _rot_y(pos, SCAN_YAW)
    return {"identifier": ident, "dimensions": [width, 2.5, 0.0],
            "transform": list(_yaw_transform(yaw + SCAN_YAW, x, y, z))}


@pytest.fixture(scope="session")
def identity():
    return IDENTITY


@pytest.fixture(scope="session")
def yaw_transform():
    """Factory: yaw_transform(deg, tx, ty, tz) -> 16 column-major values."""
    return _yaw_transform


@pytest.fixture(scope="session")
def make_element():
    """Factory for StructuralElement with identity transform by default."""
    def _make(ident, width, transform=IDENTITY, kind=ElementKind.WALL):
        return StructuralElement(ident, (width,), transform, kind)
    return _make


@pytest.fixture(scope="session")
def scan_data():
    """Room.json-shaped dict: 4 m x 3 m room yawed by SCAN_YAW, one door, one window."""
    return {"rooms": [{
        "walls": [
            _placed("W-south", 4.0, 0.0, (0.0, 1.25, 1.5)),
            _placed("W-north", 4.0, 0.0, (0.0, 1.25, -1.5)),
            _placed("W-east", 3.0, 90.0, (2.0, 1.25, 0.0)),
            _placed("W-west", 3.0, 90.0, (-2.0, 1.25, 0.0)),
        ],
        "doors": [_placed("D-1", 0.9, 0.0, (0.5, 1.0, 1.5))],
        "windows": [_placed("G-1", 1.2, 90.0, (2.0, 1.5, 0.0))],
        "openings": [],
    }]}


@pytest.fixture(scope="session")
def pose_data():
    """exif.json-shaped dict: two parsable records, two that are not."""
    return {
        "IMG_0001.jpg": "Camera translation=(0.5 1.4 -0.2) rotation=(-2.0° 45.0° 0.5°)",
        "IMG_0002.jpg": "ARKit pose [1.0, 0.0, 2.0] rotation=(0° 90° 0°)",
        "IMG_0003.jpg": "no pose data",
        "IMG_0004.jpg": "position only [0.1, 0.2, 0.3]",
    }


@pytest.fixture(scope="session")
def rooms(scan_data):
    return load_rooms(scan_data)


@pytest.fixture(scope="session")
def poses(pose_data):
    return load_poses(pose_data)


@pytest.fixture(scope="session")
def scan_yaw():
    return SCAN_YAW
