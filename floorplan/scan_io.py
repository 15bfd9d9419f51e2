"""Load room-structure and camera-pose records from their JSON files.

Room.json:  {"rooms": [{"walls": [...], "doors": [...], "windows": [...]}, ...]}
            each element {"identifier", "dimensions", "transform"}
exif.json:  {"<photo id>": "<free text with position and rotation=(...)>", ...}
"""
import json
import logging

from roomgeom.types import ElementKind, StructuralElement, Room

logger = logging.getLogger(__name__)

_GROUPS = (("walls", ElementKind.WALL), ("doors", ElementKind.DOOR),
           ("windows", ElementKind.WINDOW))


class ScanFormatError(ValueError):
    """Raised when an input file does not have the expected top-level shape."""


def element_from_dict(d: dict, kind: ElementKind, index: int = 0) -> StructuralElement:
    """StructuralElement from a record; missing fields stay None for later checks.

    A record that is not an object becomes an element with no dimensions or
    transform, so scene assembly drops and reports it like any other bad record.
    """
    if not isinstance(d, dict):
        logger.warning(f"{kind.value} #{index} is not an object: {type(d).__name__}")
        return StructuralElement(f"{kind.value}-{index}", None, None, kind)
    ident = d.get("identifier")
    if ident is None:
        ident = f"{kind.value}-{index}"
    dims = d.get("dimensions")
    t = d.get("transform")
    return StructuralElement(
        str(ident),
        tuple(dims) if isinstance(dims, (list, tuple)) else dims,
        tuple(t) if isinstance(t, (list, tuple)) else t,
        kind,
    )


def room_from_dict(d: dict) -> Room:
    if not isinstance(d, dict):
        raise ScanFormatError(f"Room is not an object: {type(d).__name__}")
    groups = {}
    for key, kind in _GROUPS:
        items = d.get(key) or []
        groups[key] = tuple(element_from_dict(e, kind, i) for i, e in enumerate(items))
    return Room(**groups)


def load_rooms(data) -> list[Room]:
    """Rooms from parsed JSON: {"rooms": [...]}, a list of rooms, or one room."""
    if isinstance(data, dict) and "rooms" in data:
        data = data["rooms"]
    elif isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ScanFormatError(f"Expected rooms list, got {type(data).__name__}")
    rooms = [room_from_dict(r) for r in data]
    logger.debug(f"Loaded {len(rooms)} room(s), "
                 f"{sum(len(r.walls) for r in rooms)} walls, "
                 f"{sum(len(r.doors) for r in rooms)} doors, "
                 f"{sum(len(r.windows) for r in rooms)} windows")
    return rooms


def load_poses(data) -> dict[str, str]:
    """Photo id -> pose text. Values are kept as given; unparsable text is valid input."""
    if not isinstance(data, dict):
        raise ScanFormatError(f"Expected photo-id mapping, got {type(data).__name__}")
    return {str(k): v for k, v in data.items()}


def read_rooms(path: str) -> list[Room]:
    with open(path, encoding="utf-8") as f:
        return load_rooms(json.load(f))


def read_poses(path: str) -> dict[str, str]:
    with open(path, encoding="utf-8") as f:
        return load_poses(json.load(f))
