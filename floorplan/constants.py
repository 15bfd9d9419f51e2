"""Named presentation constants for the floor plan.

All lengths in meters unless noted.
"""

# Footprint thicknesses (meters)
WALL_THICKNESS = 0.10             # walls drawn as 10 cm bands
DOOR_THICKNESS = 0.05             # doors thinner than walls
WINDOW_THICKNESS = 0.05           # windows thinner than walls

# Camera markers
ARROW_LENGTH = 0.15               # facing line length from the camera position
MARKER_RADIUS = 5.0               # SVG points

# Unit conversion for labels
FT_PER_M = 3.28084

# Primitive styles
STYLE_WALL = "wall"
STYLE_DOOR = "door"
STYLE_WINDOW = "window"
STYLE_OPENING = "opening"
STYLE_POSE = "pose"

# SVG paint per style
SVG_PAINT = {
    STYLE_WALL:    'fill="#666" stroke="#666" stroke-width="1.5"',
    STYLE_DOOR:    'fill="none" stroke="#000" stroke-width="1.2" stroke-dasharray="2"',
    STYLE_WINDOW:  'fill="#cce6ff" stroke="#4d94ff" stroke-width="1.5"',
    STYLE_OPENING: 'stroke="#333" stroke-width="0.8" stroke-dasharray="2"',
    STYLE_POSE:    'fill="#ff4081" stroke="#ff4081" stroke-width="2"',
}
