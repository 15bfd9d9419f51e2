"""Room-scan floor plan: alignment, shapes, camera poses, scene assembly, SVG output."""
