from .circles import (
    ColorRule,
    circle_offsets,
    draw_circle,
    draw_rings,
    offset_color,
    ring_radii,
    symmetric_points,
)
from .renderer import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    RenderSettings,
    render_concentric_circles,
    render_rings,
    write_bitmap,
)

__all__ = [
    "ColorRule",
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "RenderSettings",
    "circle_offsets",
    "draw_circle",
    "draw_rings",
    "offset_color",
    "render_concentric_circles",
    "render_rings",
    "ring_radii",
    "symmetric_points",
    "write_bitmap",
]
