from __future__ import annotations

from typing import Callable, Iterable, Iterator, Tuple

from ..raster.types import Color, PixelBuffer

ColorRule = Callable[[int, int], Color]


def offset_color(x: int, y: int) -> Color:
    """Default ring color, derived from the octant offset only."""
    red = x % 256
    return Color(red, y % 256, 255 - red)


def circle_offsets(radius: int) -> Iterator[Tuple[int, int]]:
    """Yield the first-octant offsets of a midpoint circle, integer only."""
    x = 0
    y = radius
    decision = 3 - 2 * radius
    while y >= x:
        yield x, y
        if decision > 0:
            y -= 1
            decision += 4 * (x - y) + 10
        else:
            decision += 4 * x + 6
        x += 1


def symmetric_points(x: int, y: int) -> Tuple[Tuple[int, int], ...]:
    return (
        (x, y),
        (-x, y),
        (x, -y),
        (-x, -y),
        (y, x),
        (-y, x),
        (y, -x),
        (-y, -x),
    )


def draw_circle(
    buffer: PixelBuffer,
    cx: int,
    cy: int,
    radius: int,
    color_rule: ColorRule = offset_color,
) -> int:
    """Draw a one pixel wide circle outline, clipping at the buffer edges.

    Returns the number of pixel writes made.
    """
    written = 0
    for x, y in circle_offsets(radius):
        color = color_rule(x, y)
        for dx, dy in symmetric_points(x, y):
            px = cx + dx
            py = cy + dy
            if buffer.contains(px, py):
                buffer.set_color(px, py, color)
                written += 1
    return written


def draw_rings(
    buffer: PixelBuffer,
    cx: int,
    cy: int,
    radii: Iterable[int],
    color_rule: ColorRule = offset_color,
) -> int:
    """Draw one circle per radius, in the order given."""
    radii = list(radii)
    for radius in radii:
        if isinstance(radius, bool) or not isinstance(radius, int) or radius <= 0:
            raise ValueError(f"Radius must be a positive integer, got {radius!r}")
    written = 0
    for radius in radii:
        written += draw_circle(buffer, cx, cy, radius, color_rule)
    return written


def ring_radii(width: int, height: int) -> range:
    """Increasing radii that fill a canvas with concentric rings."""
    return range(1, max(width, height) // 2 + 1)
