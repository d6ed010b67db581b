from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from ..bitmap.encoding import iter_chunks
from ..errors import BitmapIOError
from ..raster.types import PixelBuffer, validate_dimensions
from ..transport.base import ByteSink
from .circles import ColorRule, draw_rings, offset_color, ring_radii

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 1024


@dataclass
class RenderSettings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    color_rule: ColorRule = offset_color
    center: Optional[Tuple[int, int]] = None

    def resolve_center(self) -> Tuple[int, int]:
        if self.center is not None:
            return self.center
        return self.width // 2, self.height // 2


def render_rings(settings: Optional[RenderSettings] = None) -> PixelBuffer:
    """Fill a new buffer with concentric rings around the settings' center."""
    settings = settings or RenderSettings()
    buffer = PixelBuffer.create(settings.width, settings.height)
    cx, cy = settings.resolve_center()
    radii = ring_radii(settings.width, settings.height)
    written = draw_rings(buffer, cx, cy, radii, settings.color_rule)
    logger.debug(
        "Rendered %d rings at (%d, %d) on %dx%d, %d pixel writes",
        len(radii),
        cx,
        cy,
        settings.width,
        settings.height,
        written,
    )
    return buffer


def write_bitmap(buffer: PixelBuffer, sink: ByteSink) -> int:
    """Encode ``buffer`` and hand the complete file to ``sink``.

    The bitmap is fully encoded before the sink is opened. Returns the number
    of bytes written.
    """
    chunks = list(iter_chunks(buffer))
    written = 0
    try:
        with sink:
            for chunk in chunks:
                sink.write(chunk)
                written += len(chunk)
    except BitmapIOError:
        raise
    except OSError as exc:
        raise BitmapIOError(f"Bitmap output failed: {exc}") from exc
    logger.debug("Handed %d bytes to %s", written, type(sink).__name__)
    return written


def render_concentric_circles(
    width: int,
    height: int,
    sink: ByteSink,
    settings: Optional[RenderSettings] = None,
) -> int:
    """Render concentric rings at ``width`` x ``height`` and write the bitmap."""
    validate_dimensions(width, height)
    settings = replace(settings or RenderSettings(), width=width, height=height)
    with render_rings(settings) as buffer:
        return write_bitmap(buffer, sink)
