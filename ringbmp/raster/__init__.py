from .types import BLACK, WHITE, Color, PixelBuffer, pack_color, release_buffer, validate_dimensions

__all__ = [
    "BLACK",
    "Color",
    "PixelBuffer",
    "WHITE",
    "pack_color",
    "release_buffer",
    "validate_dimensions",
]
