"""
Image-to-ASCII Renderer

Converts a raster image into text art:
- Pillow decoding of any supported format into a pixel buffer
- BT.601 luminance sampling
- Box-filter downsampling to a character grid
- Darkness-ordered palettes (default "@%#*+=-:. ", custom or inverted)
"""

__version__ = "1.0.0"

from .charsets import DEFAULT_PALETTE, get_palette, list_palettes, to_char
from .errors import AsciiRenderError, DecodeError, NotLoadedError, UsageError
from .image import PixelBuffer, from_pil, load_image, sample
from .renderer import Renderer, RenderConfig, derive_height, render, render_rows
from .result import ASCIIResult

__all__ = [
    "DEFAULT_PALETTE",
    "get_palette",
    "list_palettes",
    "to_char",
    "AsciiRenderError",
    "DecodeError",
    "NotLoadedError",
    "UsageError",
    "PixelBuffer",
    "from_pil",
    "load_image",
    "sample",
    "Renderer",
    "RenderConfig",
    "derive_height",
    "render",
    "render_rows",
    "ASCIIResult",
]
