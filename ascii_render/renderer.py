"""
Box-Filter Resampling Renderer

Turns a PixelBuffer into rows of palette characters:
1. Work out the output geometry (auto height from the aspect ratio)
2. Split the image into one box of source pixels per output cell
3. Average each box's luminance (integer mean)
4. Map the average through the palette

Rows are produced one at a time so callers can stream them.
"""

import logging
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterator, Optional, TextIO, Tuple, Union

import numpy as np
from PIL import Image

from .charsets import DEFAULT_PALETTE, normalize_palette, to_char
from .errors import DecodeError, NotLoadedError
from .image import PixelBuffer, from_pil, load_image, luminance_map
from .result import ASCIIResult, create_result


logger = logging.getLogger(__name__)

# Terminal character cells are roughly twice as tall as they are wide
CELL_ASPECT = 2


@dataclass
class RenderConfig:
    """Configuration for a render pass."""
    width: int = 80                    # Output width in characters
    height: int = 0                    # Output height in rows (0 = derive from aspect ratio)
    invert: bool = False               # Invert brightness before palette lookup
    palette: str = DEFAULT_PALETTE     # Characters ordered dark to light

    def __post_init__(self):
        if self.width < 0:
            raise ValueError(f"Output width must not be negative, got {self.width}")
        if self.height < 0:
            raise ValueError(f"Output height must not be negative, got {self.height}")
        self.palette = normalize_palette(self.palette)


def derive_height(image_width: int, image_height: int, output_width: int) -> int:
    """
    Output rows that keep the image's aspect ratio on a terminal.

    May be 0 for very wide images or a zero output width.
    """
    return (image_height * output_width) // (image_width * CELL_ASPECT)


def resolve_geometry(buffer: PixelBuffer, config: RenderConfig) -> Tuple[int, int]:
    """Output (width, height) for a render pass, deriving the height if unset."""
    height = config.height
    if height == 0:
        height = derive_height(buffer.width, buffer.height, config.width)
        logger.debug("derived output height %d from %dx%d image", height, buffer.width, buffer.height)
    return config.width, height


def _box_edges(size: int, count: int) -> np.ndarray:
    """Start offsets of `count` floor-divided boxes over `size` pixels, plus the end."""
    if count == 0:
        return np.zeros(1, dtype=np.int64)
    edges = (np.arange(count + 1, dtype=np.int64) * size) // count
    return np.minimum(edges, size)


def _summed_area_table(luma: np.ndarray) -> np.ndarray:
    height, width = luma.shape
    table = np.zeros((height + 1, width + 1), dtype=np.int64)
    table[1:, 1:] = luma.cumsum(axis=0).cumsum(axis=1)
    return table


def render_rows(buffer: PixelBuffer, config: RenderConfig) -> Iterator[str]:
    """
    Render the image one output row at a time.

    Each cell averages the source pixels in
    [x*W//outW, (x+1)*W//outW) x [y*H//outH, (y+1)*H//outH).
    Cells whose box holds no pixels (output larger than the image) are
    rendered as a space.

    Args:
        buffer: Decoded pixels
        config: Output geometry, palette and invert flag

    Yields:
        One string per output row, without a line terminator
    """
    out_w, out_h = resolve_geometry(buffer, config)
    if out_h == 0:
        return

    chars = [to_char(level, config.invert, config.palette) for level in range(256)]
    table = _summed_area_table(luminance_map(buffer))

    xs = _box_edges(buffer.width, out_w)
    x0, x1 = xs[:-1], xs[1:]
    ys = _box_edges(buffer.height, out_h)

    for y in range(out_h):
        y0, y1 = ys[y], ys[y + 1]
        totals = table[y1, x1] - table[y0, x1] - table[y1, x0] + table[y0, x0]
        counts = (y1 - y0) * (x1 - x0)
        averages = totals // np.maximum(counts, 1)

        yield "".join(
            chars[avg] if count > 0 else " "
            for avg, count in zip(averages.tolist(), counts.tolist())
        )


def render(buffer: PixelBuffer, config: Optional[RenderConfig] = None) -> str:
    """
    Render an image to text art.

    Args:
        buffer: Decoded pixels
        config: Render configuration (defaults if None)

    Returns:
        Rows joined with newlines
    """
    return "\n".join(render_rows(buffer, config or RenderConfig()))


class Renderer:
    """
    Holds a loaded image and the configuration used to render it.

    Example:
        >>> renderer = Renderer()
        >>> renderer.load("photo.jpg")
        >>> renderer.set_output_size(120, 0)
        >>> renderer.convert(sys.stdout)
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()
        self._buffer: Optional[PixelBuffer] = None

    @property
    def buffer(self) -> Optional[PixelBuffer]:
        """The loaded image, or None."""
        return self._buffer

    @property
    def is_loaded(self) -> bool:
        return self._buffer is not None

    def load(self, path: Union[str, Path]) -> PixelBuffer:
        """
        Load an image file, replacing any previous one.

        On failure the renderer is left with no image.

        Raises:
            DecodeError: if the file cannot be decoded
        """
        self._buffer = None
        self._buffer = load_image(path)
        logger.info("loaded %s (%dx%d, %d channels)", path, self._buffer.width, self._buffer.height, self._buffer.channels)
        return self._buffer

    def load_image(self, image: Image.Image) -> PixelBuffer:
        """
        Load an in-memory PIL Image, replacing any previous one.

        On failure the renderer is left with no image.

        Raises:
            DecodeError: if the image pixels cannot be read
        """
        self._buffer = None
        try:
            self._buffer = from_pil(image)
        except (OSError, ValueError) as e:
            raise DecodeError("<memory>", str(e) or type(e).__name__) from e
        return self._buffer

    def set_output_size(self, width: int, height: int = 0):
        self.config = replace(self.config, width=width, height=height)

    def set_invert(self, invert: bool):
        self.config = replace(self.config, invert=invert)

    def set_palette(self, chars: str):
        """Replace the palette (dark to light) with a custom one."""
        self.config = replace(self.config, palette=chars)

    def _require_buffer(self) -> PixelBuffer:
        if self._buffer is None:
            raise NotLoadedError()
        return self._buffer

    def geometry(self) -> Tuple[int, int]:
        """Output (width, height) for the loaded image."""
        return resolve_geometry(self._require_buffer(), self.config)

    def _resolved_config(self, buffer: PixelBuffer) -> RenderConfig:
        width, height = resolve_geometry(buffer, self.config)
        return replace(self.config, width=width, height=height)

    def _metadata(self, buffer: PixelBuffer, config: RenderConfig) -> dict:
        return {
            'image_size': f"{buffer.width}x{buffer.height}",
            'channels': buffer.channels,
            'output_size': f"{config.width}x{config.height}",
            'invert': config.invert,
            'palette': config.palette,
        }

    def render(self) -> ASCIIResult:
        """
        Render the loaded image.

        Raises:
            NotLoadedError: if no image has been loaded
        """
        buffer = self._require_buffer()
        config = self._resolved_config(buffer)
        text = "\n".join(render_rows(buffer, config))
        return create_result(text, **self._metadata(buffer, config))

    def convert(self, stream: Optional[TextIO] = None) -> Optional[ASCIIResult]:
        """
        Render the loaded image to a stream, one row at a time.

        Writes an "ASCII Art (WxH):" header, a blank line, then the rows.
        If no image is loaded the error is reported on stderr and nothing
        is written.

        Args:
            stream: Output text stream (stdout if None)

        Returns:
            The rendered ASCIIResult, or None if no image was loaded
        """
        stream = stream or sys.stdout
        try:
            buffer = self._require_buffer()
        except NotLoadedError as e:
            print(f"Error: {e}", file=sys.stderr)
            return None

        # Auto height is resolved once per pass
        config = self._resolved_config(buffer)
        stream.write(f"\nASCII Art ({config.width}x{config.height}):\n\n")

        lines = []
        for line in render_rows(buffer, config):
            stream.write(line + "\n")
            lines.append(line)
        stream.flush()

        return create_result("\n".join(lines), **self._metadata(buffer, config))
