"""
Image Loading and Grayscale Sampling

Decoding is delegated to Pillow, which sniffs the format from the file
contents (JPEG, PNG, BMP, TGA, PSD, GIF, ...). The decoded pixels are kept
as a read-only numpy array of shape (height, width, channels).
"""

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from .errors import DecodeError


logger = logging.getLogger(__name__)

# ITU-R BT.601 luminance weights
LUMA_R = 0.299
LUMA_G = 0.587
LUMA_B = 0.114

# Pillow modes that are kept as-is, with their channel counts
_NATIVE_MODES = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}

# Single-band modes that are narrowed to 8-bit grayscale
_GRAY_MODES = ("1", "I", "I;16", "I;16B", "I;16L", "I;16N", "F")


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """
    Decoded image pixels.

    Attributes:
        pixels: uint8 array of shape (height, width, channels), row-major,
            pixel-interleaved. Read-only.
    """
    pixels: np.ndarray

    def __post_init__(self):
        if self.pixels.ndim != 3:
            raise ValueError(f"Expected a (height, width, channels) array, got shape {self.pixels.shape}")
        height, width, channels = self.pixels.shape
        if width <= 0 or height <= 0 or channels <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}x{channels}")
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {self.pixels.dtype}")

    @classmethod
    def from_bytes(cls, width: int, height: int, channels: int, data: bytes) -> "PixelBuffer":
        """Build a buffer from a flat, row-major, pixel-interleaved byte sequence."""
        expected = width * height * channels
        if len(data) != expected:
            raise ValueError(f"Expected {expected} bytes for {width}x{height}x{channels}, got {len(data)}")
        pixels = np.frombuffer(bytes(data), dtype=np.uint8).reshape((height, width, channels))
        return cls(pixels)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def channels(self) -> int:
        return self.pixels.shape[2]

    @property
    def data(self) -> bytes:
        """Flat pixel bytes, width * height * channels long."""
        return self.pixels.tobytes()

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height}, channels={self.channels})"


def from_pil(image: Image.Image) -> PixelBuffer:
    """
    Convert a PIL Image into a PixelBuffer.

    Modes other than L, LA, RGB and RGBA are converted first: single-band
    modes become L, palette images become RGB (RGBA with transparency) and
    everything else becomes RGB.
    """
    mode = image.mode
    if mode not in _NATIVE_MODES:
        if mode in _GRAY_MODES:
            image = image.convert("L")
        elif mode == "P":
            image = image.convert("RGBA" if "transparency" in image.info else "RGB")
        elif mode == "PA":
            image = image.convert("RGBA")
        else:
            image = image.convert("RGB")
        logger.debug("converted image mode %s -> %s", mode, image.mode)

    pixels = np.array(image, dtype=np.uint8)
    if pixels.ndim == 2:
        pixels = pixels[:, :, np.newaxis]
    pixels.setflags(write=False)

    return PixelBuffer(pixels)


def load_image(path: Union[str, Path]) -> PixelBuffer:
    """
    Load and decode an image file.

    Args:
        path: Path to the image

    Returns:
        PixelBuffer with the decoded pixels (first frame for animations)

    Raises:
        DecodeError: if the file is missing, unreadable or not a supported image
    """
    try:
        with Image.open(path) as image:
            buffer = from_pil(image)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(str(path), str(e) or type(e).__name__) from e

    logger.debug("decoded %s: %r", path, buffer)
    return buffer


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def sample(buffer: PixelBuffer, x: int, y: int) -> int:
    """
    Grayscale value of a single pixel.

    Coordinates outside the image return 0. One- and two-channel images use
    channel 0 directly; images with three or more channels use the BT.601
    weighted sum of the first three, rounded. Alpha is ignored.

    Args:
        buffer: Decoded pixels
        x: Column
        y: Row

    Returns:
        Luminance in [0, 255]
    """
    if x < 0 or y < 0 or x >= buffer.width or y >= buffer.height:
        return 0

    pixel = buffer.pixels[y, x]
    if buffer.channels < 3:
        return int(pixel[0])

    r, g, b = int(pixel[0]), int(pixel[1]), int(pixel[2])
    return _round_half_up(LUMA_R * r + LUMA_G * g + LUMA_B * b)


def luminance_map(buffer: PixelBuffer) -> np.ndarray:
    """
    Grayscale values for every pixel.

    Matches sample() exactly, pixel for pixel.

    Returns:
        int64 array of shape (height, width)
    """
    pixels = buffer.pixels
    if buffer.channels < 3:
        return pixels[:, :, 0].astype(np.int64)

    rgb = pixels[:, :, :3].astype(np.float64)
    luma = LUMA_R * rgb[:, :, 0] + LUMA_G * rgb[:, :, 1] + LUMA_B * rgb[:, :, 2]
    return np.floor(luma + 0.5).astype(np.int64)
