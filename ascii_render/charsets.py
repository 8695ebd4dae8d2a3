"""
Palette Definitions and Brightness Mapping

A palette is a plain string of characters ordered from darkest (index 0)
to lightest (last index). Provides:
- DEFAULT_PALETTE: the 10-character standard ramp
- Named presets for quick selection
- Palette normalization (non-empty, capped length)
- to_char: luminance -> palette character
"""

import logging
import warnings
from typing import Dict, List


logger = logging.getLogger(__name__)


# ============================================================================
# PALETTE DEFINITIONS - dark to light
# ============================================================================

# Standard ramp - 10 characters (the default)
DEFAULT_PALETTE = "@%#*+=-:. "

# Ultra-detailed ramp - 70 characters for smooth gradients
PALETTE_ULTRA = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "

# Minimal ramp for a stylized look
PALETTE_MINIMAL = "@#S%?*+;:. "

# Block ramp - Unicode shading blocks
PALETTE_BLOCKS = "█▓▒░ "

# Longest palette kept; anything past this is dropped
MAX_PALETTE_LENGTH = 255

_PALETTES: Dict[str, str] = {
    "standard": DEFAULT_PALETTE,
    "ultra": PALETTE_ULTRA,
    "minimal": PALETTE_MINIMAL,
    "blocks": PALETTE_BLOCKS,
}


def get_palette(name: str = "standard") -> str:
    """
    Get a palette preset by name.

    Available palettes:
        - standard: "@%#*+=-:. " (default)
        - ultra: 70 characters sorted by density
        - minimal: 11 characters
        - blocks: Unicode shade blocks (█▓▒░)

    Args:
        name: Name of the palette

    Returns:
        Palette string, darkest first
    """
    if name not in _PALETTES:
        raise ValueError(f"Unknown palette: {name}. Available: {list(_PALETTES.keys())}")
    return _PALETTES[name]


def list_palettes() -> List[str]:
    """List all available palette names."""
    return list(_PALETTES.keys())


def normalize_palette(chars: str) -> str:
    """
    Validate a custom palette.

    The palette replaces the default wholesale. It must contain at least
    one character, and is truncated to MAX_PALETTE_LENGTH characters.

    Args:
        chars: Characters ordered from darkest to lightest

    Returns:
        The palette, possibly truncated
    """
    if not chars:
        raise ValueError("Palette must contain at least one character")

    if len(chars) > MAX_PALETTE_LENGTH:
        logger.debug("palette truncated from %d to %d characters", len(chars), MAX_PALETTE_LENGTH)
        warnings.warn(
            f"Palette has {len(chars)} characters; only the first {MAX_PALETTE_LENGTH} are used"
        )
        chars = chars[:MAX_PALETTE_LENGTH]

    return chars


def to_char(luminance: int, invert: bool = False, palette: str = DEFAULT_PALETTE) -> str:
    """
    Map a luminance value to a palette character.

    Dark pixels (0) map to the first (densest) character and bright
    pixels (255) to the last one. With invert the mapping is flipped.

    Args:
        luminance: Brightness in [0, 255]
        invert: Use 255 - luminance instead
        palette: Characters ordered dark to light

    Returns:
        A single character from the palette
    """
    if invert:
        luminance = 255 - luminance

    last = len(palette) - 1
    index = (luminance * last) // 255
    index = max(0, min(last, index))

    return palette[index]
