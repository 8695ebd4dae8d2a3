"""
Exception types raised by ascii_render.
"""

from typing import Optional


class AsciiRenderError(Exception):
    """Base class for all ascii_render errors."""


class UsageError(AsciiRenderError):
    """Bad or missing command-line arguments."""


class DecodeError(AsciiRenderError):
    """
    An image file could not be opened or decoded.

    Attributes:
        path: Path that was being loaded
        reason: Human-readable failure reason from the decoder
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load image {path}: {reason}")


class NotLoadedError(AsciiRenderError):
    """Rendering was requested before an image was loaded."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "No image data loaded!")
