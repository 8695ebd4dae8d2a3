from pathlib import Path
from typing import Optional, Union

from PIL import Image, ImageDraw, ImageFont

# Monospace fonts tried in order
FONT_CANDIDATES = [
    "/System/Library/Fonts/Menlo.ttc",  # macOS
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",  # Linux
    "DejaVuSansMono.ttf",
    "consola.ttf",  # Windows
]

PADDING = 20


def _load_font(font_size: int):
    for name in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, font_size)
        except (OSError, IOError):
            continue
    return ImageFont.load_default()


def render_ascii_to_image(
    ascii_text: str,
    path: Union[str, Path],
    font_size: int = 14,
    bg_color: str = "white",
    text_color: str = "black",
) -> Optional[Path]:
    """
    Renders a text-art string to a PNG image.
    Returns the path written, or None if there is nothing to draw.
    """
    lines = ascii_text.splitlines()
    if not lines:
        return None

    font = _load_font(font_size)

    # Measure a full-height glyph for consistent cell dims
    left, top, right, bottom = font.getbbox("M")
    char_width = max(1, right - left)
    char_height = (bottom - top) + 2

    max_line_len = max(len(line) for line in lines)
    img_width = max_line_len * char_width + PADDING * 2
    img_height = len(lines) * char_height + PADDING * 2

    image = Image.new("RGB", (img_width, img_height), color=bg_color)
    draw = ImageDraw.Draw(image)

    y_text = PADDING
    for line in lines:
        draw.text((PADDING, y_text), line, font=font, fill=text_color)
        y_text += char_height

    path = Path(path)
    image.save(path, format="PNG")
    return path
