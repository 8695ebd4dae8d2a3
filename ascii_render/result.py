"""
Rendering Result Container

Provides the ASCIIResult dataclass for storing and displaying a rendering,
with support for terminal display, HTML export, and file saving.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union
import html


@dataclass
class ASCIIResult:
    """
    Container for a text-art rendering.

    Attributes:
        text: The rendered rows joined with newlines
        metadata: Render parameters (image size, output size, palette, ...)
    """
    text: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def lines(self):
        return self.text.split('\n') if self.text else []

    @property
    def width(self) -> int:
        """Width in characters."""
        return max((len(line) for line in self.lines), default=0)

    @property
    def height(self) -> int:
        """Height in lines."""
        return len(self.lines)

    def display(self, max_width: Optional[int] = None):
        """
        Print the rendering to the terminal.

        Args:
            max_width: Maximum width to display (truncates if needed)
        """
        if max_width:
            for line in self.lines:
                print(line[:max_width])
        else:
            print(self.text)

    def save(self, path: Union[str, Path], format: str = "auto") -> Path:
        """
        Save the rendering to a file.

        Args:
            path: Output file path
            format: "txt", "html", "png" or "auto" (detect from extension)

        Returns:
            The path written
        """
        path = Path(path)
        if format == "auto":
            suffix = path.suffix.lower()
            if suffix in ('.html', '.htm'):
                format = "html"
            elif suffix == '.png':
                format = "png"
            else:
                format = "txt"

        if format == "png":
            from .exporter import render_ascii_to_image
            render_ascii_to_image(self.text, path)
            return path

        content = self.to_html() if format == "html" else self.text + "\n"
        path.write_text(content, encoding='utf-8')
        return path

    def to_html(
        self,
        font_family: str = "Menlo, Monaco, 'Courier New', monospace",
        font_size: str = "10px",
        bg_color: str = "#1e1e1e",
        fg_color: str = "#d4d4d4",
        title: str = "ASCII Art",
    ) -> str:
        """
        Convert the rendering to a styled HTML page.

        Args:
            font_family: CSS font family
            font_size: CSS font size
            bg_color: Background color
            fg_color: Text color
            title: HTML page title

        Returns:
            Complete HTML document string
        """
        escaped_text = html.escape(self.text)

        meta_html = ""
        if self.metadata:
            meta_items = [
                f"<li><strong>{html.escape(str(key))}:</strong> {html.escape(str(value))}</li>"
                for key, value in self.metadata.items()
            ]
            meta_html = f"""
        <div class="metadata">
            <h3>Render Details</h3>
            <ul>{''.join(meta_items)}</ul>
        </div>
"""

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{html.escape(title)}</title>
    <style>
        body {{
            background-color: {bg_color};
            color: {fg_color};
            font-family: {font_family};
            font-size: {font_size};
            line-height: 1.2;
            padding: 20px;
            margin: 0;
        }}
        pre {{
            margin: 0;
            white-space: pre;
            overflow-x: auto;
        }}
        .metadata {{
            margin-top: 20px;
            padding-top: 20px;
            border-top: 1px solid #444;
            font-size: 12px;
        }}
        .metadata ul {{
            list-style: none;
            padding: 0;
        }}
    </style>
</head>
<body>
    <pre>{escaped_text}</pre>
{meta_html}
</body>
</html>"""

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about the rendering."""
        lines = self.lines
        unique_chars = set(self.text.replace('\n', ''))

        return {
            'width': self.width,
            'height': self.height,
            'total_characters': sum(len(line) for line in lines),
            'unique_characters': len(unique_chars),
        }

    def __repr__(self) -> str:
        return f"ASCIIResult(width={self.width}, height={self.height})"

    def __str__(self) -> str:
        return self.text


def create_result(text: str, **metadata) -> ASCIIResult:
    """
    Create an ASCIIResult stamped with a generation time.

    Args:
        text: Rendered text
        **metadata: Render parameters to record

    Returns:
        Configured ASCIIResult
    """
    stamped = {'generated_at': datetime.now().isoformat()}
    stamped.update(metadata)
    return ASCIIResult(text=text, metadata=stamped)
