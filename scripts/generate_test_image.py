"""
Generate a synthetic test image and render it as text art.
Handy for trying palettes and sizes without hunting for a sample photo.
"""

import argparse

import numpy as np
from PIL import Image, ImageDraw

from ascii_render import Renderer


def create_synthetic_image(width=600, height=400):
    """Create a synthetic image with a gradient background and shapes."""
    img = np.zeros((height, width, 3), dtype=np.uint8)

    # Horizontal black-to-white ramp, blue tinted towards the bottom
    ramp = (np.arange(width) * 255 // max(width - 1, 1)).astype(np.uint8)
    img[:, :, 0] = ramp
    img[:, :, 1] = ramp
    img[:, :, 2] = np.clip(ramp[np.newaxis, :] + np.arange(height)[:, np.newaxis] * 64 // height, 0, 255)

    pil_img = Image.fromarray(img)
    draw = ImageDraw.Draw(pil_img)

    draw.ellipse((50, 50, 200, 200), fill='white', outline='black')
    draw.rectangle((250, 50, 350, 150), fill='black')
    draw.polygon([(450, 50), (400, 150), (500, 150)], fill='gray', outline='white')

    return pil_img


def main():
    parser = argparse.ArgumentParser(description="Write a synthetic test image and preview it")
    parser.add_argument("output", nargs="?", default="test_input.png", help="Image path to write")
    parser.add_argument("--width", "-w", type=int, default=80, help="Preview width in characters")
    args = parser.parse_args()

    image = create_synthetic_image()
    image.save(args.output)
    print(f"Saved '{args.output}'")

    renderer = Renderer()
    renderer.load(args.output)
    renderer.set_output_size(args.width, 0)
    renderer.convert()


if __name__ == "__main__":
    main()
