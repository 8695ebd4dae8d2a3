#!/usr/bin/env python3
"""
Image-to-ASCII Command Line Tool

Renders an image file as text art on standard output.

Usage:
    ascii-render image.jpg
    ascii-render image.png -w 120 -h 40
    ascii-render image.jpg -i -c "@#+. "
    ascii-render --help
"""

import argparse
import sys
from typing import List, Optional, Sequence

from .charsets import DEFAULT_PALETTE
from .errors import DecodeError, UsageError
from .logging_setup import configure_logging, get_logger
from .renderer import Renderer, RenderConfig


PROG = "ascii-render"

HELP_WORDS = ("--help", "-help", "help")

# Options that always take the next token as their value, with their long forms
VALUE_OPTIONS = {"-w": "--width", "-h": "--height", "-c": "--chars", "-o": "--output"}

USAGE = """Usage: {prog} <image_path> [options]

Options:
  -w, --width <width>    Set output width (default: 80)
  -h, --height <height>  Set output height (default: auto-calculated)
  -i                     Invert colors (light becomes dark)
  -c, --chars <chars>    Custom ASCII characters (from dark to light)
  -o, --output <path>    Also save the result (.txt, .html or .png)
  -v                     Verbose diagnostics on stderr
  --help                 Show this help message

Examples:
  {prog} image.jpg
  {prog} image.png -w 120 -h 40
  {prog} image.jpg -i -c "@#+. "
  {prog} image.bmp -w 60 -o art.html

Supported formats: anything Pillow can decode (JPEG, PNG, BMP, TGA, PSD, GIF, ...)
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=PROG, add_help=False, allow_abbrev=False)
    parser.add_argument("image")
    parser.add_argument("-w", "--width", dest="width", type=int, default=80)
    parser.add_argument("-h", "--height", dest="height", type=int, default=None)
    parser.add_argument("-i", dest="invert", action="store_true")
    parser.add_argument("-c", "--chars", dest="chars", default=None)
    parser.add_argument("-o", "--output", dest="output", default=None)
    parser.add_argument("-v", dest="verbose", action="store_true")
    return parser


def attach_values(argv: Sequence[str]) -> List[str]:
    """
    Join each value option with the token after it (`-c`, `-=.` -> `--chars=-=.`).

    The next token is the value even when it starts with a dash.
    """
    joined = []
    tokens = iter(argv)
    for token in tokens:
        long_form = VALUE_OPTIONS.get(token)
        if long_form is None and token in VALUE_OPTIONS.values():
            long_form = token
        if long_form is not None:
            value = next(tokens, None)
            if value is not None:
                token = f"{long_form}={value}"
        joined.append(token)
    return joined


def print_usage(prog: str = PROG):
    print(USAGE.format(prog=prog), file=sys.stderr)


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    """
    Parse and validate command-line arguments.

    The image path must be the first argument.

    Raises:
        UsageError: on unknown options, missing or malformed values,
            non-positive sizes or an empty palette
    """
    argv = list(argv)
    if not argv or argv[0].startswith("-"):
        raise UsageError("the image path must be the first argument")

    args = build_parser().parse_args(attach_values(argv))

    if args.width <= 0:
        raise UsageError(f"width must be a positive integer, got {args.width}")
    if args.height is not None and args.height <= 0:
        raise UsageError(f"height must be a positive integer, got {args.height}")
    if args.chars is not None and not args.chars:
        raise UsageError("custom characters must not be empty")

    return args


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)

    if not argv:
        print_usage()
        return 1

    if argv[0] in HELP_WORDS or "--help" in attach_values(argv):
        print_usage()
        return 0

    try:
        args = parse_args(argv)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print_usage()
        return 1

    configure_logging(args.verbose)
    logger = get_logger()

    config = RenderConfig(
        width=args.width,
        height=args.height or 0,
        invert=args.invert,
        palette=args.chars or DEFAULT_PALETTE,
    )
    renderer = Renderer(config)

    try:
        buffer = renderer.load(args.image)
    except DecodeError as e:
        print(f"Error: Could not load image {e.path}", file=sys.stderr)
        print(f"Reason: {e.reason}", file=sys.stderr)
        return 1

    print(f"Loaded image: {buffer.width}x{buffer.height} with {buffer.channels} channels")

    result = renderer.convert(sys.stdout)
    if result is not None:
        logger.debug("rendered %s", result.get_stats())

    if args.output and result is not None:
        try:
            path = result.save(args.output)
        except OSError as e:
            print(f"Error: Could not save {args.output}: {e}", file=sys.stderr)
            return 1
        logger.info("saved %s", path)

    return 0


if __name__ == "__main__":
    sys.exit(main())
