import argparse
import logging
import sys
from pathlib import Path

from glyphpic.config import RenderConfig
from glyphpic.converter import image_to_text
from glyphpic.errors import GlyphpicError
from glyphpic.model import RenderMode

DEFAULT_IMAGE = (
    "https://upload.wikimedia.org/wikipedia/commons/thumb/e/ec/"
    "Mona_Lisa%2C_by_Leonardo_da_Vinci%2C_from_C2RMF_retouched.jpg/"
    "800px-Mona_Lisa%2C_by_Leonardo_da_Vinci%2C_from_C2RMF_retouched.jpg"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image as ASCII, dot or pixel art")
    parser.add_argument(
        "image", nargs="?", default=DEFAULT_IMAGE, help="Path, http(s) URL or data URL of the input image"
    )
    parser.add_argument(
        "-m",
        "--mode",
        default=RenderMode.ASCII.value,
        choices=[mode.value for mode in RenderMode],
        help="Rendering mode (default: ascii)",
    )
    parser.add_argument(
        "-d",
        "--max-dimension",
        type=int,
        default=RenderConfig.max_dimension,
        help="Longest side of the sampling canvas in pixels (default: 300)",
    )
    parser.add_argument("-o", "--output", type=Path, default=None, help="Write the art to a file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug details to stderr")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = RenderConfig(max_dimension=args.max_dimension)
    try:
        grid = image_to_text(args.image, args.mode, config)
    except GlyphpicError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.output is not None:
        try:
            args.output.write_text(grid.to_text(), encoding="utf-8")
        except OSError as exc:
            print(f"Could not write {args.output}: {exc}", file=sys.stderr)
            sys.exit(1)
    else:
        sys.stdout.write(grid.to_text())
