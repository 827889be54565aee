import argparse
import logging
import sys

from asciipatch.converter import write_lines
from asciipatch.engine import RenderConfig
from asciipatch.errors import AsciiPatchError
from asciipatch.loader import load_image
from asciipatch.renderer import render


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render an image as ASCII art")
    parser.add_argument("--path", required=True, help="Path to the image file to read")
    parser.add_argument("--width", type=int, default=64, help="Number of characters per line (default: 64)")
    parser.add_argument("--height", type=int, default=64, help="Number of lines (default: 64)")
    parser.add_argument(
        "--use-extended-char-list",
        action="store_true",
        default=False,
        help="Use the 69-character palette instead of the 14-character one",
    )
    parser.add_argument(
        "--char-bias",
        type=float,
        default=0.8,
        help="Brightness curve exponent (default: 0.8). Higher values give more dark characters, lower more light.",
    )
    parser.add_argument(
        "--cover-edges",
        action="store_true",
        default=False,
        help="Spread patches over every pixel instead of dropping the right and bottom remainder",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = RenderConfig.from_options(
        width=args.width,
        height=args.height,
        use_extended_char_list=args.use_extended_char_list,
        char_bias=args.char_bias,
        cover_edges=args.cover_edges,
    )
    try:
        config.validate()
        image = load_image(args.path)
        lines = render(image, config)
    except AsciiPatchError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    write_lines(lines, sys.stdout)


if __name__ == "__main__":
    main()
