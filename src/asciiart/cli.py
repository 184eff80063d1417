import argparse
import logging
import sys

from asciiart.converter import image_to_ascii
from asciiart.errors import ConversionError
from asciiart.preview import save_previews
from asciiart.sources import BytesImageSource, FileImageSource, FileTextSink, StreamTextSink
from asciiart.terminal import MAX_WIDTH, MIN_WIDTH, default_width

logger = logging.getLogger(__name__)


def width_arg(value: str) -> int:
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {value!r}") from None
    if not MIN_WIDTH <= width <= MAX_WIDTH:
        raise argparse.ArgumentTypeError(f"width must be between {MIN_WIDTH} and {MAX_WIDTH}, got {width}")
    return width


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciiart", description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image, or - to read it from stdin")
    parser.add_argument(
        "-w",
        "--width",
        type=width_arg,
        default=None,
        help=f"Output width in columns, {MIN_WIDTH}-{MAX_WIDTH} (default: terminal width)",
    )
    parser.add_argument("-o", "--output", default=None, help="Write the text to this file instead of stdout")
    parser.add_argument(
        "-p", "--preview-dir", default=None, help="Also save original, grayscale and resized bitmaps here"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    width = args.width if args.width is not None else default_width()

    if args.image == "-":
        source = BytesImageSource(sys.stdin.buffer.read(), name="<stdin>")
    else:
        source = FileImageSource(args.image)
    sink = FileTextSink(args.output) if args.output else StreamTextSink()

    try:
        image = source.load()
        logger.debug("Loaded %s (%dx%d, %s)", args.image, image.width, image.height, image.mode)
        if args.preview_dir:
            for path in save_previews(image, args.preview_dir).values():
                logger.info("Wrote preview %s", path)
        sink.write(image_to_ascii(image, width))
    except (OSError, ConversionError) as e:
        print(e, file=sys.stderr)
        return 1
    return 0
