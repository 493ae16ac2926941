"""
Image Processor command-line entry point.

Usage:
    image-processor                           interactive command loop
    image-processor photo.png                 command loop with photo.png loaded
    image-processor photo.png -c invert -c "crop 0 0 64 64" -o out.png
                                              apply descriptors in order, then save
    image-processor photo.bmp -o photo.png    convert without transforming
"""

import argparse
import logging
import sys
from typing import List, Optional

from IP_Libs import __version__
from IP_Libs.SessionLib import ImageSession, run_command_loop
from IP_Libs.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT
from IP_Libs.errors import LoadError

logger = logging.getLogger(__name__)


def print_error(error: Exception) -> None:
    print(f"Error: {error}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-processor",
        description="Apply crop, blend, color and kernel transformations to images",
    )
    parser.add_argument("image", nargs="?", help="Image to load first")
    parser.add_argument(
        "-c", "--command",
        dest="commands",
        action="append",
        default=[],
        metavar="DESCRIPTOR",
        help="Transformation descriptor to apply (repeatable, applied in order)",
    )
    parser.add_argument("-o", "--output", help="Where to save the result (with no -c, the loaded image is saved as is)")
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: %(default)s)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run_batch(session: ImageSession, commands: List[str], output: Optional[str]) -> int:
    session.run_pipeline(commands)

    if output:
        try:
            session.save(output)
        except OSError as e:
            print(f"Error: cannot save image to {output}: {e}")
            return 1
        print(f"Saved to {output}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    if (args.commands or args.output) and not args.image:
        parser.print_usage()
        print("Error: -c and -o require an IMAGE to transform")
        return 2

    session = ImageSession(reporter=print_error)

    if args.image:
        try:
            session.load(args.image)
        except LoadError as e:
            logger.debug(f"Initial load failed: {e}")
            print(f"Error: cannot load image at path {args.image}")
            return 1

    if args.commands or args.output:
        return run_batch(session, args.commands, args.output)

    return run_command_loop(session, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
