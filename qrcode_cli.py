#!/usr/bin/env python3
"""
Byte mode QR Code generator - Command Line Interface
Encodes text into a QR Code and writes it as a PNG or BMP image
"""

import argparse
import logging
import os
import sys

from error_correction import ErrorCorrection
from exceptions import QRCodeError
from qrcode import create_symbol

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Encode text into a byte mode QR Code image",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Smallest symbol for the text, written to out/qrcode.png
  python qrcode_cli.py "https://google.com"

  # Force version 5 with high error correction as a 1 bit BMP
  python qrcode_cli.py "Hello gamer!" --version 5 --ec-level H --format bmp

  # Show the mask penalties while encoding
  python qrcode_cli.py "Hello gamer!" -v
        """,
    )

    parser.add_argument("data", type=str, help="Text to encode (stored as UTF-8 bytes)")
    parser.add_argument("--ec-level", type=str, default="M", choices=["L", "M", "Q", "H"], help="Error correction level (default: M)")
    parser.add_argument("--version", type=int, default=None, help="QR Code version 1-40 (default: smallest that fits)")
    parser.add_argument("--mask-pattern", type=int, default=None, choices=range(8), help="Mask pattern 0-7 (default: lowest penalty)")
    parser.add_argument("--output", type=str, default=None, help="Output image path (default: out/qrcode.<format>)")
    parser.add_argument("--format", type=str, default="png", choices=["png", "bmp"], help="Image format (default: png)")
    parser.add_argument("--scale", type=int, default=8, help="Pixels per module (default: 8)")
    parser.add_argument("--border", type=int, default=4, help="Quiet zone width in modules (default: 4)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        symbol = create_symbol(
            args.data,
            version=args.version,
            error_correction_level=ErrorCorrection.from_letter(args.ec_level),
            mask_pattern=args.mask_pattern,
        )
    except (QRCodeError, ValueError) as e:
        logger.error("Unable to encode data: %s", e)
        return 1

    destination_folder: str | None = None
    file_name: str | None = None
    if args.output is not None:
        destination_folder, file_name = os.path.split(args.output)
        # A bare file name is written to the working directory
        destination_folder = destination_folder or "."

    writer = symbol.write_to_bmp if args.format == "bmp" else symbol.write_to_png
    try:
        file_path = writer(file_name or None, destination_folder, border=args.border, scale=args.scale)
    except (OSError, ValueError) as e:
        logger.error("Unable to write image: %s", e)
        return 1

    logger.info("Wrote version %d QR Code to %s", symbol.version, file_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
