"""
screenshot-capture command line entry point.

    screenshot-capture [URL] [DEVICE] [--size=NAME] [--production] [--output=DIR]
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .capture import (
    CaptureOptions,
    capture_production_screenshots,
    capture_screenshot,
    format_file_size,
)
from .filenames import generate_filename
from .presets import DEFAULT_PRODUCTION_SET, DEVICE_PRESETS, PRODUCTION_SIZES, get_size_preset

DEFAULT_URL = "http://example.com/"
DEFAULT_DEVICE = "mobile"
DEFAULT_DELAY_MS = 1000

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

EXAMPLES = f"""
Examples:
  screenshot-capture                                              # Basic mobile screenshot
  screenshot-capture https://example.com desktop                  # Desktop screenshot
  screenshot-capture https://example.com mobile --size=thumbnail  # Mobile thumbnail
  screenshot-capture https://example.com desktop --production     # All production sizes

Production sizes available: {', '.join(PRODUCTION_SIZES)}
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="screenshot-capture",
        description="Capture website screenshots with device presets and production sizes",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("url", nargs="?", default=DEFAULT_URL, help=f"Website URL (default: {DEFAULT_URL})")
    parser.add_argument(
        "device",
        nargs="?",
        default=DEFAULT_DEVICE,
        help=f"Device preset: {', '.join(DEVICE_PRESETS)} (default: {DEFAULT_DEVICE})",
    )
    parser.add_argument("--size", help="Production size preset: thumbnail, card, social-media, etc.")
    parser.add_argument("--production", action="store_true", help="Generate all common production sizes")
    parser.add_argument("--output", "-o", help="Output directory (default: ./screenshots)")
    parser.add_argument("--format", choices=["png", "jpeg"], default="png", help="Image format (default: png)")
    parser.add_argument("--quality", type=int, default=90, help="JPEG quality 0-100 (default: 90)")
    parser.add_argument(
        "--delay",
        type=int,
        help=f"Extra wait after load in ms (default: {DEFAULT_DELAY_MS}, none with --production)",
    )
    parser.add_argument("--wait-for", dest="wait_for", help="CSS selector to wait for before capturing")
    parser.add_argument(
        "--no-block",
        dest="block_resources",
        action="store_false",
        help="Do not block media, websocket and tracking requests",
    )
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress details")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format=LOG_FORMAT)


def resolve_delay(args: argparse.Namespace) -> int:
    if args.delay is not None:
        return args.delay
    # The production base capture is taken as soon as the page is idle.
    return 0 if args.production else DEFAULT_DELAY_MS


async def main_async(args: argparse.Namespace) -> None:
    output_dir = Path(args.output) if args.output else Path.cwd() / "screenshots"
    options = CaptureOptions(
        format=args.format,
        quality=args.quality,
        full_page=True,
        wait_for_selector=args.wait_for,
        delay=resolve_delay(args),
        block_resources=args.block_resources,
        headless=not args.headed,
    )

    print(f"Capturing screenshot of: {args.url}")
    print(f"Device preset: {args.device}")

    if args.production:
        print("Mode: Production (multiple sizes)")
        results = await capture_production_screenshots(
            args.url,
            args.device,
            DEFAULT_PRODUCTION_SET,
            output_dir=output_dir,
            options=options,
        )
        for result in results:
            print(f"✓ {result.size} ({result.dimensions.label}): {result.file_size}")

        print("\n🎉 Production screenshots captured successfully!")
        print(f"Total files: {len(results)}")
        print(f"Saved to: {output_dir}")
        return

    if args.size:
        size = get_size_preset(args.size)
        print(f"Mode: Production size ({args.size})")
        output_path = output_dir / generate_filename(args.url, args.device, args.format, args.size)
        options = replace(options, output_path=output_path, fixed_size=size)
    else:
        print("Mode: Full page screenshot")
        output_path = output_dir / generate_filename(args.url, args.device, args.format)
        options = replace(options, output_path=output_path)

    screenshot = await capture_screenshot(args.url, args.device, options)

    print("Screenshot captured successfully!")
    if args.size:
        print(f"Size: {options.fixed_size.label} ({args.size})")
    print(f"File size: {format_file_size(len(screenshot))}")
    print(f"Saved to: {output_path}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        asyncio.run(main_async(args))
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
