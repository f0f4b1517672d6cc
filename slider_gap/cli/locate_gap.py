import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from ..services.gap_locator_service import GapLocatorService
from ..services.request_service import parse_locate_request

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="slider-gap",
        description="Print the x offset of the puzzle gap in a slider captcha background.",
    )
    ap.add_argument("background", nargs="?", help="background image file")
    ap.add_argument("slider", nargs="?", help="slider piece image file (only its size is used)")
    ap.add_argument("--slider-y", type=int, help="top row of the gap")
    ap.add_argument("--stdin", action="store_true",
                    help='read {"bgBase64", "sliderBase64", "sliderY"} JSON from stdin')
    ap.add_argument("--detailed", action="store_true",
                    help="print x, score and confident as JSON")
    ap.add_argument("--edge-margin", type=int, default=None,
                    help="columns skipped at both ends of the scan (default: GAP_EDGE_MARGIN or 5)")
    ap.add_argument("--drop-threshold", type=int, default=None,
                    help="minimum per-row brightness drop (default: GAP_DROP_THRESHOLD or 15)")
    return ap


def _run(args: argparse.Namespace, service: GapLocatorService):
    if args.stdin:
        bg_payload, slider_payload, slider_y = parse_locate_request(json.loads(sys.stdin.read()))
        return service.locate_base64(bg_payload, slider_payload, slider_y)

    if not args.background or not args.slider or args.slider_y is None:
        raise ValueError("background, slider and --slider-y are required unless --stdin is given")
    if args.slider_y < 0:
        raise ValueError(f"--slider-y must be non-negative, got {args.slider_y}")

    background = service.image_service.load(args.background)
    slider = service.image_service.load(args.slider)
    return service.locate(background, slider, args.slider_y)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S',
        stream=sys.stderr,
    )
    args = build_parser().parse_args(argv)
    service = GapLocatorService(edge_margin=args.edge_margin, drop_threshold=args.drop_threshold)

    try:
        result = _run(args, service)
    except (ValueError, TypeError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.detailed:
        print(json.dumps(result.as_dict()))
    else:
        print(result.x)
    return 0


if __name__ == "__main__":
    sys.exit(main())
