import argparse
import dataclasses
import json
import logging
from pathlib import Path

import cv2

from .config import DEFAULT_CONFIG
from .geometry import as_segments
from .pipeline import LaneEstimate, detect_lanes, estimate_lanes, generate_synthetic_lane


def _format_estimate(estimate: LaneEstimate) -> str:
    parts = []
    for name, line in estimate.to_dict().items():
        parts.append(f"{name}: {'absent' if line is None else tuple(line)}")
    return ", ".join(parts)


def _cmd_generate(args: argparse.Namespace) -> int:
    img = generate_synthetic_lane(width=args.width, height=args.height)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    cv2.imwrite(str(args.output), img)
    print(f"Wrote synthetic image to {args.output}")
    return 0


def _cmd_detect(args: argparse.Namespace) -> int:
    img = cv2.imread(str(args.image))
    if img is None:
        raise FileNotFoundError(f"Could not read image: {args.image}")

    overrides = {
        "canny_low": args.canny_low,
        "canny_high": args.canny_high,
        "hough_threshold": args.hough_threshold,
        "min_line_length": args.min_line_length,
        "max_line_gap": args.max_line_gap,
    }
    config = dataclasses.replace(DEFAULT_CONFIG, **{k: v for k, v in overrides.items() if v is not None})
    res = detect_lanes(img, config)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    cv2.imwrite(str(args.output), res.overlay)
    print(f"Wrote overlay to {args.output}")

    if args.save_edges:
        args.save_edges.parent.mkdir(parents=True, exist_ok=True)
        cv2.imwrite(str(args.save_edges), res.edges)
        print(f"Wrote edges to {args.save_edges}")

    if args.save_masked:
        args.save_masked.parent.mkdir(parents=True, exist_ok=True)
        cv2.imwrite(str(args.save_masked), res.masked_edges)
        print(f"Wrote masked edges to {args.save_masked}")

    print(f"Segments: {len(res.segments)}")
    print(_format_estimate(res.estimate))
    return 0


def _cmd_estimate(args: argparse.Namespace) -> int:
    raw = json.loads(args.segments.read_text())
    estimate = estimate_lanes(args.width, args.height, as_segments(raw))
    print(json.dumps(estimate.to_dict()))
    return 0


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Lane boundary estimation (OpenCV)")
    p.add_argument("-v", "--verbose", action="store_true", help="Log per-segment debug output")
    sub = p.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate a synthetic lane image")
    g.add_argument("--output", type=Path, required=True)
    g.add_argument("--width", type=int, default=640)
    g.add_argument("--height", type=int, default=480)
    g.set_defaults(func=_cmd_generate)

    d = sub.add_parser("detect", help="Detect lane lines on an image")
    d.add_argument("--image", type=Path, required=True)
    d.add_argument("--output", type=Path, default=Path("outputs/overlay.png"))
    d.add_argument("--canny-low", type=int, default=None)
    d.add_argument("--canny-high", type=int, default=None)
    d.add_argument("--hough-threshold", type=int, default=None)
    d.add_argument("--min-line-length", type=int, default=None)
    d.add_argument("--max-line-gap", type=int, default=None)
    d.add_argument("--save-edges", type=Path, help="Optional path to save raw Canny edges")
    d.add_argument("--save-masked", type=Path, help="Optional path to save ROI-masked edges")
    d.set_defaults(func=_cmd_detect)

    e = sub.add_parser("estimate", help="Estimate lanes from a JSON list of [x1, y1, x2, y2] segments")
    e.add_argument("--width", type=int, required=True)
    e.add_argument("--height", type=int, required=True)
    e.add_argument("--segments", type=Path, required=True)
    e.set_defaults(func=_cmd_estimate)

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
