"""Command line interface for inspecting easing curves."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from typing import List, Optional

from .easing import EASING_FUNCTIONS, get_easing
from .options import OPTIONS_FILE, load_options
from .sampling import sample_curve

# ---------------------------------------------------------------------------
# Logging utilities
# ---------------------------------------------------------------------------

LOG_FILE = "elastic_ease.log"

logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.FileHandler(LOG_FILE, encoding="utf-8", delay=True)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="elastic-ease", description="Evaluate and preview easing curves"
    )
    parser.add_argument("--curve", choices=sorted(EASING_FUNCTIONS),
                        help="Easing curve to use (default from options)")
    parser.add_argument("--options", default=str(OPTIONS_FILE),
                        help="Path to the options JSON file")
    sub = parser.add_subparsers(dest="command", required=True)

    p_eval = sub.add_parser("eval", help="Print the eased value at one time")
    for name in ("t", "b", "c", "d"):
        p_eval.add_argument(name, type=float)

    def add_range(p: argparse.ArgumentParser) -> None:
        p.add_argument("--begin", type=float, help="Start value")
        p.add_argument("--change", type=float, help="Change in value")
        p.add_argument("--duration", type=float, help="Total duration")

    p_sample = sub.add_parser("sample", help="Print the curve over a time grid")
    add_range(p_sample)
    p_sample.add_argument("--steps", type=int, help="Number of intervals")
    p_sample.add_argument("--json", action="store_true", help="Emit JSON")

    p_preview = sub.add_parser("preview", help="Render the curve to an image")
    p_preview.add_argument("output", help="Image path, e.g. curve.png")
    add_range(p_preview)
    p_preview.add_argument("--width", type=int, default=320)
    p_preview.add_argument("--height", type=int, default=200)

    sub.add_parser("list", help="List registered curves")
    return parser


def _pick(value, default):
    return default if value is None else value


def _format(value: float) -> str:
    return repr(value) if math.isfinite(value) else str(value)


def _json_number(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def _run(args: argparse.Namespace) -> None:
    options = load_options(args.options)
    curve = _pick(args.curve, options["curve"])

    if args.command == "list":
        for name in sorted(EASING_FUNCTIONS):
            print(name)
        return

    ease = get_easing(curve)
    if args.command == "eval":
        logger.info("eval %s t=%s b=%s c=%s d=%s", curve, args.t, args.b, args.c, args.d)
        print(_format(ease(args.t, args.b, args.c, args.d)))
        return

    begin = _pick(args.begin, options["begin"])
    change = _pick(args.change, options["change"])
    duration = _pick(args.duration, options["duration"])

    if args.command == "sample":
        steps = _pick(args.steps, options["steps"])
        logger.info("sample %s steps=%s", curve, steps)
        samples = sample_curve(ease, begin, change, duration, steps)
        if args.json:
            rows = [
                {"t": _json_number(t), "value": _json_number(v)}
                for t, v in samples
            ]
            print(json.dumps(rows))
        else:
            for t, v in samples:
                print(f"{_format(t)}\t{_format(v)}")
        return

    # pygame prints a banner on import; keep it out of the numeric commands.
    from .preview import save_preview

    path = save_preview(
        args.output,
        ease,
        size=(args.width, args.height),
        begin=begin,
        change=change,
        duration=duration,
    )
    print(path)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the exit status."""
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return int(exc.code or 0)
    try:
        _run(args)
    except (KeyError, ValueError, OSError) as exc:
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else str(exc)
        logger.error("%s failed: %s", args.command, message)
        print(f"error: {message}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
