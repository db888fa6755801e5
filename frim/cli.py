from __future__ import annotations

import argparse
import logging
import math
from typing import Callable, List, Optional, Sequence, Tuple

from frim.config import (
    APP_VERSION,
    MODES,
    MODE_HALF_LIFE,
    MODE_FACTOR,
    DEFAULT_MODE,
    DEFAULT_HALF_LIFE,
    DEFAULT_SMOOTHING,
    DEFAULT_LAMBDA,
    DEFAULT_SOURCE,
    DEFAULT_TARGET,
    DEFAULT_FPS,
    DEFAULT_SECONDS,
    DEFAULT_EVERY,
    DEFAULT_FPS_LIST,
)
from frim.smoothing import SCALAR_SMOOTHERS

log = logging.getLogger("frim")

Smoother = Callable[[float, float, float, float], float]


def default_param(mode: str) -> float:
    if mode == MODE_HALF_LIFE:
        return DEFAULT_HALF_LIFE
    if mode == MODE_FACTOR:
        return DEFAULT_SMOOTHING
    return DEFAULT_LAMBDA


def simulate(
    fn: Smoother,
    *,
    source: float,
    target: float,
    param: float,
    fps: float,
    seconds: float,
) -> List[Tuple[int, float, float]]:
    """Run fn once per frame for `seconds` at `fps`.

    The frame count is rounded and dt adjusted so every rate covers exactly
    the same duration. Returns (frame, elapsed, value) rows, frame 0 first.
    """
    n = max(1, int(round(seconds * fps)))
    dt = seconds / n
    value = float(source)
    rows = [(0, 0.0, value)]
    for i in range(1, n + 1):
        value = fn(value, target, param, dt)
        rows.append((i, i * dt, value))
    return rows


def _parse_fps_list(text: str) -> List[float]:
    try:
        rates = [float(part) for part in text.split(",") if part.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid fps list: {text!r}") from e
    if not rates:
        raise argparse.ArgumentTypeError("fps list is empty")
    return rates


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="frim", description=f"Framerate-independent smoothing helpers v{APP_VERSION}")
    p.add_argument("--version", action="version", version=f"frim {APP_VERSION}")
    p.add_argument("--debug", action="store_true", help="enable debug logs")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--mode", choices=MODES, default=DEFAULT_MODE, help=f"smoothing parameterization (default: {DEFAULT_MODE})")
    common.add_argument(
        "--param",
        type=float,
        default=None,
        help="half-life (sec), smoothing factor (0..1, gap left after 1 sec) or lambda (1/sec); default depends on mode",
    )

    values = argparse.ArgumentParser(add_help=False)
    values.add_argument("--source", type=float, default=DEFAULT_SOURCE, help="start value")
    values.add_argument("--target", type=float, default=DEFAULT_TARGET, help="target value")
    values.add_argument("--seconds", type=float, default=DEFAULT_SECONDS, help="simulated duration (sec)")

    sub = p.add_subparsers(dest="command", required=True)

    t = sub.add_parser("trace", parents=[common, values], help="print the value frame by frame")
    t.add_argument("--fps", type=float, default=DEFAULT_FPS, help="simulated frame rate")
    t.add_argument("--every", type=int, default=DEFAULT_EVERY, help="print every n-th frame (last frame always printed)")

    c = sub.add_parser("compare", parents=[common, values], help="simulate the same duration at several frame rates")
    c.add_argument("--fps-list", type=_parse_fps_list, default=DEFAULT_FPS_LIST, help="comma separated frame rates (default: 30,60,144)")

    sub.add_parser("demo", parents=[common], help="interactive pygame sandbox (needs the 'demo' extra)")
    return p


def _check_rates(p: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    if not math.isfinite(args.seconds) or args.seconds <= 0.0:
        p.error("--seconds must be a finite number > 0")
    rates = args.fps_list if args.command == "compare" else [args.fps]
    if any(not math.isfinite(r) or r <= 0.0 for r in rates):
        p.error("frame rates must be finite numbers > 0")
    if args.command == "trace" and args.every < 1:
        p.error("--every must be >= 1")


def _run_trace(args: argparse.Namespace) -> None:
    fn = SCALAR_SMOOTHERS[args.mode]
    rows = simulate(fn, source=args.source, target=args.target, param=args.param, fps=args.fps, seconds=args.seconds)
    last = rows[-1][0]
    print(f"{'frame':>5} {'t':>8} {'value':>12} {'gap':>12}")
    for frame, elapsed, value in rows:
        if frame % args.every == 0 or frame == last:
            print(f"{frame:5d} {elapsed:8.4f} {value:12.6f} {abs(args.target - value):12.6f}")


def _run_compare(args: argparse.Namespace) -> None:
    fn = SCALAR_SMOOTHERS[args.mode]
    finals = []
    for fps in args.fps_list:
        rows = simulate(fn, source=args.source, target=args.target, param=args.param, fps=fps, seconds=args.seconds)
        frames, _, value = rows[-1]
        finals.append(value)
        print(f"fps={fps:>7g} frames={frames:5d} value={value:.9f}")
    print(f"spread={max(finals) - min(finals):.3e}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = _build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.param is None:
        args.param = default_param(args.mode)
    log.debug("command=%s mode=%s param=%g", args.command, args.mode, args.param)

    if args.command == "demo":
        try:
            from frim.demo import run_demo
        except ModuleNotFoundError as e:
            if e.name != "pygame":
                raise
            log.error("demo needs pygame: pip install 'frim[demo]'")
            return 1
        try:
            run_demo(mode=args.mode, param=float(args.param), debug=bool(args.debug))
        except RuntimeError as e:
            log.error("%s", e)
            return 1
        return 0

    _check_rates(p, args)
    if args.command == "trace":
        _run_trace(args)
    else:
        _run_compare(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
