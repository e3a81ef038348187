"""
Standalone rendering to HTML.

    python -m nations                        # animated sweep → nations.html
    python -m nations --year 1950            # single frame
    python -m nations --data nations.json --fps 12 --duration 20
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from nations import __version__, settings
from nations.dataset import DatasetError, load_entities, regions_of
from nations.driver import AnimationDriver
from nations.render import build_animation, build_figure
from nations.scales import default_scales

logger = logging.getLogger("nations")


def sweep_frames(entities, scales, duration: float, fps: float) -> list:
    """Run the sweep against a simulated clock, collecting (year, snapshots)."""
    frames: list = []
    n = max(1, int(round(duration * fps)))
    # first reading is the sweep start time
    ticks = iter([0.0] + [k / fps for k in range(n + 1)])
    driver = AnimationDriver(
        entities, scales,
        on_frame=lambda snaps, year: frames.append((year, snaps)),
        clock=lambda: next(ticks, duration),
    )
    driver.start_sweep(duration)
    while driver.step():
        pass
    return frames


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = argparse.ArgumentParser(
        prog="nations",
        description="Render the Health & Wealth of Nations chart to HTML")
    parser.add_argument("--data", type=str, default=None,
                        help="Dataset path or URL (default: NATIONS_DATA, bundled file, or the public URL)")
    parser.add_argument("--year", type=float, default=None,
                        help="Render a single year instead of the animated sweep")
    parser.add_argument("--offline", action="store_true",
                        help="Use the bundled sample instead of fetching the dataset")
    parser.add_argument("--out", type=str, default="nations.html",
                        help="Output HTML path")
    parser.add_argument("--fps", type=float, default=settings.DEFAULT_FPS,
                        help="Frames per second of the sweep")
    parser.add_argument("--duration", type=float, default=settings.SWEEP_DURATION,
                        help="Sweep duration in seconds")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger("nations").setLevel(logging.DEBUG)
    if args.fps <= 0 or args.duration <= 0:
        parser.error("--fps and --duration must be positive")

    source = args.data or settings.data_source(offline=args.offline)
    try:
        entities = load_entities(source)
    except DatasetError as e:
        logger.error(str(e))
        return 1

    scales = default_scales(regions_of(entities))

    if args.year is not None:
        driver = AnimationDriver(entities, scales, on_frame=lambda snaps, year: None)
        year = min(max(args.year, settings.START_YEAR), settings.END_YEAR)
        fig = build_figure(driver.set_year(year), scales, year)
    else:
        frames = sweep_frames(entities, scales, args.duration, args.fps)
        logger.debug(f"{len(frames)} frames at {args.fps:g} fps")
        fig = build_animation(frames, scales, frame_ms=1000.0 / args.fps)

    out = Path(args.out)
    fig.write_html(out, include_plotlyjs="cdn", auto_play=False)
    logger.info(f"Wrote {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
