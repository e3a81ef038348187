"""
Animation driver: picks the year to show and redraws.

Two sources, never both at once:

  sweep : the year runs linearly from start to end over a fixed duration,
          one cooperative frame at a time. Cancelled by any pointer activity;
          a cancelled sweep never resumes.
  scrub : a pointer x position over the year label is mapped through a
          clamped linear scale to a year; every move redraws immediately.

Both end up in set_year(), which composes the frame and hands it to the
render callback.
"""

from __future__ import annotations

import logging
import math
import time
from typing import Callable, Sequence

from nations import settings
from nations.dataset import Entity
from nations.frame import Snapshot, compose_frame, sort_for_drawing
from nations.scales import LinearScale, Scales

logger = logging.getLogger(__name__)

OnFrame = Callable[[list[Snapshot], float], None]


def year_label(year: float) -> str:
    """Year rounded half-up for the big label."""
    return str(int(math.floor(year + 0.5)))


class Sweep:
    """Linear start → end progression over `duration` seconds of clock time."""

    def __init__(
        self,
        start: float,
        end: float,
        duration: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if duration <= 0:
            raise ValueError(f"duration must be positive; got {duration!r}")
        self.start, self.end, self.duration = start, end, duration
        self._clock = clock
        self._t0 = clock()
        self.cancelled = False
        self.finished = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.finished)

    def year_at(self, elapsed: float) -> float:
        frac = min(max(elapsed / self.duration, 0.0), 1.0)
        return self.start + (self.end - self.start) * frac

    def tick(self) -> float | None:
        """Year for the current frame, or None once cancelled."""
        if self.cancelled:
            return None
        elapsed = self._clock() - self._t0
        if elapsed >= self.duration:
            self.finished = True
        return self.year_at(elapsed)

    def cancel(self) -> None:
        self.cancelled = True


class Scrub:
    """Pointer x (pixels) → year, clamped to [start, end]."""

    def __init__(self, start: float, end: float, box: Sequence[float] = settings.YEAR_LABEL_BOX) -> None:
        x, _, w, _ = box
        self.scale = LinearScale(domain=(start, end), range=(x + 10, x + w - 10), clamp=True)

    def year_at(self, pointer_x: float) -> float:
        return self.scale.invert(pointer_x)


class AnimationDriver:
    def __init__(
        self,
        entities: Sequence[Entity],
        scales: Scales,
        on_frame: OnFrame,
        start: float = settings.START_YEAR,
        end: float = settings.END_YEAR,
        box: Sequence[float] = settings.YEAR_LABEL_BOX,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.entities = entities
        self.scales = scales
        self.on_frame = on_frame
        self.start, self.end = start, end
        self.box = box
        self._clock = clock
        self._sleep = sleep

        self.year: float = start
        self.sweep: Sweep | None = None
        self.scrub: Scrub | None = None
        self.label_active = False

    @property
    def mode(self) -> str:
        if self.sweep is not None and self.sweep.active:
            return "sweep"
        if self.scrub is not None:
            return "scrub"
        return "idle"

    def set_year(self, year: float) -> list[Snapshot]:
        """Compose, order and hand the frame for `year` to the renderer."""
        snapshots = sort_for_drawing(compose_frame(self.entities, year), self.scales.r)
        self.year = year
        self.on_frame(snapshots, year)
        return snapshots

    # ── sweep ──────────────────────────────────────────────────────────────────

    def start_sweep(self, duration: float = settings.SWEEP_DURATION) -> Sweep:
        self.cancel_sweep()
        self.scrub = None
        self.label_active = False
        self.sweep = Sweep(self.start, self.end, duration, clock=self._clock)
        logger.info(f"Sweep {self.start}→{self.end} over {duration:g}s")
        return self.sweep

    def step(self) -> bool:
        """Draw one sweep frame. True while another frame should be scheduled."""
        sweep = self.sweep
        if sweep is None or sweep.cancelled:
            return False
        year = sweep.tick()
        if year is None:
            return False
        self.set_year(year)
        if sweep.finished:
            logger.info("Sweep finished")
            self.enable_interaction()
            return False
        return True

    def run_sweep(self, duration: float = settings.SWEEP_DURATION, fps: float = settings.DEFAULT_FPS) -> None:
        """Blocking frame loop; the cancel flag is checked before every frame."""
        self.start_sweep(duration)
        frame_time = 1.0 / fps
        while self.step():
            self._sleep(frame_time)

    def cancel_sweep(self) -> None:
        if self.sweep is not None and self.sweep.active:
            self.sweep.cancel()
            logger.info(f"Sweep cancelled at {self.year:.1f}")

    # ── scrub ──────────────────────────────────────────────────────────────────

    def enable_interaction(self) -> Scrub:
        """Stop any sweep and follow the pointer from now on."""
        self.cancel_sweep()
        if self.scrub is None:
            self.scrub = Scrub(self.start, self.end, self.box)
        return self.scrub

    def pointer_enter(self) -> None:
        self.enable_interaction()
        self.label_active = True

    def pointer_move(self, pointer_x: float) -> list[Snapshot]:
        scrub = self.enable_interaction()
        return self.set_year(scrub.year_at(pointer_x))
