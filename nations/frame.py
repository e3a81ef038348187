"""
Frame composition: one scalar snapshot per nation for a given year.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Iterable

from nations.dataset import Entity
from nations.series import interpolate


@dataclass(frozen=True)
class Snapshot:
    name: str
    region: str
    income: float
    population: float
    life_expectancy: float


def snapshot_at(entity: Entity, year: float) -> Snapshot:
    return Snapshot(
        name=entity.name,
        region=entity.region,
        income=interpolate(entity.income, year),
        population=interpolate(entity.population, year),
        life_expectancy=interpolate(entity.life_expectancy, year),
    )


def compose_frame(entities: Iterable[Entity], year: float) -> list[Snapshot]:
    """Snapshots for `year`, in the same order as `entities`."""
    return [snapshot_at(e, year) for e in entities]


# ── draw order ─────────────────────────────────────────────────────────────────

def compare_draw_order(a: Snapshot, b: Snapshot, radius: Callable[[float], float]) -> float:
    """Negative when `a` must be drawn before (underneath) `b`."""
    return radius(b.population) - radius(a.population)


def sort_for_drawing(snapshots: Iterable[Snapshot], radius: Callable[[float], float]) -> list[Snapshot]:
    """Largest marks first so small ones stay visible on top. Stable."""
    return sorted(snapshots, key=cmp_to_key(lambda a, b: compare_draw_order(a, b, radius)))
