"""
Scales: map data values (domain) to pixels or colours (range).

Small numpy counterparts of d3.scaleLinear / scaleLog / scaleSqrt /
scaleOrdinal, just what the chart needs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from nations import settings


@dataclass
class LinearScale:
    domain: tuple[float, float]
    range: tuple[float, float]
    clamp: bool = False

    def _t(self, v):
        return v

    def _t_inv(self, u):
        return u

    def __call__(self, value):
        d0, d1 = self._t(self.domain[0]), self._t(self.domain[1])
        r0, r1 = self.range
        u = (self._t(value) - d0) / (d1 - d0)
        if self.clamp:
            u = np.clip(u, 0.0, 1.0)
        out = r0 + u * (r1 - r0)
        return float(out) if np.ndim(out) == 0 else out

    def invert(self, pixel):
        """Range → domain. With clamp the result stays inside the domain."""
        d0, d1 = self._t(self.domain[0]), self._t(self.domain[1])
        r0, r1 = self.range
        u = (pixel - r0) / (r1 - r0)
        if self.clamp:
            u = np.clip(u, 0.0, 1.0)
        out = self._t_inv(d0 + u * (d1 - d0))
        return float(out) if np.ndim(out) == 0 else out


@dataclass
class LogScale(LinearScale):
    """Base-10 log scale; the domain must be strictly positive."""

    def _t(self, v):
        return np.log10(v)

    def _t_inv(self, u):
        return np.power(10.0, u)

    def ticks(self) -> list[float]:
        """1..9 × 10^k inside the domain, like d3's log ticks."""
        lo, hi = sorted(self.domain)
        out = []
        for k in range(math.floor(math.log10(lo)), math.ceil(math.log10(hi)) + 1):
            for m in range(1, 10):
                v = m * 10.0 ** k
                if lo <= v <= hi:
                    out.append(v)
        return out


@dataclass
class SqrtScale(LinearScale):
    def _t(self, v):
        return np.sqrt(v)

    def _t_inv(self, u):
        return np.square(u)


@dataclass
class OrdinalScale:
    """Categories → colours, assigned in first-seen order and cycling the palette."""

    palette: tuple[str, ...] = settings.CATEGORY10
    domain: list[str] = field(default_factory=list)

    def __call__(self, key: str) -> str:
        if key not in self.domain:
            self.domain.append(key)
        return self.palette[self.domain.index(key) % len(self.palette)]


@dataclass
class Scales:
    """Everything the renderer needs to place a mark."""

    x: LogScale
    y: LinearScale
    r: SqrtScale
    color: OrdinalScale
    width: float = settings.WIDTH
    height: float = settings.HEIGHT
    margin: dict[str, float] = field(default_factory=lambda: dict(settings.MARGIN))


def default_scales(regions: list[str] | None = None) -> Scales:
    """Chart scales with the exercise's fixed domains; `regions` seeds the colours."""
    width, height = settings.WIDTH, settings.HEIGHT
    return Scales(
        x=LogScale(domain=settings.INCOME_DOMAIN, range=(0.0, width)),
        y=LinearScale(domain=settings.LIFE_EXP_DOMAIN, range=(height, 0.0)),
        r=SqrtScale(domain=settings.POPULATION_DOMAIN, range=settings.RADIUS_RANGE),
        color=OrdinalScale(domain=list(regions or [])),
        width=width,
        height=height,
    )
