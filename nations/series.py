"""
Sparse time series and their linear interpolation.

Most nations have only a handful of samples before the mid-1900s, so every
field is stored as the samples we have and filled in on demand for whatever
(fractional) year the chart is showing.

No UI dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class Series:
    """Samples (year, value) of one attribute, ascending by year."""

    years: np.ndarray
    values: np.ndarray

    @classmethod
    def from_pairs(cls, pairs) -> "Series":
        arr = np.asarray(pairs, dtype=float).reshape(-1, 2)
        years, values = arr[:, 0].copy(), arr[:, 1].copy()
        years.flags.writeable = False
        values.flags.writeable = False
        return cls(years=years, values=values)

    def __len__(self) -> int:
        return len(self.years)

    def __iter__(self):
        return zip(self.years.tolist(), self.values.tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Series):
            return NotImplemented
        return np.array_equal(self.years, other.years) and np.array_equal(self.values, other.values)


def interpolate(series: Series, year: float) -> float:
    """Value of `series` at `year`, linearly interpolated between samples.

    At or before the first sample the first value is returned unchanged, and
    past the last sample the last value is held. No extrapolation either way.
    Two samples sharing a year resolve to the later one.
    """
    n = len(series)
    if n == 0:
        raise ValueError("cannot interpolate an empty series")

    # leftmost i with years[i] >= year
    i = int(np.searchsorted(series.years, year, side="left"))
    if i == n:
        return float(series.values[-1])
    later_year, later_value = float(series.years[i]), float(series.values[i])
    if i == 0:
        return later_value

    earlier_year, earlier_value = float(series.years[i - 1]), float(series.values[i - 1])
    if later_year == earlier_year:
        return later_value
    t = (year - earlier_year) / (later_year - earlier_year)
    return earlier_value * (1 - t) + later_value * t
