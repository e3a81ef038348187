"""Tests for the chart scales."""

import numpy as np
import pytest

from nations import settings
from nations.scales import LinearScale, LogScale, OrdinalScale, SqrtScale, default_scales


class TestLinearScale:
    def test_maps_and_inverts(self):
        s = LinearScale(domain=(10, 85), range=(461, 0))
        assert s(10) == 461
        assert s(85) == 0
        assert s.invert(s(47.5)) == pytest.approx(47.5)

    def test_unclamped_extrapolates(self):
        s = LinearScale(domain=(0, 10), range=(0, 100))
        assert s(20) == 200
        assert s.invert(-100) == -10

    def test_clamped_invert_stays_in_domain(self):
        s = LinearScale(domain=(1800, 2009), range=(100, 300), clamp=True)
        assert s.invert(0) == 1800
        assert s.invert(1e6) == 2009
        assert s.invert(200) == pytest.approx(1904.5)

    def test_vectorised(self):
        s = LinearScale(domain=(0, 1), range=(0, 10))
        np.testing.assert_allclose(s(np.array([0.0, 0.5, 1.0])), [0, 5, 10])


class TestLogScale:
    def test_decades_are_evenly_spaced(self):
        s = LogScale(domain=(100, 1e4), range=(0, 200))
        assert s(100) == pytest.approx(0)
        assert s(1000) == pytest.approx(100)
        assert s(1e4) == pytest.approx(200)
        assert s.invert(100) == pytest.approx(1000)

    def test_ticks(self):
        ticks = LogScale(domain=(300, 1e5), range=(0, 1)).ticks()
        assert ticks[0] == 300
        assert ticks[-1] == 1e5
        assert 1000 in ticks and 20000 in ticks
        assert ticks == sorted(ticks)


class TestSqrtScale:
    def test_radius_domain(self):
        r = SqrtScale(domain=(0, 5e8), range=(2, 40))
        assert r(0) == 2
        assert r(5e8) == pytest.approx(40)
        assert r(1.25e8) == pytest.approx(21)

    def test_monotonic(self):
        r = SqrtScale(domain=(0, 5e8), range=(2, 40))
        assert r(1e6) < r(1e7) < r(1e8)


class TestOrdinalScale:
    def test_assigns_in_first_seen_order(self):
        c = OrdinalScale()
        assert c("b") == settings.CATEGORY10[0]
        assert c("a") == settings.CATEGORY10[1]
        assert c("b") == settings.CATEGORY10[0]
        assert c.domain == ["b", "a"]

    def test_cycles_palette(self):
        c = OrdinalScale(palette=("red", "blue"))
        assert [c(k) for k in "xyz"] == ["red", "blue", "red"]


def test_default_scales():
    s = default_scales(["Europe", "Asia"])
    assert s.x(300) == pytest.approx(0)
    assert s.x(1e5) == pytest.approx(settings.WIDTH)
    assert s.y(10) == pytest.approx(settings.HEIGHT)
    assert s.r(0) == 2
    assert s.color("Asia") == settings.CATEGORY10[1]
    assert settings.WIDTH == 940.5
    assert settings.HEIGHT == 461


def test_palette_is_d3_category10():
    assert len(settings.CATEGORY10) == 10
    assert settings.CATEGORY10[0].lower() == "#1f77b4"
    assert settings.CATEGORY10[-1].lower() == "#17becf"
