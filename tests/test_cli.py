"""Tests for the standalone HTML renderer."""

import json

import pytest

from nations.__main__ import main, sweep_frames


@pytest.fixture
def data_file(raw, tmp_path):
    path = tmp_path / "nations.json"
    path.write_text(json.dumps(raw))
    return path


def test_sweep_frames_span_the_range(entities, scales):
    frames = sweep_frames(entities, scales, duration=1.0, fps=8)
    years = [y for y, _ in frames]
    assert years[0] == 1800
    assert years[-1] == 2009
    assert len(frames) == 9


def test_single_year(data_file, tmp_path):
    out = tmp_path / "frame.html"
    assert main(["--data", str(data_file), "--year", "1950", "--out", str(out)]) == 0
    assert "Bigland" in out.read_text()


def test_animation(data_file, tmp_path):
    out = tmp_path / "sweep.html"
    assert main(["--data", str(data_file), "--fps", "4", "--duration", "1", "--out", str(out)]) == 0
    assert out.exists()


def test_bad_dataset_exits_non_zero(tmp_path):
    assert main(["--data", str(tmp_path / "missing.json"), "--out", str(tmp_path / "x.html")]) == 1


def test_rejects_non_positive_fps(data_file):
    with pytest.raises(SystemExit):
        main(["--data", str(data_file), "--fps", "0"])


def test_offline_uses_bundled_sample(monkeypatch, tmp_path):
    monkeypatch.delenv("NATIONS_DATA", raising=False)
    out = tmp_path / "frame.html"
    assert main(["--offline", "--year", "2000", "--out", str(out)]) == 0
    assert "Angola" in out.read_text()
