"""Smoke tests for the streamlit page."""

import json

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

APP = "../nations/app.py"


@pytest.fixture(autouse=True)
def clear_cache():
    st.cache_data.clear()
    yield
    st.cache_data.clear()


@pytest.fixture
def data_file(raw, tmp_path, monkeypatch):
    path = tmp_path / "nations.json"
    path.write_text(json.dumps(raw))
    monkeypatch.setenv("NATIONS_DATA", str(path))
    return path


def test_page_renders_initial_year(data_file):
    at = AppTest.from_file(APP, default_timeout=30).run()
    assert not at.exception
    assert not at.error
    assert at.title[0].value == "The Health & Wealth of Nations"
    assert at.slider[0].value == 1800.0


def test_slider_scrubs_to_year(data_file):
    at = AppTest.from_file(APP, default_timeout=30).run()
    at.slider[0].set_value(1950.0).run()
    assert not at.exception
    assert at.slider[0].value == 1950.0


def test_play_runs_sweep(data_file):
    at = AppTest.from_file(APP, default_timeout=60).run()
    at.number_input[0].set_value(1.0).run()
    at.button[0].click().run()
    assert not at.exception


def test_missing_dataset_shows_error(tmp_path, monkeypatch):
    monkeypatch.setenv("NATIONS_DATA", str(tmp_path / "missing.json"))
    at = AppTest.from_file(APP, default_timeout=30).run()
    assert not at.exception
    assert "Could not load the nations dataset" in at.error[0].value
