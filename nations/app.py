"""
Streamlit page: ``streamlit run nations/app.py``

The year slider is the scrub input. "Play" runs the sweep in this script run;
touching any widget reruns the script, which is what cancels a running sweep.
"""

from __future__ import annotations

import streamlit as st

from nations import planets, settings
from nations.dataset import DatasetError, load_entities, regions_of
from nations.driver import AnimationDriver
from nations.render import build_figure
from nations.scales import default_scales


@st.cache_data(show_spinner="Loading nations…")
def _load(source: str):
    return load_entities(source)


def render_nations() -> None:
    st.markdown(
        "Income (x, log), life expectancy (y) and population (area) of each "
        "nation, coloured by region. Press **Play** to sweep the years, or drag "
        "the slider to pick one."
    )
    offline = st.sidebar.toggle("Bundled sample (offline)", value=False,
                                help="A handful of nations shipped with the package, no download.")
    source = str(settings.data_source(offline=offline))
    try:
        entities = _load(source)
    except DatasetError as e:
        st.error(f"Could not load the nations dataset: {e}")
        st.stop()

    scales = default_scales(regions_of(entities))
    chart = st.empty()

    def draw(snapshots, year):
        chart.plotly_chart(build_figure(snapshots, scales, year, label_active=driver.label_active),
                          use_container_width=False)

    driver = AnimationDriver(entities, scales, on_frame=draw)

    col1, col2 = st.columns([4, 1])
    with col1:
        year = st.slider(
            "Year",
            min_value=float(settings.START_YEAR),
            max_value=float(settings.END_YEAR),
            value=float(settings.START_YEAR),
            step=0.25,
            format="%.0f",
        )
    with col2:
        duration = st.number_input("Sweep (s)", min_value=1.0, max_value=120.0,
                                   value=settings.SWEEP_DURATION, step=1.0)
        play = st.button("Play")

    if play:
        driver.run_sweep(duration=duration, fps=settings.DEFAULT_FPS)
    else:
        # slider acts as the pointer over the year label
        driver.pointer_enter()
        driver.pointer_move(driver.scrub.scale(year))


st.title("The Health & Wealth of Nations")
tab_nations, tab_planets = st.tabs(["Nations", "Planets"])
with tab_nations:
    render_nations()
with tab_planets:
    planets.render()
