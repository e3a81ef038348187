"""
Warm-up data join: the eight planets bound to circles.

Source: https://nssdc.gsfc.nasa.gov/planetary/factsheet/
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import plotly.graph_objects as go

from nations.scales import LinearScale, SqrtScale

NAMES     = ["Mercury", "Venus", "Earth", "Mars", "Jupiter", "Saturn", "Uranus", "Neptune"]
DIAMETERS = [4879, 12104, 12756, 6792, 142984, 120536, 51118, 49528]      # km
DISTANCES = [57.9, 108.2, 149.6, 227.9, 778.6, 1433.5, 2872.5, 4495.1]    # 10^6 km from the sun
COLORS    = ["Gray", "PaleGoldenrod", "Blue", "DarkRed", "DarkOrange", "Gold", "PowderBlue", "SteelBlue"]

SIZE = 600


@dataclass(frozen=True)
class Planet:
    name: str
    radius: float     # km
    distance: float   # 10^6 km
    color: str


def planets() -> list[Planet]:
    radii = np.asarray(DIAMETERS, dtype=float) / 2
    return [
        Planet(name=n, radius=float(r), distance=d, color=c)
        for n, r, d, c in zip(NAMES, radii, DISTANCES, COLORS)
    ]


def planet_positions(bodies: list[Planet], by_distance: bool) -> list[float]:
    """cx per planet: evenly spaced by index, or on a sqrt scale of distance."""
    if not by_distance:
        return [50.0 + i * 50.0 for i in range(len(bodies))]
    xs = SqrtScale(domain=(0.0, max(b.distance for b in bodies)), range=(30.0, SIZE - 30.0))
    return [xs(b.distance) for b in bodies]


def build_figure(by_distance: bool = False) -> go.Figure:
    bodies = planets()
    radius = LinearScale(domain=(0.0, 1000.0), range=(0.0, 1.0))   # r = km / 1000
    fig = go.Figure(go.Scatter(
        x=planet_positions(bodies, by_distance),
        y=[100.0] * len(bodies),
        mode="markers+text",
        marker=dict(
            size=[max(2 * radius(b.radius), 2.0) for b in bodies],
            sizemode="diameter",
            color=[b.color for b in bodies],
        ),
        text=[b.name for b in bodies],
        textposition="bottom center",
        hovertemplate="%{text}<extra></extra>",
    ))
    fig.update_layout(
        width=SIZE, height=SIZE // 2, plot_bgcolor="white", showlegend=False,
        xaxis=dict(range=[0, SIZE], visible=False),
        yaxis=dict(range=[SIZE // 2, 0], visible=False),
        margin=dict(l=0, r=0, t=30, b=0),
    )
    return fig


def render() -> None:
    import streamlit as st

    st.subheader("Planets")
    st.caption("Radius = planet radius / 1000 km; colour and name bound from the same rows.")
    by_distance = st.toggle("Position by distance from the sun", value=False)
    st.plotly_chart(build_figure(by_distance), use_container_width=False)
