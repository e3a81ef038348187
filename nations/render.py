"""
Plotly rendering of snapshot frames.

Marks are placed in pixel space by the chart scales (0..width, 0..height with
y growing downwards, as in SVG), so axes ticks are also run through the scales.
"""

from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go

from nations.driver import year_label
from nations.frame import Snapshot
from nations.scales import Scales

X_TITLE = "income per capita, inflation-adjusted (dollars)"
Y_TITLE = "life expectancy (years)"


def _marker_trace(snapshots: Sequence[Snapshot], scales: Scales) -> go.Scatter:
    return go.Scatter(
        x=[scales.x(s.income) for s in snapshots],
        y=[scales.y(s.life_expectancy) for s in snapshots],
        mode="markers",
        marker=dict(
            size=[2 * scales.r(s.population) for s in snapshots],
            sizemode="diameter",
            color=[scales.color(s.region) for s in snapshots],
            line=dict(color="black", width=0.5),
            opacity=1.0,
        ),
        ids=[s.name for s in snapshots],  # keyed by name across frames
        text=[s.name for s in snapshots],
        hovertemplate="%{text}<extra></extra>",
        showlegend=False,
    )


def _legend_traces(scales: Scales) -> list[go.Scatter]:
    return [
        go.Scatter(
            x=[None], y=[None], mode="markers",
            marker=dict(size=12, color=scales.color(region)),
            name=region, legendgroup=region, hoverinfo="skip",
        )
        for region in list(scales.color.domain)
    ]


def _year_annotation(year: float, scales: Scales, active: bool = False) -> dict:
    return dict(
        x=scales.width, y=scales.height - 24,
        xref="x", yref="y", xanchor="right", yanchor="bottom",
        text=year_label(year), showarrow=False,
        font=dict(size=96, color="#aaa" if active else "#ddd"),
    )


def _layout(scales: Scales) -> dict:
    ticks = scales.x.ticks()
    m = scales.margin
    return dict(
        width=scales.width + m["left"] + m["right"],
        height=scales.height + m["top"] + m["bottom"] + 40,
        margin=dict(l=m["left"] + 20, r=m["right"], t=m["top"], b=m["bottom"] + 40),
        plot_bgcolor="white",
        xaxis=dict(
            title=X_TITLE, range=[0, scales.width], zeroline=False, showgrid=False,
            tickvals=[scales.x(v) for v in ticks],
            ticktext=[f"{v:,.0f}" if str(int(v))[0] in "125" else "" for v in ticks],
        ),
        yaxis=dict(
            title=Y_TITLE, range=[scales.height, 0], zeroline=False, showgrid=False,
            tickvals=[scales.y(v) for v in range(10, 90, 10)],
            ticktext=[str(v) for v in range(10, 90, 10)],
        ),
        legend=dict(title="Region", x=0.01, y=0.99),
    )


def build_figure(
    snapshots: Sequence[Snapshot],
    scales: Scales,
    year: float,
    label_active: bool = False,
) -> go.Figure:
    """One static frame. `snapshots` are drawn in the order given."""
    fig = go.Figure(data=[_marker_trace(snapshots, scales), *_legend_traces(scales)])
    fig.update_layout(**_layout(scales), annotations=[_year_annotation(year, scales, label_active)])
    return fig


def build_animation(
    frames: Sequence[tuple[float, Sequence[Snapshot]]],
    scales: Scales,
    frame_ms: float,
) -> go.Figure:
    """Self-contained animated figure: play/pause buttons plus a year slider.

    `frames` is the (year, snapshots) sequence a sweep produced.
    """
    if not frames:
        raise ValueError("no frames to animate")
    first_year, first_snaps = frames[0]
    fig = build_figure(first_snaps, scales, first_year)

    fig.frames = [
        go.Frame(
            name=f"{year:.3f}",
            data=[_marker_trace(snaps, scales)],
            traces=[0],
            layout=dict(annotations=[_year_annotation(year, scales)]),
        )
        for year, snaps in frames
    ]
    play = dict(frame=dict(duration=frame_ms, redraw=False), transition=dict(duration=0),
                fromcurrent=True, mode="immediate")
    pause = dict(frame=dict(duration=0, redraw=False), mode="immediate")
    fig.update_layout(
        updatemenus=[dict(
            type="buttons", direction="left", x=0.0, y=-0.12, xanchor="left",
            buttons=[
                dict(label="Play", method="animate", args=[None, play]),
                dict(label="Pause", method="animate", args=[[None], pause]),
            ],
        )],
        sliders=[dict(
            active=0, x=0.15, len=0.85, y=-0.08,
            currentvalue=dict(prefix="Year: "),
            steps=[
                dict(label=year_label(year), method="animate",
                     args=[[f"{year:.3f}"], pause])
                for year, _ in frames
            ],
        )],
    )
    return fig
