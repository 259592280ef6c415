# src/sortscope/plotting.py
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import numpy as np
import plotly.graph_objects as go

COLORS = [
    '#4285f4',  # Blue
    '#ea4335',  # Red
    '#34a853',  # Green
    '#fbbc04',  # Yellow
    '#9c27b0',  # Purple
    '#00bcd4',  # Cyan
    '#ff9800',  # Orange
]


def _reference_funcs():
    return {
        "n": lambda n: n.astype(float),
        "nlogn": lambda n: n.astype(float) * np.log2(np.maximum(n, 2)),
        "n**2": lambda n: n.astype(float) ** 2,
    }


def build_reference_curves(
    sizes: Sequence[int],
    ref_specs: Tuple[str, ...],
    y_anchor: float,
) -> Dict[str, np.ndarray]:
    """
    Returns dict: name -> np.ndarray of growth curves scaled so that each
    passes through y_anchor at the largest size.
    """
    n_arr = np.array(sizes, dtype=float)
    funcs = _reference_funcs()
    curves: Dict[str, np.ndarray] = {}
    if n_arr.size == 0:
        return curves

    if not np.isfinite(y_anchor) or y_anchor <= 0:
        y_anchor = 1.0

    for spec in ref_specs:
        if spec not in funcs:
            raise ValueError(f"Unknown reference curve {spec!r}; expected one of {sorted(funcs)}")
        raw = np.maximum(funcs[spec](n_arr), 1e-12)
        scale = y_anchor / raw[-1] if np.isfinite(raw[-1]) and raw[-1] != 0 else 1.0
        curves[spec] = raw * scale
    return curves


def runtime_figure(
    sizes: List[int],
    means: Dict[str, List[float]],
    reference_curves: Dict[str, np.ndarray],
    title: str,
) -> go.Figure:
    fig = go.Figure()

    for i, (label, y) in enumerate(means.items()):
        color = COLORS[i % len(COLORS)]
        fig.add_trace(go.Scatter(
            x=sizes, y=y, mode="lines+markers", name=label,
            marker=dict(size=8, color=color, line=dict(width=2, color='white')),
            line=dict(width=3, color=color),
            connectgaps=False,
            hovertemplate=f"<b>{label}</b><br>" +
                          "Input size: %{x}<br>" +
                          "Median time: %{y:.6f}s<br>" +
                          "<extra></extra>"
        ))

    ref_colors = ['#64748b', '#94a3b8', '#cbd5e1', '#e2e8f0']
    for i, (rname, ry) in enumerate(reference_curves.items()):
        fig.add_trace(go.Scatter(
            x=sizes, y=list(ry), mode="lines", name=f"O({rname})",
            line=dict(dash="dot", width=2, color=ref_colors[i % len(ref_colors)]),
            opacity=0.7,
            hoverinfo="skip",
        ))

    fig.update_layout(
        title=dict(text=title, font=dict(size=20, color='#1e293b'), x=0.5),
        xaxis_title="Input Size (n)",
        yaxis_title="Median time (seconds)",
        hovermode="x unified",
        template="plotly_white",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0.01),
        margin=dict(l=80, r=40, t=100, b=80),
        height=520,
    )
    fig.update_xaxes(type="log", showgrid=True, zeroline=False, showline=True, mirror=True)
    fig.update_yaxes(type="log", showgrid=True, zeroline=False, showline=True, mirror=True, tickformat=".1e")
    return fig


def heatmap_figure(
    x_vals: Sequence[str],
    y_vals: Sequence[str],
    z_matrix: np.ndarray,
    title: str,
    z_label: str = "Time (s)",
) -> go.Figure:
    """
    z_matrix has shape (len(y_vals), len(x_vals)); rows follow y, columns follow x.
    Missing measurements are NaN and render as gaps.
    """
    z = np.array(z_matrix, dtype=float)
    if z.ndim != 2 or z.shape != (len(y_vals), len(x_vals)):
        raise ValueError("z_matrix must be 2D with shape (len(y_vals), len(x_vals))")

    text = [["N/A" if not np.isfinite(v) else f"{v:.3g}" for v in row] for row in z]
    heat = go.Heatmap(
        x=list(x_vals),
        y=list(y_vals),
        z=z,
        text=text,
        texttemplate="%{text}",
        colorscale="Viridis",
        colorbar=dict(title=z_label),
        hovertemplate="%{y} on %{x}<br>" + z_label + "=%{z:.6f}<extra></extra>",
    )
    fig = go.Figure(data=[heat])
    fig.update_layout(
        title=dict(text=title, font=dict(size=20, color='#1e293b'), x=0.5),
        template="plotly_white",
        height=480,
        margin=dict(l=120, r=40, t=80, b=80),
    )
    return fig
