from __future__ import annotations

from typing import Optional, Tuple

import matplotlib
import numpy as np

from beam_load.domain.results import DiagramSeries
from beam_load.view.style import RenderStyle


# -------------------------
# Helpers formato
# -------------------------
def _fmt_plain(v: float, decimals: int = 2) -> str:
    """Formato fijo (sin notación científica) y recorte de ceros."""
    s = f"{float(v):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _clamp(v: float, lo: float, hi: float) -> float:
    return float(min(max(v, lo), hi))


def _annotate_extreme(ax, series: DiagramSeries, style: RenderStyle) -> None:
    """Marca el máximo absoluto de la serie y anota su valor dentro del recuadro."""
    if len(series) == 0 or series.max_abs() <= 0.0:
        return

    i = series.argmax_abs()
    xi = float(series.x_mm[i])
    yi = float(series.values[i])

    x_min, x_max = ax.get_xlim()
    y_min, y_max = ax.get_ylim()
    mx = 0.03 * max(1.0, float(x_max - x_min))
    my = 0.03 * max(1.0, float(y_max - y_min))

    ax.scatter([xi], [yi], s=18, zorder=6)

    if yi >= 0.0:
        ty, va = yi + my, "bottom"
    else:
        ty, va = yi - my, "top"

    tx = _clamp(xi, x_min + mx, x_max - mx)
    ty = _clamp(ty, y_min + my, y_max - my)
    ax.text(tx, ty, f"{_fmt_plain(yi, 2)} {series.unit}", ha="center", va=va, fontsize=style.font_size, zorder=7)


# -------------------------
# Render
# -------------------------
def _render_series(
    ax,
    series: DiagramSeries,
    *,
    color: str,
    title: str,
    style: RenderStyle,
    y_zoom: float = 1.0,
    xlim: Optional[Tuple[float, float]] = None,
):
    ax.clear()
    x = np.asarray(series.x_mm, dtype=float)
    y = np.asarray(series.values, dtype=float)

    ax.plot(x, y, color=color, linewidth=style.line_lw)
    ax.fill_between(x, y, 0.0, color=color, alpha=style.fill_alpha)
    ax.axhline(0.0, linewidth=style.axis_lw, color="black")

    if xlim is None:
        ax.set_xlim(float(x[0]), float(x[-1]))
    else:
        ax.set_xlim(xlim[0], xlim[1])

    ymax = max(series.max_abs(), 1.0)
    ax.set_ylim(-ymax * y_zoom * style.y_pad, ymax * y_zoom * style.y_pad)

    _annotate_extreme(ax, series, style)

    ax.set_ylabel(f"{series.name} [{series.unit}]")
    ax.set_xlabel("x [mm]")
    ax.set_title(title)
    ax.grid(True, alpha=style.grid_alpha)


def render_shear(ax, series: DiagramSeries, style: RenderStyle = RenderStyle(), **kw):
    _render_series(ax, series, color=style.shear_color, title="Shear Force Diagram", style=style, **kw)


def render_moment(ax, series: DiagramSeries, style: RenderStyle = RenderStyle(), **kw):
    _render_series(ax, series, color=style.moment_color, title="Bending Moment Diagram", style=style, **kw)


def save_diagram_png(series: DiagramSeries, out_path: str, kind: str, style: RenderStyle = RenderStyle()) -> str:
    """
    Renderiza una serie a PNG sin depender de una UI (backend Agg).
    kind: "shear" | "moment"
    """
    from matplotlib.figure import Figure
    from matplotlib.backends.backend_agg import FigureCanvasAgg

    renderers = {"shear": render_shear, "moment": render_moment}
    if kind not in renderers:
        raise ValueError(f"Tipo de diagrama no reconocido: {kind!r} (usar 'shear' o 'moment').")

    fig = Figure(figsize=(style.fig_w_in, style.fig_h_in), dpi=style.dpi)
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(111)
    with matplotlib.rc_context({"font.size": style.font_size}):
        renderers[kind](ax, series, style)
        fig.tight_layout()
        fig.savefig(out_path, format="png")
    return out_path
