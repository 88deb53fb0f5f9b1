from __future__ import annotations

import numpy as np
from matplotlib.patches import Polygon, Rectangle

from beam_load.domain.cases import BeamCase
from beam_load.domain.loads import LoadKind
from beam_load.view.style import RenderStyle


def _fmt(v: float) -> str:
    s = f"{float(v):.2f}"
    return s.rstrip("0").rstrip(".") if "." in s else s


def _draw_arrow(ax, x: float, y0: float, y1: float, style: RenderStyle):
    ax.annotate(
        "",
        xy=(x, y1),
        xytext=(x, y0),
        arrowprops=dict(
            arrowstyle="-|>",
            lw=style.arrow_lw,
            mutation_scale=style.arrow_scale,
            color="red",
            facecolor="red",
            shrinkA=0,
            shrinkB=0,
        ),
    )


def _draw_pin(ax, x: float, size: float):
    tri = Polygon([(x, 0.0), (x - size / 2, -size), (x + size / 2, -size)], closed=True, fill=False, lw=1.5, color="black")
    ax.add_patch(tri)


def _draw_fixed_wall(ax, size: float):
    h = 2.0 * size
    ax.plot([0.0, 0.0], [-h / 2, h / 2], lw=2.0, color="black")
    for y in np.linspace(-h / 2, h / 2, 6):
        ax.plot([0.0, -size / 3], [y, y - size / 3], lw=0.8, color="black")


def render_beam_sketch(ax, case: BeamCase, style: RenderStyle = RenderStyle()):
    """
    Esquema de la viga: apoyos (articulaciones o empotramiento en x=0) y la carga
    (flecha puntual o bloque de flechas para la uniforme). Coordenadas en mm.
    """
    ax.clear()
    beam = case.beam
    load = case.load
    L = float(beam.length_mm)
    h_arrow = L * style.arrow_height_pctL / 100.0
    s = L * style.support_size_pctL / 100.0

    ax.plot([0.0, L], [0.0, 0.0], lw=style.beam_lw, color="black", solid_capstyle="butt")

    if beam.is_cantilever:
        _draw_fixed_wall(ax, s)
    else:
        _draw_pin(ax, float(beam.left_support_mm), s)
        _draw_pin(ax, beam.right_mm, s)

    x0 = float(load.x0_mm)
    if load.kind is LoadKind.POINT:
        _draw_arrow(ax, x0, h_arrow, 0.0, style)
        label = f"{_fmt(load.magnitude)} N"
        x_lbl = x0
    else:
        x1 = load.end_mm
        ax.add_patch(Rectangle(
            (x0, 0.0), x1 - x0, h_arrow,
            lw=style.dist_rect_lw, edgecolor="red", facecolor="red", alpha=style.dist_rect_alpha,
        ))
        for xa in np.linspace(x0, x1, max(2, style.n_dist_arrows)):
            _draw_arrow(ax, float(xa), h_arrow, 0.0, style)
        label = f"{_fmt(load.magnitude)} N/mm"
        x_lbl = 0.5 * (x0 + x1)

    ax.text(x_lbl, h_arrow * 1.12, label, ha="center", va="bottom", color="red", fontsize=style.font_size)
    ax.text(0.0, -1.6 * s, "0", ha="center", va="top", fontsize=style.font_size)
    ax.text(L, -1.6 * s, _fmt(L), ha="center", va="top", fontsize=style.font_size)
    ax.set_title(f"Beam Length: {_fmt(L)} mm", fontsize=style.font_size + 1)

    ax.set_xlim(-0.08 * L, 1.08 * L)
    ax.set_ylim(-2.5 * s, h_arrow * 1.6)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")


def save_beam_sketch_png(case: BeamCase, out_path: str, style: RenderStyle = RenderStyle()) -> str:
    from matplotlib.figure import Figure
    from matplotlib.backends.backend_agg import FigureCanvasAgg

    fig = Figure(figsize=(style.fig_w_in, style.fig_h_in * 0.8), dpi=style.dpi)
    FigureCanvasAgg(fig)
    render_beam_sketch(fig.add_subplot(111), case, style)
    fig.tight_layout()
    fig.savefig(out_path, format="png")
    return out_path
