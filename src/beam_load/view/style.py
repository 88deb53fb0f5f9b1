from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class RenderStyle:
    # diagramas V / M
    line_lw: float = 1.6
    axis_lw: float = 1.0
    fill_alpha: float = 0.15
    grid_alpha: float = 0.25

    shear_color: str = "tab:blue"
    moment_color: str = "tab:red"

    # margen vertical sobre el máximo absoluto
    y_pad: float = 1.15

    # esquema de la viga
    beam_lw: float = 3.0
    arrow_lw: float = 1.5
    arrow_scale: float = 11.0
    dist_rect_lw: float = 0.9
    dist_rect_alpha: float = 0.12
    n_dist_arrows: int = 5

    # Alturas en % de L
    arrow_height_pctL: float = 12.0
    support_size_pctL: float = 6.0

    fig_w_in: float = 8.0
    fig_h_in: float = 3.2
    dpi: int = 150
    font_size: int = 8
