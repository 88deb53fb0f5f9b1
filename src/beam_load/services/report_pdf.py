# path: src/beam_load/services/report_pdf.py
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from reportlab.lib import colors, pagesizes
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Image, PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from beam_load.domain.beam import SupportCondition
from beam_load.domain.loads import LoadKind
from beam_load.domain.results import AnalysisResult
from beam_load.view.renderer_fbd import save_beam_sketch_png
from beam_load.view.renderer_vm import save_diagram_png

logger = logging.getLogger(__name__)

# Nota: este módulo sólo consume AnalysisResult; las imágenes pueden venir de
# build_report_images() o de cualquier otro renderer.

_SUPPORT_LABEL = {
    SupportCondition.SIMPLY_SUPPORTED: "Simple Beam",
    SupportCondition.CANTILEVER: "Cantilever Beam",
}

_LOAD_LABEL = {
    LoadKind.POINT: "Point Load",
    LoadKind.UNIFORM: "Uniform Load",
}


@dataclass(frozen=True)
class ReportHeader:
    title: str = "Beam Analysis Report"
    subtitle: str = "Enhanced Load Calculator"
    project: str = ""
    author: str = ""
    date: Optional[datetime] = None
    revision: str = "A"


def build_report_images(analysis: AnalysisResult, out_dir: str) -> Dict[str, str]:
    """Genera beam.png, shear.png y moment.png en out_dir; devuelve {clave: path}."""
    os.makedirs(out_dir, exist_ok=True)
    return {
        "beam": save_beam_sketch_png(analysis.case, os.path.join(out_dir, "beam.png")),
        "shear": save_diagram_png(analysis.shear, os.path.join(out_dir, "shear.png"), "shear"),
        "moment": save_diagram_png(analysis.moment, os.path.join(out_dir, "moment.png"), "moment"),
    }


def results_table_rows(analysis: AnalysisResult) -> List[List[str]]:
    """Filas [Parámetro, Valor, Unidad] de la tabla de resultados."""
    r = analysis.results
    load = analysis.case.load
    fs = "undefined" if not r.safety_factor_defined else _f(r.safety_factor, 2)
    return [
        ["Parameter", "Value", "Unit"],
        ["Resultant Force", _f(load.total_force_n, 2), "N"],
        ["Reaction R1", _f(r.reaction_left_n, 2), "N"],
        ["Reaction R2", _f(r.reaction_right_n, 2), "N"],
        ["Max Shear Force", _f(r.max_shear_force_n, 2), "N"],
        ["Max Bending Moment", _f(r.max_bending_moment_nmm, 2), "N·mm"],
        ["Max Normal Stress", _f(r.max_normal_stress_mpa, 2), "MPa"],
        ["Max Shear Stress", _f(r.max_shear_stress_mpa, 2), "MPa"],
        ["Safety Factor", fs, "-"],
        ["Moment of Inertia", f"{r.moment_of_inertia_m4:.6e}", "m^4"],
        ["Section Modulus", f"{r.section_modulus_m3:.6e}", "m^3"],
        ["Center of Gravity", _f(r.center_of_gravity_mm, 2), "mm"],
        ["Beam Weight", _f(r.beam_weight_n, 2), "N"],
    ]


def export_report_pdf(
    out_pdf_path: str,
    analysis: AnalysisResult,
    header: Optional[ReportHeader] = None,
    images: Optional[Dict[str, str]] = None,
    page_size=pagesizes.A4,
) -> None:
    """
    Genera el reporte de análisis en PDF (A4):
      1. Configuración de la viga
      2. Carga aplicada
      3. Resultados
      4. Diagramas de corte y momento
    """
    header = header or ReportHeader()
    imgs = _normalize_images_dict(images)
    case = analysis.case

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="H1c", parent=styles["Heading1"], alignment=TA_CENTER))
    styles.add(ParagraphStyle(name="H3c", parent=styles["Heading3"], alignment=TA_CENTER))
    styles.add(ParagraphStyle(name="Small", parent=styles["BodyText"], fontSize=9, leading=11))

    doc = SimpleDocTemplate(
        out_pdf_path,
        pagesize=page_size,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=12 * mm,
        bottomMargin=12 * mm,
        title=header.title,
    )

    story: List[object] = []

    # ----------------- Portada -----------------
    story.append(Paragraph(header.title, styles["H1c"]))
    fecha = header.date or datetime.now()
    story.append(Paragraph(f"Date: {fecha.strftime('%Y-%m-%d')}", styles["H3c"]))
    if header.subtitle:
        story.append(Paragraph(header.subtitle, styles["H3c"]))
    story.append(Spacer(1, 4 * mm))

    meta_rows = [
        ["Project:", header.project or "-"],
        ["Author:", header.author or "-"],
        ["Revision:", header.revision],
    ]
    t = Table(meta_rows, colWidths=[40 * mm, 140 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)
    story.append(Spacer(1, 6 * mm))

    # ----------------- 1. Viga -----------------
    story.append(Paragraph("1. Beam Configuration", styles["Heading2"]))
    beam = case.beam
    rows = [
        ["Type", _SUPPORT_LABEL[beam.support]],
        ["Length [mm]", _f(beam.length_mm, 2)],
    ]
    if beam.support is SupportCondition.SIMPLY_SUPPORTED:
        rows.append(["Supports [mm]", f"{_f(beam.left_support_mm, 2)} / {_f(beam.right_mm, 2)}"])
    else:
        rows.append(["Fixed end [mm]", "0"])
    rows += [
        ["Material", case.material.name],
        ["Yield strength [MPa]", _f(case.material.yield_strength_mpa, 2)],
        ["Density [kg/m³]", _f(case.density, 2)],
        ["Cross Section", case.section.shape.name.replace("_", " ").title()],
    ]
    rows += [[k, _f(v, 2)] for k, v in case.section.dims_mm().items()]
    t = Table(rows, colWidths=[55 * mm, 125 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)
    story.append(Spacer(1, 4 * mm))
    if "beam" in imgs:
        _append_figure(story, styles, "beam", "Figure 1.1: Beam Diagram", imgs, max_w=180 * mm, max_h=60 * mm)

    # ----------------- 2. Carga -----------------
    story.append(Paragraph("2. Applied Loads", styles["Heading2"]))
    load = case.load
    lines = [
        "Load 1:",
        f"Type: {_LOAD_LABEL[load.kind].lower()}",
        f"Force: {_f(load.magnitude, 2)} {'N' if load.kind is LoadKind.POINT else 'N/mm'}",
        f"Distance: {_f(load.x0_mm, 2)} mm",
    ]
    if load.kind is LoadKind.UNIFORM:
        lines.append(f"End Distance: {_f(load.end_mm, 2)} mm")
    lines.append("Angle: 90°")
    story.extend(_bullets(lines, styles))
    story.append(Spacer(1, 4 * mm))

    # ----------------- 3. Resultados -----------------
    story.append(Paragraph("3. Analysis Results", styles["Heading2"]))
    t = Table(results_table_rows(analysis), colWidths=[60 * mm, 60 * mm, 30 * mm], repeatRows=1)
    t.setStyle(_grid_table_style(header_rows=1))
    story.append(t)
    if analysis.results.flags:
        story.append(Spacer(1, 2 * mm))
        flags = ", ".join(f.value for f in analysis.results.flags)
        story.append(Paragraph(f"Flags: {flags}", styles["Small"]))

    # ----------------- 4. Diagramas -----------------
    story.append(PageBreak())
    story.append(Paragraph("4. Force Diagrams", styles["Heading2"]))
    _append_figure(story, styles, "shear", "Figure 4.1: Shear Force Diagram", imgs, max_w=180 * mm, max_h=90 * mm)
    _append_figure(story, styles, "moment", "Figure 4.2: Bending Moment Diagram", imgs, max_w=180 * mm, max_h=90 * mm)

    doc.build(story)
    logger.info("Reporte PDF generado: %s", out_pdf_path)


# ----------------- helpers -----------------

def _normalize_images_dict(images: Optional[Dict[str, str]]) -> Dict[str, str]:
    if not images:
        return {}
    out: Dict[str, str] = {}
    for k, v in images.items():
        kk = (k or "").strip().lower()
        vv = (v or "").strip()
        if not kk or not vv:
            continue
        out[kk] = vv
    return out


def _append_figure(story: List[object], styles, key: str, caption: str, imgs: Dict[str, str], *, max_w: float, max_h: float):
    path = (imgs.get(key) or "").strip()
    if path and os.path.exists(path):
        story.append(_img(path, max_w=max_w, max_h=max_h))
    else:
        logger.warning("Imagen '%s' no disponible para el reporte", key)
        story.append(Paragraph(f"(No image: '{key}' not available)", styles["Small"]))
    story.append(Paragraph(caption, styles["H3c"]))
    story.append(Spacer(1, 4 * mm))


def _f(v: float, dec: int) -> str:
    v = float(v)
    if not math.isfinite(v):
        return "inf" if v > 0 else "-inf" if v < 0 else "NaN"
    s = f"{v:.{dec}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _bullets(items: Sequence[str], styles):
    out: List[object] = []
    for i, it in enumerate(items):
        prefix = "" if i == 0 else "&nbsp;&nbsp;• "
        out.append(Paragraph(f"{prefix}{it}", styles["BodyText"]))
        out.append(Spacer(1, 1.2 * mm))
    return out


def _kv_table_style():
    return TableStyle(
        [
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("BACKGROUND", (0, 0), (0, -1), colors.whitesmoke),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), 6),
            ("RIGHTPADDING", (0, 0), (-1, -1), 6),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]
    )


def _grid_table_style(header_rows: int = 1, font_size: int = 9):
    ts = [
        ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), font_size),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("LEFTPADDING", (0, 0), (-1, -1), 4),
        ("RIGHTPADDING", (0, 0), (-1, -1), 4),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]
    if header_rows > 0:
        ts += [
            ("BACKGROUND", (0, 0), (-1, header_rows - 1), colors.lightgrey),
            ("FONTNAME", (0, 0), (-1, header_rows - 1), "Helvetica-Bold"),
        ]
    return TableStyle(ts)


def _img(path: str, *, max_w: float, max_h: float):
    img = Image(path)
    iw, ih = img.imageWidth, img.imageHeight
    if iw <= 0 or ih <= 0:
        return img
    scale = min(max_w / iw, max_h / ih, 1.0)
    img.drawWidth = iw * scale
    img.drawHeight = ih * scale
    return img
