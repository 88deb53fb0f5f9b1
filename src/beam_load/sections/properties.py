from __future__ import annotations

import math

from beam_load.domain.errors import InvalidGeometryError
from beam_load.domain.sections import (
    CChannel, Circular, CrossSection, IBeam, Rectangular, SectionProps, ShapeKind,
)

MM_TO_M = 1e-3


def _rect_Ix_about_centroid(b: float, h: float) -> float:
    """Ix de un rectángulo b (ancho) x h (alto), respecto a su centroide (eje horizontal)."""
    return (b * h**3) / 12.0


def _check_positive(section: CrossSection) -> None:
    for name, v in section.dims_mm().items():
        if not math.isfinite(float(v)) or float(v) <= 0.0:
            raise InvalidGeometryError(f"{section.shape.value}: {name} debe ser > 0 (valor={v!r}).")


def _flanged_parts(section: IBeam | CChannel) -> tuple[float, float, float, float, float]:
    """Devuelve (bf, tf, tw, h, h_web) en m, validando alma de altura > 0 y espesores <= h/2."""
    bf = float(section.flange_width_mm) * MM_TO_M
    tf = float(section.flange_thickness_mm) * MM_TO_M
    tw = float(section.web_thickness_mm) * MM_TO_M
    h = float(section.height_mm) * MM_TO_M
    h_web = h - 2.0 * tf
    if h_web <= 0.0:
        raise InvalidGeometryError(
            f"{section.shape.value}: altura de alma no positiva "
            f"(h={section.height_mm:g} mm, tf={section.flange_thickness_mm:g} mm)."
        )
    if tw > h / 2.0:
        raise InvalidGeometryError(
            f"{section.shape.value}: espesor de alma mayor que media altura "
            f"(h={section.height_mm:g} mm, tw={section.web_thickness_mm:g} mm)."
        )
    return bf, tf, tw, h, h_web


def _rectangular(s: Rectangular) -> SectionProps:
    b = float(s.width_mm) * MM_TO_M
    h = float(s.height_mm) * MM_TO_M
    I = _rect_Ix_about_centroid(b, h)
    c = h / 2.0
    return SectionProps(area_m2=b * h, moment_of_inertia_m4=I, section_modulus_m3=I / c, extreme_fiber_m=c)


def _circular(s: Circular) -> SectionProps:
    d = float(s.diameter_mm) * MM_TO_M
    I = math.pi * d**4 / 64.0
    c = d / 2.0
    return SectionProps(area_m2=math.pi * c**2, moment_of_inertia_m4=I, section_modulus_m3=I / c, extreme_fiber_m=c)


def _i_beam(s: IBeam) -> SectionProps:
    bf, tf, tw, h, h_web = _flanged_parts(s)
    area = 2.0 * bf * tf + h_web * tw

    # Ejes paralelos por ala respecto del centroide a media altura (alas iguales)
    arm = (h - tf) / 2.0
    I_flange = bf * tf**3 / 6.0 + bf * tf * arm**2
    I_web = _rect_Ix_about_centroid(tw, h_web)
    I = 2.0 * I_flange + I_web

    c = h / 2.0
    return SectionProps(area_m2=area, moment_of_inertia_m4=I, section_modulus_m3=I / c, extreme_fiber_m=c)


def _c_channel(s: CChannel) -> SectionProps:
    """
    Aproximación: el centroide se toma a media altura, igual que en la doble T.
    El corrimiento real del centroide de un perfil C no se considera.
    """
    bf, tf, tw, h, h_web = _flanged_parts(s)
    area = 2.0 * bf * tf + h_web * tw

    arm = (h - tf) / 2.0
    I_flange = _rect_Ix_about_centroid(bf, tf) + bf * tf * arm**2
    I_web = _rect_Ix_about_centroid(tw, h_web)
    I = 2.0 * I_flange + I_web

    c = h / 2.0
    return SectionProps(area_m2=area, moment_of_inertia_m4=I, section_modulus_m3=I / c, extreme_fiber_m=c)


_DISPATCH = {
    ShapeKind.RECTANGULAR: _rectangular,
    ShapeKind.I_BEAM: _i_beam,
    ShapeKind.C_CHANNEL: _c_channel,
    ShapeKind.CIRCULAR: _circular,
}


def compute_section_properties(section: CrossSection) -> SectionProps:
    """
    Propiedades geométricas en SI (m², m⁴, m³):
      - área
      - momento de inercia respecto del eje neutro horizontal
      - módulo resistente elástico I / c
    Las dimensiones de entrada están en mm.
    """
    shape = getattr(section, "shape", None)
    fn = _DISPATCH.get(shape) if isinstance(shape, ShapeKind) else None
    if fn is None:
        raise InvalidGeometryError(f"Tipo de sección no reconocido: {type(section).__name__}")

    _check_positive(section)
    return fn(section)
