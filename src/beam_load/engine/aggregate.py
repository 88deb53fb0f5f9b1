from __future__ import annotations

import math
from typing import List

from beam_load.domain.errors import ErrorCode
from beam_load.domain.loads import LoadKind, NormalizedLoad
from beam_load.domain.results import ResultSet, Reactions
from beam_load.domain.sections import SectionProps
from beam_load.engine.equilibrium import compute_reactions
from beam_load.engine.normalize import NormalizedBeam
from beam_load.materials.material_db import Material

G = 9.81              # m/s²
PA_TO_MPA = 1e-6
NMM_TO_NM = 1e-3
M_TO_MM = 1e3

# factor de forma para corte máximo en sección rectangular maciza (τmax = 1.5·V/A)
SHEAR_SHAPE_FACTOR = 1.5


def beam_self_weight(area_m2: float, length_m: float, density_kg_m3: float) -> float:
    """Peso propio [N] = A·L·ρ·g"""
    return float(area_m2) * float(length_m) * float(density_kg_m3) * G


def center_of_gravity_m(beam: NormalizedBeam, load: NormalizedLoad, beam_weight_n: float) -> float:
    """
    Centro de gravedad conjunto (desde x=0): peso propio en L/2 y resultante
    de la carga en su posición (o centroide si es uniforme).
    Sin fuerzas (peso y carga nulos) se devuelve el centro geométrico L/2.
    """
    F = load.total_force_n
    x_F = load.x0_m if load.kind is LoadKind.POINT else load.centroid_m

    total_force = beam_weight_n + F
    total_moment = beam_weight_n * (beam.length_m / 2.0) + F * x_F
    if abs(total_force) < 1e-12:
        return beam.length_m / 2.0
    return total_moment / total_force


def self_weight_reactions(beam: NormalizedBeam, beam_weight_n: float) -> Reactions:
    """Reacciones del peso propio como uniforme sobre [0, L]."""
    w = NormalizedLoad(
        kind=LoadKind.UNIFORM,
        magnitude=beam_weight_n / beam.length_m,
        x0_m=0.0,
        x1_m=beam.length_m,
    )
    return compute_reactions(beam, w)


def aggregate(
    props: SectionProps,
    max_shear_force_n: float,
    max_bending_moment_nmm: float,
    material: Material,
    beam_weight_n: float,
    load: NormalizedLoad,
    beam: NormalizedBeam,
    reactions: Reactions,
) -> ResultSet:
    """
    Combina máximos del análisis, propiedades de la sección y material:

      σmax = Mmax / W            [MPa]
      τmax = 1.5 · Vmax / A      [MPa]  (factor de sección rectangular, para todas las formas)
      FS   = fy / σmax           (inf + flag si σmax = 0)
    """
    flags: List[ErrorCode] = []

    M_nm = float(max_bending_moment_nmm) * NMM_TO_NM
    sigma_mpa = (M_nm / props.section_modulus_m3) * PA_TO_MPA
    tau_mpa = (SHEAR_SHAPE_FACTOR * float(max_shear_force_n) / props.area_m2) * PA_TO_MPA

    if sigma_mpa > 0.0:
        fs = float(material.yield_strength_mpa) / sigma_mpa
    else:
        fs = math.inf
        flags.append(ErrorCode.UNDEFINED_SAFETY_FACTOR)

    sw = self_weight_reactions(beam, beam_weight_n)

    return ResultSet(
        max_shear_force_n=float(max_shear_force_n),
        max_bending_moment_nmm=float(max_bending_moment_nmm),
        max_normal_stress_mpa=sigma_mpa,
        max_shear_stress_mpa=tau_mpa,
        safety_factor=fs,
        center_of_gravity_mm=center_of_gravity_m(beam, load, beam_weight_n) * M_TO_MM,
        moment_of_inertia_m4=props.moment_of_inertia_m4,
        section_modulus_m3=props.section_modulus_m3,
        area_m2=props.area_m2,
        beam_weight_n=float(beam_weight_n),
        reaction_left_n=reactions.left_n + sw.left_n,
        reaction_right_n=reactions.right_n + sw.right_n,
        flags=tuple(flags),
    )
