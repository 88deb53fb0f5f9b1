from __future__ import annotations

from beam_load.domain.errors import InvalidSupportsError
from beam_load.domain.loads import LoadKind, NormalizedLoad
from beam_load.domain.results import Reactions
from beam_load.engine.normalize import NormalizedBeam


def _resultant(load: NormalizedLoad) -> tuple[float, float]:
    """(F, x) de la resultante: la uniforme se reemplaza por F = q·(x1-x0) en su centroide."""
    if load.kind is LoadKind.POINT:
        return load.magnitude, load.x0_m
    if load.kind is LoadKind.UNIFORM:
        return load.total_force_n, load.centroid_m
    raise ValueError(f"Tipo de carga no reconocido: {load.kind!r}")


def compute_reactions(beam: NormalizedBeam, load: NormalizedLoad) -> Reactions:
    """
    Reacciones por equilibrio estático (cargas hacia abajo positivas, reacciones hacia arriba).

    Simplemente apoyada (ΣM respecto de cada apoyo):
      R1 = F·(b - x) / (b - a)
      R2 = F·(x - a) / (b - a)

    Voladizo (empotrado en x=0):
      R1 = F,  R2 = 0,  M_emp = F·x
    """
    F, x = _resultant(load)

    if beam.is_cantilever:
        return Reactions(left_n=F, right_n=0.0, fixed_moment_nm=F * x)

    a = beam.left_m
    b = beam.right_m
    span = b - a
    if span <= 0.0:
        raise InvalidSupportsError(f"Apoyos coincidentes o invertidos: a={a * 1e3:g} mm, b={b * 1e3:g} mm.")

    R1 = F * (b - x) / span
    R2 = F * (x - a) / span
    return Reactions(left_n=R1, right_n=R2)
