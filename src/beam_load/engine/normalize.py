from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from beam_load.domain.beam import BeamConfig, SupportCondition
from beam_load.domain.errors import InvalidGeometryError, InvalidLoadPositionError, InvalidSupportsError
from beam_load.domain.loads import Load, LoadKind, NormalizedLoad

MM_TO_M = 1e-3
N_PER_MM_TO_N_PER_M = 1e3

# tolerancia para posiciones ingresadas "justo" en el borde (mm)
EDGE_TOL_MM = 1e-9


@dataclass(frozen=True)
class NormalizedBeam:
    """Viga en SI (m). Para voladizo los apoyos no se usan (empotramiento en x=0)."""
    length_mm: float
    length_m: float
    support: SupportCondition
    left_m: float
    right_m: float

    @property
    def is_cantilever(self) -> bool:
        return self.support is SupportCondition.CANTILEVER


def _finite(v: float) -> bool:
    return math.isfinite(float(v))


def normalize_beam(beam: BeamConfig) -> NormalizedBeam:
    L = float(beam.length_mm)
    if not _finite(L) or L <= 0.0:
        raise InvalidGeometryError(f"Luz de viga inválida: L={beam.length_mm!r} mm (debe ser > 0).")

    if not isinstance(beam.support, SupportCondition):
        raise InvalidSupportsError(f"Condición de apoyo no reconocida: {beam.support!r}")

    if beam.support is SupportCondition.CANTILEVER:
        return NormalizedBeam(length_mm=L, length_m=L * MM_TO_M, support=beam.support, left_m=0.0, right_m=L * MM_TO_M)

    a = float(beam.left_support_mm)
    b = float(beam.right_mm)
    if not (_finite(a) and _finite(b)):
        raise InvalidSupportsError(f"Posición de apoyo no numérica: [{a!r}, {b!r}] mm.")
    if a < -EDGE_TOL_MM or b > L + EDGE_TOL_MM:
        raise InvalidSupportsError(f"Apoyos fuera de la viga: [{a:g}, {b:g}] mm con L={L:g} mm.")
    if abs(b - a) <= EDGE_TOL_MM:
        raise InvalidSupportsError(f"Apoyos coincidentes en x={a:g} mm.")
    if b < a:
        raise InvalidSupportsError(f"Apoyos invertidos: izquierdo={a:g} mm > derecho={b:g} mm.")

    return NormalizedBeam(length_mm=L, length_m=L * MM_TO_M, support=beam.support, left_m=a * MM_TO_M, right_m=b * MM_TO_M)


def normalize_load(load: Load, beam: BeamConfig, notes: List[str] | None = None) -> NormalizedLoad:
    """
    Valida posiciones y convierte a SI.

    Una uniforme de longitud nula se degrada a puntual con la misma fuerza total
    (q·0 = 0 N), en x0.
    """
    L = float(beam.length_mm)
    if not isinstance(load.kind, LoadKind):
        raise InvalidLoadPositionError(f"Tipo de carga no reconocido: {load.kind!r}")
    if not _finite(load.magnitude):
        raise InvalidLoadPositionError(f"Magnitud de carga no numérica: {load.magnitude!r}")

    x0 = float(load.x0_mm)
    x1 = float(load.end_mm)
    if not (_finite(x0) and _finite(x1)):
        raise InvalidLoadPositionError(f"Posición de carga no numérica: [{x0!r}, {x1!r}] mm.")
    if x0 < -EDGE_TOL_MM or x0 > L + EDGE_TOL_MM:
        raise InvalidLoadPositionError(f"Carga fuera de la viga: x0={x0:g} mm con L={L:g} mm.")

    if load.kind is LoadKind.POINT:
        return NormalizedLoad(kind=LoadKind.POINT, magnitude=float(load.magnitude), x0_m=x0 * MM_TO_M, x1_m=x0 * MM_TO_M)

    if load.x1_mm is None:
        raise InvalidLoadPositionError("Carga uniforme sin posición final.")
    if x1 > L + EDGE_TOL_MM:
        raise InvalidLoadPositionError(f"Carga fuera de la viga: x1={x1:g} mm con L={L:g} mm.")
    if x1 < x0:
        raise InvalidLoadPositionError(f"Carga uniforme invertida: x1={x1:g} mm < x0={x0:g} mm.")

    if x1 - x0 <= EDGE_TOL_MM:
        if notes is not None:
            notes.append(f"Uniforme de longitud nula en x={x0:g} mm: se trató como puntual de 0 N.")
        return NormalizedLoad(kind=LoadKind.POINT, magnitude=0.0, x0_m=x0 * MM_TO_M, x1_m=x0 * MM_TO_M)

    return NormalizedLoad(
        kind=LoadKind.UNIFORM,
        magnitude=float(load.magnitude) * N_PER_MM_TO_N_PER_M,
        x0_m=x0 * MM_TO_M,
        x1_m=x1 * MM_TO_M,
    )
