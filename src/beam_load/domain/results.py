from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from beam_load.domain.cases import BeamCase
from beam_load.domain.errors import ErrorCode, UndefinedSafetyFactorError


@dataclass(frozen=True)
class Reactions:
    left_n: float              # R1 (apoyo izquierdo o empotramiento)
    right_n: float             # R2 (0 en voladizo)
    fixed_moment_nm: float = 0.0  # momento de empotramiento (solo voladizo)

    @property
    def total_n(self) -> float:
        return self.left_n + self.right_n


@dataclass(frozen=True)
class DiagramSeries:
    """
    Serie muestreada (x, valor) para graficar o exportar.
    x en mm; valores en la unidad indicada (N para corte, N·mm para momento).
    """
    name: str
    unit: str
    x_mm: np.ndarray
    values: np.ndarray

    def __post_init__(self):
        # Copias de solo lectura: la serie no se modifica una vez creada
        for field in ("x_mm", "values"):
            arr = np.array(getattr(self, field), dtype=float)
            arr.flags.writeable = False
            object.__setattr__(self, field, arr)

    def __len__(self) -> int:
        return int(self.x_mm.size)

    def points(self) -> List[Tuple[float, float]]:
        return [(float(x), float(v)) for x, v in zip(self.x_mm, self.values)]

    def max_abs(self) -> float:
        if self.values.size == 0:
            return 0.0
        return float(np.max(np.abs(self.values)))

    def argmax_abs(self) -> int:
        return int(np.argmax(np.abs(self.values)))


@dataclass(frozen=True)
class ResultSet:
    max_shear_force_n: float
    max_bending_moment_nmm: float
    max_normal_stress_mpa: float
    max_shear_stress_mpa: float
    safety_factor: float           # math.inf si no hay tensión
    center_of_gravity_mm: float
    moment_of_inertia_m4: float
    section_modulus_m3: float
    area_m2: float
    beam_weight_n: float
    reaction_left_n: float         # incluye peso propio
    reaction_right_n: float
    flags: Tuple[ErrorCode, ...] = ()

    @property
    def safety_factor_defined(self) -> bool:
        return ErrorCode.UNDEFINED_SAFETY_FACTOR not in self.flags and math.isfinite(self.safety_factor)

    def require_safety_factor(self) -> float:
        if not self.safety_factor_defined:
            raise UndefinedSafetyFactorError("Tensión normal máxima nula: el factor de seguridad no está definido.")
        return self.safety_factor


@dataclass(frozen=True)
class AnalysisResult:
    case: BeamCase
    reactions: Reactions          # sólo carga aplicada (sin peso propio)
    shear: DiagramSeries
    moment: DiagramSeries
    results: ResultSet
