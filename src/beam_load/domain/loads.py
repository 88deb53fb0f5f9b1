from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LoadKind(Enum):
    POINT = "point"
    UNIFORM = "uniform"


@dataclass(frozen=True)
class Load:
    """
    Carga única aplicada (hacia abajo positiva).

    - POINT:   magnitude en N, actuando en x0_mm.
    - UNIFORM: magnitude en N/mm sobre [x0_mm, x1_mm].
    """
    kind: LoadKind
    magnitude: float
    x0_mm: float
    x1_mm: Optional[float] = None

    @classmethod
    def point(cls, magnitude_n: float, x_mm: float) -> "Load":
        return cls(kind=LoadKind.POINT, magnitude=float(magnitude_n), x0_mm=float(x_mm))

    @classmethod
    def uniform(cls, q_n_per_mm: float, x0_mm: float, x1_mm: float) -> "Load":
        return cls(kind=LoadKind.UNIFORM, magnitude=float(q_n_per_mm), x0_mm=float(x0_mm), x1_mm=float(x1_mm))

    @property
    def end_mm(self) -> float:
        if self.kind is LoadKind.POINT or self.x1_mm is None:
            return float(self.x0_mm)
        return float(self.x1_mm)

    @property
    def total_force_n(self) -> float:
        if self.kind is LoadKind.POINT:
            return float(self.magnitude)
        return float(self.magnitude) * (self.end_mm - float(self.x0_mm))


@dataclass(frozen=True)
class NormalizedLoad:
    """Carga en unidades internas SI: N (puntual) o N/m (uniforme), posiciones en m."""
    kind: LoadKind
    magnitude: float
    x0_m: float
    x1_m: float

    @property
    def span_m(self) -> float:
        return self.x1_m - self.x0_m

    @property
    def total_force_n(self) -> float:
        if self.kind is LoadKind.POINT:
            return self.magnitude
        return self.magnitude * self.span_m

    @property
    def centroid_m(self) -> float:
        return 0.5 * (self.x0_m + self.x1_m)
