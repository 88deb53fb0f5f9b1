from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SupportCondition(Enum):
    SIMPLY_SUPPORTED = "simply_supported"
    CANTILEVER = "cantilever"


@dataclass(frozen=True)
class BeamConfig:
    """
    Viga recta de un solo tramo. Posiciones en mm medidas desde x=0.

    Voladizo: empotrado en x=0, extremo libre en x=L (los apoyos se ignoran).
    Simplemente apoyada: apoyos en left_support_mm / right_support_mm
    (right_support_mm=None => L).
    """
    length_mm: float
    support: SupportCondition = SupportCondition.SIMPLY_SUPPORTED
    left_support_mm: float = 0.0
    right_support_mm: Optional[float] = None

    @property
    def right_mm(self) -> float:
        if self.right_support_mm is None:
            return float(self.length_mm)
        return float(self.right_support_mm)

    @property
    def is_cantilever(self) -> bool:
        return self.support is SupportCondition.CANTILEVER
