from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union


class ShapeKind(Enum):
    RECTANGULAR = "rectangular"
    I_BEAM = "i_beam"
    C_CHANNEL = "c_channel"
    CIRCULAR = "circular"


@dataclass(frozen=True)
class Rectangular:
    width_mm: float
    height_mm: float
    shape = ShapeKind.RECTANGULAR

    def dims_mm(self) -> Dict[str, float]:
        return {"width_mm": self.width_mm, "height_mm": self.height_mm}


@dataclass(frozen=True)
class IBeam:
    """
    Doble T simétrica: dos alas iguales (bf x tf) y alma (tw) entre ellas.
    height_mm es la altura total (incluye ambas alas).
    """
    flange_width_mm: float
    flange_thickness_mm: float
    web_thickness_mm: float
    height_mm: float
    shape = ShapeKind.I_BEAM

    def dims_mm(self) -> Dict[str, float]:
        return {
            "flange_width_mm": self.flange_width_mm,
            "flange_thickness_mm": self.flange_thickness_mm,
            "web_thickness_mm": self.web_thickness_mm,
            "height_mm": self.height_mm,
        }


@dataclass(frozen=True)
class CChannel:
    """Perfil C (U). Mismos parámetros que la doble T."""
    flange_width_mm: float
    flange_thickness_mm: float
    web_thickness_mm: float
    height_mm: float
    shape = ShapeKind.C_CHANNEL

    def dims_mm(self) -> Dict[str, float]:
        return {
            "flange_width_mm": self.flange_width_mm,
            "flange_thickness_mm": self.flange_thickness_mm,
            "web_thickness_mm": self.web_thickness_mm,
            "height_mm": self.height_mm,
        }


@dataclass(frozen=True)
class Circular:
    diameter_mm: float
    shape = ShapeKind.CIRCULAR

    def dims_mm(self) -> Dict[str, float]:
        return {"diameter_mm": self.diameter_mm}


CrossSection = Union[Rectangular, IBeam, CChannel, Circular]


@dataclass(frozen=True)
class SectionProps:
    area_m2: float
    moment_of_inertia_m4: float
    section_modulus_m3: float
    extreme_fiber_m: float  # distancia del eje neutro a la fibra extrema
