from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from beam_load.domain.beam import BeamConfig
from beam_load.domain.loads import Load
from beam_load.domain.sections import CrossSection
from beam_load.materials.material_db import Material


@dataclass(frozen=True)
class BeamCase:
    """
    Caso completo para el motor (entrada única e inmutable):
      - viga (luz y condición de apoyo)
      - carga aplicada (una sola)
      - sección transversal
      - material (o material "custom")
      - densidad para el peso propio; si es None se usa la del material
    """
    beam: BeamConfig
    load: Load
    section: CrossSection
    material: Material
    density_kg_m3: Optional[float] = None

    @property
    def density(self) -> float:
        if self.density_kg_m3 is None:
            return float(self.material.density_kg_m3)
        return float(self.density_kg_m3)
