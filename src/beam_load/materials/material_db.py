from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

KSI_TO_MPA = 6.894757293168  # 1 ksi = 6.894757... MPa


@dataclass(frozen=True)
class Material:
    """
    Material para la verificación elástica.

    Unidades:
      - yield_strength_mpa   [MPa]
      - elastic_modulus_gpa  [GPa]
      - density_kg_m3        [kg/m³]

    elastic_modulus / poissons_ratio / thermal_expansion no intervienen en las
    tensiones actuales; se conservan para trazabilidad.
    """
    name: str
    yield_strength_mpa: float
    elastic_modulus_gpa: float = 0.0
    density_kg_m3: float = 0.0
    poissons_ratio: float = 0.0
    thermal_expansion: float = 0.0  # [1e-6 / °C]
    notes: str = ""

    @classmethod
    def custom(
        cls,
        yield_strength_mpa: float,
        elastic_modulus_gpa: float = 0.0,
        density_kg_m3: float = 0.0,
    ) -> "Material":
        return cls(
            name="Custom",
            yield_strength_mpa=float(yield_strength_mpa),
            elastic_modulus_gpa=float(elastic_modulus_gpa),
            density_kg_m3=float(density_kg_m3),
        )


STANDARD_MATERIALS: Dict[str, Material] = {
    "ASTM A36 Structural Steel": Material(
        name="ASTM A36 Structural Steel",
        yield_strength_mpa=250.0,
        elastic_modulus_gpa=200.0,
        density_kg_m3=7850.0,
        poissons_ratio=0.3,
        thermal_expansion=12.0,
    ),
    "ASTM A992 Structural Steel": Material(
        name="ASTM A992 Structural Steel",
        yield_strength_mpa=345.0,
        elastic_modulus_gpa=200.0,
        density_kg_m3=7850.0,
        poissons_ratio=0.3,
        thermal_expansion=12.0,
    ),
    "ASTM A572 Grade 50 Steel": Material(
        name="ASTM A572 Grade 50 Steel",
        yield_strength_mpa=345.0,
        elastic_modulus_gpa=200.0,
        density_kg_m3=7850.0,
        poissons_ratio=0.3,
        thermal_expansion=12.0,
    ),
}


class MaterialDB:
    def __init__(self, materials: List[Material]):
        self.materials: List[Material] = list(materials)
        self.by_name: Dict[str, Material] = {m.name.strip(): m for m in self.materials if m.name.strip()}

    def names(self) -> List[str]:
        return [m.name for m in self.materials]

    def get(self, name: str) -> Optional[Material]:
        return self.by_name.get((name or "").strip())

    def __len__(self) -> int:
        return len(self.materials)

    @classmethod
    def default(cls) -> "MaterialDB":
        return cls(list(STANDARD_MATERIALS.values()))

    @staticmethod
    def _norm(s: str) -> str:
        return (s or "").strip()

    @classmethod
    def from_txt(cls, path: str | Path) -> "MaterialDB":
        """
        Formato: columnas separadas por ';', primera fila con encabezados.
        Líneas vacías o que empiezan con '#' o '//' se ignoran.

        Columnas reconocidas:
          name; yield_mpa; e_gpa; density_kg_m3; poisson; thermal_expansion; notes
        Compatibilidad: 'yield_ksi' si no viene yield_mpa.
        """
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"No existe el archivo de materiales: {p}")

        lines = p.read_text(encoding="utf-8", errors="replace").splitlines()
        rows: List[List[str]] = []
        for ln in lines:
            t = ln.strip()
            if not t:
                continue
            if t.startswith("#") or t.startswith("//"):
                continue
            rows.append([c.strip() for c in t.split(";")])

        if not rows:
            raise ValueError("Archivo de materiales vacío o sin filas válidas.")

        header = [h.strip().lower() for h in rows[0]]
        if "name" not in header:
            raise ValueError(f"Falta la columna 'name' en el encabezado: {rows[0]}")
        data_rows = rows[1:]

        def idx(name: str) -> Optional[int]:
            return header.index(name) if name in header else None

        i_name = idx("name")
        i_yield = idx("yield_mpa")
        i_yield_ksi = idx("yield_ksi")
        i_e = idx("e_gpa")
        i_rho = idx("density_kg_m3")
        i_nu = idx("poisson")
        i_alpha = idx("thermal_expansion")
        i_notes = idx("notes")

        def get_cell(row: List[str], i: Optional[int]) -> str:
            if i is None:
                return ""
            return row[i] if i < len(row) else ""

        def try_float(s: str) -> Optional[float]:
            t = (s or "").strip().replace(",", ".")
            if t == "":
                return None
            try:
                return float(t)
            except ValueError:
                return None

        mats: List[Material] = []
        for r in data_rows:
            name = cls._norm(get_cell(r, i_name))
            if not name:
                continue

            fy = try_float(get_cell(r, i_yield))
            if fy is None:
                fy_ksi = try_float(get_cell(r, i_yield_ksi))
                if fy_ksi is not None:
                    fy = fy_ksi * KSI_TO_MPA
            if fy is None:
                # sin fluencia el material no sirve para el factor de seguridad
                continue

            mats.append(Material(
                name=name,
                yield_strength_mpa=float(fy),
                elastic_modulus_gpa=try_float(get_cell(r, i_e)) or 0.0,
                density_kg_m3=try_float(get_cell(r, i_rho)) or 0.0,
                poissons_ratio=try_float(get_cell(r, i_nu)) or 0.0,
                thermal_expansion=try_float(get_cell(r, i_alpha)) or 0.0,
                notes=cls._norm(get_cell(r, i_notes)),
            ))

        if not mats:
            raise ValueError("No se pudieron cargar materiales: faltan columnas o valores de fluencia.")

        mats.sort(key=lambda m: m.name.upper())
        return cls(mats)


def default_materials_path() -> Path:
    """Catálogo incluido en el paquete: src/beam_load/materials/data/materials.txt"""
    return Path(__file__).resolve().parent / "data" / "materials.txt"
