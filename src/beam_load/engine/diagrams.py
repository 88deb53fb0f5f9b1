from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from beam_load.domain.loads import LoadKind, NormalizedLoad
from beam_load.domain.results import DiagramSeries, Reactions
from beam_load.engine.equilibrium import compute_reactions
from beam_load.engine.normalize import NormalizedBeam

N_SAMPLES = 100
NM_TO_NMM = 1e3


@dataclass(frozen=True)
class VMDiagram:
    """
    V(x) y M(x) de la carga aplicada, en SI (x en m, V en N, M en N·m).

    Simplemente apoyada (superposición con escalones):
      - R1 cuenta desde x >= a, R2 desde x >= b (ambas hacia arriba)
      - la carga resta en V desde x >= x0, y en M desde x > x0
      - M es nulo antes del apoyo izquierdo

    Voladizo (empotrado en x=0, libre en x=L): se mide la carga que queda
    entre la sección y el extremo libre; más allá de la carga V = M = 0.
    """
    beam: NormalizedBeam
    load: NormalizedLoad
    reactions: Reactions

    def eval_V(self, x: float) -> float:
        return float(self._eval_V_array(np.asarray([x], dtype=float))[0])

    def eval_M(self, x: float) -> float:
        return float(self._eval_M_array(np.asarray([x], dtype=float))[0])

    # -------------------------
    # Evaluadores vectorizados
    # -------------------------
    def _eval_V_array(self, x: np.ndarray) -> np.ndarray:
        if self.beam.is_cantilever:
            return self._cantilever_V(x)

        a, b = self.beam.left_m, self.beam.right_m
        R1, R2 = self.reactions.left_n, self.reactions.right_n
        ld = self.load

        V = R1 * (x >= a) + R2 * (x >= b)
        if ld.kind is LoadKind.POINT:
            V = V - ld.magnitude * (x >= ld.x0_m)
        else:
            # uniforme: rampa dentro del tramo cargado, constante después
            lx = np.clip(x - ld.x0_m, 0.0, ld.span_m)
            V = V - ld.magnitude * lx
        return V.astype(float)

    def _eval_M_array(self, x: np.ndarray) -> np.ndarray:
        if self.beam.is_cantilever:
            return self._cantilever_M(x)

        a, b = self.beam.left_m, self.beam.right_m
        R1, R2 = self.reactions.left_n, self.reactions.right_n
        ld = self.load

        M = R1 * (x - a) * (x >= a)
        M = M + R2 * (x - b) * (x > b)

        past = x > ld.x0_m
        if ld.kind is LoadKind.POINT:
            M = M - ld.magnitude * (x - ld.x0_m) * past
        else:
            # momento de la porción de carga ya recorrida, aplicado en su centroide
            loaded = np.clip(x - ld.x0_m, 0.0, ld.span_m)
            xc = ld.x0_m + 0.5 * loaded
            M = M - ld.magnitude * loaded * (x - xc) * past
        return M.astype(float)

    def _cantilever_V(self, x: np.ndarray) -> np.ndarray:
        ld = self.load
        if ld.kind is LoadKind.POINT:
            return np.where(x <= ld.x0_m, -ld.magnitude, 0.0).astype(float)

        W = ld.total_force_n
        inside = (x > ld.x0_m) & (x < ld.x1_m)
        remaining = np.clip(ld.x1_m - x, 0.0, ld.span_m)
        return np.where(x <= ld.x0_m, -W, np.where(inside, -ld.magnitude * remaining, 0.0)).astype(float)

    def _cantilever_M(self, x: np.ndarray) -> np.ndarray:
        ld = self.load
        if ld.kind is LoadKind.POINT:
            return np.where(x <= ld.x0_m, -ld.magnitude * (ld.x0_m - x), 0.0).astype(float)

        W = ld.total_force_n
        inside = (x > ld.x0_m) & (x < ld.x1_m)
        remaining = np.clip(ld.x1_m - x, 0.0, ld.span_m)
        before = -W * (ld.centroid_m - x)
        within = -ld.magnitude * remaining * remaining / 2.0
        return np.where(x <= ld.x0_m, before, np.where(inside, within, 0.0)).astype(float)

    # -------------------------
    # Muestreo
    # -------------------------
    def sample_x_mm(self, n_samples: int = N_SAMPLES) -> np.ndarray:
        if int(n_samples) < 2:
            raise ValueError(f"Se requieren al menos 2 muestras (n_samples={n_samples}).")
        return np.linspace(0.0, self.beam.length_mm, int(n_samples), dtype=float)

    def sample(self, n_samples: int = N_SAMPLES) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Devuelve (x_mm, V [N], M [N·mm]) con n_samples puntos equiespaciados,
        incluyendo ambos extremos.
        """
        x_mm = self.sample_x_mm(n_samples)
        x_m = x_mm * 1e-3
        V = self._eval_V_array(x_m)
        M = self._eval_M_array(x_m) * NM_TO_NMM
        return x_mm, V, M

    def series(self, n_samples: int = N_SAMPLES) -> Tuple[DiagramSeries, DiagramSeries]:
        """Series (corte [N], momento [N·mm]) sobre x en mm."""
        x_mm, V, M = self.sample(n_samples)
        shear = DiagramSeries(name="Shear Force", unit="N", x_mm=x_mm, values=V)
        moment = DiagramSeries(name="Bending Moment", unit="N·mm", x_mm=x_mm, values=M)
        return shear, moment

    def critical_points(self) -> np.ndarray:
        """
        Abscisas (m) donde V o M pueden alcanzar extremos que el muestreo
        equiespaciado no toca: apoyos, bordes de la carga (lado izquierdo y
        derecho) y puntos de corte nulo dentro de la uniforme.
        """
        L = self.beam.length_m
        ld = self.load
        eps = 1e-9 * max(L, 1.0)

        xs: List[float] = [0.0, L, ld.x0_m, ld.x1_m]
        if not self.beam.is_cantilever:
            xs += [self.beam.left_m, self.beam.right_m]
        xs += [x - eps for x in list(xs)]

        if ld.kind is LoadKind.UNIFORM and abs(ld.magnitude) > 0.0:
            # V lineal por tramos dentro de [x0, x1]; cortes en los apoyos interiores
            bounds = [ld.x0_m, ld.x1_m]
            if not self.beam.is_cantilever:
                bounds += [s for s in (self.beam.left_m, self.beam.right_m) if ld.x0_m < s < ld.x1_m]
            bounds = sorted(set(bounds))
            for s, e in zip(bounds[:-1], bounds[1:]):
                V_s = self.eval_V(s) + ld.magnitude * (s - ld.x0_m)  # corte sin la rampa propia
                x_zero = ld.x0_m + V_s / ld.magnitude
                if s <= x_zero <= e:
                    xs.append(x_zero)

        arr = np.asarray(xs, dtype=float)
        return np.unique(np.clip(arr, 0.0, L))

    def extremes(self, n_samples: int = N_SAMPLES) -> Tuple[float, float]:
        """
        (max|V| [N], max|M| [N·mm]) sobre las muestras y los puntos críticos.
        """
        x_m = np.concatenate([self.sample_x_mm(n_samples) * 1e-3, self.critical_points()])
        V = self._eval_V_array(x_m)
        M = self._eval_M_array(x_m) * NM_TO_NMM
        return float(np.max(np.abs(V))), float(np.max(np.abs(M)))


def build_V_M(beam: NormalizedBeam, load: NormalizedLoad, reactions: Reactions | None = None) -> VMDiagram:
    if reactions is None:
        reactions = compute_reactions(beam, load)
    return VMDiagram(beam=beam, load=load, reactions=reactions)


def sample_diagrams(
    beam: NormalizedBeam,
    load: NormalizedLoad,
    n_samples: int = N_SAMPLES,
    reactions: Reactions | None = None,
) -> Tuple[DiagramSeries, DiagramSeries]:
    """Series (corte [N], momento [N·mm]) sobre x en mm, listas para graficar o exportar."""
    return build_V_M(beam, load, reactions).series(n_samples)
