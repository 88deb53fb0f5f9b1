from __future__ import annotations

import logging
from typing import List

from beam_load.domain.cases import BeamCase
from beam_load.domain.results import AnalysisResult
from beam_load.engine.aggregate import aggregate, beam_self_weight
from beam_load.engine.diagrams import N_SAMPLES, build_V_M
from beam_load.engine.equilibrium import compute_reactions
from beam_load.engine.normalize import normalize_beam, normalize_load
from beam_load.sections.properties import compute_section_properties

logger = logging.getLogger(__name__)


def run_analysis(case: BeamCase, n_samples: int = N_SAMPLES) -> AnalysisResult:
    """
    Cálculo completo (puro, sin estado):
      entradas -> propiedades de sección -> reacciones y diagramas -> resultados

    Cualquier dato inválido lanza BeamLoadError antes de calcular; no hay
    resultados parciales.
    """
    notes: List[str] = []

    props = compute_section_properties(case.section)
    beam = normalize_beam(case.beam)
    load = normalize_load(case.load, case.beam, notes)
    for n in notes:
        logger.debug(n)

    reactions = compute_reactions(beam, load)
    diag = build_V_M(beam, load, reactions)
    shear, moment = diag.series(n_samples)
    max_V, max_M = diag.extremes(n_samples)

    weight = beam_self_weight(props.area_m2, beam.length_m, case.density)
    results = aggregate(
        props,
        max_shear_force_n=max_V,
        max_bending_moment_nmm=max_M,
        material=case.material,
        beam_weight_n=weight,
        load=load,
        beam=beam,
        reactions=reactions,
    )

    logger.debug(
        "Análisis: R1=%.3f N R2=%.3f N Vmax=%.3f N Mmax=%.3f N·mm FS=%s",
        reactions.left_n, reactions.right_n, max_V, max_M, results.safety_factor,
    )
    return AnalysisResult(case=case, reactions=reactions, shear=shear, moment=moment, results=results)
