import math

import pytest
from pytest import approx

from beam_load.domain.beam import BeamConfig, SupportCondition
from beam_load.domain.cases import BeamCase
from beam_load.domain.errors import BeamLoadError, ErrorCode, UndefinedSafetyFactorError
from beam_load.domain.loads import Load
from beam_load.domain.sections import Circular, IBeam, Rectangular
from beam_load.engine.aggregate import G, beam_self_weight
from beam_load.engine.analysis import run_analysis
from beam_load.materials.material_db import STANDARD_MATERIALS, Material

A36 = STANDARD_MATERIALS["ASTM A36 Structural Steel"]
RECT = Rectangular(width_mm=100, height_mm=200)


def _case(beam, load, section=RECT, material=A36, density=None):
    return BeamCase(beam=beam, load=load, section=section, material=material, density_kg_m3=density)


def test_simply_supported_midspan_reference_case():
    res = run_analysis(_case(BeamConfig(length_mm=1000, left_support_mm=0, right_support_mm=1000), Load.point(1000, 500)))
    r = res.results

    assert res.reactions.left_n == approx(500)
    assert res.reactions.right_n == approx(500)
    assert r.max_shear_force_n == approx(500)
    assert r.max_bending_moment_nmm == approx(250_000)
    assert r.moment_of_inertia_m4 == approx(100 * 200**3 / 12 * 1e-12)
    assert r.section_modulus_m3 == approx(r.moment_of_inertia_m4 / 0.1)

    # σ = 250 N·m / 6.667e-4 m³ = 0.375 MPa ; τ = 1.5·500 / 0.02 = 0.0375 MPa
    assert r.max_normal_stress_mpa == approx(0.375)
    assert r.max_shear_stress_mpa == approx(0.0375)
    assert r.safety_factor == approx(250 / 0.375)
    assert r.flags == ()

    assert r.beam_weight_n == approx(0.02 * 1.0 * 7850 * 9.81)
    assert r.center_of_gravity_mm == approx(500)


def test_cantilever_uniform_reference_case():
    res = run_analysis(_case(BeamConfig(length_mm=1000, support=SupportCondition.CANTILEVER), Load.uniform(10, 0, 1000)))
    assert res.reactions.left_n == approx(10_000)
    assert res.reactions.right_n == 0.0
    assert res.moment.values[0] == approx(-5_000_000)
    assert res.results.max_bending_moment_nmm == approx(5_000_000)


def test_cantilever_point_load_at_free_end_peak_moment():
    res = run_analysis(_case(BeamConfig(length_mm=2000, support=SupportCondition.CANTILEVER), Load.point(750, 2000)))
    assert res.results.max_bending_moment_nmm == approx(750 * 2000)
    assert res.results.max_shear_force_n == approx(750)


@pytest.mark.parametrize("beam,load", [
    (BeamConfig(length_mm=1000), Load.point(1000, 500)),
    (BeamConfig(length_mm=1000), Load.point(1000, 130)),
    (BeamConfig(length_mm=3000, left_support_mm=400, right_support_mm=2200), Load.uniform(2.5, 1000, 3000)),
    (BeamConfig(length_mm=1500, support=SupportCondition.CANTILEVER), Load.point(800, 700)),
    (BeamConfig(length_mm=1500, support=SupportCondition.CANTILEVER), Load.uniform(1, 500, 1500)),
])
def test_reactions_balance_load_plus_self_weight(beam, load):
    r = run_analysis(_case(beam, load)).results
    assert r.reaction_left_n + r.reaction_right_n == approx(load.total_force_n + r.beam_weight_n)


def test_unloaded_beam_has_undefined_safety_factor():
    res = run_analysis(_case(BeamConfig(length_mm=1000), Load.point(0, 500)))
    r = res.results
    assert r.max_normal_stress_mpa == 0.0
    assert math.isinf(r.safety_factor)
    assert not math.isnan(r.safety_factor)
    assert ErrorCode.UNDEFINED_SAFETY_FACTOR in r.flags
    assert not r.safety_factor_defined
    with pytest.raises(UndefinedSafetyFactorError):
        r.require_safety_factor()


def test_zero_length_uniform_is_zero_force():
    r = run_analysis(_case(BeamConfig(length_mm=1000), Load.uniform(10, 400, 400))).results
    assert r.max_bending_moment_nmm == 0.0
    assert ErrorCode.UNDEFINED_SAFETY_FACTOR in r.flags


def test_center_of_gravity_weighted_average():
    # peso propio nulo: el CG coincide con la resultante de la carga
    r = run_analysis(_case(BeamConfig(length_mm=1000), Load.uniform(1, 200, 600), density=0.0)).results
    assert r.beam_weight_n == 0.0
    assert r.center_of_gravity_mm == approx(400)

    r = run_analysis(_case(BeamConfig(length_mm=1000), Load.point(1000, 1000), density=1000 / (0.02 * 1.0 * G))).results
    assert r.beam_weight_n == approx(1000)
    assert r.center_of_gravity_mm == approx(750)


def test_center_of_gravity_without_forces_is_midspan():
    r = run_analysis(_case(BeamConfig(length_mm=800), Load.point(0, 100), density=0.0)).results
    assert r.center_of_gravity_mm == approx(400)


def test_custom_material_and_density_override():
    mat = Material.custom(yield_strength_mpa=100, elastic_modulus_gpa=70, density_kg_m3=2700)
    res = run_analysis(_case(BeamConfig(length_mm=1000), Load.point(1000, 500), material=mat))
    assert res.results.beam_weight_n == approx(beam_self_weight(0.02, 1.0, 2700))
    assert res.results.safety_factor == approx(100 / 0.375)

    res = run_analysis(_case(BeamConfig(length_mm=1000), Load.point(1000, 500), material=mat, density=7850))
    assert res.results.beam_weight_n == approx(beam_self_weight(0.02, 1.0, 7850))


def test_shear_stress_uses_rectangular_factor_for_every_shape():
    sec = Circular(diameter_mm=50)
    res = run_analysis(_case(BeamConfig(length_mm=1000), Load.point(2000, 500), section=sec))
    area = math.pi * 0.025**2
    assert res.results.max_shear_stress_mpa == approx(1.5 * 1000 / area / 1e6)


@pytest.mark.parametrize("case,code", [
    (_case(BeamConfig(length_mm=1000), Load.point(1, 1), section=Rectangular(width_mm=0, height_mm=1)), ErrorCode.INVALID_GEOMETRY),
    (_case(BeamConfig(length_mm=1000), Load.point(1, 1),
           section=IBeam(flange_width_mm=100, flange_thickness_mm=60, web_thickness_mm=5, height_mm=100)), ErrorCode.INVALID_GEOMETRY),
    (_case(BeamConfig(length_mm=1000, left_support_mm=300, right_support_mm=300), Load.point(1, 1)), ErrorCode.INVALID_SUPPORTS),
    (_case(BeamConfig(length_mm=1000, left_support_mm=700, right_support_mm=300), Load.point(1, 1)), ErrorCode.INVALID_SUPPORTS),
    (_case(BeamConfig(length_mm=1000), Load.point(1, 1500)), ErrorCode.INVALID_LOAD_POSITION),
    (_case(BeamConfig(length_mm=1000), Load.uniform(1, 800, 200)), ErrorCode.INVALID_LOAD_POSITION),
])
def test_invalid_inputs_fail_with_typed_error(case, code):
    with pytest.raises(BeamLoadError) as ei:
        run_analysis(case)
    assert ei.value.code is code
    assert code.value in str(ei.value)


def test_analysis_is_pure_and_repeatable():
    case = _case(BeamConfig(length_mm=2400, left_support_mm=200, right_support_mm=2000), Load.uniform(3, 0, 2400))
    a = run_analysis(case)
    b = run_analysis(case)
    assert a.results == b.results
    assert a.moment.points() == b.moment.points()
    assert a.case is case


def test_series_have_fixed_length():
    res = run_analysis(_case(BeamConfig(length_mm=1500), Load.point(10, 20)))
    assert len(res.shear) == 100
    assert len(res.moment) == 100
    assert res.shear.x_mm[-1] == 1500


def test_series_are_read_only():
    res = run_analysis(_case(BeamConfig(length_mm=2000), Load.point(1000, 1000)))
    before = res.moment.values[0]
    with pytest.raises(ValueError):
        res.moment.values[0] = 123.0
    with pytest.raises(ValueError):
        res.shear.x_mm[0] = 5.0
    assert res.moment.values[0] == before
