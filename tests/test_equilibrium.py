import pytest
from pytest import approx

from beam_load.domain.beam import BeamConfig, SupportCondition
from beam_load.domain.errors import InvalidSupportsError
from beam_load.domain.loads import Load, LoadKind, NormalizedLoad
from beam_load.engine.equilibrium import compute_reactions
from beam_load.engine.normalize import NormalizedBeam, normalize_beam, normalize_load


def _reactions(beam: BeamConfig, load: Load):
    return compute_reactions(normalize_beam(beam), normalize_load(load, beam))


@pytest.mark.parametrize("left,right", [(0, 1000), (100, 900), (250, 750), (499, 501)])
def test_symmetric_point_load_splits_evenly(left, right):
    beam = BeamConfig(length_mm=1000, left_support_mm=left, right_support_mm=right)
    r = _reactions(beam, Load.point(1000, 500))
    assert r.left_n == approx(500)
    assert r.right_n == approx(500)
    assert r.fixed_moment_nm == 0.0


def test_point_load_lever_rule():
    beam = BeamConfig(length_mm=2000, left_support_mm=0, right_support_mm=2000)
    r = _reactions(beam, Load.point(900, 500))
    assert r.left_n == approx(900 * 1500 / 2000)
    assert r.right_n == approx(900 * 500 / 2000)


def test_point_load_on_overhang_lifts_far_support():
    beam = BeamConfig(length_mm=1000, left_support_mm=0, right_support_mm=800)
    r = _reactions(beam, Load.point(800, 1000))
    assert r.left_n == approx(-200)
    assert r.right_n == approx(1000)


def test_point_load_on_support_goes_to_that_support():
    beam = BeamConfig(length_mm=1000, left_support_mm=200, right_support_mm=800)
    r = _reactions(beam, Load.point(500, 200))
    assert r.left_n == approx(500)
    assert r.right_n == approx(0, abs=1e-12)


def test_uniform_load_as_equivalent_point_load():
    beam = BeamConfig(length_mm=1000)
    r = _reactions(beam, Load.uniform(2, 0, 500))  # 1000 N en x=250 mm
    assert r.left_n == approx(750)
    assert r.right_n == approx(250)


def test_cantilever_point_load():
    beam = BeamConfig(length_mm=1500, support=SupportCondition.CANTILEVER)
    r = _reactions(beam, Load.point(400, 1500))
    assert r.left_n == approx(400)
    assert r.right_n == 0.0
    assert r.fixed_moment_nm == approx(400 * 1.5)


def test_cantilever_uniform_load():
    beam = BeamConfig(length_mm=1000, support=SupportCondition.CANTILEVER)
    r = _reactions(beam, Load.uniform(10, 0, 1000))
    assert r.left_n == approx(10_000)
    assert r.right_n == 0.0
    assert r.fixed_moment_nm == approx(10_000 * 0.5)


@pytest.mark.parametrize("beam,load", [
    (BeamConfig(length_mm=1000), Load.point(123, 77)),
    (BeamConfig(length_mm=3000, left_support_mm=500, right_support_mm=2500), Load.point(5000, 2900)),
    (BeamConfig(length_mm=3000, left_support_mm=500, right_support_mm=2500), Load.uniform(3.5, 0, 3000)),
    (BeamConfig(length_mm=800, support=SupportCondition.CANTILEVER), Load.uniform(1.25, 100, 700)),
])
def test_reactions_balance_applied_load(beam, load):
    r = _reactions(beam, load)
    assert r.total_n == approx(load.total_force_n)


def test_degenerate_supports_rejected_by_statics():
    beam = NormalizedBeam(length_mm=1000, length_m=1.0, support=SupportCondition.SIMPLY_SUPPORTED, left_m=0.5, right_m=0.5)
    load = NormalizedLoad(kind=LoadKind.POINT, magnitude=10.0, x0_m=0.5, x1_m=0.5)
    with pytest.raises(InvalidSupportsError):
        compute_reactions(beam, load)
