import math

import pytest
from pytest import approx

from beam_load.domain.errors import ErrorCode, InvalidGeometryError
from beam_load.domain.sections import CChannel, Circular, IBeam, Rectangular
from beam_load.sections.properties import compute_section_properties


def test_rectangular_100x200():
    p = compute_section_properties(Rectangular(width_mm=100, height_mm=200))
    assert p.area_m2 == approx(0.02)
    assert p.moment_of_inertia_m4 == approx(100 * 200**3 / 12 * 1e-12)
    assert p.moment_of_inertia_m4 == approx(6.6667e-5, rel=1e-4)
    assert p.section_modulus_m3 == approx(p.moment_of_inertia_m4 / 0.1)
    assert p.extreme_fiber_m == approx(0.1)


def test_rectangular_inertia_scales_with_height_cubed():
    base = compute_section_properties(Rectangular(width_mm=50, height_mm=120))
    for k in (0.5, 2.0, 3.0):
        p = compute_section_properties(Rectangular(width_mm=50, height_mm=120 * k))
        assert p.moment_of_inertia_m4 == approx(base.moment_of_inertia_m4 * k**3)


def test_circular():
    p = compute_section_properties(Circular(diameter_mm=100))
    assert p.area_m2 == approx(math.pi * 0.05**2)
    assert p.moment_of_inertia_m4 == approx(math.pi * 0.1**4 / 64)
    assert p.section_modulus_m3 == approx(p.moment_of_inertia_m4 / 0.05)


def test_i_beam_parallel_axis():
    bf, tf, tw, h = 0.100, 0.010, 0.006, 0.200
    p = compute_section_properties(IBeam(flange_width_mm=100, flange_thickness_mm=10, web_thickness_mm=6, height_mm=200))

    expected_I = 2 * (bf * tf**3 / 6 + bf * tf * ((h - tf) / 2) ** 2) + tw * (h - 2 * tf) ** 3 / 12
    assert p.area_m2 == approx(2 * bf * tf + (h - 2 * tf) * tw)
    assert p.moment_of_inertia_m4 == approx(expected_I)
    assert p.section_modulus_m3 == approx(expected_I / (h / 2))


def test_c_channel_uses_flange_own_inertia_over_12():
    bf, tf, tw, h = 0.100, 0.010, 0.006, 0.200
    dims = dict(flange_width_mm=100, flange_thickness_mm=10, web_thickness_mm=6, height_mm=200)
    c = compute_section_properties(CChannel(**dims))
    i = compute_section_properties(IBeam(**dims))

    expected_I = 2 * (bf * tf**3 / 12 + bf * tf * ((h - tf) / 2) ** 2) + tw * (h - 2 * tf) ** 3 / 12
    assert c.moment_of_inertia_m4 == approx(expected_I)
    assert c.area_m2 == approx(i.area_m2)
    assert c.moment_of_inertia_m4 < i.moment_of_inertia_m4


@pytest.mark.parametrize("section", [
    Rectangular(width_mm=1, height_mm=1),
    Rectangular(width_mm=300, height_mm=20),
    IBeam(flange_width_mm=150, flange_thickness_mm=12, web_thickness_mm=8, height_mm=300),
    CChannel(flange_width_mm=50, flange_thickness_mm=5, web_thickness_mm=5, height_mm=100),
    Circular(diameter_mm=3),
])
def test_inertia_strictly_positive(section):
    p = compute_section_properties(section)
    assert p.moment_of_inertia_m4 > 0
    assert p.section_modulus_m3 > 0
    assert p.area_m2 > 0


@pytest.mark.parametrize("section", [
    Rectangular(width_mm=0, height_mm=200),
    Rectangular(width_mm=100, height_mm=-5),
    Circular(diameter_mm=0),
    IBeam(flange_width_mm=100, flange_thickness_mm=100, web_thickness_mm=6, height_mm=200),
    CChannel(flange_width_mm=100, flange_thickness_mm=120, web_thickness_mm=6, height_mm=200),
    IBeam(flange_width_mm=100, flange_thickness_mm=10, web_thickness_mm=0, height_mm=200),
    IBeam(flange_width_mm=100, flange_thickness_mm=10, web_thickness_mm=150, height_mm=200),
    CChannel(flange_width_mm=100, flange_thickness_mm=10, web_thickness_mm=101, height_mm=200),
    Rectangular(width_mm=float("nan"), height_mm=200),
])
def test_degenerate_geometry_rejected(section):
    with pytest.raises(InvalidGeometryError) as ei:
        compute_section_properties(section)
    assert ei.value.code is ErrorCode.INVALID_GEOMETRY


def test_unknown_shape_rejected():
    class Triangle:
        base_mm = 10.0

    with pytest.raises(InvalidGeometryError):
        compute_section_properties(Triangle())
