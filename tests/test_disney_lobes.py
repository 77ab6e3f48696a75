import math

import numpy as np
import pytest

from shadekit.disney_lobes import (
    DisneyClearcoat,
    DisneyDiffuse,
    DisneyFakeSS,
    DisneyRetro,
    DisneySheen,
    fr_schlick,
    gtr1,
    schlick_r0_from_eta,
    schlick_weight,
    smith_g_ggx,
)


def _unit(v):
    v = np.asarray(v, dtype=float)
    return v / np.linalg.norm(v)


NORMAL = np.array([0.0, 0.0, 1.0])
WO = _unit([0.3, -0.2, 0.8])
WI = _unit([-0.5, 0.4, 0.6])


def test_schlick_weight_endpoints():
    assert schlick_weight(1.0) == pytest.approx(0.0)
    assert schlick_weight(0.0) == pytest.approx(1.0)
    assert schlick_weight(-2.0) == pytest.approx(1.0)


def test_fr_schlick_endpoints():
    assert fr_schlick(0.3, 1.0) == pytest.approx(0.3)
    assert fr_schlick(0.3, 0.0) == pytest.approx(1.0)


def test_schlick_r0_of_clearcoat_index():
    assert schlick_r0_from_eta(1.5) == pytest.approx(0.04)
    assert schlick_r0_from_eta(1.0) == pytest.approx(0.0)


def test_smith_g_at_normal_incidence():
    for alpha in (0.1, 0.25, 0.9):
        assert smith_g_ggx(1.0, alpha) == pytest.approx(0.5)


def test_gtr1_is_normalized():
    alpha = 0.3
    n = 20000
    theta = (np.arange(n) + 0.5) * (math.pi / 2) / n
    c = np.cos(theta)
    integrand = gtr1(c, alpha) * c * np.sin(theta)
    total = 2.0 * math.pi * float(np.sum(integrand)) * (math.pi / 2) / n
    assert total == pytest.approx(1.0, rel=1e-3)


def test_diffuse_normal_incidence():
    r = np.array([0.2, 0.5, 0.8])
    f = DisneyDiffuse(r).evaluate(NORMAL, NORMAL)
    np.testing.assert_allclose(f, r / math.pi)


def test_diffuse_backward_matches_evaluate_with_gradient():
    df = np.array([1.0, -2.0, 0.5])
    lobe = DisneyDiffuse([0.7, 0.1, 0.3])
    np.testing.assert_allclose(lobe.backward(WO, WI, df), DisneyDiffuse(df).evaluate(WO, WI))


def test_diffuse_darkens_at_grazing():
    lobe = DisneyDiffuse([1.0])
    grazing = _unit([1.0, 0.0, 0.01])
    assert lobe.evaluate(grazing, NORMAL)[0] < lobe.evaluate(NORMAL, NORMAL)[0]


@pytest.mark.parametrize("lobe", [
    DisneyFakeSS([0.4, 0.6], 0.5),
    DisneyRetro([0.4, 0.6], 0.5),
    DisneySheen([0.4, 0.6]),
])
def test_lobes_are_reciprocal(lobe):
    np.testing.assert_allclose(lobe.evaluate(WO, WI), lobe.evaluate(WI, WO))


@pytest.mark.parametrize("lobe", [
    DisneyFakeSS([0.4, 0.6], 0.5),
    DisneyRetro([0.4, 0.6], 0.5),
    DisneySheen([0.4, 0.6]),
])
def test_lobes_vanish_for_opposite_directions(lobe):
    np.testing.assert_array_equal(lobe.evaluate(WO, -WO), [0.0, 0.0])


def test_retro_vanishes_without_roughness():
    np.testing.assert_allclose(DisneyRetro([1.0, 1.0], 0.0).evaluate(WO, WI), [0.0, 0.0])


def test_sheen_zero_when_directions_coincide():
    np.testing.assert_allclose(DisneySheen([1.0]).evaluate(WO, WO), [0.0], atol=1e-12)


def test_sheen_scales_with_reflectance():
    a = DisneySheen([0.5]).evaluate(WO, WI)
    b = DisneySheen([1.0]).evaluate(WO, WI)
    assert b[0] == pytest.approx(2.0 * a[0])
    assert a[0] > 0.0


def test_clearcoat_reciprocal_and_scales_with_weight():
    a = DisneyClearcoat(1.0, 0.05)
    b = DisneyClearcoat(2.0, 0.05)
    assert a.evaluate(WO, WI) == pytest.approx(a.evaluate(WI, WO))
    assert b.evaluate(WO, WI) == pytest.approx(2.0 * a.evaluate(WO, WI))


def test_clearcoat_pdf_zero_across_hemispheres():
    lobe = DisneyClearcoat(1.0, 0.05)
    below = np.array([WI[0], WI[1], -WI[2]])
    assert lobe.pdf(WO, below) == 0.0
    assert lobe.pdf(WO, WI) > 0.0


@pytest.mark.parametrize("u", [(0.1, 0.2), (0.5, 0.7), (0.9, 0.35)])
def test_clearcoat_sample_consistent(u):
    lobe = DisneyClearcoat(0.8, 0.05)
    wi, value, pdf = lobe.sample(WO, u)
    assert np.linalg.norm(wi) == pytest.approx(1.0)
    if wi[2] > 0.0:
        assert pdf == pytest.approx(lobe.pdf(WO, wi))
        assert value == pytest.approx(lobe.evaluate(WO, wi))
    else:
        assert (value, pdf) == (0.0, 0.0)


def test_clearcoat_sample_invalid_for_tangent_outgoing():
    wi, value, pdf = DisneyClearcoat(1.0, 0.05).sample([1.0, 0.0, 0.0], (0.3, 0.3))
    assert (value, pdf) == (0.0, 0.0)
    assert np.linalg.norm(wi) == pytest.approx(1.0)