import numpy as np
import pytest

from shadekit.mix import Evaluation, mix_evaluations, mix_ratio, split_lobe_sample

UP = np.array([0.0, 0.0, 1.0])


def _eval_a():
    return Evaluation(f=[0.2, 0.4, 0.6], pdf=1.5, normal=UP, roughness=[0.1, 0.2], eta=[1.0, 1.0, 1.0])


def _eval_b():
    return Evaluation(f=[0.9, 0.3, 0.1], pdf=0.5, normal=UP, roughness=[0.7, 0.4], eta=[1.5, 1.5, 1.5])


def test_mix_ratio_default_and_clamp():
    assert mix_ratio(None) == 0.5
    assert mix_ratio(-2.0) == 0.0
    assert mix_ratio(3.0) == 1.0
    assert mix_ratio(0.3) == 0.3


@pytest.mark.parametrize("u,ratio", [(0.1, 0.4), (0.39, 0.4), (0.4, 0.4), (0.95, 0.4), (0.0, 0.7)])
def test_split_lobe_sample_remaps(u, ratio):
    picks_a, remapped = split_lobe_sample(u, ratio)
    assert picks_a == (u < ratio)
    assert 0.0 <= remapped < 1.0
    if picks_a:
        assert remapped * ratio == pytest.approx(u)
    else:
        assert ratio + remapped * (1.0 - ratio) == pytest.approx(u)


def test_full_ratio_returns_first():
    wi = np.array([0.3, 0.0, 0.9])
    mixed = mix_evaluations(1.0, wi, _eval_a(), _eval_b(), UP)
    assert np.allclose(mixed.f, _eval_a().f)
    assert mixed.pdf == pytest.approx(_eval_a().pdf)
    assert np.allclose(mixed.roughness, _eval_a().roughness)
    assert np.allclose(mixed.eta, _eval_a().eta)


def test_zero_ratio_returns_second():
    wi = np.array([0.0, 0.6, 0.8])
    mixed = mix_evaluations(0.0, wi, _eval_a(), _eval_b(), UP)
    assert np.allclose(mixed.f, _eval_b().f)
    assert mixed.pdf == pytest.approx(_eval_b().pdf)
    assert np.allclose(mixed.eta, _eval_b().eta)


def test_half_ratio_averages():
    wi = np.array([0.0, 0.0, 1.0])
    a, b = _eval_a(), _eval_b()
    mixed = mix_evaluations(0.5, wi, a, b, UP)
    assert np.allclose(mixed.f, (a.f + b.f) / 2)
    assert mixed.pdf == pytest.approx((a.pdf + b.pdf) / 2)
    assert np.allclose(mixed.roughness, (a.roughness + b.roughness) / 2)
    assert np.array_equal(mixed.normal, UP)


def test_frame_conversion_uses_cosines():
    wi = np.array([0.0, 0.6, 0.8])
    tilted = np.array([0.0, 0.6, 0.8])
    a = Evaluation(f=[1.0], pdf=1.0, normal=tilted, roughness=[0.0, 0.0], eta=[1.0])
    b = Evaluation(f=[0.0], pdf=1.0, normal=UP, roughness=[0.0, 0.0], eta=[1.0])
    mixed = mix_evaluations(1.0, wi, a, b, UP)
    assert mixed.f[0] * abs(np.dot(UP, wi)) == pytest.approx(abs(np.dot(tilted, wi)))