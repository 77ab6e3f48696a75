"""Blending of two surface evaluations by a ratio."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class Evaluation:
    """A surface evaluation: spectrum value, pdf, shading normal, roughness and eta."""

    f: np.ndarray
    pdf: float
    normal: np.ndarray
    roughness: np.ndarray
    eta: np.ndarray

    def __post_init__(self) -> None:
        self.f = np.asarray(self.f, dtype=float)
        self.pdf = float(self.pdf)
        self.normal = np.asarray(self.normal, dtype=float)
        self.roughness = np.asarray(self.roughness, dtype=float)
        self.eta = np.asarray(self.eta, dtype=float)


def mix_ratio(ratio: float | None) -> float:
    """Return the effective weight of the first surface: 0.5 by default, else clamped to [0, 1]."""
    if ratio is None:
        return 0.5
    return min(max(float(ratio), 0.0), 1.0)


def split_lobe_sample(u_lobe: float, ratio: float) -> tuple[bool, float]:
    """Choose a surface for ``u_lobe`` and remap it to [0, 1) within that choice.

    Returns ``(True, u)`` when the first surface is picked, ``(False, u)`` otherwise.
    """
    if u_lobe < ratio:
        return True, u_lobe / ratio
    return False, (u_lobe - ratio) / (1.0 - ratio)


def mix_evaluations(ratio: float, wi, eval_a: Evaluation, eval_b: Evaluation, normal) -> Evaluation:
    """Blend two evaluations, converting their values to the frame of ``normal``."""
    wi = np.asarray(wi, dtype=float)
    normal = np.asarray(normal, dtype=float)
    t = 1.0 - ratio
    cos_a = abs(float(np.dot(eval_a.normal, wi)))
    cos_b = abs(float(np.dot(eval_b.normal, wi)))
    cos_i = abs(float(np.dot(normal, wi)))
    return Evaluation(
        f=(ratio * eval_a.f * cos_a + t * eval_b.f * cos_b) / cos_i,
        pdf=(1.0 - t) * eval_a.pdf + t * eval_b.pdf,
        normal=normal,
        roughness=(1.0 - t) * eval_a.roughness + t * eval_b.roughness,
        eta=ratio * eval_a.eta + t * eval_b.eta,
    )