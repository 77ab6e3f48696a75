"""Lobes of the Disney principled BSDF, evaluated in the local shading frame (normal = +z)."""

from __future__ import annotations

import math

import numpy as np

INV_PI = 1.0 / math.pi


def _vec(w) -> np.ndarray:
    return np.asarray(w, dtype=float)


def _abs_cos_theta(w: np.ndarray) -> float:
    return abs(float(w[2]))


def _same_hemisphere(a: np.ndarray, b: np.ndarray) -> bool:
    return float(a[2]) * float(b[2]) > 0.0


def _half_vector(wo: np.ndarray, wi: np.ndarray) -> np.ndarray | None:
    """Return the normalized half vector, or None when ``wo + wi`` vanishes."""
    wh = wi + wo
    if not np.any(wh != 0.0):
        return None
    return wh / np.linalg.norm(wh)


def _reflect(wo: np.ndarray, n: np.ndarray) -> np.ndarray:
    return -wo + 2.0 * float(np.dot(wo, n)) * n


def schlick_weight(cos_theta):
    """Return (1 - cos_theta)^5 with the base clamped to [0, 1]."""
    m = np.clip(1.0 - cos_theta, 0.0, 1.0)
    return (m * m) * (m * m) * m


def fr_schlick(r0, cos_theta):
    """Schlick's Fresnel: ``r0`` at normal incidence rising to one at grazing angles."""
    return r0 + (1.0 - r0) * schlick_weight(cos_theta)


def schlick_r0_from_eta(eta):
    """Reflectance at normal incidence of a dielectric of index ``eta`` seen from air."""
    return ((eta - 1.0) / (eta + 1.0)) ** 2


def gtr1(cos_theta, alpha):
    """The generalized Trowbridge-Reitz distribution with exponent one."""
    alpha2 = alpha * alpha
    denom = math.pi * np.log(alpha2) * (1.0 + (alpha2 - 1.0) * cos_theta * cos_theta)
    return (alpha2 - 1.0) / denom


def smith_g_ggx(cos_theta, alpha):
    """Smith masking term for GGX, divided by twice the cosine."""
    alpha2 = alpha * alpha
    cos2 = cos_theta * cos_theta
    return 1.0 / (cos_theta + np.sqrt(alpha2 + cos2 - alpha2 * cos2))


class DisneyDiffuse:
    """Burley's diffuse lobe with its grazing-angle retro darkening."""

    def __init__(self, r) -> None:
        self.r = np.atleast_1d(_vec(r))

    @staticmethod
    def _factor(wo: np.ndarray, wi: np.ndarray) -> float:
        fo = schlick_weight(_abs_cos_theta(wo))
        fi = schlick_weight(_abs_cos_theta(wi))
        return INV_PI * (1.0 - fo * 0.5) * (1.0 - fi * 0.5)

    def evaluate(self, wo, wi) -> np.ndarray:
        """Return the lobe value per wavelength."""
        return self.r * self._factor(_vec(wo), _vec(wi))

    def backward(self, wo, wi, df) -> np.ndarray:
        """Return the gradient with respect to the reflectance given the output gradient ``df``."""
        return np.atleast_1d(_vec(df)) * self._factor(_vec(wo), _vec(wi))


class DisneyFakeSS:
    """Hanrahan-Krueger style approximation of subsurface scattering."""

    def __init__(self, r, roughness: float) -> None:
        self.r = np.atleast_1d(_vec(r))
        self.roughness = float(roughness)

    def evaluate(self, wo, wi) -> np.ndarray:
        """Return the lobe value per wavelength."""
        wo, wi = _vec(wo), _vec(wi)
        wh = _half_vector(wo, wi)
        if wh is None:
            return np.zeros_like(self.r)
        cos_d = float(np.dot(wi, wh))
        fss90 = cos_d * cos_d * self.roughness
        fo = schlick_weight(_abs_cos_theta(wo))
        fi = schlick_weight(_abs_cos_theta(wi))
        fss = (1.0 + (fss90 - 1.0) * fo) * (1.0 + (fss90 - 1.0) * fi)
        ss = 1.25 * (fss * (1.0 / (_abs_cos_theta(wo) + _abs_cos_theta(wi)) - 0.5) + 0.5)
        return self.r * (INV_PI * ss)


class DisneyRetro:
    """Roughness-driven retro-reflection lobe."""

    def __init__(self, r, roughness: float) -> None:
        self.r = np.atleast_1d(_vec(r))
        self.roughness = float(roughness)

    def evaluate(self, wo, wi) -> np.ndarray:
        """Return the lobe value per wavelength."""
        wo, wi = _vec(wo), _vec(wi)
        wh = _half_vector(wo, wi)
        if wh is None:
            return np.zeros_like(self.r)
        cos_d = float(np.dot(wi, wh))
        fo = schlick_weight(_abs_cos_theta(wo))
        fi = schlick_weight(_abs_cos_theta(wi))
        rr = 2.0 * self.roughness * cos_d * cos_d
        return self.r * (INV_PI * rr * (fo + fi + fo * fi * (rr - 1.0)))


class DisneySheen:
    """Sheen lobe for cloth-like grazing highlights."""

    def __init__(self, r) -> None:
        self.r = np.atleast_1d(_vec(r))

    def evaluate(self, wo, wi) -> np.ndarray:
        """Return the lobe value per wavelength."""
        wo, wi = _vec(wo), _vec(wi)
        wh = _half_vector(wo, wi)
        if wh is None:
            return np.zeros_like(self.r)
        return self.r * schlick_weight(float(np.dot(wi, wh)))


class DisneyClearcoat:
    """Clearcoat layer: index 1.5, GTR1 distribution and a fixed masking roughness of 0.25."""

    def __init__(self, weight: float, gloss: float) -> None:
        self.weight = float(weight)
        self.gloss = float(gloss)

    def evaluate(self, wo, wi) -> float:
        """Return the achromatic lobe value."""
        wo, wi = _vec(wo), _vec(wi)
        wh = _half_vector(wo, wi)
        if wh is None:
            return 0.0
        dr = gtr1(_abs_cos_theta(wh), self.gloss)
        fr = fr_schlick(0.04, float(np.dot(wo, wh)))
        gr = smith_g_ggx(_abs_cos_theta(wo), 0.25) * smith_g_ggx(_abs_cos_theta(wi), 0.25)
        return float(self.weight * gr * fr * dr * 0.25)

    def pdf(self, wo, wi) -> float:
        """Return the solid-angle density of sampling ``wi`` given ``wo``."""
        wo, wi = _vec(wo), _vec(wi)
        wh = _half_vector(wo, wi)
        if wh is None or not _same_hemisphere(wo, wi):
            return 0.0
        dr = gtr1(_abs_cos_theta(wh), self.gloss)
        return float(dr * _abs_cos_theta(wh) / (4.0 * float(np.dot(wo, wh))))

    def sample(self, wo, u) -> tuple[np.ndarray, float, float]:
        """Sample an incident direction from two uniform numbers.

        Returns ``(wi, value, pdf)``; value and pdf are zero for an invalid sample.
        """
        wo = _vec(wo)
        u0, u1 = float(u[0]), float(u[1])
        alpha2 = self.gloss * self.gloss
        cos_theta = math.sqrt(max(0.0, (1.0 - alpha2 ** (1.0 - u0)) / (1.0 - alpha2)))
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
        phi = 2.0 * math.pi * u1
        wh = np.array([sin_theta * math.cos(phi), sin_theta * math.sin(phi), cos_theta])
        if not _same_hemisphere(wo, wh):
            wh = -wh
        wi = _reflect(wo, wh)
        if float(wo[2]) == 0.0 or not _same_hemisphere(wo, wi):
            return wi, 0.0, 0.0
        return wi, self.evaluate(wo, wi), self.pdf(wo, wi)