"""Rigid and animated 4x4 transforms: identity, matrix, SRT, stacks and keyframe lerp."""

from __future__ import annotations

import bisect
import logging
import math
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

_log = logging.getLogger(__name__)


def translation(t) -> np.ndarray:
    """Return the 4x4 matrix translating by the 3-vector ``t``."""
    m = np.eye(4)
    m[:3, 3] = np.asarray(t, dtype=float)
    return m


def scaling(s) -> np.ndarray:
    """Return the 4x4 matrix scaling by ``s`` (a scalar or a 3-vector)."""
    factors = np.broadcast_to(np.asarray(s, dtype=float), (3,))
    return np.diag(np.append(factors, 1.0))


def rotation(axis, angle: float) -> np.ndarray:
    """Return the 4x4 matrix rotating by ``angle`` radians about ``axis``."""
    a = np.asarray(axis, dtype=float)
    a = a / np.linalg.norm(a)
    c, s = math.cos(angle), math.sin(angle)
    cross = np.array([
        [0.0, -a[2], a[1]],
        [a[2], 0.0, -a[0]],
        [-a[1], a[0], 0.0],
    ])
    m = np.eye(4)
    m[:3, :3] = c * np.eye(3) + (1.0 - c) * np.outer(a, a) + s * cross
    return m


def quaternion_rotation(q) -> np.ndarray:
    """Return the 4x4 rotation matrix of the quaternion ``q`` given as (x, y, z, w)."""
    x, y, z, w = np.asarray(q, dtype=float) / np.linalg.norm(q)
    m = np.eye(4)
    m[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - z * w), 2 * (x * z + y * w)],
        [2 * (x * y + z * w), 1 - 2 * (x * x + z * z), 2 * (y * z - x * w)],
        [2 * (x * z - y * w), 2 * (y * z + x * w), 1 - 2 * (x * x + y * y)],
    ]
    return m


def _quaternion_from_rotation(r: np.ndarray) -> np.ndarray:
    trace = r[0, 0] + r[1, 1] + r[2, 2]
    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        w, x = 0.25 * s, (r[2, 1] - r[1, 2]) / s
        y, z = (r[0, 2] - r[2, 0]) / s, (r[1, 0] - r[0, 1]) / s
    elif r[0, 0] > r[1, 1] and r[0, 0] > r[2, 2]:
        s = math.sqrt(1.0 + r[0, 0] - r[1, 1] - r[2, 2]) * 2.0
        w, x = (r[2, 1] - r[1, 2]) / s, 0.25 * s
        y, z = (r[0, 1] + r[1, 0]) / s, (r[0, 2] + r[2, 0]) / s
    elif r[1, 1] > r[2, 2]:
        s = math.sqrt(1.0 + r[1, 1] - r[0, 0] - r[2, 2]) * 2.0
        w, x = (r[0, 2] - r[2, 0]) / s, (r[0, 1] + r[1, 0]) / s
        y, z = 0.25 * s, (r[1, 2] + r[2, 1]) / s
    else:
        s = math.sqrt(1.0 + r[2, 2] - r[0, 0] - r[1, 1]) * 2.0
        w, x = (r[1, 0] - r[0, 1]) / s, (r[0, 2] + r[2, 0]) / s
        y, z = (r[1, 2] + r[2, 1]) / s, 0.25 * s
    q = np.array([x, y, z, w])
    return q / np.linalg.norm(q)


@dataclass(frozen=True)
class DecomposedTransform:
    """An affine matrix split into scaling, rotation quaternion (x, y, z, w) and translation."""

    scaling: np.ndarray
    quaternion: np.ndarray
    translation: np.ndarray


def decompose(m) -> DecomposedTransform:
    """Split an affine 4x4 matrix into scaling, rotation and translation."""
    m = np.asarray(m, dtype=float)
    linear = m[:3, :3]
    u, _, vt = np.linalg.svd(linear)
    r = u @ vt
    if np.linalg.det(r) < 0.0:
        u[:, -1] = -u[:, -1]
        r = u @ vt
    stretch = r.T @ linear
    return DecomposedTransform(
        scaling=np.diag(stretch).copy(),
        quaternion=_quaternion_from_rotation(r),
        translation=m[:3, 3].copy(),
    )


def slerp(q0, q1, t: float) -> np.ndarray:
    """Spherically interpolate between unit quaternions ``q0`` and ``q1``."""
    a = np.asarray(q0, dtype=float)
    b = np.asarray(q1, dtype=float)
    a = a / np.linalg.norm(a)
    b = b / np.linalg.norm(b)
    d = float(np.dot(a, b))
    if d < 0.0:
        b, d = -b, -d
    if d > 0.9995:
        q = a + t * (b - a)
        return q / np.linalg.norm(q)
    theta = math.acos(min(d, 1.0))
    sin_theta = math.sin(theta)
    return (math.sin((1.0 - t) * theta) * a + math.sin(t * theta) * b) / sin_theta


def _lerp(a, b, t: float):
    return (1.0 - t) * a + t * b


class Transform(ABC):
    """A possibly time-varying 4x4 transform."""

    @property
    def is_static(self) -> bool:
        return True

    @property
    def is_identity(self) -> bool:
        return False

    @abstractmethod
    def matrix(self, time: float) -> np.ndarray:
        """Return the 4x4 matrix at ``time``."""


class IdentityTransform(Transform):
    """The transform that leaves everything in place."""

    @property
    def is_identity(self) -> bool:
        return True

    def matrix(self, time: float) -> np.ndarray:
        return np.eye(4)


class MatrixTransform(Transform):
    """A fixed affine matrix given as 16 row-major entries."""

    def __init__(self, m: Sequence[float] | None = None) -> None:
        entries = [float(x) for x in (m or ())]
        self._matrix = np.eye(4)
        if len(entries) == 16:
            if entries[12:] != [0.0, 0.0, 0.0, 1.0]:
                _log.warning(
                    "Expected affine transform matrices, while the last row is %s. "
                    "This will be fixed but might lead to unexpected transforms.",
                    tuple(entries[12:]),
                )
                entries[12:] = [0.0, 0.0, 0.0, 1.0]
            self._matrix = np.array(entries).reshape(4, 4)
        elif entries:
            raise ValueError(f"Invalid matrix entries: expected 16 values, got {len(entries)}.")

    @property
    def is_identity(self) -> bool:
        return bool(np.array_equal(self._matrix, np.eye(4)))

    def matrix(self, time: float) -> np.ndarray:
        return self._matrix.copy()


class ScaleRotateTranslate(Transform):
    """Scale, then rotate about an axis by degrees, then translate."""

    def __init__(self, scale=1.0, rotate=(0.0, 0.0, 1.0, 0.0), translate=(0.0, 0.0, 0.0)) -> None:
        axis_angle = np.asarray(rotate, dtype=float)
        self._matrix = (
            translation(translate)
            @ rotation(axis_angle[:3], math.radians(axis_angle[3]))
            @ scaling(scale)
        )

    @property
    def is_identity(self) -> bool:
        return bool(np.array_equal(self._matrix, np.eye(4)))

    def matrix(self, time: float) -> np.ndarray:
        return self._matrix.copy()


class TransformStack(Transform):
    """A chain of transforms; later ones are applied after earlier ones."""

    def __init__(self, transforms: Iterable[Transform] = ()) -> None:
        children = list(transforms)
        self._is_static = all(t.is_static for t in children)
        self._is_identity = all(t.is_identity for t in children)
        self._time_cache = 0.0
        self._matrix_cache = np.eye(4)
        for t in children:
            self._matrix_cache = t.matrix(self._time_cache) @ self._matrix_cache
        self._transforms = [] if self._is_static else children
        self._lock = threading.Lock()

    @property
    def is_static(self) -> bool:
        return self._is_static

    @property
    def is_identity(self) -> bool:
        return self._is_identity

    def _compose(self, time: float) -> np.ndarray:
        m = np.eye(4)
        for t in self._transforms:
            m = t.matrix(time) @ m
        return m

    def matrix(self, time: float) -> np.ndarray:
        if self._is_static:
            return self._matrix_cache.copy()
        if len(self._transforms) < 4:
            return self._compose(time)
        with self._lock:
            if time != self._time_cache:
                self._time_cache = time
                self._matrix_cache = self._compose(time)
            return self._matrix_cache.copy()


class LerpTransform(Transform):
    """Keyframed transforms interpolated by decomposed scaling, rotation and translation."""

    def __init__(self, transforms: Sequence[Transform], time_points: Sequence[float]) -> None:
        transforms = list(transforms)
        times = [float(t) for t in time_points]
        if len(transforms) != len(times):
            raise ValueError("Number of transforms and number of time points mismatch.")
        if not transforms:
            raise ValueError("Empty transform list.")
        order = sorted(range(len(times)), key=times.__getitem__)
        unique = [i for k, i in enumerate(order) if k == 0 or times[i] != times[order[k - 1]]]
        if len(unique) != len(order):
            _log.warning(
                "Duplicate time points (count = %d) in LerpTransform will be removed.",
                len(order) - len(unique),
            )
        self._time_points = [times[i] for i in unique]
        self._transforms = [transforms[i] for i in unique]
        self._lock = threading.Lock()
        self._time_cache = math.nan
        self._matrix_cache = np.eye(4)
        self._upper_index_cache: int | None = None
        self._t0_cache: DecomposedTransform | None = None
        self._t1_cache: DecomposedTransform | None = None

    @property
    def is_static(self) -> bool:
        return False

    def matrix(self, time: float) -> np.ndarray:
        with self._lock:
            if time != self._time_cache:
                self._update(time)
            return self._matrix_cache.copy()

    def _update(self, time: float) -> None:
        first, last = self._time_points[0], self._time_points[-1]
        if time <= first:
            self._time_cache = first
            self._matrix_cache = self._transforms[0].matrix(first)
            return
        if time >= last:
            self._time_cache = last
            self._matrix_cache = self._transforms[-1].matrix(last)
            return
        self._time_cache = time
        upper = bisect.bisect_right(self._time_points, time)
        if upper != self._upper_index_cache:
            self._upper_index_cache = upper
            self._t0_cache = decompose(self._transforms[upper - 1].matrix(time))
            self._t1_cache = decompose(self._transforms[upper].matrix(time))
        t0, t1 = self._t0_cache, self._t1_cache
        lower_time = self._time_points[upper - 1]
        upper_time = self._time_points[upper]
        t = (time - lower_time) / (upper_time - lower_time)
        s = _lerp(t0.scaling, t1.scaling, t)
        q = slerp(t0.quaternion, t1.quaternion, t)
        d = _lerp(t0.translation, t1.translation, t)
        self._matrix_cache = translation(d) @ quaternion_rotation(q) @ scaling(s)