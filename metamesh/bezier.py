# metamesh/bezier.py
"""
Cubic Bezier curves and bicubic Bezier patches.

A patch is 16 control points laid out as four curves of four points each.
Evaluation first reduces the four curves at ``u`` to four intermediate
points (with their derivatives), then evaluates those as a single curve
at ``v``.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple

import numpy as np

from metamesh.math import cross_vec3, magnitude_vec, norm_vec

# Below this length the column derivative is treated as a collapsed pole.
DEGENERATE_EPSILON = float(np.finfo(np.float32).eps)


class CurvePoint(NamedTuple):
    position: np.ndarray
    derivative: np.ndarray


class SurfacePoint(NamedTuple):
    position: np.ndarray
    normal: np.ndarray
    uv: Tuple[float, float]


Corners = Tuple[CurvePoint, CurvePoint, CurvePoint, CurvePoint]


def bezier(
    p0: np.ndarray, p1: np.ndarray, p2: np.ndarray, p3: np.ndarray, t: float
) -> np.ndarray:
    mt = 1.0 - t
    return (
        mt * mt * mt * p0
        + 3.0 * mt * mt * t * p1
        + 3.0 * mt * t * t * p2
        + t * t * t * p3
    )


def bezier_derivative(
    p0: np.ndarray, p1: np.ndarray, p2: np.ndarray, p3: np.ndarray, t: float
) -> np.ndarray:
    mt = 1.0 - t
    return (
        3.0 * mt * mt * (p1 - p0)
        + 6.0 * mt * t * (p2 - p1)
        + 3.0 * t * t * (p3 - p2)
    )


def evaluate_curve(
    p0: np.ndarray, p1: np.ndarray, p2: np.ndarray, p3: np.ndarray, t: float
) -> CurvePoint:
    return CurvePoint(
        bezier(p0, p1, p2, p3, t), bezier_derivative(p0, p1, p2, p3, t)
    )


def reduce_patch(control: np.ndarray, u: float) -> Corners:
    """
    Evaluate the four curves of a patch at ``u``.
    control: (16, 3)
    """
    c = np.asarray(control, dtype=np.float64).reshape(4, 4, 3)
    return (
        evaluate_curve(c[0, 0], c[0, 1], c[0, 2], c[0, 3], u),
        evaluate_curve(c[1, 0], c[1, 1], c[1, 2], c[1, 3], u),
        evaluate_curve(c[2, 0], c[2, 1], c[2, 2], c[2, 3], u),
        evaluate_curve(c[3, 0], c[3, 1], c[3, 2], c[3, 3], u),
    )


def evaluate_row(corners: Corners, v: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Position and normal at ``v`` across the reduced corner points.

    When the cross-curve derivative collapses (a patch pole), the second
    corner's derivative stands in for it.
    """
    c0, c1, c2, c3 = corners
    p = evaluate_curve(c0.position, c1.position, c2.position, c3.position, v)
    d_row = p.derivative
    d_col = bezier(
        c0.derivative, c1.derivative, c2.derivative, c3.derivative, v
    )
    if magnitude_vec(d_col) < DEGENERATE_EPSILON:
        d_col = c1.derivative
    return p.position, norm_vec(cross_vec3(d_row, d_col))


def evaluate_patch(control: np.ndarray, u: float, v: float) -> SurfacePoint:
    position, normal = evaluate_row(reduce_patch(control, u), v)
    return SurfacePoint(position, normal, (u, v))
