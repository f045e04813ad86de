"""Cubic Bezier curve evaluation.

Road curves arrive from the host as four control points. This module
derives everything the calculators need from them: positions, end
tangents, sub-curves and planar arc length.
"""

from __future__ import annotations

import math

from ..models.network import CubicBezier
from ..models.types import Point3D, Vector3D
from .tolerances import ZERO_MAGNITUDE
from .vector_math import subtract

# 5-point Gauss-Legendre nodes/weights on [-1, 1]
_GAUSS_NODES: tuple[float, ...] = (
    0.0,
    -0.5384693101056831,
    0.5384693101056831,
    -0.9061798459386640,
    0.9061798459386640,
)
_GAUSS_WEIGHTS: tuple[float, ...] = (
    0.5688888888888889,
    0.4786286704993665,
    0.4786286704993665,
    0.2369268850561891,
    0.2369268850561891,
)

# Spans the curve is split into before integrating
_LENGTH_SPANS: int = 8


def _lerp(p: Point3D, q: Point3D, t: float) -> Point3D:
    return (
        p[0] + (q[0] - p[0]) * t,
        p[1] + (q[1] - p[1]) * t,
        p[2] + (q[2] - p[2]) * t,
    )


def _is_zero(v: Vector3D) -> bool:
    return abs(v[0]) < ZERO_MAGNITUDE and abs(v[1]) < ZERO_MAGNITUDE and abs(v[2]) < ZERO_MAGNITUDE


def _blossom(curve: CubicBezier, u: float, v: float, w: float) -> Point3D:
    """Evaluate the polar form of the curve (de Casteljau with one parameter per level)."""
    ab = _lerp(curve.a, curve.b, u)
    bc = _lerp(curve.b, curve.c, u)
    cd = _lerp(curve.c, curve.d, u)
    abc = _lerp(ab, bc, v)
    bcd = _lerp(bc, cd, v)
    return _lerp(abc, bcd, w)


def position(curve: CubicBezier, t: float) -> Point3D:
    """
    Evaluate a cubic Bezier at parameter t.

    Args:
        curve: The curve
        t: Curve parameter, normally in [0, 1]

    Returns:
        Point on the curve
    """
    s = 1.0 - t
    b0 = s * s * s
    b1 = 3.0 * s * s * t
    b2 = 3.0 * s * t * t
    b3 = t * t * t
    a, b, c, d = curve.control_points
    return (
        b0 * a[0] + b1 * b[0] + b2 * c[0] + b3 * d[0],
        b0 * a[1] + b1 * b[1] + b2 * c[1] + b3 * d[1],
        b0 * a[2] + b1 * b[2] + b2 * c[2] + b3 * d[2],
    )


def start_tangent(curve: CubicBezier) -> Vector3D:
    """
    Tangent at the start of the curve, pointing into the curve.

    Falls back to further control points when the leading ones coincide,
    so straight edges stored with collapsed handles still get a direction.
    """
    tangent = subtract(curve.b, curve.a)
    if _is_zero(tangent):
        tangent = subtract(curve.c, curve.a)
        if _is_zero(tangent):
            tangent = subtract(curve.d, curve.a)
    return tangent


def end_tangent(curve: CubicBezier) -> Vector3D:
    """Tangent at the end of the curve, pointing along the curve direction."""
    tangent = subtract(curve.d, curve.c)
    if _is_zero(tangent):
        tangent = subtract(curve.d, curve.b)
        if _is_zero(tangent):
            tangent = subtract(curve.d, curve.a)
    return tangent


def cut(curve: CubicBezier, t0: float, t1: float) -> CubicBezier:
    """
    Extract the part of a curve between two parameters.

    The result runs from ``position(curve, t0)`` to ``position(curve, t1)``;
    when ``t0 > t1`` it is traversed backwards.

    Args:
        curve: Source curve
        t0: Parameter where the sub-curve starts
        t1: Parameter where the sub-curve ends

    Returns:
        The sub-curve as a new CubicBezier
    """
    return CubicBezier(
        a=_blossom(curve, t0, t0, t0),
        b=_blossom(curve, t0, t0, t1),
        c=_blossom(curve, t0, t1, t1),
        d=_blossom(curve, t1, t1, t1),
    )


def _planar_speed(curve: CubicBezier, t: float) -> float:
    s = 1.0 - t
    a, b, c, d = curve.control_points
    k0 = 3.0 * s * s
    k1 = 6.0 * s * t
    k2 = 3.0 * t * t
    dx = k0 * (b[0] - a[0]) + k1 * (c[0] - b[0]) + k2 * (d[0] - c[0])
    dz = k0 * (b[2] - a[2]) + k1 * (c[2] - b[2]) + k2 * (d[2] - c[2])
    return math.hypot(dx, dz)


def planar_length(curve: CubicBezier) -> float:
    """
    Arc length of the curve projected onto the horizontal plane.

    Integrates the planar speed with Gauss-Legendre quadrature over
    equal parameter spans.
    """
    total = 0.0
    span = 1.0 / _LENGTH_SPANS
    half = span / 2.0
    for i in range(_LENGTH_SPANS):
        mid = i * span + half
        for node, weight in zip(_GAUSS_NODES, _GAUSS_WEIGHTS):
            total += weight * _planar_speed(curve, mid + node * half)
    return total * half
