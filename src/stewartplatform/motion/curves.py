"""
Curve flattening for the path builder.

Bezier curves are sampled into a fixed lookup table, elliptical arcs are
converted from SVG endpoint parameterization to centre parameterization
(https://www.w3.org/TR/SVG11/implnote.html#ArcImplementationNotes) and sampled
at a constant arc length per step. All functions work in source coordinates
and return (n, 2) arrays.
"""

from dataclasses import dataclass
from math import acos, ceil, cos, pi, radians, sin, sqrt
from typing import Sequence

import numpy as np

from .models import ArcSegment


@dataclass(frozen=True)
class ArcCenter:
    """Centre parameterization of an elliptical arc (angles in radians)."""

    cx: float
    cy: float
    rx: float
    ry: float
    phi: float
    theta1: float
    delta_theta: float

    def point_at(self, theta: float) -> np.ndarray:
        x = self.rx * cos(theta)
        y = self.ry * sin(theta)
        return np.array([
            self.cx + x * cos(self.phi) - y * sin(self.phi),
            self.cy + x * sin(self.phi) + y * cos(self.phi),
        ])


def _bezier_parameters(steps: int) -> np.ndarray:
    return np.linspace(0.0, 1.0, steps + 1)[:, np.newaxis]


def quadratic_lut(p0: Sequence[float], p1: Sequence[float], p2: Sequence[float], steps: int) -> np.ndarray:
    """steps + 1 points of a quadratic bezier curve, t = 0 included."""
    p0, p1, p2 = (np.asarray(p, dtype=float) for p in (p0, p1, p2))
    t = _bezier_parameters(steps)
    mt = 1 - t
    return mt * mt * p0 + 2 * mt * t * p1 + t * t * p2


def cubic_lut(p0: Sequence[float], p1: Sequence[float], p2: Sequence[float], p3: Sequence[float],
              steps: int) -> np.ndarray:
    """steps + 1 points of a cubic bezier curve, t = 0 included."""
    p0, p1, p2, p3 = (np.asarray(p, dtype=float) for p in (p0, p1, p2, p3))
    t = _bezier_parameters(steps)
    mt = 1 - t
    return mt * mt * mt * p0 + 3 * mt * mt * t * p1 + 3 * mt * t * t * p2 + t * t * t * p3


def angle_between(ux: float, uy: float, vx: float, vy: float) -> float:
    """Signed angle from vector u to vector v."""
    cos_phi = (ux * vx + uy * vy) / sqrt((ux * ux + uy * uy) * (vx * vx + vy * vy))
    # rounding can push the cosine just outside [-1, 1]
    cos_phi = min(max(cos_phi, -1.0), 1.0)
    return (-1 if ux * vy < uy * vx else 1) * acos(cos_phi)


def arc_to_center(x1: float, y1: float, arc: ArcSegment) -> ArcCenter:
    """
    Convert an arc starting at (x1, y1) to centre parameterization.

    Radii too small to span the end points are scaled up. The caller handles
    coincident end points and zero radii, which have no centre form.
    """
    x2, y2 = arc.x, arc.y
    rx, ry = abs(arc.rx), abs(arc.ry)
    phi = radians(arc.x_axis_rotation)
    cos_phi, sin_phi = cos(phi), sin(phi)

    # Step 1: x1', y1'
    dx = (x1 - x2) / 2
    dy = (y1 - y2) / 2
    x1_ = cos_phi * dx + sin_phi * dy
    y1_ = -sin_phi * dx + cos_phi * dy

    # out of range radii
    radii_check = (x1_ * x1_) / (rx * rx) + (y1_ * y1_) / (ry * ry)
    if radii_check > 1:
        rx *= sqrt(radii_check)
        ry *= sqrt(radii_check)

    # Step 2: cx', cy'
    numerator = rx * rx * ry * ry - rx * rx * y1_ * y1_ - ry * ry * x1_ * x1_
    denominator = rx * rx * y1_ * y1_ + ry * ry * x1_ * x1_
    coefficient = (-1 if bool(arc.large_arc) == bool(arc.sweep) else 1) * sqrt(max(numerator / denominator, 0.0))

    cx_ = coefficient * rx * y1_ / ry
    cy_ = coefficient * -ry * x1_ / rx

    # Step 3: cx, cy
    cx = (x1 + x2) / 2 + cos_phi * cx_ - sin_phi * cy_
    cy = (y1 + y2) / 2 + sin_phi * cx_ + cos_phi * cy_

    # Step 4: start angle and sweep
    ux, uy = (x1_ - cx_) / rx, (y1_ - cy_) / ry
    vx, vy = (-x1_ - cx_) / rx, (-y1_ - cy_) / ry

    theta1 = angle_between(1, 0, ux, uy)
    delta_theta = angle_between(ux, uy, vx, vy)

    if not arc.sweep and delta_theta > 0:
        delta_theta -= 2 * pi
    elif arc.sweep and delta_theta < 0:
        delta_theta += 2 * pi

    return ArcCenter(cx, cy, rx, ry, phi, theta1, delta_theta)


def arc_step_count(center: ArcCenter, step_length: float) -> int:
    return max(1, ceil(abs(center.delta_theta * max(center.rx, center.ry)) / step_length))


def flatten_arc(x1: float, y1: float, arc: ArcSegment, step_length: float) -> np.ndarray:
    """
    Points along the arc from (x1, y1), excluding the start point.

    Coincident end points give no points, a zero radius gives the straight
    line to the end point.
    """
    if x1 == arc.x and y1 == arc.y:
        return np.empty((0, 2))
    if arc.rx == 0 or arc.ry == 0:
        return np.array([[arc.x, arc.y]], dtype=float)

    center = arc_to_center(x1, y1, arc)
    steps = arc_step_count(center, step_length)

    points = np.array([center.point_at(center.theta1 + center.delta_theta * j / steps) for j in range(1, steps + 1)])
    # land exactly on the requested end point
    points[-1] = (arc.x, arc.y)
    return points
