#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ****************************************************************************
#
# Copyright (C) 2025-2026, CartoProj Developers.
# This file is part of CartoProj.
#
# CartoProj is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# CartoProj is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# with this download. If not, see <http://www.gnu.org/licenses/>
#
# ****************************************************************************
"""
Unit tests for :mod:`cartoproj.proj.wink2`.

The auxiliary angle is checked against an independent bisection of
``theta + sin(theta) = pi sin(lat)``.
"""

from __future__ import annotations

import unittest
from math import cos, isclose, pi, radians, sin

from cartoproj.ellipsoid import WGS84, Ellipsoid
from cartoproj.exceptions import UnsupportedOperation
from cartoproj.proj.wink2 import Winkel2, mollweide_theta
from cartoproj.utilities import HALFPI


UNIT = Ellipsoid.sphere(1.0)


def bisect_theta(lat: float) -> float:
    """Half of the root of theta + sin(theta) = pi sin(lat)."""
    k = pi * sin(lat)
    lo, hi = -pi, pi
    for _ in range(200):
        mid = 0.5 * (lo + hi)
        if mid + sin(mid) < k:
            lo = mid
        else:
            hi = mid
    return 0.25 * (lo + hi)


class TestMollweideTheta(unittest.TestCase):

    def test_against_bisection(self) -> None:
        for deg in (-80.0, -45.0, -10.0, 0.0, 5.0, 30.0, 60.0, 75.0):
            lat = radians(deg)
            self.assertTrue(
                isclose(mollweide_theta(lat), bisect_theta(lat),
                        abs_tol=1e-7),
                msg=f"mollweide_theta failed at {deg}",
            )

    def test_symmetry(self) -> None:
        for lat in (0.1, 0.7, 1.2):
            self.assertEqual(mollweide_theta(-lat), -mollweide_theta(lat))

    def test_pole(self) -> None:
        """At the poles the auxiliary angle is taken as +-pi/2."""
        self.assertEqual(mollweide_theta(HALFPI), HALFPI)
        self.assertEqual(mollweide_theta(-HALFPI), -HALFPI)


class TestWinkel2(unittest.TestCase):

    def test_origin(self) -> None:
        p = Winkel2(UNIT)
        x, y = p.forward(0.0, 0.0)
        self.assertTrue(isclose(x, 0.0, abs_tol=1e-15))
        self.assertTrue(isclose(y, 0.0, abs_tol=1e-15))

    def test_equator(self) -> None:
        p = Winkel2(UNIT)
        x, y = p.forward(2.0, 0.0)
        self.assertTrue(isclose(x, 2.0, rel_tol=1e-12))
        self.assertTrue(isclose(y, 0.0, abs_tol=1e-15))

    def test_forward(self) -> None:
        p = Winkel2(UNIT, {"lat_1": 50.0})
        lon, lat = 1.2, 0.6
        x, y = p.forward(lon, lat)
        theta = bisect_theta(lat)
        xr = 0.5 * lon * (cos(theta) + cos(radians(50.0)))
        yr = 0.25 * pi * (sin(theta) + 2.0 * lat / pi)
        self.assertTrue(isclose(x, xr, abs_tol=1e-7))
        self.assertTrue(isclose(y, yr, abs_tol=1e-7))

    def test_pole(self) -> None:
        p = Winkel2(UNIT)
        x, y = p.forward(1.0, HALFPI)
        self.assertTrue(isclose(x, 0.5, rel_tol=1e-12))
        self.assertTrue(isclose(y, HALFPI, rel_tol=1e-12))

    def test_no_inverse(self) -> None:
        p = Winkel2(UNIT)
        self.assertFalse(p.has_inverse)
        with self.assertRaises(UnsupportedOperation) as ctx:
            p.inverse(0.0, 0.0)
        self.assertEqual(ctx.exception.code, -40)

    def test_ellipsoid_as_sphere(self) -> None:
        p = Winkel2(WGS84)
        self.assertEqual(p.params.es, 0.0)
        x, _ = p.forward(1.0, 0.0)
        self.assertTrue(isclose(x, WGS84.a, rel_tol=1e-12))


if __name__ == "__main__":
    unittest.main()
