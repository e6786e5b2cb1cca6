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
Unit tests for :mod:`cartoproj.proj.base`.

The checks shared by every projection (input ranges, pole snapping,
central meridian, false origin and scaling) are exercised through the
spherical cylindrical equal-area formula, whose unit-sphere values are
``x = lon`` and ``y = sin(lat)``.
"""

from __future__ import annotations

import unittest
from math import isclose, nan, radians

from cartoproj.ellipsoid import WGS84, Ellipsoid
from cartoproj.exceptions import DomainError, InvalidGeometry
from cartoproj.proj.base import Projection
from cartoproj.proj.cea import (
    CylindricalEqualAreaEllipsoid,
    CylindricalEqualAreaSpheroid,
)
from cartoproj.utilities import HALFPI


UNIT = Ellipsoid.sphere(1.0)


class TestForwardWrapper(unittest.TestCase):

    def test_origin(self) -> None:
        p = CylindricalEqualAreaSpheroid(UNIT)
        self.assertEqual(p.forward(0.0, 0.0), (0.0, 0.0))

    def test_scaling_and_false_origin(self) -> None:
        p = CylindricalEqualAreaSpheroid(
            Ellipsoid.sphere(2.0), {"x_0": 100.0, "y_0": -50.0}
        )
        x, y = p.forward(1.0, radians(30.0))
        self.assertTrue(isclose(x, 102.0), msg="false easting failed")
        self.assertTrue(isclose(y, -49.0), msg="false northing failed")

        lon, lat = p.inverse(x, y)
        self.assertTrue(isclose(lon, 1.0))
        self.assertTrue(isclose(lat, radians(30.0)))

    def test_central_meridian(self) -> None:
        p = CylindricalEqualAreaSpheroid(UNIT, {"lon_0": 170.0})
        x, _ = p.forward(radians(-170.0), 0.0)
        self.assertTrue(
            isclose(x, radians(20.0), rel_tol=1e-12),
            msg="longitude not wrapped across the antimeridian",
        )

        lon, _ = p.inverse(x, 0.0)
        self.assertTrue(isclose(lon, radians(-170.0), rel_tol=1e-12))

    def test_over(self) -> None:
        p = CylindricalEqualAreaSpheroid(UNIT, {"lon_0": 170.0, "over": None})
        x, _ = p.forward(radians(-170.0), 0.0)
        self.assertTrue(isclose(x, radians(-340.0), rel_tol=1e-12))

    def test_pole_snap(self) -> None:
        p = CylindricalEqualAreaSpheroid(UNIT)
        _, y = p.forward(0.0, HALFPI + 1e-13)
        self.assertEqual(y, 1.0)
        _, y = p.forward(0.0, -HALFPI - 1e-13)
        self.assertEqual(y, -1.0)

    def test_out_of_range(self) -> None:
        p = CylindricalEqualAreaSpheroid(UNIT)
        for lon, lat in [(0.0, HALFPI + 1e-6), (10.5, 0.0), (nan, 0.0)]:
            with self.assertRaises(DomainError) as ctx:
                p.forward(lon, lat)
            self.assertEqual(ctx.exception.code, -14)

        with self.assertRaises(DomainError) as ctx:
            p.inverse(nan, 0.0)
        self.assertEqual(ctx.exception.code, -15)


class TestProjectionObject(unittest.TestCase):

    def test_properties(self) -> None:
        p = CylindricalEqualAreaSpheroid(UNIT, {"k_0": 0.5})
        self.assertEqual(p.name, "cea_spheroid")
        self.assertEqual(p.identifier, "cea")
        self.assertTrue(p.has_inverse)
        self.assertEqual(p.params.k0, 0.5)
        self.assertEqual(p.block.qp, 0.0)
        self.assertIn("cea_spheroid", repr(p))

        p = CylindricalEqualAreaSpheroid(UNIT, identifier="custom")
        self.assertEqual(p.identifier, "custom")

    def test_shape_mismatch(self) -> None:
        with self.assertRaises(InvalidGeometry) as ctx:
            CylindricalEqualAreaEllipsoid(UNIT)
        self.assertEqual(ctx.exception.code, -34)

        with self.assertRaises(InvalidGeometry):
            CylindricalEqualAreaSpheroid(WGS84)

    def test_abstract(self) -> None:
        with self.assertRaises(TypeError):
            Projection(UNIT)

    def test_setup_failure_propagates(self) -> None:
        with self.assertRaises(InvalidGeometry) as ctx:
            CylindricalEqualAreaSpheroid(UNIT, {"k_0": -1.0})
        self.assertEqual(ctx.exception.code, -31)


if __name__ == "__main__":
    unittest.main()
