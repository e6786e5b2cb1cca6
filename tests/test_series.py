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
Unit tests for :mod:`cartoproj.series`.

The series and closed forms are checked against direct numerical
quadrature of their defining integrals (scipy), and the iterative
inverses against their forward counterparts.
"""

from __future__ import annotations

import unittest
from math import atan, cos, isclose, radians, sin, sqrt

from cartoproj.ellipsoid import WGS84
from cartoproj.exceptions import ConvergenceFailure, InvalidGeometry
from cartoproj.series import (
    authalic_latitude,
    authlat,
    authset,
    enfn,
    inv_mlfn,
    mlfn,
    msfn,
    phi1_,
    qsfn,
    ssfn,
    tsfn,
)
from cartoproj.utilities import HALFPI

try:
    from scipy.integrate import quad
except ImportError:  # test extra not installed
    quad = None


E = WGS84.e
ES = WGS84.es
ONE_ES = WGS84.one_es

LATITUDES = [radians(v) for v in (-85.0, -60.0, -30.0, -1.0, 0.0,
                                  10.0, 45.0, 72.5, 85.0)]


@unittest.skipIf(quad is None, "scipy is not installed")
class TestSeriesQuadrature(unittest.TestCase):

    def test_qsfn_integral(self) -> None:
        """q(phi) is the integral of the authalic area element."""
        def dq(t):
            return 2.0 * ONE_ES * cos(t) / (1.0 - ES * sin(t) ** 2) ** 2

        for phi in LATITUDES:
            ref, _ = quad(dq, 0.0, phi, epsabs=1e-14, epsrel=1e-14)
            self.assertTrue(
                isclose(qsfn(sin(phi), E, ONE_ES), ref, abs_tol=1e-12),
                msg=f"qsfn failed at phi={phi}",
            )

    def test_mlfn_integral(self) -> None:
        """mlfn is the meridian arc of the unit ellipsoid."""
        def dm(t):
            return ONE_ES / (1.0 - ES * sin(t) ** 2) ** 1.5

        en = enfn(ES)
        for phi in LATITUDES:
            ref, _ = quad(dm, 0.0, phi, epsabs=1e-14, epsrel=1e-14)
            self.assertTrue(
                isclose(mlfn(phi, sin(phi), cos(phi), en), ref,
                        abs_tol=1e-10),
                msg=f"mlfn failed at phi={phi}",
            )


class TestAuthalic(unittest.TestCase):

    def test_qsfn_sphere(self) -> None:
        self.assertEqual(qsfn(0.5, 0.0, 1.0), 1.0)
        self.assertEqual(qsfn(-1.0, 0.0, 1.0), -2.0)

    def test_qsfn_symmetry(self) -> None:
        for phi in LATITUDES:
            self.assertTrue(
                isclose(qsfn(sin(phi), E, ONE_ES),
                        -qsfn(-sin(phi), E, ONE_ES), abs_tol=1e-15)
            )

    def test_authlat_roundtrip(self) -> None:
        """authlat inverts authalic_latitude up to the series order."""
        apa = authset(ES)
        self.assertFalse(apa.flags.writeable)
        for phi in LATITUDES:
            beta = authalic_latitude(phi, E, ONE_ES)
            self.assertTrue(
                isclose(authlat(beta, apa), phi, abs_tol=1e-9),
                msg=f"authlat round trip failed at phi={phi}",
            )

    def test_authlat_roundtrip_eccentricities(self) -> None:
        """The 3-term series loses accuracy as e^8: ~1e-5 rad at e=0.3."""
        for e, tol in ((0.0, 1e-12), (0.01, 1e-7), (0.05, 1e-7),
                       (0.1, 1e-7), (0.2, 1e-6), (0.3, 2e-5)):
            es = e * e
            apa = authset(es)
            for phi in LATITUDES:
                beta = authalic_latitude(phi, e, 1.0 - es)
                self.assertTrue(
                    isclose(authlat(beta, apa), phi, abs_tol=tol),
                    msg=f"authlat failed at e={e}, phi={phi}",
                )

    def test_authset_invalid(self) -> None:
        for es in (-0.1, 1.0, float("nan")):
            with self.assertRaises(InvalidGeometry):
                authset(es)

    def test_phi1_inverts_qsfn(self) -> None:
        for phi in LATITUDES:
            qs = qsfn(sin(phi), E, ONE_ES)
            self.assertTrue(
                isclose(phi1_(qs, E, ONE_ES), phi, abs_tol=1e-9),
                msg=f"phi1_ failed at phi={phi}",
            )

    def test_phi1_sphere(self) -> None:
        self.assertTrue(isclose(phi1_(1.0, 0.0, 1.0), radians(30.0)))

    def test_phi1_out_of_range(self) -> None:
        with self.assertRaises(ConvergenceFailure):
            phi1_(2.5, E, ONE_ES)
        with self.assertRaises(ConvergenceFailure):
            phi1_(float("nan"), E, ONE_ES)


class TestMeridianAndConformal(unittest.TestCase):

    def test_inv_mlfn(self) -> None:
        en = enfn(ES)
        self.assertFalse(en.flags.writeable)
        for phi in LATITUDES:
            m = mlfn(phi, sin(phi), cos(phi), en)
            self.assertTrue(
                isclose(inv_mlfn(m, ES, en), phi, abs_tol=1e-10),
                msg=f"inv_mlfn failed at phi={phi}",
            )

    def test_mlfn_sphere(self) -> None:
        en = enfn(0.0)
        phi = radians(40.0)
        self.assertTrue(isclose(mlfn(phi, sin(phi), cos(phi), en), phi))

    def test_msfn(self) -> None:
        self.assertEqual(msfn(0.0, 1.0, ES), 1.0)
        phi = radians(60.0)
        ref = cos(phi) / sqrt(1.0 - ES * sin(phi) ** 2)
        self.assertTrue(isclose(msfn(sin(phi), cos(phi), ES), ref))

    def test_tsfn_ssfn_reciprocal(self) -> None:
        """tsfn and ssfn are reciprocal at the same latitude."""
        for phi in LATITUDES:
            t = tsfn(phi, sin(phi), E)
            s = ssfn(phi, sin(phi), E)
            self.assertTrue(isclose(t * s, 1.0, rel_tol=1e-12))

        self.assertTrue(isclose(tsfn(HALFPI, 1.0, E), 0.0, abs_tol=1e-15))

    def test_ssfn_sphere_is_identity(self) -> None:
        for phi in LATITUDES:
            chi = 2.0 * atan(ssfn(phi, sin(phi), 0.0)) - HALFPI
            self.assertTrue(isclose(chi, phi, abs_tol=1e-14))


if __name__ == "__main__":
    unittest.main()
