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
Property tests across all projections built through the registry.

- Round trip: inverse(forward(p)) returns p within 1e-6 rad for every
  projection with an inverse, on both figures where supported.
- Equal area: the Jacobian determinant of the forward transform equals
  the area element of the figure for the equal-area projections.
"""

from __future__ import annotations

import unittest
from math import cos, isclose, radians, sin

from cartoproj.ellipsoid import WGS84, Ellipsoid
from cartoproj.proj.registry import create_projection


UNIT = Ellipsoid.sphere(1.0)
UNIT_WGS84 = Ellipsoid(a=1.0, f=WGS84.f)


def grid(lon_range, lat_range, n=5):
    """Regular n x n grid of (lon, lat) in radians from degree ranges."""
    lons = [lon_range[0] + i * (lon_range[1] - lon_range[0]) / (n - 1)
            for i in range(n)]
    lats = [lat_range[0] + j * (lat_range[1] - lat_range[0]) / (n - 1)
            for j in range(n)]
    return [(radians(lo), radians(la)) for lo in lons for la in lats]


# name, params, lon range, lat range, figures
CASES = [
    ("aea", {"lat_1": 29.5, "lat_2": 45.5, "lat_0": 23.0, "lon_0": -96.0},
     (-130.0, -65.0), (20.0, 55.0), (UNIT, WGS84)),
    ("aea", {"lat_1": -20.0, "lat_2": -50.0, "lon_0": 135.0},
     (110.0, 160.0), (-45.0, -10.0), (UNIT, WGS84)),
    ("leac", {"lat_1": 45.0, "lon_0": 10.0},
     (-20.0, 40.0), (20.0, 80.0), (UNIT, WGS84)),
    ("cea", {"lat_ts": 30.0},
     (-170.0, 170.0), (-80.0, 80.0), (UNIT, WGS84)),
    ("tcea", {"lon_0": 15.0, "k_0": 0.9},
     (-45.0, 75.0), (-70.0, 70.0), (UNIT, WGS84)),
    ("ocea", {"lat_1": 10.0, "lon_1": 0.0, "lat_2": 40.0, "lon_2": 60.0},
     (0.0, 60.0), (0.0, 50.0), (UNIT, WGS84)),
    ("ocea", {"alpha": 35.0, "lonc": -40.0, "lat_0": 20.0},
     (-70.0, -10.0), (-10.0, 50.0), (UNIT, WGS84)),
    ("stere", {"lat_0": 90.0, "lat_ts": 70.0, "lon_0": -45.0},
     (-180.0, 180.0), (30.0, 89.0), (UNIT, WGS84)),
    ("stere", {"lat_0": -90.0},
     (-180.0, 180.0), (-89.0, -30.0), (UNIT, WGS84)),
    ("stere", {"lat_0": 0.0, "lon_0": 20.0},
     (-40.0, 80.0), (-60.0, 60.0), (UNIT, WGS84)),
    ("stere", {"lat_0": 52.0, "lon_0": 5.0, "k_0": 0.9999079},
     (-30.0, 40.0), (20.0, 80.0), (UNIT, WGS84)),
    ("ups", {},
     (-180.0, 180.0), (60.0, 89.5), (WGS84,)),
    ("ups", {"south": None},
     (-180.0, 180.0), (-89.5, -60.0), (WGS84,)),
]


class TestRoundTrip(unittest.TestCase):

    def test_round_trip(self) -> None:
        for name, params, lon_range, lat_range, figures in CASES:
            for ell in figures:
                p = create_projection(name, ell, params)
                for lon, lat in grid(lon_range, lat_range):
                    lon2, lat2 = p.inverse(*p.forward(lon, lat))
                    self.assertTrue(
                        isclose(lat2, lat, abs_tol=1e-6),
                        msg=f"{p!r} {params}: lat at ({lon}, {lat})",
                    )
                    # Longitude is undefined at the poles and wraps at
                    # the antimeridian
                    if abs(cos(lat)) < 1e-9:
                        continue
                    dlon = abs(lon2 - lon)
                    self.assertTrue(
                        dlon < 1e-6 or abs(dlon - 2.0 * 3.141592653589793)
                        < 1e-6,
                        msg=f"{p!r} {params}: lon at ({lon}, {lat})",
                    )


class TestEqualArea(unittest.TestCase):

    STEP = 1e-5

    def _jacobian(self, p, lon, lat):
        h = self.STEP
        xe, ye = p.forward(lon + h, lat)
        xw, yw = p.forward(lon - h, lat)
        xn, yn = p.forward(lon, lat + h)
        xs, ys = p.forward(lon, lat - h)
        dx_dl = (xe - xw) / (2 * h)
        dy_dl = (ye - yw) / (2 * h)
        dx_dp = (xn - xs) / (2 * h)
        dy_dp = (yn - ys) / (2 * h)
        return abs(dx_dl * dy_dp - dx_dp * dy_dl)

    def test_equal_area(self) -> None:
        names = ("aea", "leac", "cea", "tcea", "ocea")
        for name, params, lon_range, lat_range, _ in CASES:
            if name not in names:
                continue
            for ell in (UNIT, UNIT_WGS84):
                p = create_projection(name, ell, params)
                es = p.params.es
                for lon, lat in grid(lon_range, lat_range, n=3):
                    # Keep the stencil away from the poles
                    lat = max(min(lat, radians(85.0)), radians(-85.0))
                    s = sin(lat)
                    area = (1.0 - es) * cos(lat) / (1.0 - es * s * s) ** 2
                    self.assertTrue(
                        isclose(self._jacobian(p, lon, lat), area,
                                rel_tol=1e-6),
                        msg=f"{p!r} {params}: area at ({lon}, {lat})",
                    )


if __name__ == "__main__":
    unittest.main()
