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
Oblique Cylindrical Equal Area.

Cylindrical, spheroid only. The oblique pole is defined either by

- one point and an azimuth: ``alpha`` (azimuth of the central line at
  the centre), ``lonc`` (longitude of the centre) and ``lat_0``
  (latitude of the centre), Snyder eq. 9-7 and 9-8; or
- two points on the central line: ``lat_1``, ``lon_1``, ``lat_2``,
  ``lon_2``, Snyder eq. 9-1 and 9-2.

The presence of ``alpha`` selects the first form. The central meridian
``lon_0`` is replaced by the one derived from the pole.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from cartoproj.exceptions import DomainError
from cartoproj.proj.base import Projection
from cartoproj.utilities import HALFPI, ONEPI, aasin, asqrt


logger = logging.getLogger(__name__)

EPS10 = 1.0e-10


@dataclass(frozen=True)
class ObliqueCylindricalEqualAreaBlock:
    """Scale factors and trigonometry of the oblique pole."""

    rok: float
    rtk: float
    sinphi: float
    cosphi: float


def oblique_pole(par, params):
    """
    Locate the pole of the oblique cylinder.

    Returns
    -------
    lonp, phip : float
        Longitude and latitude of the oblique pole, radians.
    """
    if params.has("alpha"):
        alpha = params.radians("alpha")
        lonz = params.radians("lonc")
        phi_0 = par.phi0
        lonp = math.atan2(
            -math.cos(alpha), -math.sin(phi_0) * math.sin(alpha)
        ) + lonz
        phip = math.asin(math.cos(phi_0) * math.sin(alpha))
        return lonp, phip

    phi_1 = params.radians("lat_1")
    phi_2 = params.radians("lat_2")
    lam_1 = params.radians("lon_1")
    lam_2 = params.radians("lon_2")
    lonp = math.atan2(
        math.cos(phi_1) * math.sin(phi_2) * math.cos(lam_1)
        - math.sin(phi_1) * math.cos(phi_2) * math.cos(lam_2),
        math.sin(phi_1) * math.cos(phi_2) * math.sin(lam_2)
        - math.cos(phi_1) * math.sin(phi_2) * math.sin(lam_1),
    )
    # lam0 wraps around when the first point sits at 90W
    if lam_1 == -HALFPI:
        lonp = -lonp

    num = -math.cos(lonp - lam_1)
    tan_phi1 = math.tan(phi_1)
    if tan_phi1 == 0.0:
        phip = math.copysign(HALFPI, num)
    else:
        phip = math.atan(num / tan_phi1)
    return lonp, phip


class ObliqueCylindricalEqualArea(Projection):

    IDENTIFIER = "ocea"
    NAME = "ocea_spheroid"
    SHAPE = "spheroid"

    @classmethod
    def setup(cls, par, params):
        lonp, phip = oblique_pole(par, params)
        logger.debug("ocea: oblique pole at lon=%.10g lat=%.10g rad",
                     lonp, phip)
        block = ObliqueCylindricalEqualAreaBlock(
            rok=1.0 / par.k0,
            rtk=par.k0,
            sinphi=math.sin(phip),
            cosphi=math.cos(phip),
        )
        par = par.as_sphere().replace(lam0=lonp + HALFPI)
        return block, par

    def _forward(self, lon, lat):
        p = self._proj_parm
        sinlam = math.sin(lon)
        t = math.cos(lon)
        if abs(t) < EPS10:
            raise DomainError(
                "Point lies on the meridian 90 degrees from the centre.",
                -20,
            )
        x = math.atan(
            (math.tan(lat) * p.cosphi + p.sinphi * sinlam) / t
        )
        if t < 0.0:
            x += ONEPI
        x *= p.rtk
        y = p.rok * (
            p.sinphi * math.sin(lat) - p.cosphi * math.cos(lat) * sinlam
        )
        return x, y

    def _inverse(self, x, y):
        p = self._proj_parm
        y /= p.rok
        x /= p.rtk
        if abs(y) > 1.0 + EPS10:
            raise DomainError("Point lies outside the projected domain.", -20)
        t = asqrt(1.0 - y * y)
        s = math.sin(x)
        lat = aasin(y * p.sinphi + t * p.cosphi * s)
        lon = math.atan2(t * p.sinphi * s - y * p.cosphi, t * math.cos(x))
        return lon, lat
