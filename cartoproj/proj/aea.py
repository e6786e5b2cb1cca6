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
Albers Equal Area and Lambert Equal Area Conic projections.

Conic, equal-area, spheroid and ellipsoid (Snyder, ch. 14).

Named parameters
----------------
aea
    ``lat_1``, ``lat_2``: standard parallels (degrees).
leac
    ``lat_1``: standard parallel; ``south``: use the south pole as
    second parallel instead of the north pole.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from cartoproj.exceptions import DomainError, InvalidGeometry
from cartoproj.proj.base import Projection
from cartoproj.series import msfn, phi1_, qsfn
from cartoproj.utilities import HALFPI


logger = logging.getLogger(__name__)

EPS10 = 1.0e-10
TOL7 = 1.0e-7


@dataclass(frozen=True)
class AlbersBlock:
    """Constants of the Albers cone."""

    phi1: float
    phi2: float
    n: float
    n2: float
    c: float
    dd: float
    rho0: float
    ec: float
    ellips: bool


def _cone_radius(value: float) -> float:
    if value < 0.0:
        raise InvalidGeometry(
            "Latitude of origin lies outside the cone.", -20
        )
    return math.sqrt(value)


def setup_albers(par, phi1: float, phi2: float) -> AlbersBlock:
    """
    Derive the cone constants for standard parallels phi1 and phi2.

    Raises
    ------
    InvalidGeometry
        If the parallels are symmetric about the equator, or if the
        two parallels give the same authalic quantity.
    """
    if abs(phi1 + phi2) < EPS10:
        raise InvalidGeometry(
            "Standard parallels must not be symmetric about the equator "
            "(lat_1 = -lat_2).",
            -21,
        )

    n = sinphi = math.sin(phi1)
    cosphi = math.cos(phi1)
    secant = abs(phi1 - phi2) >= EPS10

    if par.es > 0.0:
        m1 = msfn(sinphi, cosphi, par.es)
        ml1 = qsfn(sinphi, par.e, par.one_es)
        if secant:
            sinphi = math.sin(phi2)
            cosphi = math.cos(phi2)
            m2 = msfn(sinphi, cosphi, par.es)
            ml2 = qsfn(sinphi, par.e, par.one_es)
            if ml2 == ml1:
                raise InvalidGeometry(
                    "Standard parallels give identical authalic values."
                )
            n = (m1 * m1 - m2 * m2) / (ml2 - ml1)
        ec = 1.0 - 0.5 * par.one_es * math.log(
            (1.0 - par.e) / (1.0 + par.e)
        ) / par.e
        c = m1 * m1 + n * ml1
        dd = 1.0 / n
        rho0 = dd * _cone_radius(
            c - n * qsfn(math.sin(par.phi0), par.e, par.one_es)
        )
        return AlbersBlock(
            phi1=phi1, phi2=phi2, n=n, n2=n + n, c=c, dd=dd,
            rho0=rho0, ec=ec, ellips=True,
        )

    if secant:
        n = 0.5 * (n + math.sin(phi2))
    n2 = n + n
    c = cosphi * cosphi + n2 * sinphi
    dd = 1.0 / n
    rho0 = dd * _cone_radius(c - n2 * math.sin(par.phi0))
    return AlbersBlock(
        phi1=phi1, phi2=phi2, n=n, n2=n2, c=c, dd=dd,
        rho0=rho0, ec=0.0, ellips=False,
    )


class AlbersEqualArea(Projection):
    """
    Albers Equal Area, ellipsoidal or spherical.

    The same class serves both figures: the formulas switch on the
    ``ellips`` flag of the parameter block.
    """

    IDENTIFIER = "aea"
    NAME = "aea_ellipsoid"

    @classmethod
    def setup(cls, par, params):
        phi1 = params.radians("lat_1")
        phi2 = params.radians("lat_2")
        return setup_albers(par, phi1, phi2), par

    @property
    def name(self) -> str:
        if self._proj_parm.ellips:
            return self.NAME
        return f"{self.IDENTIFIER}_spheroid"

    def _forward(self, lon, lat):
        p = self._proj_parm
        if p.ellips:
            rho = p.c - p.n * qsfn(
                math.sin(lat), self._par.e, self._par.one_es
            )
        else:
            rho = p.c - p.n2 * math.sin(lat)
        if rho < 0.0:
            raise DomainError("Point lies outside the cone.", -20)
        rho = p.dd * math.sqrt(rho)
        lon *= p.n
        return rho * math.sin(lon), p.rho0 - rho * math.cos(lon)

    def _inverse(self, x, y):
        p = self._proj_parm
        y = p.rho0 - y
        rho = math.hypot(x, y)
        if rho == 0.0:
            return 0.0, (HALFPI if p.n > 0.0 else -HALFPI)

        if p.n < 0.0:
            rho = -rho
            x = -x
            y = -y
        lat = rho / p.dd
        if p.ellips:
            lat = (p.c - lat * lat) / p.n
            if abs(p.ec - abs(lat)) > TOL7:
                lat = phi1_(lat, self._par.e, self._par.one_es)
            else:
                lat = -HALFPI if lat < 0.0 else HALFPI
        else:
            lat = (p.c - lat * lat) / p.n2
            if abs(lat) <= 1.0:
                lat = math.asin(lat)
            else:
                lat = -HALFPI if lat < 0.0 else HALFPI
        return math.atan2(x, y) / p.n, lat


class LambertEqualAreaConic(AlbersEqualArea):
    """
    Lambert Equal Area Conic: Albers with one parallel at a pole.
    """

    IDENTIFIER = "leac"
    NAME = "leac_ellipsoid"

    @classmethod
    def setup(cls, par, params):
        phi2 = params.radians("lat_1")
        phi1 = -HALFPI if params.flag("south") else HALFPI
        logger.debug("leac: second parallel at %s pole",
                     "south" if phi1 < 0.0 else "north")
        return setup_albers(par, phi1, phi2), par
