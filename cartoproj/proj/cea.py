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
Cylindrical Equal Area (Lambert, Behrmann, Gall-Peters, ...).

Cylindrical, equal-area, spheroid and ellipsoid. The optional
``lat_ts`` sets the latitude of true scale; without it the scale factor
``k_0`` is used as given.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from cartoproj.exceptions import DomainError, InvalidGeometry
from cartoproj.proj.base import Projection
from cartoproj.series import authlat, authset, qsfn
from cartoproj.utilities import HALFPI, aasin

EPS = 1.0e-10


@dataclass(frozen=True)
class CylindricalEqualAreaBlock:
    qp: float = 0.0
    apa: Optional[np.ndarray] = None


def _setup_cea(par, params):
    t = 0.0
    if params.has("lat_ts"):
        t = params.radians("lat_ts")
        k0 = math.cos(t)
        if k0 < 0.0:
            raise InvalidGeometry(
                "lat_ts must lie within [-90, 90] degrees.", -24
            )
        par = par.replace(k0=k0)

    if par.es > 0.0:
        t = math.sin(t)
        par = par.replace(k0=par.k0 / math.sqrt(1.0 - par.es * t * t))
        apa = authset(par.es)
        qp = qsfn(1.0, par.e, par.one_es)
        return CylindricalEqualAreaBlock(qp=qp, apa=apa), par

    return CylindricalEqualAreaBlock(), par


class CylindricalEqualAreaEllipsoid(Projection):

    IDENTIFIER = "cea"
    NAME = "cea_ellipsoid"
    SHAPE = "ellipsoid"

    @classmethod
    def setup(cls, par, params):
        return _setup_cea(par, params)

    def _forward(self, lon, lat):
        par = self._par
        x = par.k0 * lon
        y = 0.5 * qsfn(math.sin(lat), par.e, par.one_es) / par.k0
        return x, y

    def _inverse(self, x, y):
        par = self._par
        p = self._proj_parm
        beta = aasin(2.0 * y * par.k0 / p.qp)
        return x / par.k0, authlat(beta, p.apa)


class CylindricalEqualAreaSpheroid(Projection):

    IDENTIFIER = "cea"
    NAME = "cea_spheroid"
    SHAPE = "spheroid"

    @classmethod
    def setup(cls, par, params):
        return _setup_cea(par, params)

    def _forward(self, lon, lat):
        k0 = self._par.k0
        return k0 * lon, math.sin(lat) / k0

    def _inverse(self, x, y):
        k0 = self._par.k0
        y *= k0
        t = abs(y)
        if t - EPS > 1.0:
            raise DomainError(
                "Point lies beyond the poles of the cylinder.", -20
            )
        if t >= 1.0:
            lat = -HALFPI if y < 0.0 else HALFPI
        else:
            lat = math.asin(y)
        return x / k0, lat
