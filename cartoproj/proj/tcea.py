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
Transverse Cylindrical Equal Area.

Cylindrical, spheroid only: any ellipsoid is treated as a sphere of
radius ``a``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from cartoproj.exceptions import DomainError
from cartoproj.proj.base import Projection
from cartoproj.utilities import aasin, asqrt


logger = logging.getLogger(__name__)

EPS10 = 1.0e-10


@dataclass(frozen=True)
class TransverseCylindricalEqualAreaBlock:
    rk0: float


class TransverseCylindricalEqualArea(Projection):

    IDENTIFIER = "tcea"
    NAME = "tcea_spheroid"
    SHAPE = "spheroid"

    @classmethod
    def setup(cls, par, params):
        if par.es != 0.0:
            logger.debug("tcea: figure forced to a sphere of radius %g",
                         par.a)
        block = TransverseCylindricalEqualAreaBlock(rk0=1.0 / par.k0)
        return block, par.as_sphere()

    def _forward(self, lon, lat):
        par = self._par
        x = self._proj_parm.rk0 * math.cos(lat) * math.sin(lon)
        y = par.k0 * (math.atan2(math.tan(lat), math.cos(lon)) - par.phi0)
        return x, y

    def _inverse(self, x, y):
        par = self._par
        y = y * self._proj_parm.rk0 + par.phi0
        x *= par.k0
        if abs(x) > 1.0 + EPS10:
            raise DomainError("Point lies outside the projected domain.", -20)
        t = asqrt(1.0 - x * x)
        lat = aasin(t * math.sin(y))
        lon = math.atan2(x, t * math.cos(y))
        return lon, lat
