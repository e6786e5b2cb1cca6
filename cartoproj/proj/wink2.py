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
Winkel II.

Pseudocylindrical, spheroid only, forward only. Averages a Mollweide
style latitude with an equirectangular one; ``lat_1`` sets the
standard parallel of the equirectangular part.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from cartoproj.exceptions import ConvergenceFailure
from cartoproj.proj.base import Projection
from cartoproj.utilities import FORTPI, HALFPI, ONEPI, TWO_D_PI


logger = logging.getLogger(__name__)

MAX_ITER = 10
LOOP_TOL = 1.0e-7

# Distance from +-pi inside which the Newton step stalls and the
# auxiliary angle is taken at the pole.
POLAR_BAND = 0.05


@dataclass(frozen=True)
class WinkelBlock:
    cosphi1: float


def mollweide_theta(lat: float) -> float:
    """
    Solve ``theta + sin(theta) = pi sin(lat)`` and return ``theta / 2``.

    Raises
    ------
    ConvergenceFailure
        If Newton's method does not settle within :data:`MAX_ITER`
        steps away from the poles. Close to the poles, where the root
        is triple and convergence is only linear, the result is
        clamped to +-pi/2.
    """
    k = ONEPI * math.sin(lat)
    theta = 1.8 * lat
    for _ in range(MAX_ITER):
        den = 1.0 + math.cos(theta)
        if den == 0.0:
            break
        v = (theta + math.sin(theta) - k) / den
        theta -= v
        if abs(v) < LOOP_TOL:
            return 0.5 * theta

    if ONEPI - abs(theta) < POLAR_BAND:
        return -HALFPI if theta < 0.0 else HALFPI
    raise ConvergenceFailure(
        f"Winkel II latitude did not converge for lat={lat!r}"
    )


class Winkel2(Projection):

    IDENTIFIER = "wink2"
    NAME = "wink2_spheroid"
    SHAPE = "spheroid"
    HAS_INVERSE = False

    @classmethod
    def setup(cls, par, params):
        block = WinkelBlock(cosphi1=math.cos(params.radians("lat_1")))
        if par.es != 0.0:
            logger.debug("wink2: figure forced to a sphere of radius %g",
                         par.a)
        return block, par.as_sphere()

    def _forward(self, lon, lat):
        y = lat * TWO_D_PI
        theta = mollweide_theta(lat)
        x = 0.5 * lon * (math.cos(theta) + self._proj_parm.cosphi1)
        y = FORTPI * (math.sin(theta) + y)
        return x, y
