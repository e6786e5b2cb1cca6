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
Stereographic and Universal Polar Stereographic projections.

Azimuthal, conformal, spheroid and ellipsoid (Snyder, ch. 21).

The aspect is selected from the latitude of origin ``lat_0``:

- ``|lat_0| = 90``: polar (north or south), with optional latitude of
  true scale ``lat_ts`` (default: the pole);
- ``lat_0 = 0``: equatorial;
- otherwise: oblique.

The ellipsoidal oblique and equatorial aspects work on the conformal
latitude. Both polar aspects share one formula, written for the north
pole and mirrored through a hemisphere sign.

UPS is the polar stereographic with ``k0 = 0.994``, false origin
``(2e6, 2e6)`` and ``lon_0 = 0``; ``south`` selects the south pole. It
is only defined on an ellipsoid.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass

from cartoproj.exceptions import ConvergenceFailure, DomainError
from cartoproj.exceptions import InvalidGeometry
from cartoproj.proj.base import Projection
from cartoproj.series import ssfn, tsfn
from cartoproj.utilities import FORTPI, HALFPI


logger = logging.getLogger(__name__)

EPS10 = 1.0e-10
TOL = 1.0e-8
NITER = 8
CONV = 1.0e-10


class StereoMode(enum.Enum):
    S_POLE = 0
    N_POLE = 1
    OBLIQ = 2
    EQUIT = 3

    @property
    def is_polar(self) -> bool:
        return self in (StereoMode.S_POLE, StereoMode.N_POLE)

    @property
    def hemisphere(self) -> float:
        """+1 for the north pole aspect, -1 for the south pole aspect."""
        return -1.0 if self is StereoMode.S_POLE else 1.0


@dataclass(frozen=True)
class StereographicBlock:
    mode: StereoMode
    akm1: float
    sinX1: float = 0.0
    cosX1: float = 1.0


def select_mode(phi0: float) -> StereoMode:
    """Aspect of the projection for a latitude of origin phi0."""
    t = abs(phi0)
    if abs(t - HALFPI) < EPS10:
        return StereoMode.S_POLE if phi0 < 0.0 else StereoMode.N_POLE
    return StereoMode.OBLIQ if t > EPS10 else StereoMode.EQUIT


def setup_stereographic(par, phits: float) -> StereographicBlock:
    """
    Derive the stereographic constants for the global parameters.

    ``phits`` is the latitude of true scale of the polar aspects.
    """
    mode = select_mode(par.phi0)
    phits = abs(phits)
    logger.debug("stere: %s aspect, lat_ts=%.10g rad", mode.name, phits)

    if par.es != 0.0:
        e = par.e
        if mode.is_polar:
            if abs(phits - HALFPI) < EPS10:
                akm1 = 2.0 * par.k0 / math.sqrt(
                    math.pow(1.0 + e, 1.0 + e) * math.pow(1.0 - e, 1.0 - e)
                )
            else:
                t = math.sin(phits)
                akm1 = math.cos(phits) / tsfn(phits, t, e)
                t *= e
                akm1 /= math.sqrt(1.0 - t * t)
            return StereographicBlock(mode=mode, akm1=akm1)

        t = math.sin(par.phi0)
        X = 2.0 * math.atan(ssfn(par.phi0, t, e)) - HALFPI
        t *= e
        akm1 = 2.0 * par.k0 * math.cos(par.phi0) / math.sqrt(1.0 - t * t)
        return StereographicBlock(
            mode=mode, akm1=akm1,
            sinX1=math.sin(X), cosX1=math.cos(X),
        )

    if mode.is_polar:
        if abs(phits - HALFPI) >= EPS10:
            akm1 = math.cos(phits) / math.tan(FORTPI - 0.5 * phits)
        else:
            akm1 = 2.0 * par.k0
        return StereographicBlock(mode=mode, akm1=akm1)

    if mode is StereoMode.OBLIQ:
        return StereographicBlock(
            mode=mode, akm1=2.0 * par.k0,
            sinX1=math.sin(par.phi0), cosX1=math.cos(par.phi0),
        )
    return StereographicBlock(mode=mode, akm1=2.0 * par.k0)


def _setup_stere(par, params):
    phits = params.radians("lat_ts") if params.has("lat_ts") else HALFPI
    return setup_stereographic(par, phits), par


def _setup_ups(par, params):
    phi0 = -HALFPI if params.flag("south") else HALFPI
    if par.es == 0.0:
        raise InvalidGeometry(
            "Universal Polar Stereographic requires an ellipsoid.", -34
        )
    par = par.replace(phi0=phi0, k0=0.994, x0=2000000.0, y0=2000000.0,
                      lam0=0.0)
    return setup_stereographic(par, HALFPI), par


class StereographicEllipsoid(Projection):

    IDENTIFIER = "stere"
    NAME = "stere_ellipsoid"
    SHAPE = "ellipsoid"

    @classmethod
    def setup(cls, par, params):
        return _setup_stere(par, params)

    def _forward(self, lon, lat):
        p = self._proj_parm
        e = self._par.e
        coslam = math.cos(lon)
        sinlam = math.sin(lon)
        sinphi = math.sin(lat)

        if p.mode.is_polar:
            h = p.mode.hemisphere
            lat *= h
            coslam *= h
            sinphi *= h
            if abs(lat + HALFPI) < TOL:
                raise DomainError(
                    "Antipodal pole has no stereographic image.", -20
                )
            x = p.akm1 * tsfn(lat, sinphi, e)
            y = -x * coslam
            return x * sinlam, y

        X = 2.0 * math.atan(ssfn(lat, sinphi, e)) - HALFPI
        sinX = math.sin(X)
        cosX = math.cos(X)
        if p.mode is StereoMode.OBLIQ:
            denom = p.cosX1 * (
                1.0 + p.sinX1 * sinX + p.cosX1 * cosX * coslam
            )
        else:
            denom = 1.0 + cosX * coslam
        if denom <= EPS10:
            raise DomainError(
                "Antipode of the origin has no stereographic image.", -20
            )
        A = p.akm1 / denom
        if p.mode is StereoMode.OBLIQ:
            y = A * (p.cosX1 * sinX - p.sinX1 * cosX * coslam)
        else:
            y = A * sinX
        return A * cosX * sinlam, y

    def _inverse(self, x, y):
        p = self._proj_parm
        e = self._par.e
        rho = math.hypot(x, y)

        if p.mode.is_polar:
            h = p.mode.hemisphere
            y *= -h
            tp = -rho / p.akm1
            phi_l = HALFPI - 2.0 * math.atan(tp)
            halfpi = -HALFPI
            halfe = -0.5 * e
        else:
            tp = 2.0 * math.atan2(rho * p.cosX1, p.akm1)
            cosphi = math.cos(tp)
            sinphi = math.sin(tp)
            if rho == 0.0:
                phi_l = math.asin(cosphi * p.sinX1)
            else:
                phi_l = math.asin(
                    cosphi * p.sinX1 + (y * sinphi * p.cosX1 / rho)
                )
            tp = math.tan(0.5 * (HALFPI + phi_l))
            x *= sinphi
            y = rho * p.cosX1 * cosphi - y * p.sinX1 * sinphi
            halfpi = HALFPI
            halfe = 0.5 * e

        for _ in range(NITER):
            sinphi = e * math.sin(phi_l)
            lat = 2.0 * math.atan(
                tp * math.pow((1.0 + sinphi) / (1.0 - sinphi), halfe)
            ) - halfpi
            if abs(phi_l - lat) < CONV:
                if p.mode is StereoMode.S_POLE:
                    lat = -lat
                lon = 0.0 if (x == 0.0 and y == 0.0) else math.atan2(x, y)
                return lon, lat
            phi_l = lat

        raise ConvergenceFailure(
            "Stereographic inverse latitude did not converge.", -20
        )


class StereographicSpheroid(Projection):

    IDENTIFIER = "stere"
    NAME = "stere_spheroid"
    SHAPE = "spheroid"

    @classmethod
    def setup(cls, par, params):
        return _setup_stere(par, params)

    def _forward(self, lon, lat):
        p = self._proj_parm
        sinphi = math.sin(lat)
        cosphi = math.cos(lat)
        coslam = math.cos(lon)
        sinlam = math.sin(lon)

        if p.mode.is_polar:
            # written for the south pole; the north pole is mirrored
            h = p.mode.hemisphere
            coslam *= -h
            lat *= -h
            if abs(lat - HALFPI) < TOL:
                raise DomainError(
                    "Antipodal pole has no stereographic image.", -20
                )
            r = p.akm1 * math.tan(FORTPI + 0.5 * lat)
            return sinlam * r, r * coslam

        if p.mode is StereoMode.EQUIT:
            denom = 1.0 + cosphi * coslam
        else:
            denom = 1.0 + p.sinX1 * sinphi + p.cosX1 * cosphi * coslam
        if denom <= EPS10:
            raise DomainError(
                "Antipode of the origin has no stereographic image.", -20
            )
        A = p.akm1 / denom
        x = A * cosphi * sinlam
        if p.mode is StereoMode.EQUIT:
            y = A * sinphi
        else:
            y = A * (p.cosX1 * sinphi - p.sinX1 * cosphi * coslam)
        return x, y

    def _inverse(self, x, y):
        p = self._proj_parm
        rh = math.hypot(x, y)
        c = 2.0 * math.atan(rh / p.akm1)
        sinc = math.sin(c)
        cosc = math.cos(c)
        lon = 0.0

        if p.mode is StereoMode.EQUIT:
            if abs(rh) <= EPS10:
                lat = 0.0
            else:
                lat = math.asin(y * sinc / rh)
            if cosc != 0.0 or x != 0.0:
                lon = math.atan2(x * sinc, cosc * rh)
            return lon, lat

        if p.mode is StereoMode.OBLIQ:
            if abs(rh) <= EPS10:
                lat = self._par.phi0
            else:
                lat = math.asin(
                    cosc * p.sinX1 + y * sinc * p.cosX1 / rh
                )
            c = cosc - p.sinX1 * math.sin(lat)
            if c != 0.0 or x != 0.0:
                lon = math.atan2(x * sinc * p.cosX1, c * rh)
            return lon, lat

        h = p.mode.hemisphere
        y *= -h
        if abs(rh) <= EPS10:
            lat = self._par.phi0
        else:
            lat = math.asin(h * cosc)
        lon = 0.0 if (x == 0.0 and y == 0.0) else math.atan2(x, y)
        return lon, lat


class UniversalPolarStereographicEllipsoid(StereographicEllipsoid):

    IDENTIFIER = "ups"
    NAME = "ups_ellipsoid"

    @classmethod
    def setup(cls, par, params):
        return _setup_ups(par, params)


class UniversalPolarStereographicSpheroid(StereographicSpheroid):
    """Registered for completeness; setup always rejects the sphere."""

    IDENTIFIER = "ups"
    NAME = "ups_spheroid"

    @classmethod
    def setup(cls, par, params):
        return _setup_ups(par, params)
