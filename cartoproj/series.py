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
Auxiliary latitude helpers shared by the projection formulas.

Every ellipsoidal projection reduces to one of a few canonical
auxiliary-latitude transforms:

- **authalic** (equal-area): :func:`qsfn`, :func:`authset`,
  :func:`authlat`, :func:`phi1_`
- **meridian distance**: :func:`enfn`, :func:`mlfn`, :func:`inv_mlfn`,
  :func:`msfn`
- **conformal / isometric**: :func:`ssfn`, :func:`tsfn`

All functions operate on scalars in radians. Coefficient tables are
returned as read-only numpy arrays computed once per figure.

Iterative solvers raise
:class:`~cartoproj.exceptions.ConvergenceFailure` when their iteration
budget is exhausted instead of returning a sentinel value.

References
----------
Snyder, J.P. (1987). Map Projections - A Working Manual.
USGS Professional Paper 1395.
"""

from __future__ import annotations

import math

import numpy as np

from cartoproj.exceptions import ConvergenceFailure, InvalidGeometry
from cartoproj.utilities import HALFPI


# Below this eccentricity the figure is handled as a sphere.
_E_SPHERE = 1.0e-7

# Authalic series coefficients (third order in es).
_P00 = 0.33333333333333333333
_P01 = 0.17222222222222222222
_P02 = 0.10257936507936507936
_P10 = 0.06388888888888888888
_P11 = 0.06640211640211640211
_P20 = 0.01641501294219154443

# Meridian distance series coefficients.
_C00 = 1.0
_C02 = 0.25
_C04 = 0.046875
_C06 = 0.01953125
_C08 = 0.01068115234375
_C22 = 0.75
_C44 = 0.46875
_C46 = 0.01302083333333333333
_C48 = 0.00712076822916666666
_C66 = 0.36458333333333333333
_C68 = 0.00569661458333333333
_C88 = 0.3076171875

PHI1_MAX_ITER = 15
PHI1_TOL = 1.0e-10

INV_MLFN_MAX_ITER = 10
INV_MLFN_TOL = 1.0e-11


def _frozen(values) -> np.ndarray:
    arr = np.array(values, dtype=float)
    arr.setflags(write=False)
    return arr


# ============================================================================
# Authalic latitude
# ============================================================================


def qsfn(sinphi: float, e: float, one_es: float) -> float:
    """
    Authalic quantity q for a given sine of latitude.

    Parameters
    ----------
    sinphi : float
        Sine of the geodetic latitude.
    e : float
        First eccentricity.
    one_es : float
        ``1 - e**2``.

    Returns
    -------
    float
        ``q``; equals ``2 sinphi`` on the sphere.
    """
    if e >= _E_SPHERE:
        con = e * sinphi
        return one_es * (
            sinphi / (1.0 - con * con)
            - (0.5 / e) * math.log((1.0 - con) / (1.0 + con))
        )
    return sinphi + sinphi


def authset(es: float) -> np.ndarray:
    """
    Coefficients of the inverse authalic latitude series.

    Parameters
    ----------
    es : float
        Eccentricity squared.

    Returns
    -------
    numpy.ndarray
        Read-only array of three coefficients for :func:`authlat`.

    Raises
    ------
    InvalidGeometry
        If ``es`` is not a valid eccentricity squared.
    """
    if not math.isfinite(es) or es < 0.0 or es >= 1.0:
        raise InvalidGeometry(
            f"Cannot build authalic coefficients for es={es!r}"
        )
    t = es * es
    apa0 = es * _P00 + t * _P01
    apa1 = t * _P10
    t *= es
    apa0 += t * _P02
    apa1 += t * _P11
    apa2 = t * _P20
    return _frozen((apa0, apa1, apa2))


def authlat(beta: float, apa: np.ndarray) -> float:
    """
    Geodetic latitude from authalic latitude ``beta``.

    Truncated Fourier series using the coefficients from
    :func:`authset`. The error of the truncation grows as ``es**4``:
    about 1e-9 rad at e=0.1, 4e-7 rad at e=0.2 and 1e-5 rad at e=0.3.
    """
    t = beta + beta
    return float(
        beta
        + apa[0] * math.sin(t)
        + apa[1] * math.sin(t + t)
        + apa[2] * math.sin(t + t + t)
    )


def authalic_latitude(phi: float, e: float, one_es: float) -> float:
    """
    Authalic latitude of the geodetic latitude ``phi``.

    This is the forward counterpart of :func:`authlat`:
    ``asin(q(phi) / q(pi/2))``.
    """
    qp = qsfn(1.0, e, one_es)
    ratio = qsfn(math.sin(phi), e, one_es) / qp
    return math.asin(max(-1.0, min(1.0, ratio)))


def phi1_(qs: float, e: float, one_es: float) -> float:
    """
    Geodetic latitude from the authalic quantity by Newton iteration.

    Parameters
    ----------
    qs : float
        Authalic quantity, as returned by :func:`qsfn`.
    e : float
        First eccentricity.
    one_es : float
        ``1 - e**2``.

    Returns
    -------
    float
        Latitude in radians.

    Raises
    ------
    ConvergenceFailure
        If ``qs`` admits no starting value, the iterate is not finite,
        or the step is still above tolerance after
        :data:`PHI1_MAX_ITER` iterations.
    """
    half = 0.5 * qs
    if not math.isfinite(half) or abs(half) > 1.0:
        raise ConvergenceFailure(
            f"Authalic quantity {qs!r} out of solvable range"
        )
    phi = math.asin(half)
    if e < _E_SPHERE:
        return phi

    for _ in range(PHI1_MAX_ITER):
        sinpi = math.sin(phi)
        cospi = math.cos(phi)
        con = e * sinpi
        com = 1.0 - con * con
        dphi = 0.5 * com * com / cospi * (
            qs / one_es
            - sinpi / com
            + 0.5 / e * math.log((1.0 - con) / (1.0 + con))
        )
        phi += dphi
        if not math.isfinite(phi):
            break
        if abs(dphi) <= PHI1_TOL:
            return phi

    raise ConvergenceFailure(
        f"Authalic latitude did not converge for qs={qs!r}"
    )


# ============================================================================
# Meridian distance
# ============================================================================


def enfn(es: float) -> np.ndarray:
    """
    Coefficients of the meridian distance series for ``es``.

    Returns
    -------
    numpy.ndarray
        Read-only array of five coefficients for :func:`mlfn`.
    """
    en0 = _C00 - es * (_C02 + es * (_C04 + es * (_C06 + es * _C08)))
    en1 = es * (_C22 - es * (_C04 + es * (_C06 + es * _C08)))
    t = es * es
    en2 = t * (_C44 - es * (_C46 + es * _C48))
    t *= es
    en3 = t * (_C66 - es * _C68)
    en4 = t * es * _C88
    return _frozen((en0, en1, en2, en3, en4))


def mlfn(phi: float, sphi: float, cphi: float, en: np.ndarray) -> float:
    """
    Meridian distance from the equator to ``phi`` on a unit ellipsoid.

    ``sphi`` and ``cphi`` are the sine and cosine of ``phi``.
    """
    cphi *= sphi
    sphi *= sphi
    return float(
        en[0] * phi
        - cphi * (en[1] + sphi * (en[2] + sphi * (en[3] + sphi * en[4])))
    )


def inv_mlfn(arg: float, es: float, en: np.ndarray) -> float:
    """
    Latitude whose meridian distance is ``arg`` (unit ellipsoid).

    Raises
    ------
    ConvergenceFailure
        If the Newton iteration does not settle within
        :data:`INV_MLFN_MAX_ITER` steps.
    """
    k = 1.0 / (1.0 - es)
    phi = arg
    for _ in range(INV_MLFN_MAX_ITER):
        s = math.sin(phi)
        t = 1.0 - es * s * s
        t = (mlfn(phi, s, math.cos(phi), en) - arg) * (t * math.sqrt(t)) * k
        phi -= t
        if abs(t) < INV_MLFN_TOL:
            return phi
    raise ConvergenceFailure(
        f"Inverse meridian distance did not converge for {arg!r}", -17
    )


def msfn(sinphi: float, cosphi: float, es: float) -> float:
    """Radius of the parallel at latitude phi on a unit ellipsoid."""
    return cosphi / math.sqrt(1.0 - es * sinphi * sinphi)


# ============================================================================
# Conformal latitude
# ============================================================================


def tsfn(phi: float, sinphi: float, e: float) -> float:
    """
    Isometric colatitude function ``t`` (Snyder eq. 15-9).

    Decreases from infinity at the south pole to 0 at the north pole.
    """
    sinphi *= e
    return math.tan(0.5 * (HALFPI - phi)) / math.pow(
        (1.0 - sinphi) / (1.0 + sinphi), 0.5 * e
    )


def ssfn(phit: float, sinphi: float, e: float) -> float:
    """
    Conformal auxiliary function used by the stereographic projection.

    ``2 atan(ssfn(phi, sin(phi), e)) - pi/2`` is the conformal latitude
    of ``phi``.
    """
    sinphi *= e
    return math.tan(0.5 * (HALFPI + phit)) * math.pow(
        (1.0 - sinphi) / (1.0 + sinphi), 0.5 * e
    )
