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
Core angular utilities for CartoProj.

This module contains low–level constants and angle helpers that do not
depend on any projection. It is intended to be small, stable and
reusable across the library.

Conventions
----------
* Projection formulas work in radians. Degrees only appear at the
  boundary (named parameters and DMS strings).
* The guarded inverse trigonometric helpers (:func:`aasin`,
  :func:`aacos`, :func:`asqrt`) tolerate arguments that overshoot
  their domain by round-off only; anything larger is reported as a
  :class:`~cartoproj.exceptions.DomainError`.
"""

from __future__ import annotations

import math
import re

from cartoproj.exceptions import DomainError, InvalidGeometry



# -----------------------------------------------------------------------------
# Angular constants
# -----------------------------------------------------------------------------


#: pi / 2
HALFPI: float = 0.5 * math.pi

#: pi / 4
FORTPI: float = 0.25 * math.pi

#: pi
ONEPI: float = math.pi

#: 2 pi
TWOPI: float = 2.0 * math.pi

#: 2 / pi
TWO_D_PI: float = 2.0 / math.pi

#: Degrees–to–radians conversion factor.
DEG2RAD: float = math.pi / 180.0

#: Radians–to–degrees conversion factor.
RAD2DEG: float = 180.0 / math.pi

# Slightly above pi: longitudes up to this value are left untouched.
_SPI: float = 3.14159265359

# Overshoot accepted by the guarded inverse trig functions.
_ONE_TOL: float = 1.00000000000001


# -----------------------------------------------------------------------------
# Longitude wrapping
# -----------------------------------------------------------------------------


def adjlon(lon: float) -> float:
    """
    Wrap a longitude in radians into [-pi, pi].

    Values already within (slightly more than) pi in magnitude are
    returned unchanged, so that +pi and -pi both survive.
    """
    if abs(lon) <= _SPI:
        return lon
    lon += ONEPI
    lon -= TWOPI * math.floor(lon / TWOPI)
    lon -= ONEPI
    return lon


# -----------------------------------------------------------------------------
# Guarded inverse trigonometry
# -----------------------------------------------------------------------------


def aasin(v: float) -> float:
    """
    Arc sine that absorbs round-off overshoot of the argument.

    Raises
    ------
    DomainError
        If ``|v|`` exceeds 1 by more than round-off.
    """
    av = abs(v)
    if av >= 1.0:
        if av > _ONE_TOL:
            raise DomainError(f"asin argument out of range: {v!r}", -19)
        return HALFPI if v > 0.0 else -HALFPI
    return math.asin(v)


def aacos(v: float) -> float:
    """
    Arc cosine that absorbs round-off overshoot of the argument.

    Raises
    ------
    DomainError
        If ``|v|`` exceeds 1 by more than round-off.
    """
    av = abs(v)
    if av >= 1.0:
        if av > _ONE_TOL:
            raise DomainError(f"acos argument out of range: {v!r}", -19)
        return 0.0 if v > 0.0 else ONEPI
    return math.acos(v)


def asqrt(v: float) -> float:
    """Square root returning 0 for negative arguments."""
    return 0.0 if v <= 0.0 else math.sqrt(v)


# -----------------------------------------------------------------------------
# Parsing helpers
# -----------------------------------------------------------------------------


def dms2dec(value) -> float:
    """
    Convert degrees-minutes-seconds notation to decimal degrees.

    This helper accepts both plain decimal strings (e.g. ``"12.5"``)
    and DMS-like strings with arbitrary separators, such as::

        "12°34'56.7\\""
        "12 34 56.7N"
        "-12:34:56.7"
        "12°34'S"

    If a hemisphere letter is present (N, S, E, W), it controls the
    sign of the result and overrides any explicit sign on the degrees.
    A leading minus on the degrees applies to the whole angle. For
    numeric inputs, the value is returned unchanged as float.

    Parameters
    ----------
    value : float, int or str
        Angle in decimal degrees or DMS notation.

    Returns
    -------
    float
        Angle in decimal degrees.

    Raises
    ------
    InvalidGeometry
        If the string cannot be parsed.
    """
    if not isinstance(value, str):
        return float(value)

    s = value.strip().upper().replace(",", ".")
    if not s:
        raise InvalidGeometry("Empty DMS string.", -2)

    hemi_sign = 1.0
    has_hemi = False
    if s[-1] in ("N", "E", "S", "W"):
        hemi = s[-1]
        has_hemi = True
        s = s[:-1].strip()
        if hemi in ("S", "W"):
            hemi_sign = -1.0

    parts = [p for p in re.split(r"[^\d.+-]+", s) if p]
    if not parts:
        raise InvalidGeometry(f"Cannot parse DMS string: {value!r}", -2)

    try:
        nums = [float(p) for p in parts]
    except ValueError as exc:
        raise InvalidGeometry(
            f"Cannot parse DMS string: {value!r}", -2
        ) from exc

    if has_hemi:
        sign = hemi_sign
    else:
        sign = -1.0 if parts[0].startswith("-") else 1.0
    nums = [abs(x) for x in nums]

    if len(nums) == 1:
        dec = nums[0]
    elif len(nums) == 2:
        deg, minute = nums
        dec = deg + minute / 60.0
    else:
        deg, minute, sec = nums[:3]
        dec = deg + minute / 60.0 + sec / 3600.0

    return float(dec * sign)
