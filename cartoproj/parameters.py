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
Projection parameters.

Two kinds of parameters reach a projection:

- **Named parameters** (:class:`ProjectionParams`): the short keys a
  user supplies (``lat_1``, ``lat_ts``, ``alpha``, ``south``, ...).
  Angles are given in degrees. The mere presence of some keys selects
  alternate setup branches, so presence is queried separately from the
  value.

- **Global parameters** (:class:`ProjectionGlobals`): the fields every
  projection shares (figure constants, scale factor, origin, false
  origin). They are derived once from an :class:`Ellipsoid` and the
  named parameters. A projection setup may return an adjusted copy
  (e.g. with the figure forced to a sphere); the input instance is never
  modified.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Iterator, Optional

from cartoproj.exceptions import InvalidGeometry
from cartoproj.ellipsoid import Ellipsoid
from cartoproj.utilities import DEG2RAD, HALFPI, dms2dec


_TRUE_STRINGS = ("", "t", "true", "yes", "y", "1")
_FALSE_STRINGS = ("f", "false", "no", "n", "0")


class ProjectionParams(Mapping):
    """
    Read-only set of named projection parameters.

    Keys are stripped and lowercased. Values may be numbers (degrees
    for angular keys), DMS strings, booleans, or ``None`` for a bare
    presence flag.

    Parameters
    ----------
    params : mapping or None
        Raw key/value pairs.

    Examples
    --------
    >>> p = ProjectionParams({"lat_1": 29.5, "south": None})
    >>> p.has("lat_2"), p.flag("south")
    (False, True)
    """

    def __init__(self, params: Optional[Mapping[str, Any]] = None):
        data = {}
        for key, value in dict(params or {}).items():
            if not isinstance(key, str) or not key.strip():
                raise InvalidGeometry(
                    f"Parameter names must be non-empty strings: {key!r}",
                    -2,
                )
            data[key.strip().lower()] = value
        self._data = data

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ProjectionParams({self._data!r})"

    def has(self, key: str) -> bool:
        """Return True if ``key`` was supplied, whatever its value."""
        return key in self._data

    def flag(self, key: str) -> bool:
        """
        Interpret ``key`` as a boolean switch.

        A bare key (``None``) or a true-like value (``True``, ``1``,
        ``"yes"``, ...) enables the switch; an absent key or a false-like
        value (``False``, ``0``, ``"no"``, ...) disables it.
        """
        if key not in self._data:
            return False
        value = self._data[key]
        if value is None or isinstance(value, bool):
            return value is None or value
        if isinstance(value, int) and value in (0, 1):
            return value == 1
        if isinstance(value, str):
            s = value.strip().lower()
            if s in _TRUE_STRINGS:
                return True
            if s in _FALSE_STRINGS:
                return False
        raise InvalidGeometry(
            f"Parameter {key!r} is not a valid boolean: {value!r}", -2
        )

    def number(self, key: str, default: float = 0.0) -> float:
        """Return ``key`` as a plain float, or ``default`` if absent."""
        if key not in self._data:
            return float(default)
        return self._to_float(key, self._data[key])

    def radians(self, key: str, default: float = 0.0) -> float:
        """
        Return the angle ``key`` (given in degrees) in radians.

        ``default`` is already in radians and is returned unchanged
        when the key is absent.
        """
        if key not in self._data:
            return float(default)
        value = self._data[key]
        if isinstance(value, str):
            return dms2dec(value) * DEG2RAD
        return self._to_float(key, value) * DEG2RAD

    def _to_float(self, key: str, value: Any) -> float:
        if value is None or isinstance(value, bool):
            raise InvalidGeometry(
                f"Parameter {key!r} requires a numeric value.", -2
            )
        try:
            out = float(value)
        except (TypeError, ValueError) as exc:
            raise InvalidGeometry(
                f"Parameter {key!r} is not numeric: {value!r}", -2
            ) from exc
        if not math.isfinite(out):
            raise InvalidGeometry(
                f"Parameter {key!r} is not finite: {value!r}", -2
            )
        return out


@dataclass(frozen=True)
class ProjectionGlobals:
    """
    Global parameters shared by every projection.

    Attributes
    ----------
    a, ra : float
        Equatorial radius and its reciprocal.
    es, e, one_es, rone_es : float
        Figure constants. ``es == 0`` selects spherical formulas.
    k0 : float
        Scale factor at the natural origin.
    phi0, lam0 : float
        Latitude and longitude of origin, radians.
    x0, y0 : float
        False easting and northing, in the unit of ``a``.
    over : bool
        If True, longitudes are not wrapped into [-pi, pi].
    """

    a: float
    ra: float
    es: float
    e: float
    one_es: float
    rone_es: float
    k0: float = 1.0
    phi0: float = 0.0
    lam0: float = 0.0
    x0: float = 0.0
    y0: float = 0.0
    over: bool = False

    @classmethod
    def from_params(
        cls,
        ellipsoid: Ellipsoid,
        params: ProjectionParams,
    ) -> "ProjectionGlobals":
        """
        Build the global parameters from a figure and named parameters.

        Reads ``lat_0``, ``lon_0``, ``x_0``, ``y_0``, ``k_0`` (or ``k``)
        and ``over``.

        Raises
        ------
        InvalidGeometry
            If ``k0`` is not positive or ``lat_0`` exceeds 90 degrees.
        """
        if params.has("k_0"):
            k0 = params.number("k_0")
        else:
            k0 = params.number("k", 1.0)
        if k0 <= 0.0:
            raise InvalidGeometry(f"k0 must be positive, got {k0!r}", -31)

        phi0 = params.radians("lat_0")
        if abs(phi0) > HALFPI + 1e-12:
            raise InvalidGeometry(
                "lat_0 must lie within [-90, 90] degrees.", -19
            )

        return cls(
            a=ellipsoid.a,
            ra=ellipsoid.ra,
            es=ellipsoid.es,
            e=ellipsoid.e,
            one_es=ellipsoid.one_es,
            rone_es=ellipsoid.rone_es,
            k0=k0,
            phi0=phi0,
            lam0=params.radians("lon_0"),
            x0=params.number("x_0"),
            y0=params.number("y_0"),
            over=params.flag("over"),
        )

    @property
    def is_sphere(self) -> bool:
        return self.es == 0.0

    def replace(self, **changes: Any) -> "ProjectionGlobals":
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    def as_sphere(self) -> "ProjectionGlobals":
        """Return a copy whose figure is treated as a sphere of radius a."""
        return replace(self, es=0.0, e=0.0, one_es=1.0, rone_es=1.0)
