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
Reference figures of the Earth.

An :class:`Ellipsoid` is defined by its equatorial radius ``a`` and its
flattening ``f``. All other shape constants used by the projection
formulas (``b``, ``e``, ``es``, ``one_es``, ...) are derived on demand.
The sphere is the special case ``f = 0``.

Instances are immutable and validated at construction time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from cartoproj.exceptions import InvalidGeometry


# ============================================================================
# WGS84 ellipsoid parameters
# ============================================================================


WGS84_A: float = 6378137.0              # semi-major axis [m]
WGS84_F: float = 1.0 / 298.257223563    # flattening [-]


#: Named figures as ``(a, 1/f)``; an inverse flattening of 0 denotes a
#: sphere.
ELLIPSOIDS: Dict[str, Tuple[float, float]] = {
    "wgs84": (WGS84_A, 298.257223563),
    "grs80": (6378137.0, 298.257222101),
    "intl": (6378388.0, 297.0),
    "clrk66": (6378206.4, 294.978698213898),
    "bessel": (6377397.155, 299.1528128),
    "sphere": (6370997.0, 0.0),
}


@dataclass(frozen=True)
class Ellipsoid:
    """
    Ellipsoid of revolution.

    Attributes
    ----------
    a : float
        Equatorial (semi-major) radius, in the linear unit of the
        projected coordinates.
    f : float
        Flattening ``(a - b) / a``; 0 for a sphere.
    name : str or None
        Optional label.
    """

    a: float
    f: float = 0.0
    name: Optional[str] = None

    def __post_init__(self) -> None:
        a = float(self.a)
        f = float(self.f)
        if not math.isfinite(a) or a <= 0.0:
            raise InvalidGeometry(
                f"Ellipsoid radius must be positive, got {self.a!r}", -27
            )
        if not math.isfinite(f) or f < 0.0 or f >= 1.0:
            raise InvalidGeometry(
                f"Ellipsoid flattening must be in [0, 1), got {self.f!r}",
                -13,
            )
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "f", f)

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def sphere(cls, radius: float = 6370997.0) -> "Ellipsoid":
        """Sphere of the given radius."""
        return cls(a=radius, f=0.0, name="sphere")

    @classmethod
    def from_axes(cls, a: float, b: float, name=None) -> "Ellipsoid":
        """Ellipsoid from its semi-major and semi-minor axes."""
        if b <= 0.0 or b > a:
            raise InvalidGeometry(
                f"Semi-minor axis must be in (0, a], got {b!r}", -13
            )
        return cls(a=a, f=(a - b) / a, name=name)

    @classmethod
    def from_name(cls, name: str) -> "Ellipsoid":
        """
        Ellipsoid from the :data:`ELLIPSOIDS` table (case-insensitive).

        Raises
        ------
        KeyError
            If ``name`` is not tabulated.
        """
        key = str(name).strip().lower()
        if key not in ELLIPSOIDS:
            available = ", ".join(sorted(ELLIPSOIDS))
            raise KeyError(
                f"Unknown ellipsoid {name!r}. Available: {available}"
            )
        a, rf = ELLIPSOIDS[key]
        return cls(a=a, f=(1.0 / rf if rf else 0.0), name=key)

    # ------------------------------------------------------------------
    # Derived constants
    # ------------------------------------------------------------------

    @property
    def b(self) -> float:
        """Polar (semi-minor) radius."""
        return self.a * (1.0 - self.f)

    @property
    def es(self) -> float:
        """First eccentricity squared."""
        return self.f * (2.0 - self.f)

    @property
    def e(self) -> float:
        """First eccentricity."""
        return math.sqrt(self.es)

    @property
    def one_es(self) -> float:
        return 1.0 - self.es

    @property
    def rone_es(self) -> float:
        return 1.0 / self.one_es

    @property
    def ra(self) -> float:
        return 1.0 / self.a

    @property
    def is_sphere(self) -> bool:
        return self.es == 0.0


#: WGS84 reference ellipsoid.
WGS84 = Ellipsoid.from_name("WGS84")
