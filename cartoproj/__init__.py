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
CartoProj
=========

Forward and inverse map projections on the sphere and the ellipsoid.

This module re-exports the public API from the submodules (ellipsoid,
parameters, exceptions, utilities and the projection registry) so it
can be used directly from :mod:`cartoproj`.

Example
-------
>>> import math
>>> from cartoproj import Ellipsoid, create
>>> p = create("stere", Ellipsoid.from_name("WGS84"), {"lat_0": 90})
>>> x, y = p.forward(math.radians(10.0), math.radians(80.0))
>>> lon, lat = p.inverse(x, y)
"""

from .exceptions import (
    ProjectionError,
    InvalidGeometry,
    ConvergenceFailure,
    DomainError,
    UnsupportedOperation,
    UnknownProjection,
)

from .utilities import (
    HALFPI,
    FORTPI,
    ONEPI,
    TWOPI,
    DEG2RAD,
    RAD2DEG,
    adjlon,
    aasin,
    aacos,
    asqrt,
    dms2dec,
)

from .ellipsoid import (
    ELLIPSOIDS,
    WGS84,
    Ellipsoid,
)

from .parameters import (
    ProjectionParams,
    ProjectionGlobals,
)

from .proj import (
    Projection,
    list_projections,
    projection_title,
    resolve_name,
    get_projection_class,
    create_projection,
    clear_caches,
)

#: Short alias of :func:`create_projection`.
create = create_projection

__version__ = "0.1.0"


__all__ = [
    # errors
    "ProjectionError",
    "InvalidGeometry",
    "ConvergenceFailure",
    "DomainError",
    "UnsupportedOperation",
    "UnknownProjection",
    # angular helpers
    "HALFPI",
    "FORTPI",
    "ONEPI",
    "TWOPI",
    "DEG2RAD",
    "RAD2DEG",
    "adjlon",
    "aasin",
    "aacos",
    "asqrt",
    "dms2dec",
    # figures and parameters
    "ELLIPSOIDS",
    "WGS84",
    "Ellipsoid",
    "ProjectionParams",
    "ProjectionGlobals",
    # projections
    "Projection",
    "list_projections",
    "projection_title",
    "resolve_name",
    "get_projection_class",
    "create_projection",
    "create",
    "clear_caches",
]
