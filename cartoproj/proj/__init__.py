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
Projection formulas and registry.

Each module implements one projection family as subclasses of
:class:`~cartoproj.proj.base.Projection`. Classes are normally obtained
through the registry, which picks the ellipsoidal or spherical variant
for a given figure:

>>> from cartoproj import Ellipsoid
>>> from cartoproj.proj import create_projection
>>> p = create_projection("aea", Ellipsoid.from_name("clrk66"),
...                       {"lat_1": 29.5, "lat_2": 45.5, "lon_0": -96})
"""

from .base import Projection

from .registry import (
    list_projections,
    projection_title,
    resolve_name,
    get_projection_class,
    create_projection,
    clear_caches,
)


__all__ = [
    "Projection",
    "list_projections",
    "projection_title",
    "resolve_name",
    "get_projection_class",
    "create_projection",
    "clear_caches",
]
