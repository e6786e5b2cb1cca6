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
Base class for map projections.

A concrete projection provides three pieces:

- :meth:`Projection.setup`, a classmethod mapping the global and named
  parameters to an immutable parameter block and a (possibly adjusted)
  copy of the global parameters;
- :meth:`Projection._forward`, the closed-form formula on a unit
  figure with longitude already reduced to the central meridian;
- optionally :meth:`Projection._inverse`.

The public :meth:`Projection.forward` and :meth:`Projection.inverse`
wrap the formula with the checks and conversions common to every
projection (range validation, central meridian, false origin, scaling
by the equatorial radius).
"""

from __future__ import annotations

import abc as _abc
import logging
import math
from typing import Any, Mapping, Optional, Tuple

from cartoproj.ellipsoid import Ellipsoid
from cartoproj.exceptions import DomainError, InvalidGeometry
from cartoproj.exceptions import UnsupportedOperation
from cartoproj.parameters import ProjectionGlobals, ProjectionParams
from cartoproj.utilities import HALFPI, adjlon


logger = logging.getLogger(__name__)

_EPS12 = 1.0e-12


class Projection(metaclass=_abc.ABCMeta):
    """
    Forward/inverse evaluator for one projection and figure shape.

    Parameters
    ----------
    ellipsoid : Ellipsoid
        Reference figure. Only read.
    params : mapping or ProjectionParams, optional
        Named projection parameters (angles in degrees).
    identifier : str, optional
        Registry identifier used to create the instance; defaults to
        :attr:`IDENTIFIER`.

    Raises
    ------
    InvalidGeometry
        If setup rejects the parameters. No instance is created.
    """

    #: Registry identifier of the projection family.
    IDENTIFIER: str = ""

    #: ``"ellipsoid"``, ``"spheroid"`` or ``None`` if both are handled.
    SHAPE: Optional[str] = None

    #: False for projections without an inverse.
    HAS_INVERSE: bool = True

    def __init__(
        self,
        ellipsoid: Ellipsoid,
        params: Optional[Mapping[str, Any]] = None,
        identifier: Optional[str] = None,
    ):
        if not isinstance(params, ProjectionParams):
            params = ProjectionParams(params)

        par = ProjectionGlobals.from_params(ellipsoid, params)
        block, par = self.setup(par, params)
        self._check_shape(par)

        self._par = par
        self._proj_parm = block
        self._identifier = identifier or self.IDENTIFIER

        logger.debug(
            "Created %s (es=%.12g, k0=%.12g, lam0=%.12g, phi0=%.12g)",
            self.name, par.es, par.k0, par.lam0, par.phi0,
        )

    # ------------------------------------------------------------------
    # Interface to be provided by concrete projections
    # ------------------------------------------------------------------

    @property
    @_abc.abstractmethod
    def NAME(self):
        pass

    @classmethod
    @_abc.abstractmethod
    def setup(
        cls,
        par: ProjectionGlobals,
        params: ProjectionParams,
    ) -> Tuple[Any, ProjectionGlobals]:
        """
        Derive the parameter block.

        Returns
        -------
        block, par
            Immutable parameter block and the global parameters the
            formulas must run with.
        """

    @_abc.abstractmethod
    def _forward(self, lon: float, lat: float) -> Tuple[float, float]:
        """Formula on the unit figure, lon relative to the central meridian."""

    def _inverse(self, x: float, y: float) -> Tuple[float, float]:
        raise UnsupportedOperation(
            f"Projection {self.name!r} has no inverse."
        )

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        """Name of the formula variant, e.g. ``"stere_ellipsoid"``."""
        return self.NAME

    @property
    def identifier(self) -> str:
        """Registry identifier, e.g. ``"ups"``."""
        return self._identifier

    @property
    def has_inverse(self) -> bool:
        return self.HAS_INVERSE

    @property
    def params(self) -> ProjectionGlobals:
        """Global parameters after setup."""
        return self._par

    @property
    def block(self):
        """Projection specific constants derived by setup."""
        return self._proj_parm

    def forward(self, lon: float, lat: float) -> Tuple[float, float]:
        """
        Project geographic coordinates.

        Parameters
        ----------
        lon, lat : float
            Longitude and latitude in radians.

        Returns
        -------
        x, y : float
            Projected coordinates in the unit of the ellipsoid radius,
            false origin included.

        Raises
        ------
        DomainError
            If the point is out of range or singular for the projection.
        ConvergenceFailure
            If an iterative step of the formula does not converge.
        """
        par = self._par
        lon = float(lon)
        lat = float(lat)
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise DomainError("Non-finite geographic coordinate.", -14)

        t = abs(lat) - HALFPI
        if t > _EPS12 or abs(lon) > 10.0:
            raise DomainError(
                f"Latitude or longitude out of range: ({lon!r}, {lat!r})",
                -14,
            )
        if abs(t) <= _EPS12:
            lat = HALFPI if lat > 0.0 else -HALFPI

        lon -= par.lam0
        if not par.over:
            lon = adjlon(lon)

        x, y = self._forward(lon, lat)
        return par.a * x + par.x0, par.a * y + par.y0

    def inverse(self, x: float, y: float) -> Tuple[float, float]:
        """
        Recover geographic coordinates from projected ones.

        Parameters
        ----------
        x, y : float
            Projected coordinates, false origin included.

        Returns
        -------
        lon, lat : float
            Longitude and latitude in radians.

        Raises
        ------
        UnsupportedOperation
            If the projection defines no inverse.
        DomainError
            If the point lies outside the projected domain.
        ConvergenceFailure
            If an iterative step of the formula does not converge.
        """
        if not self.HAS_INVERSE:
            raise UnsupportedOperation(
                f"Projection {self.name!r} has no inverse."
            )

        par = self._par
        x = float(x)
        y = float(y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise DomainError("Non-finite projected coordinate.", -15)

        x = (x - par.x0) * par.ra
        y = (y - par.y0) * par.ra

        lon, lat = self._inverse(x, y)

        lon += par.lam0
        if not par.over:
            lon = adjlon(lon)
        return lon, lat

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.identifier!r} ({self.name})>"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_shape(self, par: ProjectionGlobals) -> None:
        """
        Make sure the figure after setup matches the formulas used.
        """
        if self.SHAPE == "ellipsoid" and par.es <= 0.0:
            raise InvalidGeometry(
                f"{type(self).__name__} requires an ellipsoidal figure.",
                -34,
            )
        if self.SHAPE == "spheroid" and par.es != 0.0:
            raise InvalidGeometry(
                f"{type(self).__name__} requires a spherical figure.",
                -34,
            )
