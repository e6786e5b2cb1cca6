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
Error taxonomy for CartoProj.

Every failure raised by the projection layer derives from
:class:`ProjectionError` and carries an integer ``code``. Codes follow
the historical PROJ numbering, so that a failure can be matched against
the classic error table:

====  ========================================================
code  meaning
====  ========================================================
   0  degenerate setup (no specific PROJ number)
  -2  malformed named parameter
 -14  latitude or longitude exceeds its valid range
 -15  invalid x or y on inverse input
 -19  argument of an inverse trigonometric function out of range
 -20  tolerance condition (point outside the projection domain)
 -21  conic ``lat_1 = -lat_2``
 -24  ``lat_ts`` beyond 90 degrees
 -31  non-positive scale factor
 -34  ellipsoidal figure required
 -40  no inverse available
 -90  unknown projection identifier
====  ========================================================

Each concrete class also inherits from the closest builtin exception,
so callers that only know the standard hierarchy (``ValueError``,
``KeyError``, ...) keep working.
"""


class ProjectionError(Exception):
    """
    Base class for all projection failures.

    Parameters
    ----------
    message : str
        Human readable description.
    code : int, optional
        PROJ-style error number. Subclasses provide a default.
    """

    default_code = 0

    def __init__(self, message, code=None):
        super().__init__(message)
        self.message = message
        self.code = self.default_code if code is None else int(code)

    def __str__(self):
        return f"{self.message} (code {self.code})"


class InvalidGeometry(ProjectionError, ValueError):
    """Raised when a setup-time geometric precondition is violated."""

    default_code = 0


class ConvergenceFailure(ProjectionError, ArithmeticError):
    """Raised when an iterative solver exhausts its iteration budget."""

    default_code = -20


class DomainError(ProjectionError, ValueError):
    """Raised when a single point lies outside the projection domain."""

    default_code = -20


class UnsupportedOperation(ProjectionError, NotImplementedError):
    """Raised when a projection does not define the requested transform."""

    default_code = -40


class UnknownProjection(ProjectionError, KeyError):
    """Raised on registry lookup of an unknown projection identifier."""

    default_code = -90

    def __str__(self):
        # KeyError would otherwise repr() the message
        return ProjectionError.__str__(self)
