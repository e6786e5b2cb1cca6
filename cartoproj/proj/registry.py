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
Projection registry utilities for CartoProj.

This module loads a JSON registry (registry.json) shipped with the package
and provides helpers to resolve a projection by identifier or alias and to
build an evaluator for a given figure.

Registry format
---------------
The JSON file must follow this schema:

{
  "projmap": {
    "<identifier>": {
      "ellipsoid": "<module.path:ClassName>",
      "spheroid": "<module.path:ClassName>",
      "alias": ["<alias1>", "<alias2>", ...],
      "title": "<Human readable name>"
    },
    ...
  }
}

Design notes
------------
- The registry is explicit (no module scanning).
- Identifiers and aliases are lowercase; lookups are case-insensitive.
- Each identifier names one class per figure: the ellipsoidal class is
  used when the eccentricity is non-zero, the spheroidal one otherwise.
  Both pointers may name the same class.
- Projection classes are imported lazily (only when requested).
- The JSON is loaded via importlib.resources to work for installed packages.

Optional override
-----------------
If the environment variable CARTOPROJ_REGISTRY is set to an absolute
filesystem path, that JSON file is loaded instead of the packaged resource.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from importlib import import_module
from importlib import resources as importlib_resources
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from cartoproj.ellipsoid import Ellipsoid
from cartoproj.exceptions import UnknownProjection

from .base import Projection


logger = logging.getLogger(__name__)

_ENV_REGISTRY_PATH = "CARTOPROJ_REGISTRY"
_DEFAULT_RESOURCE = "registry.json"
_SHAPES = ("ellipsoid", "spheroid")


@dataclass(frozen=True)
class _RegistryData:
    """
    Normalized registry data.
    """

    projmap: Dict[str, Dict[str, str]]
    aliases: Dict[str, str]
    titles: Dict[str, str]


# Caches
_REGISTRY_CACHE: Optional[_RegistryData] = None
_CLASS_CACHE: Dict[str, Type[Projection]] = {}


def list_projections() -> List[str]:
    """
    Return the list of canonical projection identifiers in the registry.
    """
    reg = _load_registry()
    return sorted(reg.projmap.keys())


def projection_title(name: str) -> str:
    """
    Return the human readable name of a projection.
    """
    reg = _load_registry()
    canonical = resolve_name(name)
    return reg.titles.get(canonical, canonical)


def resolve_name(name: str) -> str:
    """
    Resolve an identifier or alias to its canonical projection identifier.

    Parameters
    ----------
    name
        Canonical identifier or alias (case-insensitive).

    Returns
    -------
    str
        Canonical identifier.

    Raises
    ------
    UnknownProjection
        If `name` is unknown.
    """
    if not isinstance(name, str) or not name.strip():
        raise UnknownProjection("Projection name must be a non-empty string.")

    key = name.strip().lower()
    reg = _load_registry()
    if key in reg.projmap:
        return key

    canonical = reg.aliases.get(key)
    if canonical is None:
        available = ", ".join(list_projections())
        raise UnknownProjection(
            f"Unknown projection {name!r}. Available: {available}"
        )
    return canonical


def get_projection_class(
    name: str,
    ellipsoidal: bool = True,
) -> Type[Projection]:
    """
    Resolve a projection identifier to its class (lazy import).

    Parameters
    ----------
    name
        Canonical identifier or alias.
    ellipsoidal
        If True, return the class for a figure with non-zero
        eccentricity, otherwise the spherical one.

    Returns
    -------
    Type[Projection]
        The resolved projection class.

    Raises
    ------
    UnknownProjection
        If `name` is unknown.
    ImportError
        If the module/class cannot be imported.
    TypeError
        If the resolved object is not a Projection subclass.
    """
    canonical = resolve_name(name)
    shape = _SHAPES[0] if ellipsoidal else _SHAPES[1]

    reg = _load_registry()
    pointer = reg.projmap[canonical][shape]

    if pointer in _CLASS_CACHE:
        return _CLASS_CACHE[pointer]

    module_name, class_name = _split_pointer(pointer)

    module = import_module(module_name)
    cls = getattr(module, class_name, None)

    if cls is None:
        raise ImportError(
            f"Projection class {class_name!r} not found in module "
            f"{module_name!r} (pointer={pointer!r})."
        )

    if not isinstance(cls, type) or not issubclass(cls, Projection):
        raise TypeError(
            f"Resolved object {module_name}:{class_name} is not a "
            f"Projection subclass."
        )

    logger.debug("Resolved %s (%s) to %s", canonical, shape, pointer)
    _CLASS_CACHE[pointer] = cls
    return cls


def create_projection(
    name: str,
    ellipsoid: Ellipsoid,
    params: Optional[Mapping[str, Any]] = None,
) -> Projection:
    """
    Instantiate a projection by identifier or alias.

    The ellipsoidal or spherical variant is selected from the
    eccentricity of `ellipsoid`.

    Parameters
    ----------
    name
        Canonical identifier or alias.
    ellipsoid
        Reference figure.
    params
        Named projection parameters (angles in degrees).

    Returns
    -------
    Projection
        Ready to use evaluator.

    Raises
    ------
    UnknownProjection
        If `name` is unknown.
    ProjectionError
        Any setup failure of the projection, unchanged.
    """
    canonical = resolve_name(name)
    cls = get_projection_class(canonical, ellipsoidal=ellipsoid.es > 0.0)
    return cls(ellipsoid, params, identifier=canonical)


def clear_caches() -> None:
    """
    Clear registry and class caches (mainly for tests).
    """
    global _REGISTRY_CACHE
    _REGISTRY_CACHE = None
    _CLASS_CACHE.clear()


# ---------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------

def _load_registry() -> _RegistryData:
    """
    Load and normalize the registry from JSON (with caching).
    """
    global _REGISTRY_CACHE
    if _REGISTRY_CACHE is not None:
        return _REGISTRY_CACHE

    raw = _read_registry_json()
    reg = _normalize_registry(raw)

    logger.debug("Loaded projection registry with %d entries",
                 len(reg.projmap))
    _REGISTRY_CACHE = reg
    return reg


def _read_registry_json() -> Mapping[str, Any]:
    """
    Read the registry JSON from an override path or package resources.
    """
    override = os.environ.get(_ENV_REGISTRY_PATH, "").strip()
    if override:
        logger.debug("Reading projection registry from %s", override)
        with open(override, "r", encoding="utf-8") as f:
            return json.load(f)

    # Load packaged registry.json (same package as this module)
    data = importlib_resources.files(__package__).joinpath(_DEFAULT_RESOURCE)
    with data.open("r", encoding="utf-8") as f:
        return json.load(f)


def _normalize_registry(raw: Mapping[str, Any]) -> _RegistryData:
    """
    Validate and normalize the raw JSON registry into fast lookup maps.

    Returns
    -------
    _RegistryData
        - projmap: canonical -> {shape: pointer}
        - aliases: alias -> canonical
        - titles: canonical -> title
    """
    if not isinstance(raw, Mapping):
        raise TypeError("registry.json must contain a JSON object at top level.")

    projmap_raw = raw.get("projmap")
    if not isinstance(projmap_raw, Mapping):
        raise TypeError("registry.json must contain a 'projmap' object.")

    projmap: Dict[str, Dict[str, str]] = {}
    aliases: Dict[str, str] = {}
    titles: Dict[str, str] = {}

    # Collect canonical pointers first
    for canonical, entry in projmap_raw.items():
        if not isinstance(canonical, str) or not canonical.strip():
            raise ValueError(
                "Canonical projection names must be non-empty strings."
            )
        if canonical != canonical.strip().lower():
            raise ValueError(
                f"Canonical projection name {canonical!r} must be lowercase."
            )

        if not isinstance(entry, Mapping):
            raise TypeError(
                f"Registry entry for {canonical!r} must be an object."
            )

        pointers: Dict[str, str] = {}
        for shape in _SHAPES:
            pointer = entry.get(shape)
            if not isinstance(pointer, str) or not pointer.strip():
                raise ValueError(
                    f"Registry entry for {canonical!r} must contain a "
                    f"non-empty {shape!r} string."
                )
            # Validate pointer format early
            _split_pointer(pointer)
            pointers[shape] = pointer.strip()

        if canonical in projmap:
            raise ValueError(f"Duplicate projection name: {canonical!r}")

        projmap[canonical] = pointers
        titles[canonical] = str(entry.get("title", canonical))

    # Build alias map
    for canonical, entry in projmap_raw.items():
        alias_list = entry.get("alias", [])
        if alias_list is None:
            alias_list = []

        if not isinstance(alias_list, list):
            raise TypeError(
                f"'alias' for {canonical!r} must be a list of strings."
            )

        for alias in alias_list:
            if not isinstance(alias, str) or not alias.strip():
                raise ValueError(
                    f"Invalid alias for {canonical!r}: {alias!r}"
                )
            alias = alias.strip().lower()

            if alias in projmap and alias != canonical:
                raise ValueError(
                    f"Alias {alias!r} collides with a canonical "
                    f"projection name."
                )

            prev = aliases.get(alias)
            if prev is not None and prev != canonical:
                raise ValueError(
                    f"Alias {alias!r} is defined for multiple projections: "
                    f"{prev!r}, {canonical!r}"
                )

            aliases[alias] = canonical

    return _RegistryData(projmap=projmap, aliases=aliases, titles=titles)


def _split_pointer(pointer: str) -> Tuple[str, str]:
    """
    Split and validate a 'module.path:ClassName' pointer.
    """
    if ":" not in pointer:
        raise ValueError(
            f"Invalid projection pointer {pointer!r}. "
            f"Expected 'module:ClassName'."
        )

    module_name, class_name = pointer.split(":", 1)
    module_name = module_name.strip()
    class_name = class_name.strip()

    if not module_name or not class_name:
        raise ValueError(
            f"Invalid projection pointer {pointer!r}. "
            f"Expected 'module:ClassName'."
        )

    return module_name, class_name
