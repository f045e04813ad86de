"""Shared type aliases for geometry and tooltip data.

Coordinates follow the host's convention: ``(x, y, z)`` with ``y`` as the
elevation and ``(x, z)`` as the horizontal (planar) plane.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Literal, TypeAlias

Point3D: TypeAlias = tuple[float, float, float]
Vector3D: TypeAlias = tuple[float, float, float]
Vector2D: TypeAlias = tuple[float, float]
ScreenPoint: TypeAlias = tuple[float, float]

# Host entity handle (edge or node). Opaque to the core; only compared
# for equality and used as a lookup key.
EntityId: TypeAlias = Hashable

UnitSuffix: TypeAlias = Literal['m', '°', '%', '']
