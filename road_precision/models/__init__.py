"""Data models for Road Precision."""

from .types import Point3D, Vector3D, Vector2D, ScreenPoint, EntityId, UnitSuffix
from .network import CubicBezier, EdgeData, NodeData, PathPoint, GeometryProvider
from .course import (
    CoursePosFlags,
    CreationFlags,
    EXCLUDED_CREATION_FLAGS,
    CoursePosition,
    NetCourse,
)
from .tooltip_data import (
    TooltipCategory,
    TooltipAnchor,
    ReferenceTooltip,
    RefinedTooltip,
    AngleCandidate,
)
from .settings import PrecisionSettings, SettingsDict, validate_decimal_places

__all__ = [
    # Types
    'Point3D',
    'Vector3D',
    'Vector2D',
    'ScreenPoint',
    'EntityId',
    'UnitSuffix',
    # Network
    'CubicBezier',
    'EdgeData',
    'NodeData',
    'PathPoint',
    'GeometryProvider',
    # Courses
    'CoursePosFlags',
    'CreationFlags',
    'EXCLUDED_CREATION_FLAGS',
    'CoursePosition',
    'NetCourse',
    # Tooltips
    'TooltipCategory',
    'TooltipAnchor',
    'ReferenceTooltip',
    'RefinedTooltip',
    'AngleCandidate',
    # Settings
    'PrecisionSettings',
    'SettingsDict',
    'validate_decimal_places',
]
