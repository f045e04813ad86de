"""Net course data models.

A net course is one placed segment of the multi-segment road currently
being built. The host hands them over unordered every cycle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag

from .network import CubicBezier
from .types import EntityId, Point3D


class CoursePosFlags(IntFlag):
    """Flags carried by a course endpoint."""

    NONE = 0
    IS_FIRST = 1
    IS_LAST = 2
    IS_PARALLEL = 4


class CreationFlags(IntFlag):
    """Lifecycle flags of a course's creation definition."""

    NONE = 0
    PERMANENT = 1
    DELETE = 2
    UPGRADE = 4
    INVERT = 8
    ALIGN = 16


# Courses carrying any of these are not part of the primary path
EXCLUDED_CREATION_FLAGS: CreationFlags = (
    CreationFlags.PERMANENT
    | CreationFlags.DELETE
    | CreationFlags.UPGRADE
    | CreationFlags.INVERT
    | CreationFlags.ALIGN
)


@dataclass(frozen=True, slots=True)
class CoursePosition:
    """One end of a net course.

    Attributes:
        position: World position of the endpoint
        course_delta: Curve parameter (0-1) of this endpoint on the course curve
        flags: Endpoint flags
    """

    position: Point3D
    course_delta: float
    flags: CoursePosFlags = CoursePosFlags.NONE


@dataclass(frozen=True, slots=True)
class NetCourse:
    """A placed segment of the path under construction.

    Attributes:
        start: Start endpoint
        end: End endpoint
        curve: Underlying curve; the course covers the
            ``[start.course_delta, end.course_delta]`` part of it
        length: Placed length as reported by the host (may differ from
            the geometric length when segments are trimmed)
        creation_flags: Lifecycle flags
        original: Existing entity this course modifies, if any
    """

    start: CoursePosition
    end: CoursePosition
    curve: CubicBezier
    length: float
    creation_flags: CreationFlags = CreationFlags.NONE
    original: EntityId | None = field(default=None)

    def is_measured(self) -> bool:
        """Check if this course belongs to the primary path being drawn."""
        if self.original is not None:
            return False
        if self.creation_flags & EXCLUDED_CREATION_FLAGS:
            return False
        return not self.start.flags & CoursePosFlags.IS_PARALLEL
