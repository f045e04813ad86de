"""Path-level length and slope for a chain of net courses.

This module aggregates the courses of the road currently being placed
into a single length figure, a slope, and the midpoint where both are
displayed.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..models.course import NetCourse
from ..models.types import Point3D
from .bezier import cut, planar_length, position
from .course_ordering import build_course_chain
from .tolerances import FLAT_SLOPE_PERCENT, MIN_SLOPE_PATH_LENGTH


@dataclass(slots=True)
class CourseSummary:
    """Aggregated measurements for one chain of courses.

    Attributes:
        chain: Courses in connectivity order
        total_length: Sum of the placed course lengths
        curve_length: Sum of the planar arc lengths of the placed parts
        slope: Grade in percent, None when the path is too short
        midpoint: World position halfway along the chain, None when the
            path is too short
    """

    chain: list[NetCourse]
    total_length: float
    curve_length: float
    slope: float | None = None
    midpoint: Point3D | None = None


def course_curve_length(course: NetCourse) -> float:
    """Planar arc length of the part of the curve a course covers."""
    placed = cut(course.curve, course.start.course_delta, course.end.course_delta)
    return planar_length(placed)


def total_course_length(chain: Iterable[NetCourse]) -> float:
    return sum(course.length for course in chain)


def total_curve_length(chain: Iterable[NetCourse]) -> float:
    return sum(course_curve_length(course) for course in chain)


def parameter_at_distance(
    chain: Sequence[NetCourse],
    distance: float,
) -> tuple[int, float] | None:
    """
    Locate a distance along the chain as (course index, curve parameter).

    Walks the chain accumulating placed lengths. In the course where the
    running total reaches ``distance`` the curve parameter is interpolated
    between the course's start and end deltas. Zero-length courses are
    passed over.

    Args:
        chain: Ordered courses
        distance: Distance from the start of the chain

    Returns:
        (index, t), or None if the distance lies beyond the chain
    """
    accumulated = -distance

    for index, course in enumerate(chain):
        accumulated += course.length
        if accumulated >= 0.0 and course.length != 0.0:
            fraction = 1.0 - accumulated / course.length
            start_delta = course.start.course_delta
            end_delta = course.end.course_delta
            return index, start_delta + (end_delta - start_delta) * fraction

    return None


def position_at_distance(chain: Sequence[NetCourse], distance: float) -> Point3D | None:
    """
    World position at a distance along the chain.

    Args:
        chain: Ordered courses
        distance: Distance from the start of the chain

    Returns:
        Point on the chain; the last course's end position if ``distance``
        exceeds the chain length; None for an empty chain
    """
    if not chain:
        return None

    located = parameter_at_distance(chain, distance)
    if located is None:
        return chain[-1].end.position

    index, t = located
    return position(chain[index].curve, t)


def calculate_slope(start_elevation: float, end_elevation: float, curve_length: float) -> float | None:
    """
    Grade of a path in percent.

    Args:
        start_elevation: Elevation at the start of the path
        end_elevation: Elevation at the end of the path
        curve_length: Planar length of the path

    Returns:
        Slope in percent, snapped to 0.0 when its magnitude is below
        FLAT_SLOPE_PERCENT; None when the path is shorter than
        MIN_SLOPE_PATH_LENGTH
    """
    if curve_length < MIN_SLOPE_PATH_LENGTH:
        return None

    slope = 100.0 * (end_elevation - start_elevation) / curve_length
    if abs(slope) < FLAT_SLOPE_PERCENT:
        return 0.0
    return slope


def aggregate_courses(courses: Iterable[NetCourse]) -> CourseSummary | None:
    """
    Measure the primary path from the courses reported by the host.

    Args:
        courses: All courses of the current placement, unordered

    Returns:
        CourseSummary, or None when no course belongs to the primary path
    """
    chain = build_course_chain(courses)
    if not chain:
        return None

    total_length = total_course_length(chain)
    curve_length = total_curve_length(chain)

    slope = calculate_slope(
        chain[0].start.position[1],
        chain[-1].end.position[1],
        curve_length,
    )
    midpoint: Point3D | None = None
    if slope is not None:
        midpoint = position_at_distance(chain, total_length / 2.0)

    return CourseSummary(
        chain=chain,
        total_length=total_length,
        curve_length=curve_length,
        slope=slope,
        midpoint=midpoint,
    )
