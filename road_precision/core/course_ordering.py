"""Course filtering and ordering for path aggregation.

This module selects the courses that make up the primary path and
orders them by connectivity into a chain.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..models.course import CoursePosFlags, NetCourse


def filter_measured_courses(courses: Iterable[NetCourse]) -> list[NetCourse]:
    """Keep only courses belonging to the primary path, in input order."""
    return [course for course in courses if course.is_measured()]


def courses_are_connected(current: NetCourse, following: NetCourse) -> bool:
    """Check if ``following`` starts exactly where ``current`` ends."""
    return current.end.position == following.start.position


def sort_courses(courses: list[NetCourse]) -> None:
    """
    Order courses into a connected chain, in place.

    The course flagged as first moves to the front. Then each position
    pulls forward the first later course that starts exactly where it
    ends. Courses without a matching successor keep their relative
    order, so a broken chain is still fully traversed.

    Args:
        courses: Unordered list of courses, reordered in place
    """
    for i, course in enumerate(courses):
        if course.start.flags & CoursePosFlags.IS_FIRST:
            courses[i] = courses[0]
            courses[0] = course
            break

    for i in range(len(courses) - 1):
        current = courses[i]
        for j in range(i + 1, len(courses)):
            candidate = courses[j]
            if courses_are_connected(current, candidate):
                courses[j] = courses[i + 1]
                courses[i + 1] = candidate
                break


def build_course_chain(courses: Iterable[NetCourse]) -> list[NetCourse]:
    """
    Filter and order courses into the chain that gets measured.

    Args:
        courses: All courses reported by the host this cycle

    Returns:
        Ordered chain; empty if no course qualifies
    """
    chain = filter_measured_courses(courses)
    sort_courses(chain)
    return chain
