"""Core calculation and geometry utilities."""

from .vector_math import (
    planar,
    dot_2d,
    length_2d,
    subtract,
    negate,
    perpendicular_2d,
    distance_between_points,
    planar_distance,
    normalize_safe,
    safe_direction,
    angle_between,
)
from .bezier import (
    position,
    start_tangent,
    end_tangent,
    cut,
    planar_length,
)
from .control_point_angles import (
    is_displayable_angle,
    offset_label_position,
    calculate_control_point_angles,
)
from .connection_angles import (
    new_segment_direction,
    edge_direction_near_point,
    edge_direction_at_node,
    supplementary_angles,
    calculate_connection_angles,
)
from .value_matching import (
    AngleMatchMode,
    match_angle,
    refine_reference_value,
)
from .course_ordering import (
    filter_measured_courses,
    courses_are_connected,
    sort_courses,
    build_course_chain,
)
from .course_aggregation import (
    CourseSummary,
    course_curve_length,
    total_course_length,
    total_curve_length,
    parameter_at_distance,
    position_at_distance,
    calculate_slope,
    aggregate_courses,
)
from .formatting import (
    UNIT_SUFFIXES,
    effective_decimal_places,
    format_value,
    format_with_unit,
    format_label,
)
from .tolerances import (
    MIN_SEGMENT_LENGTH,
    ZERO_MAGNITUDE,
    MIN_INTERIOR_ANGLE_DEG,
    MAX_INTERIOR_ANGLE_DEG,
    SUPPLEMENT_TOLERANCE_DEG,
    FLAT_SLOPE_PERCENT,
    MIN_SLOPE_PATH_LENGTH,
)

__all__ = [
    # Vector math
    'planar',
    'dot_2d',
    'length_2d',
    'subtract',
    'negate',
    'perpendicular_2d',
    'distance_between_points',
    'planar_distance',
    'normalize_safe',
    'safe_direction',
    'angle_between',
    # Curves
    'position',
    'start_tangent',
    'end_tangent',
    'cut',
    'planar_length',
    # Control point angles
    'is_displayable_angle',
    'offset_label_position',
    'calculate_control_point_angles',
    # Connection angles
    'new_segment_direction',
    'edge_direction_near_point',
    'edge_direction_at_node',
    'supplementary_angles',
    'calculate_connection_angles',
    # Matching
    'AngleMatchMode',
    'match_angle',
    'refine_reference_value',
    # Course ordering
    'filter_measured_courses',
    'courses_are_connected',
    'sort_courses',
    'build_course_chain',
    # Course aggregation
    'CourseSummary',
    'course_curve_length',
    'total_course_length',
    'total_curve_length',
    'parameter_at_distance',
    'position_at_distance',
    'calculate_slope',
    'aggregate_courses',
    # Formatting
    'UNIT_SUFFIXES',
    'effective_decimal_places',
    'format_value',
    'format_with_unit',
    'format_label',
    # Tolerances
    'MIN_SEGMENT_LENGTH',
    'ZERO_MAGNITUDE',
    'MIN_INTERIOR_ANGLE_DEG',
    'MAX_INTERIOR_ANGLE_DEG',
    'SUPPLEMENT_TOLERANCE_DEG',
    'FLAT_SLOPE_PERCENT',
    'MIN_SLOPE_PATH_LENGTH',
]
