"""
Pytest configuration for Road Precision tests.

This conftest.py sets up the Python path and module aliases so that tests can
import project modules using simple names (e.g., `from core.x import y`) while
the production code uses relative imports inside the road_precision package.

How it works:
1. Adds the project root to sys.path (for runs without an installed package)
2. Imports road_precision as a package (triggering __init__.py)
3. Creates module aliases so `import core` resolves to `road_precision.core`
"""
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Import package submodules and create aliases
import road_precision.core as core
import road_precision.models as models
import road_precision.systems as systems

sys.modules['core'] = core
sys.modules['models'] = models
sys.modules['systems'] = systems

# Also alias the submodules for imports like `from core.bezier import x`
sys.modules['core.vector_math'] = core.vector_math
sys.modules['core.bezier'] = core.bezier
sys.modules['core.control_point_angles'] = core.control_point_angles
sys.modules['core.connection_angles'] = core.connection_angles
sys.modules['core.value_matching'] = core.value_matching
sys.modules['core.course_ordering'] = core.course_ordering
sys.modules['core.course_aggregation'] = core.course_aggregation
sys.modules['core.formatting'] = core.formatting
sys.modules['core.tolerances'] = core.tolerances

sys.modules['models.types'] = models.types
sys.modules['models.network'] = models.network
sys.modules['models.course'] = models.course
sys.modules['models.tooltip_data'] = models.tooltip_data
sys.modules['models.settings'] = models.settings

sys.modules['systems.frame'] = systems.frame
sys.modules['systems.tooltip_buffer'] = systems.tooltip_buffer
sys.modules['systems.settings_monitor'] = systems.settings_monitor
sys.modules['systems.guide_line_tooltips'] = systems.guide_line_tooltips
sys.modules['systems.net_course_tooltips'] = systems.net_course_tooltips
sys.modules['systems.tooltip_controller'] = systems.tooltip_controller
