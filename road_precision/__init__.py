"""Road Precision - precise measurement tooltips for road construction.

This __init__.py makes the add-in directory a proper Python package,
enabling relative imports between submodules (core, models, systems).

The host adapter drives everything through
``systems.PrecisionTooltipController`` once per refresh cycle.
"""

from . import core
from . import models
from . import systems

__all__ = ['core', 'models', 'systems']
