# Application Global Variables
# This module serves as a way to share constants across different
# modules. Runtime settings are NOT read from here by the systems; they
# are passed in explicitly every cycle as a PrecisionSettings value.

import os

# Flag that indicates to run in Debug mode or not. When running in Debug mode
# more information is written to the log. Generally, it's useful to set this
# to True while developing and set it to False when you are ready to distribute.
DEBUG = False

# Gets the name of the add-in from the name of the folder the py file is in.
# Used as the logger name.
ADDIN_NAME = os.path.basename(os.path.dirname(__file__))

# Default user settings (mirrors the options page defaults)
DEFAULT_DISTANCE_DECIMAL_PLACES = 2
DEFAULT_ANGLE_DECIMAL_PLACES = 2
DEFAULT_ENABLE_FLOAT_DISTANCE = True
DEFAULT_ENABLE_FLOAT_ANGLE = True
MIN_DECIMAL_PLACES = 0
MAX_DECIMAL_PLACES = 4

# Settings are re-read every N update cycles (~1 second at 60fps)
SETTINGS_CHECK_INTERVAL = 60

# Tag shown in front of every refined value so it can't be confused
# with the coarse reference tooltip next to it
DISPLAY_TAG = '[P]'

# Screen-space offsets (pixels) keeping refined tooltips clear of the
# reference tooltips they accompany
GUIDE_LINE_TOOLTIP_OFFSET_Y = 55.0
NET_COURSE_TOOLTIP_OFFSET_X = 300.0

# World-space offsets used when a candidate is shown at its own vertex
CANDIDATE_PERPENDICULAR_OFFSET = 2.0
CANDIDATE_VERTICAL_OFFSET = 1.0
