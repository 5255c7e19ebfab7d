"""
ripsgrid/config.py

Default parameters for boards, thresholds and random stone placement.
"""

DEFAULT_BOARD_SIZE = 9
DEFAULT_POINT_COUNT = 9
DEFAULT_EPSILON = 3

DEFAULT_TARGET_HOLES = 5

# Upper bound on draws when placing distinct random stones
MAX_PLACEMENT_ATTEMPTS = 5000
