"""
config.py

Global constants for the ring diagram: geometry, animation pacing, bounds,
window size and colors. Everything is in "world" units (1 unit = 1 pixel at
scale 1.0) unless noted otherwise.
"""

# ============================================================
# GEOMETRY
# ============================================================

# Diameter of one number marker.
MARKER_SIZE = 32.0

# Distance between two neighbouring rings.
RING_SPACING = 40.0

# Base radius of the reduction layout is MARKER_SIZE * modulus / RING_RADIUS_SCALE.
RING_RADIUS_SCALE = 4.0

# Cycle mode draws one ring only, so it gets a fixed radius.
CYCLE_RADIUS = 320.0

# ============================================================
# ANIMATION
# ============================================================

# Seconds between two revealed points.
POINT_REVEAL_PERIOD = 1.0

# Fraction of the arrow pulled in at each end so it clears the markers.
SHRINK_FACTOR = 0.05

FPS = 60

# ============================================================
# BOUNDS
# ============================================================

U32_MAX = 2**32 - 1

# Slider ranges in the control panel.
NATURAL_MAX = 99
MODULUS_MAX = 36

# ============================================================
# WINDOW
# ============================================================

WINDOW_SIZE = (1280, 800)
MIN_WINDOW_SIZE = (800, 520)
SIDEBAR_WIDTH = 340
MARGIN = 16

# Never zoom in past this, small diagrams stay at their natural size.
MAX_SCALE = 1.0

# ============================================================
# COLORS
# ============================================================

BACKGROUND = (255, 255, 255)
PANEL_BG = (24, 24, 30)
PANEL_BORDER = (70, 70, 80)
TEXT = (235, 235, 235)
TEXT_DIM = (170, 170, 180)
MARKER_STROKE = (0, 0, 0)
MARKER_LABEL = (0, 0, 0)
RING_COLOR = (0, 191, 255)
REDUCTION_ARROW = (245, 173, 66, 150)
CYCLE_ARROW = (255, 165, 0, 255)
ACCENT = (0, 191, 255)
ERROR_TEXT = (255, 150, 150)
