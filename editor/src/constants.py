"""
4color - Constants and Configuration

This module contains all constant values used throughout the application:
- Named colors (view palette)
- Grid defaults (tile counts and sizes)
- View placement and history limits
- Key bindings for the board controller
- Status indicator labels
"""

# ======================================================================
# NAMED COLORS
# ======================================================================
# Components are normalized floats in [0, 1]

NAMED_COLORS = {
    'black':  (0.0, 0.0, 0.0),
    'red':    (1.0, 0.0, 0.25),
    'yellow': (1.0, 1.0, 0.0),
    'green':  (0.15, 0.75, 0.15),
    'blue':   (0.0, 0.0, 1.0),
}

# Colors of the four views, in focus order
VIEW_COLOR_NAMES = ['red', 'yellow', 'green', 'blue']

# Grid line shade relative to the focused view's color
GRID_SHADE_FACTOR = 0.5

# ======================================================================
# GRID DEFAULTS
# ======================================================================

DEFAULT_NUM_EDGE_TILES = 16   # Tiles along each edge of the square grid
DEFAULT_TILE_SIZE = 20        # Pixels per tile

# Horizontal distance between the initial offsets of neighbouring views
DEFAULT_VIEW_SPACING = 3

# ======================================================================
# HISTORY
# ======================================================================

DEFAULT_MAX_HISTORY = 50

# ======================================================================
# KEY BINDINGS
# ======================================================================
# Key name -> (command, argument). Arguments are tile deltas for translate.

KEY_COMMANDS = {
    'Left':      ('translate', (-1, 0)),
    'Right':     ('translate', (1, 0)),
    'Up':        ('translate', (0, 1)),
    'Down':      ('translate', (0, -1)),
    'Page_Up':   ('rotate_ccw', None),
    'Page_Down': ('rotate_cw', None),
    'space':     ('flip_x', None),
    'f':         ('flip_y', None),
    'Tab':       ('focus_next', None),
    'c':         ('clear', None),
    'z':         ('undo', None),
    'y':         ('redo', None),
}

# ======================================================================
# STATUS INDICATORS
# ======================================================================
# One lamp per flag: Contiguous, all Visible, needs 4 colors

STATUS_LABELS = 'CV4'

# ======================================================================
# ASCII RENDERING
# ======================================================================

ASCII_TILE = '# '
ASCII_EMPTY = '. '
ASCII_OVERLAP = '*'
