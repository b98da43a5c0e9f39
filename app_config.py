"""
volmix configuration

Central constants for the mixer. There is no config file; edit these values
to tune behaviour.
"""

# =============================================================================
# APPLICATION
# =============================================================================

APP_NAME = "volmix"

# Client name shown by the sound server for the event subscription
PULSE_CLIENT_NAME = "volmix-events"

# =============================================================================
# VOLUME SETTINGS
# =============================================================================

VOLUME_MIN = 0
VOLUME_MAX = 100

# Percent applied per left/right key press
VOLUME_STEP = 2

# =============================================================================
# LOOP TIMING
# =============================================================================

# Animation tick period. Display volumes move one percent per tick.
TICK_INTERVAL = 0.030  # seconds

# Full re-read of the stream list when no event subscription is available
AUTO_REFRESH_INTERVAL = 1.2  # seconds

# How long each loop iteration waits on the event subscription
EVENT_LISTEN_TIMEOUT = 0.001  # seconds

# =============================================================================
# LAYOUT
# =============================================================================

# Name column width. Longer names are cut to NAME_WIDTH - 1 plus an ellipsis.
NAME_WIDTH = 15

# Columns reserved for name, brackets and percent label around the bar
BAR_PADDING = 25
BAR_MIN_WIDTH = 10

BAR_FILL_CHAR = "░"
BAR_EMPTY_CHAR = " "
ELLIPSIS = "…"

# =============================================================================
# LOGGING
# =============================================================================

# Records are buffered while curses owns the terminal and written to stderr
# on exit. ERROR and above flush immediately.
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_BUFFER_CAPACITY = 200
