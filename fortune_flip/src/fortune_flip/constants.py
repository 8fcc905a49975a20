STORAGE_KEY = "fortuneflip:wheels"

DEFAULT_SEGMENT_LABEL = "Default"
SEGMENT_LABEL_PREFIX = "Segment"
WHEEL_NAME_PREFIX = "Wheel"

# Full turns added to every spin; cosmetic only
EXTRA_SPINS = 4
SPIN_DURATION_MS = 4000

WHEEL_SIZE = 280
LABEL_RADIUS_RATIO = 0.6
COLORS = ["#FF6B6B", "#FFD166", "#06D6A0", "#4ECDC4", "#1A535C", "#EF476F"]
HIGHLIGHT_COLOR = "#FFF"

STATUS_IDLE = "idle"
STATUS_SPINNING = "spinning"
