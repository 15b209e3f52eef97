# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

MAX_INPUT_SIZE = 30
RANDOM_SIZE    = 15
RANDOM_LOW     = 0
RANDOM_HIGH    = 100          # exclusive

DEFAULT_PACE_MS = 70

# ============================================================
# ===================== DISPLAY SCALING ======================
# ============================================================
#
# Every input value is mapped to a bar height in [MAG_LOW, MAG_HIGH]
# (percent of the drawing area):
#   magnitude = MAG_LOW + (MAG_HIGH - MAG_LOW) * value / max(values)
# All-zero input has no maximum to divide by; every bar gets MAG_MID.

MAG_LOW  = 10.0
MAG_HIGH = 90.0
MAG_MID  = (MAG_LOW + MAG_HIGH) / 2

# ============================================================
# ========================= VIEWER ===========================
# ============================================================

WINDOW_WIDTH  = 900
WINDOW_HEIGHT = 560
FPS           = 60

BAR_MIN_W   = 20
BAR_MAX_W   = 40
BAR_SPACING = 4
BAR_AREA_W  = 600
BAR_TOP     = 90
BAR_BOTTOM  = 130          # space reserved under the bars for labels/status

BACKGROUND_COLOR = (5, 5, 10)
DEFAULT_COLOR    = (70, 130, 220)
ACTIVE_COLOR     = (255, 60, 60)
COMPARE_COLOR    = (255, 200, 40)
TEXT_COLOR       = (215, 215, 228)
SUBTEXT_COLOR    = (105, 105, 130)
OK_COLOR         = (60, 200, 100)
ERROR_COLOR      = (255, 90, 90)
