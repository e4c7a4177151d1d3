"""
PocketCalc Configuration Settings
"""
import os

# Application Settings
APP_NAME = "PocketCalc"
VERSION = "1.0.0"

# Display Settings
WINDOW_WIDTH = 360
WINDOW_HEIGHT = 560
SMALL_SCREEN_WIDTH = 640          # narrower windows use the compact font scale
DISPLAY_FONT_FAMILY = "Segoe UI Light"
BUTTON_FONT = ("Segoe UI", 20)
LABEL_FONT = ("Segoe UI", 11)

# Display font sizes (points): (short display, long display)
DISPLAY_FONT_SIZES = {
    "large": (48, 40),
    "small": (40, 32),
}
LONG_DISPLAY_LENGTH = 6

# ── Palette ────────────────────────────────────────────────────────────────────
PALETTE = {
    "bg":           "#000000",
    "display_fg":   "#FFFFFF",
    "function_bg":  "#A5A5A5",   # C ± %
    "function_fg":  "#000000",
    "function_act": "#D4D4D2",
    "digit_bg":     "#333333",
    "digit_fg":     "#FFFFFF",
    "digit_act":    "#737373",
    "operator_bg":  "#FF9500",
    "operator_fg":  "#FFFFFF",
    "operator_act": "#FFB143",
    "selected_bg":  "#FFFFFF",   # operator awaiting its second operand
    "selected_fg":  "#FF9500",
}

# Press highlight duration (ms)
PRESS_HIGHLIGHT_MS = 100

# How often the GUI picks up presses from the web keypad (ms)
WEB_POLL_MS = 200

# Engine limits
MAX_DIGITS = 9
OVERFLOW_LIMIT = 999999999
ROUNDING_SCALE = 100000000        # results are rounded to 8 decimal places
ERROR_DISPLAY = "Error"

# Web keypad settings
WEB_ENABLED = os.environ.get("POCKETCALC_WEB_ENABLED", "1") not in ("0", "false", "no")
WEB_HOST = '0.0.0.0'
WEB_PORT = int(os.environ.get("POCKETCALC_WEB_PORT", 8888))
