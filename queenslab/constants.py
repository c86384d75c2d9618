"""**********************************************************************************
 * Title: constants.py
 * -------------------------------------------------------------------------------
 * Description:
 * Static data and configuration values for the regional queens engine. This
 * centralizes the cell state identifiers used on the wire, the generation
 * limits, the bounds enforced by the HTTP API, and the palette used when a
 * region grid is printed to a terminal.
 **********************************************************************************"""

# --- GAME STATE CONSTANTS ---
# Integer identifiers for a cell's player state, as exchanged with the frontend.
STATE_EMPTY = 0
STATE_MARKED = 1
STATE_EXCLUDED = 2

# --- GENERATION ---
DEFAULT_SIZE = 8
MAX_GENERATION_ATTEMPTS = 100

# Marker for a cell that the partitioner has not claimed yet, and for a row of
# the solver's placement array that holds no marker.
UNASSIGNED = -1

# Orthogonal neighbor offsets in the fixed check order: up, down, left, right.
ORTHOGONAL_OFFSETS = [(-1, 0), (1, 0), (0, -1), (0, 1)]

# --- API / SERVER CONFIGURATION ---
MIN_API_SIZE = 4
MAX_API_SIZE = 12
API_HOST = '0.0.0.0'
API_PORT = 5001

# --- TERMINAL DISPLAY ---
RESET = "\033[0m"
UNIFIED_COLORS_BG = [
    ("Bright Red", (255, 204, 204), "\033[48;2;255;204;204m\033[38;2;0;0;0m"),
    ("Bright Green", (204, 255, 204), "\033[48;2;204;255;204m\033[38;2;0;0;0m"),
    ("Bright Yellow", (255, 255, 204), "\033[48;2;255;255;204m\033[38;2;0;0;0m"),
    ("Bright Blue", (204, 229, 255), "\033[48;2;204;229;255m\033[38;2;0;0;0m"),
    ("Bright Magenta", (255, 204, 255), "\033[48;2;255;204;255m\033[38;2;0;0;0m"),
    ("Bright Cyan", (204, 255, 255), "\033[48;2;204;255;255m\033[38;2;0;0;0m"),
    ("Light Orange", (255, 229, 204), "\033[48;2;255;229;204m\033[38;2;0;0;0m"),
    ("Light Purple", (229, 204, 255), "\033[48;2;229;204;255m\033[38;2;0;0;0m"),
    ("Light Gray", (224, 224, 224), "\033[48;2;224;224;224m\033[38;2;0;0;0m"),
    ("Mint", (210, 240, 210), "\033[48;2;210;240;210m\033[38;2;0;0;0m"),
    ("Peach", (255, 218, 185), "\033[48;2;255;218;185m\033[38;2;0;0;0m"),
    ("Sky Blue", (173, 216, 230), "\033[48;2;173;216;230m\033[38;2;0;0;0m"),
]
BASE64_DISPLAY_ALPHABET = '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-_'
MARKER_SYMBOL = '★'
