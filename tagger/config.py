import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
EXPORTS_DIR = PROJECT_ROOT / "exports"

SCHEMA_VERSION = "1.0"

DEFAULT_PLAYER_A = "Ostapenko"
DEFAULT_PLAYER_B = "Suárez Navarro"
DEFAULT_LOCALE = "en"

GAMES_TO_WIN_SET = 6
MIN_SET_MARGIN = 2

LOG_LEVEL = os.environ.get("TAGGER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Overlay (BGR)
OVERLAY_WIDTH = 360
OVERLAY_HEIGHT = 110
OVERLAY_MARGIN = 20
OVERLAY_ALPHA = 0.6
# Used when the container reports no frame rate
DEFAULT_FPS = 30.0
COLOR_PLAYER_A = (68, 68, 239)
COLOR_PLAYER_B = (246, 130, 59)
