import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).parent
load_dotenv(BASE_DIR / ".env")

# External tool path (override via environment variables). May also point to
# the directory that holds the gnuplot binary.
GNUPLOT_PATH = os.environ.get("GNUPLOT_PATH", "gnuplot")

# Temp files: None means the system temp directory
TEMP_DIR = os.environ.get("GNUPLOT_TEMP_DIR") or None
KEEP_TEMP_FILES = os.environ.get("KEEP_TEMP_FILES", "0").lower() in ("1", "true", "yes")

# Timeout in seconds; 0 waits for gnuplot indefinitely
RENDER_TIMEOUT = int(os.environ.get("RENDER_TIMEOUT", "60"))

# Plot defaults
PLOT_WIDTH = int(os.environ.get("PLOT_WIDTH", "500"))
PLOT_HEIGHT = int(os.environ.get("PLOT_HEIGHT", "400"))
PLOT_FONT = os.environ.get("PLOT_FONT", "Arial")
PLOT_FONT_SIZE = int(os.environ.get("PLOT_FONT_SIZE", "12"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()
