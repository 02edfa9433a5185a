"""
Global configuration for feed76.

Values can be overridden from the environment (or a .env file).
"""
import os

from dotenv import load_dotenv

load_dotenv()

# Source pages
NK_HOME_URL = "https://nukaknights.com/en/"
MINERVA_URL = "https://whereisminerva.nukaknights.com/"
NUKECODES_URL = "https://dev.nukacrypt.com/FO76/"

# Feed envelope schema version
SCHEMA_VERSION = 1

# Output directory for the feed files (GitHub Pages serves /public)
OUTPUT_DIR = os.getenv("FEED76_OUTPUT_DIR", "public")

# HTTP
USER_AGENT = os.getenv("FEED76_USER_AGENT", "76feed-bot/1.0 (GitHub Actions)")
REQUEST_TIMEOUT = float(os.getenv("FEED76_TIMEOUT", "30"))
FETCH_RETRIES = int(os.getenv("FEED76_RETRIES", "2"))

# Zone the event calendar times are printed in, when the page names none
DEFAULT_TIMEZONE = os.getenv("FEED76_TIMEZONE", "Europe/Berlin")

# Optional log file (console only when unset)
LOG_FILE = os.getenv("FEED76_LOG_FILE") or None
