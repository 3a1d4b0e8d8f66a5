import configparser
import os
import logging

# Get base directory
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_PATH = os.path.join(BASE_DIR, "config.ini")
LOG_PATH = os.path.join(BASE_DIR, "app.log")

# Load config
config = configparser.ConfigParser()
config.read(CONFIG_PATH, encoding="utf-8")

LOG_LEVEL = config.get("settings", "log_level", fallback="DEBUG").upper()


def setup_logging():
    logging.basicConfig(
        filename=LOG_PATH,
        level=getattr(logging, LOG_LEVEL, logging.DEBUG),
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s'
    )

setup_logging()

logger = logging.getLogger(__name__)

logger.info("Loaded configuration from %s", CONFIG_PATH)
if not config.sections():
    logger.warning("No sections found in config.ini")
    raise RuntimeError("config.ini is missing or empty")

# Settings
MODE = config.get("settings", "mode", fallback="DEBUG")

# Roster upload
HIGHLIGHT_COLOR = config.get("roster", "highlight_color", fallback="FFC000").strip().lstrip("#").upper()
SHEET_NAME = config.get("roster", "sheet_name", fallback="").strip() or None
ALLOWED_EXTENSIONS = tuple(
    ext.strip().lower()
    for ext in config.get("roster", "allowed_extensions", fallback=".xlsx,.xlsm").split(",")
    if ext.strip()
)
MAX_UPLOAD_BYTES = config.getint("roster", "max_upload_bytes", fallback=5 * 1024 * 1024)

# Roster store
ROSTER_TTL_SECONDS = config.getint("cache", "roster_ttl_seconds", fallback=1800)  # 30 minutes
ROSTER_MAX_ENTRIES = config.getint("cache", "roster_max_entries", fallback=32)
