"""Process configuration, read from the environment once at import."""
import os
from pathlib import Path

APP_DIR = Path(__file__).resolve().parent

# Server
PORT = int(os.environ.get("PORT", "3001"))
HOST = os.environ.get("HOST", "127.0.0.1")

# Path translation: the user sees USER_HOME, this process reaches the same
# files under HOST_HOME (e.g. a bind mount inside a container).
HOST_HOME = os.environ.get("HOST_HOME", "/host-home")
USER_HOME = os.environ.get("USER_HOME", "")

# Local state
DB_PATH = Path(os.environ.get("TAGGER_DB_PATH", str(APP_DIR / "lora_tagger.db")))
THUMB_DIR = Path(os.environ.get("TAGGER_THUMB_DIR", str(APP_DIR / ".thumbs")))

# Logging
LOG_DIR = os.environ.get("TAGGER_LOG_DIR") or None
LOG_LEVEL = os.environ.get("TAGGER_LOG_LEVEL", "INFO").upper()
