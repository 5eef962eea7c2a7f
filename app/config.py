import os
import logging
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

APP_DIR = os.path.dirname(os.path.abspath(__file__))

# ----- Gemini Vision API Config -----
GEMINI_API_KEY: Optional[str] = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
GEMINI_API_URL: str = os.getenv(
    "GEMINI_API_URL",
    f"https://generativelanguage.googleapis.com/v1beta/models/{GEMINI_MODEL}:generateContent",
)
GEMINI_TIMEOUT: float = float(os.getenv("GEMINI_TIMEOUT", "60"))

# ----- Intake -----
DEFAULT_IMAGE_PATH: str = os.getenv(
    "DEFAULT_IMAGE_PATH", os.path.join(APP_DIR, "static", "default-gemstone.png")
)
MAX_IMAGE_BYTES: int = 20 * 1024 * 1024
ACCEPTED_MEDIA_TYPES = ["image/jpeg", "image/png", "image/jpg", "image/webp"]

# ----- Web -----
SESSION_COOKIE: str = "gemstone_session"
MAX_SESSIONS: int = int(os.getenv("MAX_SESSIONS", "1000"))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

if not GEMINI_API_KEY:
    logger.warning("GEMINI_API_KEY not set; only the demo analysis will be available")
