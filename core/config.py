import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# --- Languages ---
# Used as a plain prefix of the language file name, so keep the trailing separator.
LANGUAGES_PATH = os.environ.get(
    "EASYLANG_PATH", str(PROJECT_ROOT / "easylang" / "languages") + os.sep
)
DEFAULT_LANG = os.environ.get("EASYLANG_LANG", "en")
DEFAULT_IS_RTL = os.environ.get("EASYLANG_RTL", "false").lower() == "true"
RTL_LANGS = [
    code.strip()
    for code in os.environ.get("EASYLANG_RTL_LANGS", "ar,fa,he,ur").split(",")
    if code.strip()
]

# --- Logging ---
LOG_LEVEL = os.environ.get("EASYLANG_LOG_LEVEL", "INFO").upper()
