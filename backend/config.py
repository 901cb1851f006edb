"""Runtime configuration, read from the environment (and an optional .env file)."""
import os
from dotenv import load_dotenv

load_dotenv()

def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Inputs longer than this are rejected before alignment (O(n*m) matrix). 0 disables.
MAX_SEQUENCE_LENGTH = int(os.getenv("MAX_SEQUENCE_LENGTH", "10000"))
MIN_ORF_LENGTH = int(os.getenv("MIN_ORF_LENGTH", "30"))

# 0 keeps every saved analysis
HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "0"))

# Compute composition/ORFs for both sides of a comparison instead of zero-filling
FULL_COMPARISON_STATS = _flag("FULL_COMPARISON_STATS")

RCSB_DATA_URL = os.getenv("RCSB_DATA_URL", "https://data.rcsb.org/rest/v1/core/entry")
MOLSTAR_VIEWER_URL = os.getenv("MOLSTAR_VIEWER_URL", "https://molstar.org/viewer/")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))

ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost:5173").split(",")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
