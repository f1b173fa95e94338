"""Central configuration for pricetrack.

Values come from the environment (a local ``.env`` file is merged in
first) and fall back to directories next to the project root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings:
    """Central configuration for pricetrack."""

    # --- Paths ---
    DATA_DIR: Path = Path(os.getenv("PRICETRACK_DATA_DIR", _PROJECT_ROOT / "data"))
    LOGS_DIR: Path = Path(os.getenv("PRICETRACK_LOGS_DIR", _PROJECT_ROOT / "logs"))

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("PRICETRACK_LOG_LEVEL", "INFO").upper()
    LOG_FILE_NAME: str = "pricetrack.log"

    # --- Dashboard ---
    RECENT_CHANGES_LIMIT: int = 4
    BEST_DEALS_LIMIT: int = 4
