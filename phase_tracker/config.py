"""
Phase Tracker Configuration

All settings come from environment variables and are read once at import.
"""

import os
from pathlib import Path
from typing import Optional

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
LOG_LEVEL = os.getenv("PHASE_TRACKER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# -----------------------------------------------------------------------------
# Server
# -----------------------------------------------------------------------------
HOST = os.getenv("PHASE_TRACKER_HOST", "0.0.0.0")
PORT = int(os.getenv("PHASE_TRACKER_PORT", "8000"))

# -----------------------------------------------------------------------------
# Workflow
# -----------------------------------------------------------------------------
# Identifiers are ID_BYTES random bytes rendered as lowercase hex.
ID_BYTES = 4


def get_seed_file() -> Optional[Path]:
    """Get the YAML workflow file used to seed a new service, if any."""
    value = os.getenv("PHASE_TRACKER_SEED_FILE")
    if not value:
        return None
    return Path(value)
