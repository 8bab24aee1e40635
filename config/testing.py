import os
import tempfile
from pathlib import Path

_BASE = Path(tempfile.gettempdir()) / "work_tracker_test"

LEDGER_DIR = os.getenv("LEDGER_DIR", str(_BASE / "ledger"))
STATE_FILE = os.getenv("STATE_FILE", str(_BASE / "work_start_time"))

# Default rules only
WORK_RULES = {}

LOG_LEVEL = "DEBUG"

DEBUG = False
TESTING = True
