import os
from pathlib import Path

LEDGER_DIR = os.getenv("LEDGER_DIR", str(Path.home() / "Documents" / "Obsidian" / "CDX" / "Overtime"))
STATE_FILE = os.getenv("STATE_FILE", str(Path.home() / ".work_start_time"))

WORK_RULES = {
    "work_start": os.getenv("WORK_START", "08:30"),
    "flex_deadline": os.getenv("FLEX_DEADLINE", "09:10"),
    "lunch_start": os.getenv("LUNCH_START", "11:30"),
    "lunch_end": os.getenv("LUNCH_END", "13:00"),
    "required_work": int(os.getenv("REQUIRED_WORK_MINUTES", "450")),
    "overtime_gap": int(os.getenv("OVERTIME_GAP_MINUTES", "30")),
    "overtime_min": int(os.getenv("OVERTIME_MIN_MINUTES", "30")),
    "overtime_step": int(os.getenv("OVERTIME_STEP_MINUTES", "30")),
    "hint_window": int(os.getenv("HINT_WINDOW_MINUTES", "15")),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
