"""Constants and defaults.

Note: Keep workplace rule defaults here to avoid magic numbers spread across code.
"""

DEFAULT_WORK_START = "08:30"
DEFAULT_FLEX_DEADLINE = "09:10"
DEFAULT_LUNCH_START = "11:30"
DEFAULT_LUNCH_END = "13:00"
DEFAULT_REQUIRED_WORK_MINUTES = 450
DEFAULT_OVERTIME_GAP_MINUTES = 30
DEFAULT_OVERTIME_MIN_MINUTES = 30
DEFAULT_OVERTIME_STEP_MINUTES = 30
DEFAULT_HINT_WINDOW_MINUTES = 15

# Clock-ins after this time are accepted but flagged as suspicious.
SUSPICIOUS_CLOCK_IN = "12:00"

MINUTES_PER_DAY = 1440

LATE_NOTE_PREFIX = "Late:"
OVERTIME_MARKER = "🔥"
NOTE_SEPARATOR = "; "
