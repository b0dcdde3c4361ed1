"""Quiz-related constants shared across UI and core layers."""

DEFAULT_TOTAL_SECONDS: float = 480.0
RECOMMENDED_ITEM_COUNT: int = 26

INTRO_COUNTDOWN_STEPS: int = 5
INTRO_STEP_SECONDS: float = 1.0
INTRO_TERMINAL_PAUSE_SECONDS: float = 0.2

# Inclusive lower bounds in percent of the possible points, highest first.
PERFECT_PERCENT: int = 100
HIGH_PERCENT: int = 90
MID_PERCENT: int = 75
LOW_PERCENT: int = 50

RESULT_DELAY_AFTER_TIMEOUT_SECONDS: float = 0.2
RESULT_DELAY_AFTER_COMPLETION_SECONDS: float = 0.1

TICK_INTERVAL_MS: int = 100
LOW_TIME_WARNING_SECONDS: int = 30

DEFAULT_START_KEY: str = "Return"
DEFAULT_NEXT_KEY: str = "Right"
DEFAULT_PREV_KEY: str = "Left"
