"""Global configuration: pricing policy constants and numeric guards."""

# Integrity gate thresholds (gross margin percent)
MARGIN_FLOOR_PCT = 40.0
MARGIN_TARGET_PCT = 45.0

# Overhead resolution
DEFAULT_ROLLING_MONTHS = 3
OVERHEAD_NO_DATA_PCT = 20.0
OVERHEAD_NO_REVENUE_PCT = 50.0

# COGS multiplier clamp: when the room left for COGS is at or below
# MIN_COGS_ROOM_PCT the multiplier is pinned to MAX_COGS_MULTIPLIER.
MIN_COGS_ROOM_PCT = 5.0
MAX_COGS_MULTIPLIER = 20.0

# Auto-calc
EXPEDITED_SURCHARGE_PCT = 0.20
BELOW_FLOOR_RATE_FRACTION = 0.50
VENDOR_COST_FALLBACK_RATIO = 0.65

# Minimum quote value applied to a final total
DEFAULT_MINIMUM_PROJECT_VALUE = 2500.0

# Line item ids are "<prefix><n>"
LINE_ITEM_ID_PREFIX = "li-"

# Area name used for project-level line items
PROJECT_LEVEL_AREA_NAME = "Project-Level"

# A scan-day estimate never goes below this
MIN_SCAN_DAYS = 1

# Complexity scoring for scan intelligence
COMPLEXITY_SCORES = {"Low": 1, "Medium": 2, "High": 3}
UNGROUPED_LABEL = "Other"
