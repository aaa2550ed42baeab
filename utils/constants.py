# utils/constants.py

APP_VERSION = "v1.2.0"

# Sentinel label for null, empty and whitespace-only bucket values
MISSING = "[Missing]"

# Strategy values as they appear in summary configuration files
STRATEGY_TOTAL = "total"
STRATEGY_ITEMIZED = "itemized"
STRATEGIES = [STRATEGY_TOTAL, STRATEGY_ITEMIZED]

# Card metadata line labels
METADATA_LABELS = {
    "total": "Total Count",
    "report": "Report Name",
    "bucket": "Grouped By",
}

# Columns used when tallies are shown as a table or exported
TALLY_COLUMNS = ["Label", "Count"]

# User-facing alert messages
MESSAGES = {
    "missingReport": "The report for this summary no longer exists. Edit the summary to choose another report.",
    "missingBucketByField": "The field used to group this summary is not available on the report",
    "confirmDelete": "Are you sure you want to delete this summary?",
}

# Environment / secrets keys
LOG_LEVEL_KEY = "LOG_LEVEL"
SUMMARY_CONFIG_PATH_KEY = "SUMMARY_CONFIG_PATH"
DEFAULT_LOG_LEVEL = "INFO"

# UI strings
CARD_ICONS = {
    "drag": "☰", "edit": "✏️", "delete": "🗑", "up": "⬆️", "down": "⬇️",
    "alert": "⚠️", "download": "⬇", "summary": "📊"
}
