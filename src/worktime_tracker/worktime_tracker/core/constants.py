"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_SESSION_DAYS = 7

# Report filter value meaning "no filter".
FILTER_ALL = "all"

# Placeholders for missing optional fields in views/exports.
EMPTY_PLACEHOLDER = "-"
ACTIVE_PLACEHOLDER = "Active"
