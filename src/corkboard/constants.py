"""Shared constants."""

BRANCH_NAME = "corkboard"

NEW_COLUMN_TITLE = "New Column"

DEFAULT_COLUMNS = (
    ("col-1", "To Do"),
    ("col-2", "In Progress"),
    ("col-3", "Done"),
)
