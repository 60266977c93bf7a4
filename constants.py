"""
Constants for Localization Manager
"""

# Language files
LANGUAGE_FILE_EXTENSION = '.json'
JSON_INDENT = 2

# Configuration
CONFIG_FILE_NAME = ".localization_manager.json"
LOG_FILE_NAME = "localization_manager.log"

# UI Strings
APP_TITLE = "Localization Manager"
DEFAULT_WINDOW_SIZE = "1200x800"
NO_DIRECTORY_TEXT = "No directory selected"
UNSAVED_CHANGES_TITLE = "Unsaved Changes"

# Confirmation prompts per pending action kind
CONFIRM_MESSAGES = {
    'edit-single': "Are you sure you want to save the changes to '{key}'?",
    'edit-bulk': "Are you sure you want to save all {count} pending change(s)?",
    'delete': "Are you sure you want to delete '{key}' from every language file?",
    'create': "Are you sure you want to create '{key}'?",
    'cancel-all': "Are you sure you want to discard all {count} pending change(s)?",
}

# Treeview tags
TAG_PENDING = "pending"
TAG_MISSING = "missing"

# Colors
COLOR_PENDING_BG = "#ffff99"
COLOR_MISSING_BG = "#ffe6e6"
COLOR_STATUS_OK = "black"
COLOR_STATUS_HINT = "gray"

# Fonts
FONT_ARIAL_BOLD = ("Arial", 11, "bold")

# Column widths
KEY_COLUMN_WIDTH = 250
LANGUAGE_COLUMN_WIDTH = 250

# Status bar messages clear after this many milliseconds
STATUS_CLEAR_DELAY_MS = 5000
