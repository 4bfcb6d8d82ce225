"""Constants for the GUI layout."""

WINDOW_DEFAULT_WIDTH = 700
WINDOW_DEFAULT_HEIGHT = 700
WINDOW_MIN_WIDTH = 520
WINDOW_MIN_HEIGHT = 420

SIDEBAR_WIDTH = 200
SEARCH_FIELD_MAX_WIDTH = 420

SETTINGS_DIALOG_WIDTH = 520
SETTINGS_DIALOG_HEIGHT = 380

# Empty-state title cycles through these
ROTATING_TITLES = ["Dictionary", "Synonyms", "Translations", "Pronunciation", "Origins"]
TITLE_ROTATION_INTERVAL_MS = 3000

EMPTY_STATE_HINT = "Type to search…"
LOADING_TEXT = "Searching…"
