# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKLIST_LOG_TO_FILE": "Write a debug log under the data dir (true/false, default: true).",
    # Paths (gitignored)
    "TASKLIST_DATA_DIR": "Local data directory for logs (default: .local/tasklist).",
    # Host behaviour
    "TASKLIST_TITLE_PREFIX": "Window title prefix (default: TODO -> 'TODO: all tasks').",
    "TASKLIST_SET_TERMINAL_TITLE": "Set the terminal title on filter change (true/false).",
    "TASKLIST_DEFAULT_FILTER": "Initial view: all | completed | pending | trashed (default: all).",
}
