# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name used in logs (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level on stderr (default: WARNING).",
    "TASKLIST_LOG_FILE": "Also write DEBUG logs to <data_dir>/tasklist.log (true/false, default: false).",
    # Storage
    "TASKLIST_TASKS_PATH": "Task file path (default: tasks.txt in the working directory).",
    "TASKLIST_STRICT_LOAD": (
        "Skip lines whose id or completed flag does not parse instead of "
        "defaulting them to 0 / false (true/false, default: false)."
    ),
    # Paths (gitignored)
    "TASKLIST_DATA_DIR": "Local data directory for logs (default: .local/tasklist).",
}
