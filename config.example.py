# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
See .env.example for a ready-to-copy template.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Level for the log file <data_dir>/todo.log (default: INFO).",
    # Presentation
    "TODO_DEFAULT_PRIORITY": "Priority preselected for new tasks: Low | Medium | High (default: Medium).",
    "TODO_COLOR": "ANSI colors in the console (true/false, default: true). NO_COLOR disables.",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todo).",
    "TODO_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
}
