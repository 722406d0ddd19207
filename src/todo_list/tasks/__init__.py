"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, BatchDeleteResult)
- errors.py: store exceptions
- task_store.py: SQLite-backed storage + query/update helpers
- task_api.py: actions the presentation layer calls (keeps the snapshot fresh)
"""
