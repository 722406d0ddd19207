"""Local to-do list: SQLite task store with a console front end."""

__version__ = "0.1.0"
