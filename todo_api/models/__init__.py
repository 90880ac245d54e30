# todo_api/models/__init__.py
"""In-memory models for Todo API."""
