# todo_api/core/__init__.py
"""Core modules for Todo API."""
