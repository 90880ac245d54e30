# todo_api/schemas/__init__.py
"""Pydantic schemas for Todo API."""
