# todo_api/__init__.py
"""Todo API - in-memory task management service."""

__version__ = "1.0.0"
__author__ = "Todo API Team"
