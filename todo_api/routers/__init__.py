# todo_api/routers/__init__.py
"""API routers for Todo API."""
